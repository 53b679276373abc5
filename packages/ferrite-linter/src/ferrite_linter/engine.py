import logging
from pathlib import Path

from ferrite_pattern import SyntaxNode, iter_nodes
from ferrite_tree_sitter import ParseResult, RustParser, SourceMap, lower

from .context import LintContext, SourceLookup
from .models import Diagnostic
from .registry import LintRule, RuleRegistry

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for Rust structural linting"""

    def __init__(self, registry: RuleRegistry | None = None):
        self.parser = RustParser()
        self.registry = registry if registry is not None else RuleRegistry()

    def analyze_file(self, file_path: Path, rules: list[LintRule] | None = None) -> list[Diagnostic]:
        """Run all lint checks on a file"""
        file_path = Path(file_path)
        logger.debug("linting %s", file_path)
        return self._lint(self.parser.parse_file(file_path), file_path, rules)

    def analyze_string(
        self,
        source: str,
        file_path: Path | None = None,
        rules: list[LintRule] | None = None,
    ) -> list[Diagnostic]:
        """Run all lint checks on source text"""
        return self._lint(self.parser.parse_string(source), file_path, rules)

    def lint_tree(
        self,
        root: SyntaxNode,
        source_map: SourceLookup,
        file_path: Path | None = None,
        rules: list[LintRule] | None = None,
    ) -> list[Diagnostic]:
        """Hand every node of `root` to every rule"""
        if rules is None:
            rules = self.registry.get_all_rules()
        cx = LintContext(source_map, file_path)
        for node in iter_nodes(root):
            for rule in rules:
                rule.check_expr(cx, node)
        return sorted(cx.diagnostics, key=lambda d: (d.span.start, d.rule_id))

    def _lint(
        self,
        result: ParseResult,
        file_path: Path | None,
        rules: list[LintRule] | None,
    ) -> list[Diagnostic]:
        for error in result.errors:
            logger.debug("%s: %s", file_path or "<string>", error)
        root = lower(result.tree.root_node, result.source)
        return self.lint_tree(root, SourceMap(result.source, file_path), file_path, rules)
