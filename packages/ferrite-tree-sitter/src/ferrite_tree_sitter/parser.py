import logging
from pathlib import Path

import tree_sitter_rust as tsrust
from tree_sitter import Language, Parser

from .ast_walker import ASTWalker
from .node_types import ParseResult

logger = logging.getLogger(__name__)

RUST_LANGUAGE = Language(tsrust.language())


class RustParser:
    """Thin wrapper around the tree-sitter Rust grammar"""

    def __init__(self):
        self.parser = Parser(RUST_LANGUAGE)

    def parse_string(self, source: str) -> ParseResult:
        tree = self.parser.parse(source.encode("utf8"))
        errors = self._collect_errors(tree.root_node)
        if errors:
            logger.debug("tree-sitter reported %d syntax error(s)", len(errors))
        return ParseResult(tree=tree, source=source, errors=errors)

    def parse_file(self, file_path: Path) -> ParseResult:
        # Undecodable bytes should not stop the lint run
        source = Path(file_path).read_text(encoding="utf-8", errors="replace")
        return self.parse_string(source)

    def _collect_errors(self, root) -> list[str]:
        if not root.has_error:
            return []
        errors = []

        def check(node):
            if node.type == "ERROR":
                line, col = node.start_point
                errors.append(f"syntax error at {line + 1}:{col}")
            elif node.is_missing:
                line, col = node.start_point
                errors.append(f"missing {node.type} at {line + 1}:{col}")

        ASTWalker.walk(root, check)
        return errors
