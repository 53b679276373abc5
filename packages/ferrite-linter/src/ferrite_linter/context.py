from pathlib import Path
from typing import Protocol

from ferrite_pattern import Span, SyntaxNode, iter_nodes

from .models import Diagnostic, Severity, Suggestion
from .reconstruct import trim_multiline


class SourceLookup(Protocol):
    """What the rules need from the host about the file being linted"""

    def snippet(self, span: Span) -> str: ...

    def line_col(self, offset: int) -> tuple[int, int]: ...

    def from_expansion(self, node: SyntaxNode) -> bool: ...


class LintContext:
    """Per-file state handed to every rule: span lookups and the diagnostic sink"""

    def __init__(self, source_map: SourceLookup, file_path: Path | None = None):
        self.source_map = source_map
        self.file_path = file_path
        self.diagnostics: list[Diagnostic] = []

    def snippet(self, span: Span) -> str:
        return self.source_map.snippet(span)

    def snippet_block(self, span: Span) -> str:
        """Snippet of a block-like span with its continuation lines dedented"""
        return trim_multiline(self.snippet(span), ignore_first=True)

    def from_expansion(self, node: SyntaxNode) -> bool:
        return self.source_map.from_expansion(node)

    def has_multiline_literal(self, *nodes: SyntaxNode) -> bool:
        """True when a literal under any of `nodes` spans a line break.

        Re-indenting such a snippet would change the literal's value.
        """
        return any(
            n.kind == "Lit" and "\n" in self.snippet(n.span)
            for node in nodes
            for n in iter_nodes(node)
        )

    def emit(
        self,
        rule_id: str,
        span: Span,
        message: str,
        suggestion: Suggestion | None = None,
        severity: Severity = Severity.WARNING,
        help: str | None = None,
    ) -> Diagnostic:
        line, column = self.source_map.line_col(span.start)
        diagnostic = Diagnostic(
            file_path=self.file_path,
            line=line,
            column=column,
            rule_id=rule_id,
            message=message,
            severity=severity,
            span=span,
            suggestion=suggestion,
            help=help,
        )
        self.diagnostics.append(diagnostic)
        return diagnostic
