from abc import ABC, abstractmethod

from ferrite_pattern import Span, SyntaxNode

from ..context import LintContext
from ..models import Diagnostic, Severity, Suggestion


class BaseRule(ABC):
    """Abstract base class for all lint rules.

    Rules hold no state between calls; the engine hands every node of every
    file to `check_expr`.
    """

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'collapsible_if')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name."""
        pass

    @property
    @abstractmethod
    def category(self) -> str:
        """Rule group used for selection (e.g., 'style', 'pedantic')."""
        pass

    @property
    def severity(self) -> Severity:
        """Default severity for this rule."""
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        """Can this rule produce machine-applicable suggestions?"""
        return False

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check_expr(self, cx: LintContext, node: SyntaxNode) -> None:
        """Examine one node and emit diagnostics into `cx`."""
        pass

    # Helper method for consistent diagnostic creation
    def _emit(
        self,
        cx: LintContext,
        span: Span,
        message: str,
        suggestion: Suggestion | None = None,
        help: str | None = None,
    ) -> Diagnostic:
        """Helper to emit a diagnostic with rule defaults."""
        return cx.emit(
            self.rule_id,
            span,
            message,
            suggestion=suggestion,
            severity=self.severity,
            help=help,
        )
