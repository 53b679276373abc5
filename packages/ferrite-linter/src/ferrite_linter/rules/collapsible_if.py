"""Checks for `if` expressions that contain only an `if` expression.

For example, the rule catches

    if x {
        if y {
            println!("Hello world");
        }
    }

and suggests `if x && y { .. }`. It also collapses `else { if .. }` into
`else if ..`.
"""

from ferrite_pattern import SyntaxNode, pattern

from ..context import LintContext
from ..models import Applicability, Suggestion
from ..reconstruct import starts_with_comment
from ..sugg import make_and
from .base import BaseRule

IF_WITHOUT_ELSE = pattern(
    """
    If(
        _#check,
        Block(
            expr_or_semi( If(_#check_inner, _#content)#inner )
        )#then
    )
    """,
    name="if_without_else",
)

IF_ELSE = pattern(
    """
    If(
        _,
        _,
        Block(
            expr_or_semi( If(_, _, _?)#else_ )
        )#block
    )
    """,
    name="if_else",
)


def block_starts_with_comment(cx: LintContext, block: SyntaxNode) -> bool:
    # Collapsing would move the comment to a misleading place
    return starts_with_comment(cx.snippet_block(block.span))


class CollapsibleIfRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "collapsible_if"

    @property
    def name(self) -> str:
        return "collapsible-if"

    @property
    def category(self) -> str:
        return "style"

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return (
            "`if`s that can be collapsed (e.g., `if x { if y { ... } }` and "
            "`else { if x { ... } }`)"
        )

    def check_expr(self, cx: LintContext, expr: SyntaxNode) -> None:
        if cx.from_expansion(expr):
            return
        self._check_if_without_else(cx, expr)
        self._check_if_else(cx, expr)

    def _check_if_without_else(self, cx: LintContext, expr: SyntaxNode) -> None:
        res = IF_WITHOUT_ELSE.match(expr)
        if res is None:
            return
        # Merging two pattern-binding conditions with `&&` changes their scope
        if res.check.kind == "Let" or res.check_inner.kind == "Let":
            return
        if block_starts_with_comment(cx, res.then):
            return
        if expr.expansion_context != res.inner.expansion_context:
            return

        replacement = "if {} {}".format(
            make_and(cx, res.check, res.check_inner),
            cx.snippet_block(res.content.span),
        )
        applicability = Applicability.MACHINE_APPLICABLE
        if cx.has_multiline_literal(expr):
            applicability = Applicability.ADVISORY
        self._emit(
            cx,
            expr.span,
            "this if statement can be collapsed",
            suggestion=Suggestion(
                span=expr.span,
                message="try",
                replacement=replacement,
                applicability=applicability,
            ),
        )

    def _check_if_else(self, cx: LintContext, expr: SyntaxNode) -> None:
        res = IF_ELSE.match(expr)
        if res is None:
            return
        if block_starts_with_comment(cx, res.block) or cx.from_expansion(res.else_):
            return

        applicability = Applicability.MACHINE_APPLICABLE
        if cx.has_multiline_literal(res.else_):
            applicability = Applicability.ADVISORY
        self._emit(
            cx,
            res.block.span,
            "this `else { if .. }` block can be collapsed",
            suggestion=Suggestion(
                span=res.block.span,
                message="try",
                replacement=cx.snippet_block(res.else_.span),
                applicability=applicability,
            ),
        )
