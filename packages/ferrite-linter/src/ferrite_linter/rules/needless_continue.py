"""Checks for `continue` statements in loops that are redundant.

There are two cases.

Case 1, `continue` inside the else block:

    loop {
        // region A
        if cond {
            // region B
        } else {
            continue;
        }
        // region C
    }

is better written as

    loop {
        // region A
        if cond {
            // region B
            // region C
        }
    }

Case 2, `continue` inside the then block:

    loop {
        // region A
        if cond {
            continue;
        } else {
            // region B
        }
        // region C
    }

can be refactored to

    loop {
        // region A
        if !cond {
            // region B
            // region C
        }
    }

Case 2 negates the condition textually, so its suggestion is only ever
advisory.
"""

import logging

from ferrite_pattern import Span, SyntaxNode, pattern

from ..context import LintContext
from ..models import Applicability, Suggestion
from ..reconstruct import erode_block, indent_multiline, trim_multiline
from ..sugg import negate
from .base import BaseRule

logger = logging.getLogger(__name__)

ELSE_HOLDS_CONTINUE = pattern(
    """
    some_loop(
        Block(
            _*  // region A
            expr_or_semi(If(
                _#if_cond,
                Block#if_block,
                Block(expr_or_semi(Continue#continue_expr) _*)#else_block
            )#if_expr)#if_stmt
            _*#region_c
        )
    )
    """,
    name="else_holds_continue",
)

THEN_HOLDS_CONTINUE = pattern(
    """
    some_loop(
        Block(
            _*  // region A
            expr_or_semi(If(
                _#if_cond,
                Block(expr_or_semi(Continue#continue_expr) _*)#if_block,
                _#else_block
            )#if_expr)#if_stmt
            _*#region_c
        )
    )
    """,
    name="then_holds_continue",
)

MSG_REDUNDANT_ELSE_BLOCK = "this `else` block is redundant"

MSG_ELSE_BLOCK_NOT_NEEDED = "there is no need for an explicit `else` block for this `if` expression"

DROP_ELSE_BLOCK_AND_MERGE_MSG = (
    "consider dropping the `else` clause and merging the code that follows (in the loop) "
    "with the `if` block"
)

DROP_ELSE_BLOCK_MSG = (
    "consider dropping the `else` clause and moving the code in the `else` block, "
    "together with the code that follows, under the negated condition"
)

INDENT = "    "

BLOCK_LIKE_KINDS = {"If", "Block", "Loop", "While", "ForLoop", "Match"}

# Statements that bring a name into scope for the rest of the block
DECLARATION_KINDS = {"Local", "Fn", "use_declaration", "macro_definition"}


def compare_labels(loop_label: str | None, continue_label: str | None) -> bool:
    """If the `continue` has a label, check it matches the label of the loop."""
    # `loop { continue; }` or `'a: loop { continue; }`
    if continue_label is None:
        return True
    # `loop { continue 'a; }`
    if loop_label is None:
        return False
    # `'a: loop { continue 'a; }` or `'a: loop { continue 'b; }`
    return loop_label == continue_label


def merged_if(condition: str, parts: list[str]) -> str:
    """`if <condition> { <parts> }` with the body indented one level"""
    body = "\n".join(part for part in parts if part)
    if not body:
        return f"if {condition} {{\n}}"
    return f"if {condition} {{\n{indent_multiline(body, INDENT)}\n}}"


def block_body(cx: LintContext, block: SyntaxNode) -> str:
    return trim_multiline(erode_block(cx.snippet(block.span)))


def tail_text(cx: LintContext, if_stmt: SyntaxNode, region: tuple[SyntaxNode, ...]) -> str:
    """Source of the statements after the `if`, comments between them included"""
    if not region:
        return ""
    text = cx.snippet(Span(if_stmt.span.end, region[-1].span.end)).rstrip()
    head, sep, rest = text.partition("\n")
    if sep and not head.strip():
        return trim_multiline(rest)
    return trim_multiline(text.lstrip())


def introduces_names(cond: SyntaxNode, block: SyntaxNode) -> bool:
    """True when code moved into `block` could see names bound by it"""
    if cond.kind == "Let":
        return True
    return any(
        stmt.kind in DECLARATION_KINDS or stmt.kind.endswith("_item")
        for stmt in block.children
    )


def ends_with_bare_expression(block: SyntaxNode) -> bool:
    """True when the block's last statement is a value expression without `;`"""
    if not block.children:
        return False
    last = block.children[-1]
    if last.kind != "Expr" or not last.children:
        return False
    return last.children[0].kind not in BLOCK_LIKE_KINDS


class NeedlessContinueRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "needless_continue"

    @property
    def name(self) -> str:
        return "needless-continue"

    @property
    def category(self) -> str:
        return "pedantic"

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "`continue` statements that can be replaced by a rearrangement of code"

    def check_expr(self, cx: LintContext, expr: SyntaxNode) -> None:
        if cx.from_expansion(expr):
            return
        self._check_else_block(cx, expr)
        self._check_then_block(cx, expr)

    def _check_else_block(self, cx: LintContext, loop: SyntaxNode) -> None:
        res = ELSE_HOLDS_CONTINUE.match(loop)
        if res is None:
            return
        if not compare_labels(loop.label, res.continue_expr.label):
            return
        if cx.from_expansion(res.if_expr) or cx.from_expansion(res.else_block):
            return

        region_c = res.sequence("region_c")
        replacement = merged_if(
            cx.snippet(res.if_cond.span),
            [block_body(cx, res.if_block), tail_text(cx, res.if_stmt, region_c)],
        )

        applicability = Applicability.MACHINE_APPLICABLE
        else_text = cx.snippet(res.else_block.span)
        if "//" in else_text or "/*" in else_text:
            # dropping the else block would delete its comments
            applicability = Applicability.ADVISORY
        elif region_c and ends_with_bare_expression(res.if_block):
            # appending statements after a trailing expression needs a `;`
            applicability = Applicability.ADVISORY
        elif region_c and introduces_names(res.if_cond, res.if_block):
            # the moved code would resolve names against the `if` bindings
            applicability = Applicability.ADVISORY
        elif cx.has_multiline_literal(res.if_stmt, *region_c):
            applicability = Applicability.ADVISORY

        span = res.if_stmt.span
        if region_c:
            span = span.to(region_c[-1].span)
        logger.debug("redundant else block at %d..%d (%s)", span.start, span.end, applicability.value)

        self._emit(
            cx,
            res.else_block.span,
            MSG_REDUNDANT_ELSE_BLOCK,
            suggestion=Suggestion(
                span=span,
                message="drop the `else` block and merge the code that follows into the `if` block",
                replacement=replacement,
                applicability=applicability,
            ),
            help=DROP_ELSE_BLOCK_AND_MERGE_MSG,
        )

    def _check_then_block(self, cx: LintContext, loop: SyntaxNode) -> None:
        res = THEN_HOLDS_CONTINUE.match(loop)
        if res is None:
            return
        if not compare_labels(loop.label, res.continue_expr.label):
            return
        if cx.from_expansion(res.if_expr) or cx.from_expansion(res.if_block):
            return

        suggestion = None
        negated = negate(cx, res.if_cond)
        # `else if` has no block to move out
        if negated is not None and res.else_block.kind == "Block":
            region_c = res.sequence("region_c")
            span = res.if_stmt.span
            if region_c:
                span = span.to(region_c[-1].span)
            suggestion = Suggestion(
                span=span,
                message="negate the condition and move the `else` block into the `if` block",
                replacement=merged_if(
                    negated,
                    [block_body(cx, res.else_block), tail_text(cx, res.if_stmt, region_c)],
                ),
                # Textual negation of an arbitrary condition needs a human check
                applicability=Applicability.ADVISORY,
            )

        self._emit(
            cx,
            res.if_expr.span,
            MSG_ELSE_BLOCK_NOT_NEEDED,
            suggestion=suggestion,
            help=DROP_ELSE_BLOCK_MSG,
        )
