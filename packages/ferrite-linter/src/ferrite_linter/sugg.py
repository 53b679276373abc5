"""Building condition text for suggestions."""

from ferrite_pattern import SyntaxNode

from .context import LintContext

# Kinds that bind more loosely than `&&` and need parentheses as its operand
LOOSER_THAN_AND = {"Assign", "AssignOp", "Range", "Closure"}

# Kinds that can take a `!` prefix without parentheses
ATOMIC_KINDS = {"Path", "Call", "MethodCall", "Field", "Index", "Lit", "Paren", "MacCall", "Unit"}


def needs_parens_for_and(node: SyntaxNode) -> bool:
    if node.kind in LOOSER_THAN_AND:
        return True
    return node.kind == "Binary" and node.operator == "||"


def and_operand(cx: LintContext, node: SyntaxNode) -> str:
    text = cx.snippet(node.span)
    return f"({text})" if needs_parens_for_and(node) else text


def make_and(cx: LintContext, lhs: SyntaxNode, rhs: SyntaxNode) -> str:
    """`lhs && rhs`, parenthesising either side where precedence requires"""
    return f"{and_operand(cx, lhs)} && {and_operand(cx, rhs)}"


def negate(cx: LintContext, node: SyntaxNode) -> str | None:
    """Text of the logical negation of a condition.

    Returns None for pattern-binding conditions, which have no negation.
    """
    if node.kind == "Let":
        return None
    if node.kind == "Unary" and node.operator == "!" and node.children:
        inner = node.children[0]
        if inner.kind == "Paren" and inner.children:
            inner = inner.children[0]
        return cx.snippet(inner.span)
    text = cx.snippet(node.span)
    if node.kind in ATOMIC_KINDS:
        return f"!{text}"
    return f"!({text})"
