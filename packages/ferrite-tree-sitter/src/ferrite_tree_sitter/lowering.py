"""Lowers tree-sitter Rust trees into the SyntaxNode shape the patterns expect.

Comments and punctuation are dropped. Positional children follow the
pattern vocabulary: `If(cond, then[, else])`, `Loop(body)`,
`While(cond, body)`, `ForLoop(pat, iter, body)`, `Block(stmt*)`, with
statements wrapped in `Semi(e)` or `Expr(e)` depending on whether they end
in a semicolon. Loop and `continue` labels become the node's `label`.
"""

from typing import Optional

from ferrite_pattern import ROOT, ExpansionContext, Span, SyntaxNode
from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import KIND_NAMES, STATEMENT_TYPES


class TreeLowering:
    """Converts tree-sitter nodes into SyntaxNode trees"""

    def __init__(self, source: bytes | str, expansion_context: ExpansionContext = ROOT):
        self.source = source.encode("utf8") if isinstance(source, str) else source
        # tree-sitter does not expand macros, so all code is literal source
        self.expansion_context = expansion_context

    def lower(self, node: Node) -> SyntaxNode:
        handler = getattr(self, f"_lower_{node.type}", None)
        if handler is not None:
            return handler(node)
        return self._make(node, self._kind(node), self._lower_all(*ASTWalker.code_children(node)))

    # Helpers
    def _kind(self, node: Node) -> str:
        return KIND_NAMES.get(node.type, node.type)

    def _make(self, node: Node, kind: str, children, label=None, operator=None) -> SyntaxNode:
        return SyntaxNode(
            kind=kind,
            children=tuple(children),
            span=Span(node.start_byte, node.end_byte),
            expansion_context=self.expansion_context,
            label=label,
            operator=operator,
        )

    def _lower_all(self, *nodes: Optional[Node]) -> list[SyntaxNode]:
        return [self.lower(n) for n in nodes if n is not None]

    def _label(self, node: Node) -> Optional[str]:
        label = ASTWalker.get_child_of_type(node, "label")
        if label is None:
            return None
        return ASTWalker.get_text(label, self.source)

    # Statements
    def _lower_block(self, node: Node) -> SyntaxNode:
        statements = []
        for child in ASTWalker.code_children(node):
            if child.type in ("label", "empty_statement"):
                continue
            if child.type in STATEMENT_TYPES or child.type.endswith(("_item", "_declaration")):
                statements.append(self.lower(child))
            else:
                # trailing expression without a semicolon
                statements.append(self._make(child, "Expr", [self.lower(child)]))
        return self._make(node, "Block", statements, label=self._label(node))

    def _lower_expression_statement(self, node: Node) -> SyntaxNode:
        has_semi = any(c.type == ";" for c in node.children)
        return self._make(
            node,
            "Semi" if has_semi else "Expr",
            self._lower_all(*ASTWalker.code_children(node)[:1]),
        )

    # Conditionals
    def _lower_if_expression(self, node: Node) -> SyntaxNode:
        children = [self._condition(node), *self._lower_all(node.child_by_field_name("consequence"))]
        alternative = node.child_by_field_name("alternative")
        if alternative is not None:
            # `else { .. }` contributes its block, `else if ..` its if
            branches = ASTWalker.code_children(alternative)
            if branches:
                children.append(self.lower(branches[0]))
        return self._make(node, "If", children)

    _lower_if_let_expression = _lower_if_expression

    def _condition(self, node: Node) -> SyntaxNode:
        condition = node.child_by_field_name("condition")
        if condition is not None:
            return self.lower(condition)
        # Older grammars: `if let` / `while let` carry pattern and value
        # directly on the expression.
        pattern = node.child_by_field_name("pattern")
        value = node.child_by_field_name("value")
        if pattern is None or value is None:
            return self._make(node, "Error", [])
        return SyntaxNode(
            kind="Let",
            children=tuple(self._lower_all(pattern, value)),
            span=Span(pattern.start_byte, value.end_byte),
            expansion_context=self.expansion_context,
        )

    # Loops
    def _lower_loop_expression(self, node: Node) -> SyntaxNode:
        return self._make(
            node,
            "Loop",
            self._lower_all(node.child_by_field_name("body")),
            label=self._label(node),
        )

    def _lower_while_expression(self, node: Node) -> SyntaxNode:
        children = [self._condition(node), *self._lower_all(node.child_by_field_name("body"))]
        return self._make(node, "While", children, label=self._label(node))

    _lower_while_let_expression = _lower_while_expression

    def _lower_for_expression(self, node: Node) -> SyntaxNode:
        children = self._lower_all(
            node.child_by_field_name("pattern"),
            node.child_by_field_name("value"),
            node.child_by_field_name("body"),
        )
        return self._make(node, "ForLoop", children, label=self._label(node))

    def _lower_continue_expression(self, node: Node) -> SyntaxNode:
        return self._make(node, "Continue", [], label=self._label(node))

    def _lower_break_expression(self, node: Node) -> SyntaxNode:
        values = [c for c in ASTWalker.code_children(node) if c.type != "label"]
        return self._make(node, "Break", self._lower_all(*values), label=self._label(node))

    # Operators
    def _lower_binary_expression(self, node: Node) -> SyntaxNode:
        operator = node.child_by_field_name("operator")
        return self._make(
            node,
            "Binary",
            self._lower_all(node.child_by_field_name("left"), node.child_by_field_name("right")),
            operator=operator.type if operator is not None else None,
        )

    def _lower_unary_expression(self, node: Node) -> SyntaxNode:
        return self._make(
            node,
            "Unary",
            self._lower_all(*ASTWalker.code_children(node)),
            operator=node.children[0].type if node.children else None,
        )

    def _lower_call_expression(self, node: Node) -> SyntaxNode:
        function = node.child_by_field_name("function")
        kind = "MethodCall" if function is not None and function.type == "field_expression" else "Call"
        return self._make(node, kind, self._lower_all(*ASTWalker.code_children(node)))


def lower(root: Node, source: bytes | str) -> SyntaxNode:
    """Lower a whole tree-sitter tree (usually `tree.root_node`)."""
    return TreeLowering(source).lower(root)
