from dataclasses import dataclass
from typing import List

from tree_sitter import Tree


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""
    tree: Tree
    source: str
    errors: List[str]


# tree-sitter-rust node type -> SyntaxNode kind. Anything missing here keeps
# its tree-sitter name.
KIND_NAMES = {
    "source_file": "Crate",
    "function_item": "Fn",
    "block": "Block",
    "if_expression": "If",
    "if_let_expression": "If",
    "loop_expression": "Loop",
    "while_expression": "While",
    "while_let_expression": "While",
    "for_expression": "ForLoop",
    "continue_expression": "Continue",
    "break_expression": "Break",
    "return_expression": "Ret",
    "let_condition": "Let",
    "let_chain": "Let",
    "let_declaration": "Local",
    "binary_expression": "Binary",
    "unary_expression": "Unary",
    "parenthesized_expression": "Paren",
    "identifier": "Path",
    "scoped_identifier": "Path",
    "self": "Path",
    "call_expression": "Call",
    "field_expression": "Field",
    "index_expression": "Index",
    "macro_invocation": "MacCall",
    "assignment_expression": "Assign",
    "compound_assignment_expr": "AssignOp",
    "range_expression": "Range",
    "closure_expression": "Closure",
    "match_expression": "Match",
    "unit_expression": "Unit",
    "integer_literal": "Lit",
    "float_literal": "Lit",
    "boolean_literal": "Lit",
    "string_literal": "Lit",
    "raw_string_literal": "Lit",
    "char_literal": "Lit",
    "ERROR": "Error",
}

COMMENT_TYPES = ("line_comment", "block_comment")

# Block children that are statements in their own right; any other named
# child of a block is an expression and gets wrapped in an `Expr` statement.
STATEMENT_TYPES = (
    "expression_statement",
    "empty_statement",
    "macro_definition",
    "attribute_item",
    "inner_attribute_item",
    "associated_type",
)
