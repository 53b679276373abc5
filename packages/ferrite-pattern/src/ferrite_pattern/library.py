"""Pattern functions shared by the lint rules."""

from .dsl import FunctionTable, PatternFunction, compile_pattern, define_function
from .matcher import CompiledPattern

# A statement holding an expression, with or without a trailing semicolon.
expr_or_semi = define_function("expr_or_semi", ["expr"], "Expr($expr) | Semi($expr)")

# Any of the three loop forms, by body. Labels live on the loop node itself.
some_loop = define_function(
    "some_loop",
    ["body"],
    """
    Loop($body)
    | ForLoop(_, _, $body)
    | While(_, $body)
    """,
)

STANDARD_FUNCTIONS: dict[str, PatternFunction] = {
    expr_or_semi.name: expr_or_semi,
    some_loop.name: some_loop,
}


def pattern(source: str, name: str | None = None, functions: FunctionTable | None = None) -> CompiledPattern:
    """Compile `source` with the standard functions in scope."""
    table = dict(STANDARD_FUNCTIONS)
    table.update(functions or {})
    return compile_pattern(source, table, name=name)
