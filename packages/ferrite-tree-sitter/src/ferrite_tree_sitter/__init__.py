"""tree-sitter host for the Rust structural lints."""

from .ast_walker import ASTWalker
from .lowering import TreeLowering, lower
from .node_types import ParseResult
from .parser import RUST_LANGUAGE, RustParser
from .source_map import SourceMap

__all__ = [
    "ASTWalker",
    "ParseResult",
    "RUST_LANGUAGE",
    "RustParser",
    "SourceMap",
    "TreeLowering",
    "lower",
]
