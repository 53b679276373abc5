"""Structural pattern matching over host-supplied syntax trees."""

from .captures import CapturedValue, Captures
from .dsl import PatternFunction, compile_pattern, define_function, tokenize
from .library import STANDARD_FUNCTIONS, pattern
from .matcher import CompiledPattern, match
from .model import (
    Alternation,
    Capture,
    PatternError,
    Variant,
    Wildcard,
    ZeroOrMore,
    ZeroOrOne,
    capture_names,
)
from .nodes import ROOT, ExpansionContext, Span, SyntaxNode, iter_nodes

__all__ = [
    "Alternation",
    "Capture",
    "CapturedValue",
    "Captures",
    "CompiledPattern",
    "ExpansionContext",
    "PatternError",
    "PatternFunction",
    "ROOT",
    "STANDARD_FUNCTIONS",
    "Span",
    "SyntaxNode",
    "Variant",
    "Wildcard",
    "ZeroOrMore",
    "ZeroOrOne",
    "capture_names",
    "compile_pattern",
    "define_function",
    "iter_nodes",
    "match",
    "pattern",
    "tokenize",
]
