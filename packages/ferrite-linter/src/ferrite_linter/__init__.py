"""Structural lints for Rust source built on ferrite_pattern."""

from .autofix import AutoFixEngine, FixResult
from .context import LintContext
from .engine import LinterEngine
from .models import Applicability, Diagnostic, Severity, Suggestion
from .registry import RuleRegistry

__all__ = [
    "Applicability",
    "AutoFixEngine",
    "Diagnostic",
    "FixResult",
    "LintContext",
    "LinterEngine",
    "RuleRegistry",
    "Severity",
    "Suggestion",
]
