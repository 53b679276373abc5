from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ferrite_pattern import Span


class Severity(Enum):
    """Issue severity levels"""

    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    INFO = "info"


class Applicability(Enum):
    """Whether a suggestion may be applied without a human looking at it"""

    MACHINE_APPLICABLE = "MachineApplicable"
    ADVISORY = "Advisory"


@dataclass(frozen=True)
class Suggestion:
    """A proposed replacement for the source text under `span`"""

    span: Span
    message: str
    replacement: str
    applicability: Applicability

    @property
    def machine_applicable(self) -> bool:
        return self.applicability is Applicability.MACHINE_APPLICABLE


@dataclass
class Diagnostic:
    """Internal representation of a lint finding"""

    file_path: Path | None
    line: int
    column: int
    rule_id: str
    message: str
    severity: Severity
    span: Span
    suggestion: Suggestion | None = None
    help: str | None = None

    @property
    def auto_fixable(self) -> bool:
        return self.suggestion is not None and self.suggestion.machine_applicable
