from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    INFO = "info"


class LintIssue(BaseModel):
    severity: Severity
    file_path: str
    line_number: int
    column: int
    rule_id: str
    message: str
    help: Optional[str] = None
    suggestion: Optional[str] = None
    applicability: Optional[str] = None
    auto_fixable: bool = False


class LinterConfig(BaseModel):
    select: List[str] = Field(default_factory=lambda: ["all"])
    ignore: List[str] = Field(default_factory=list)
    show_advisory: bool = Field(default=True, alias="show-advisory")

    model_config = {"populate_by_name": True}
