from ferrite_linter.models import Diagnostic

from .models import LintIssue


def diagnostic_to_lint_issue(diagnostic: Diagnostic) -> LintIssue:
    """Convert an internal dataclass diagnostic to an external Pydantic issue"""
    suggestion = diagnostic.suggestion
    return LintIssue(
        severity=diagnostic.severity.value,
        file_path=str(diagnostic.file_path) if diagnostic.file_path else "<string>",
        line_number=diagnostic.line,
        column=diagnostic.column + 1,  # editors count columns from 1
        rule_id=diagnostic.rule_id,
        message=diagnostic.message,
        help=diagnostic.help,
        suggestion=suggestion.replacement if suggestion else None,
        applicability=suggestion.applicability.value if suggestion else None,
        auto_fixable=diagnostic.auto_fixable,
    )
