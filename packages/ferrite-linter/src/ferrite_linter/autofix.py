import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ferrite_tree_sitter import SourceMap

from .models import Diagnostic
from .reconstruct import reindent_multiline

logger = logging.getLogger(__name__)


@dataclass
class FixResult:
    source: str
    applied: List[Diagnostic] = field(default_factory=list)
    skipped: List[Diagnostic] = field(default_factory=list)

    @property
    def modified(self) -> bool:
        return bool(self.applied)


class AutoFixEngine:
    """Applies machine-applicable suggestions to source text"""

    def can_fix(self, diagnostic: Diagnostic) -> bool:
        return diagnostic.auto_fixable

    def apply(self, source: str, diagnostics: List[Diagnostic]) -> FixResult:
        """Apply every fixable suggestion that does not overlap another.

        Edits run from the end of the file backwards so earlier spans stay
        valid. When two suggestions overlap, the one further down is kept and
        the other is left for a later pass.
        """
        source_map = SourceMap(source)
        content = source_map.source_bytes
        result = FixResult(source=source)

        fixable = [d for d in diagnostics if self.can_fix(d)]
        fixable.sort(key=lambda d: (d.suggestion.span.start, d.suggestion.span.end), reverse=True)

        applied_spans = []
        for diagnostic in fixable:
            span = diagnostic.suggestion.span
            if any(span.overlaps(done) or span == done for done in applied_spans):
                result.skipped.append(diagnostic)
                continue
            # Continuation lines follow the indentation of the line being replaced
            replacement = reindent_multiline(
                diagnostic.suggestion.replacement,
                source_map.line_indent(span.start),
            )
            content = content[: span.start] + replacement.encode("utf8") + content[span.end :]
            applied_spans.append(span)
            result.applied.append(diagnostic)
            logger.debug("applied %s fix at %d..%d", diagnostic.rule_id, span.start, span.end)

        result.source = content.decode("utf8", errors="replace")
        return result

    def apply_to_file(self, file_path: Path, diagnostics: List[Diagnostic]) -> FixResult:
        content = file_path.read_text(encoding="utf-8")
        result = self.apply(content, diagnostics)
        if result.modified:
            file_path.write_text(result.source, encoding="utf-8")
        return result
