from bisect import bisect_right
from pathlib import Path

from ferrite_pattern import ROOT, Span, SyntaxNode


class SourceMap:
    """Owns one file's text and answers span queries for the lint rules"""

    def __init__(self, source: str | bytes, file_path: Path | None = None):
        self.source_bytes = source.encode("utf8") if isinstance(source, str) else source
        self.file_path = file_path
        self._line_starts = [0]
        for i, byte in enumerate(self.source_bytes):
            if byte == 0x0A:
                self._line_starts.append(i + 1)

    def snippet(self, span: Span) -> str:
        return self.source_bytes[span.start : span.end].decode("utf8", errors="replace")

    def line_col(self, offset: int) -> tuple[int, int]:
        """1-based line and 0-based byte column of `offset`"""
        index = bisect_right(self._line_starts, offset) - 1
        return index + 1, offset - self._line_starts[index]

    def line_indent(self, offset: int) -> str:
        """Leading whitespace of the line containing `offset`"""
        line_start = self._line_starts[bisect_right(self._line_starts, offset) - 1]
        end = line_start
        while end < len(self.source_bytes) and self.source_bytes[end] in b" \t":
            end += 1
        return self.source_bytes[line_start:end].decode("ascii")

    def from_expansion(self, node: SyntaxNode) -> bool:
        return node.expansion_context != ROOT
