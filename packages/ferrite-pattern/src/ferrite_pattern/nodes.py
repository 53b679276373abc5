from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Span:
    """Half-open byte range into the host's source text"""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def contains(self, other: "Span") -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end

    def to(self, other: "Span") -> "Span":
        """Smallest span covering both `self` and `other`."""
        return Span(min(self.start, other.start), max(self.end, other.end))


@dataclass(frozen=True)
class ExpansionContext:
    """Opaque token naming where a span came from.

    Only equality is meaningful. Hosts hand out distinct tokens for code
    produced by macro expansion; literal source carries ROOT.
    """

    token: int = 0


ROOT = ExpansionContext()


@dataclass(frozen=True, eq=False)
class SyntaxNode:
    """A read-only node of a host-supplied syntax tree.

    Nodes compare by identity: two nodes are equal only when they are the
    same node of the same tree. Absent optional children are left out of
    `children` rather than stored as placeholders.
    """

    kind: str
    children: tuple["SyntaxNode", ...] = ()
    span: Span = Span(0, 0)
    expansion_context: ExpansionContext = ROOT
    label: str | None = None
    operator: str | None = None

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __repr__(self) -> str:
        extra = ""
        if self.label:
            extra += f" label={self.label}"
        if self.operator:
            extra += f" op={self.operator}"
        return f"<{self.kind} {self.span.start}..{self.span.end}{extra} children={len(self.children)}>"


def iter_nodes(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Pre-order depth-first walk over `root` and all of its descendants"""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
