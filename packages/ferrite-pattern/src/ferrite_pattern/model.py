"""Immutable description of a tree shape.

A pattern is a tree of the classes below. Node patterns (`Wildcard`,
`Variant`, `Alternation`, `Capture`) match exactly one node. The sequence
slots `ZeroOrMore` and `ZeroOrOne` only make sense inside a variant's slot
list, where they match a run of sibling children.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Union


class PatternError(ValueError):
    """Raised when a pattern is malformed. Patterns are compiled at import
    time, so this aborts startup before any matching happens."""

    def __init__(self, message: str, source: str | None = None, position: int | None = None):
        self.message = message
        self.source = source
        self.position = position
        super().__init__(self._render())

    def _render(self) -> str:
        if self.source is None or self.position is None:
            return self.message
        line_start = self.source.rfind("\n", 0, self.position) + 1
        line_end = self.source.find("\n", self.position)
        if line_end == -1:
            line_end = len(self.source)
        line = self.source[line_start:line_end]
        caret = " " * (self.position - line_start) + "^"
        return f"{self.message} (at offset {self.position})\n    {line}\n    {caret}"


@dataclass(frozen=True)
class Wildcard:
    """Matches any single node and binds nothing (`_`)."""

    def __repr__(self) -> str:
        return "_"


@dataclass(frozen=True)
class Variant:
    """Matches a node of `kind`.

    With `slots=None` the children are not inspected. Otherwise the slots
    must consume the node's children exactly, in order.
    """

    kind: str
    slots: tuple["SlotPattern", ...] | None = None

    def __post_init__(self):
        if self.slots is not None and not isinstance(self.slots, tuple):
            object.__setattr__(self, "slots", tuple(self.slots))


@dataclass(frozen=True)
class Alternation:
    """Tries each option in order and keeps the first that matches."""

    options: tuple["Pattern", ...]

    def __post_init__(self):
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))


@dataclass(frozen=True)
class Capture:
    """Binds whatever `inner` matched under `name`."""

    name: str
    inner: "SlotPattern"


@dataclass(frozen=True)
class ZeroOrMore:
    """Any number of consecutive siblings, each matching `inner` (`p*`)."""

    inner: "Pattern"


@dataclass(frozen=True)
class ZeroOrOne:
    """At most one sibling matching `inner` (`p?`)."""

    inner: "Pattern"


Pattern = Union[Wildcard, Variant, Alternation, Capture]
SlotPattern = Union[Pattern, ZeroOrMore, ZeroOrOne]

QUANTIFIERS = (ZeroOrMore, ZeroOrOne)


def split_slot(slot: "SlotPattern") -> tuple[tuple[str, ...], "SlotPattern"]:
    """Peel capture wrappers off a quantified slot.

    Returns the capture names and the quantifier when `slot` is a (possibly
    captured) quantifier, otherwise `((), slot)` unchanged.
    """
    names = []
    core = slot
    while isinstance(core, Capture):
        names.append(core.name)
        core = core.inner
    if isinstance(core, QUANTIFIERS):
        return tuple(names), core
    return (), slot


@lru_cache(maxsize=None)
def capture_names(pattern: "SlotPattern") -> tuple[str, ...]:
    """Validate `pattern` and return its capture names in first-seen order.

    Names must be unique along any single match path. Alternation branches
    are alternative paths, so they may reuse a name.
    """
    return tuple(_collect(pattern, in_slot=False, repeated=False))


def _collect(pattern, *, in_slot: bool, repeated: bool) -> list[str]:
    if isinstance(pattern, Wildcard):
        return []

    if isinstance(pattern, QUANTIFIERS):
        if not in_slot:
            raise PatternError(f"quantifier {_describe(pattern)} is only allowed in a variant's slot list")
        if isinstance(split_slot(pattern.inner)[1], QUANTIFIERS):
            raise PatternError(f"quantifier applied to a quantifier in {_describe(pattern)}")
        return _collect(
            pattern.inner,
            in_slot=False,
            repeated=repeated or isinstance(pattern, ZeroOrMore),
        )

    if isinstance(pattern, Capture):
        if repeated:
            raise PatternError(f"capture #{pattern.name} cannot appear inside a repetition")
        inner = _collect(pattern.inner, in_slot=in_slot, repeated=repeated)
        if pattern.name in inner:
            raise PatternError(f"duplicate capture name #{pattern.name}")
        return [pattern.name, *inner]

    if isinstance(pattern, Alternation):
        if not pattern.options:
            raise PatternError("alternation needs at least one option")
        names: list[str] = []
        for option in pattern.options:
            for name in _collect(option, in_slot=False, repeated=repeated):
                if name not in names:
                    names.append(name)
        return names

    if isinstance(pattern, Variant):
        names = []
        for slot in pattern.slots or ():
            for name in _collect(slot, in_slot=True, repeated=repeated):
                if name in names:
                    raise PatternError(f"duplicate capture name #{name} in {pattern.kind}(...)")
                names.append(name)
        return names

    raise PatternError(f"not a pattern: {pattern!r}")


def _describe(pattern) -> str:
    symbol = "*" if isinstance(pattern, ZeroOrMore) else "?"
    return f"{pattern.inner!r}{symbol}"
