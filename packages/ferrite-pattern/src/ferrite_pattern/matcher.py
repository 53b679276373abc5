"""Evaluates a pattern against a syntax tree.

Matching is purely structural: it never looks at spans or expansion
contexts. Bindings are threaded through as plain dicts that are copied,
never mutated, so backtracking needs no undo step.
"""

from dataclasses import dataclass, field
from typing import Sequence

from .captures import Captures
from .model import (
    Alternation,
    Capture,
    Pattern,
    PatternError,
    SlotPattern,
    Variant,
    Wildcard,
    ZeroOrMore,
    ZeroOrOne,
    capture_names,
    split_slot,
)
from .nodes import SyntaxNode

Bindings = dict


def match(pattern: Pattern, node: SyntaxNode) -> Captures | None:
    """Match `pattern` against `node`.

    Returns the captures of the first match found, or None when the pattern
    does not apply. The result depends only on `(pattern, node)`.
    """
    names = capture_names(pattern)
    bindings = _match_node(pattern, node, {})
    if bindings is None:
        return None
    return Captures({name: bindings.get(name) for name in names})


def _match_node(pattern: Pattern, node: SyntaxNode, bindings: Bindings) -> Bindings | None:
    if isinstance(pattern, Wildcard):
        return bindings

    if isinstance(pattern, Variant):
        if node.kind != pattern.kind:
            return None
        if pattern.slots is None:
            return bindings
        return _match_slots(pattern.slots, 0, node.children, 0, bindings)

    if isinstance(pattern, Alternation):
        for option in pattern.options:
            result = _match_node(option, node, bindings)
            if result is not None:
                return result
        return None

    if isinstance(pattern, Capture):
        result = _match_node(pattern.inner, node, bindings)
        if result is None:
            return None
        return {**result, pattern.name: node}

    raise PatternError(f"{pattern!r} cannot match a single node")


def _bind(bindings: Bindings, names: tuple[str, ...], value) -> Bindings:
    if not names:
        return bindings
    return {**bindings, **{name: value for name in names}}


def _match_slots(
    slots: Sequence[SlotPattern],
    index: int,
    children: Sequence[SyntaxNode],
    position: int,
    bindings: Bindings,
) -> Bindings | None:
    """Match slots[index:] against children[position:], consuming all of them."""
    if index == len(slots):
        return bindings if position == len(children) else None

    names, slot = split_slot(slots[index])

    if isinstance(slot, ZeroOrMore):
        # Shortcut for a trailing `_*`: it swallows whatever is left.
        if index == len(slots) - 1 and isinstance(slot.inner, Wildcard):
            return _bind(bindings, names, tuple(children[position:]))

        # Lazy: try the fewest repetitions first, so that the next slot
        # anchors at the earliest sibling it can.
        end = position
        current = bindings
        while True:
            result = _match_slots(
                slots,
                index + 1,
                children,
                end,
                _bind(current, names, tuple(children[position:end])),
            )
            if result is not None:
                return result
            if end == len(children):
                return None
            current = _match_node(slot.inner, children[end], current)
            if current is None:
                return None
            end += 1

    if isinstance(slot, ZeroOrOne):
        if position < len(children):
            taken = _match_node(slot.inner, children[position], bindings)
            if taken is not None:
                result = _match_slots(
                    slots,
                    index + 1,
                    children,
                    position + 1,
                    _bind(taken, names, children[position]),
                )
                if result is not None:
                    return result
        return _match_slots(slots, index + 1, children, position, _bind(bindings, names, None))

    if position == len(children):
        return None
    result = _match_node(slot, children[position], bindings)
    if result is None:
        return None
    return _match_slots(slots, index + 1, children, position + 1, result)


@dataclass(frozen=True)
class CompiledPattern:
    """A validated pattern, ready to be shared by every match of a rule.

    Calling the object is the same as calling `match`.
    """

    pattern: Pattern
    names: tuple[str, ...]
    name: str | None = None
    source: str | None = field(default=None, repr=False)

    @classmethod
    def build(cls, pattern: Pattern, name: str | None = None, source: str | None = None) -> "CompiledPattern":
        """Validate a combinator-built pattern. Raises PatternError."""
        return cls(pattern=pattern, names=capture_names(pattern), name=name, source=source)

    def match(self, node: SyntaxNode) -> Captures | None:
        bindings = _match_node(self.pattern, node, {})
        if bindings is None:
            return None
        return Captures({name: bindings.get(name) for name in self.names})

    __call__ = match
