from collections.abc import Mapping
from typing import Iterator, Union

from .nodes import SyntaxNode

CapturedValue = Union[SyntaxNode, tuple[SyntaxNode, ...], None]


class Captures(Mapping):
    """Bindings produced by one successful match.

    Values are a single node, a tuple of sibling nodes (for `p*` slots), or
    None for an optional slot that matched nothing. Every capture name of the
    pattern is present. Bindings are also readable as attributes, so rules can
    write `res.if_cond`.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, CapturedValue]):
        object.__setattr__(self, "_values", dict(values))

    def __getitem__(self, name: str) -> CapturedValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> CapturedValue:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"no capture named {name!r}") from None

    def __setattr__(self, name, value):
        raise AttributeError("Captures is read-only")

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"Captures({inner})"

    def node(self, name: str) -> SyntaxNode:
        """The single node bound to `name`."""
        value = self._values[name]
        if not isinstance(value, SyntaxNode):
            raise TypeError(f"capture {name!r} is not a single node: {value!r}")
        return value

    def sequence(self, name: str) -> tuple[SyntaxNode, ...]:
        """The sibling run bound to `name` by a `*` slot."""
        value = self._values[name]
        if not isinstance(value, tuple):
            raise TypeError(f"capture {name!r} is not a sequence: {value!r}")
        return value

    def optional(self, name: str) -> SyntaxNode | None:
        """The node bound to `name`, or None when its slot matched nothing."""
        value = self._values[name]
        if isinstance(value, tuple):
            raise TypeError(f"capture {name!r} is a sequence, not an optional node")
        return value
