"""Text syntax for patterns.

    If(_#check, Block(expr_or_semi(If(_#check_inner, _#content)#inner))#then)

- `Kind(a, b)` matches a node of that kind whose children match the slots;
  `Kind` without parentheses ignores the children. Commas between slots are
  optional, so `Block(_* Semi(_) _*#tail)` reads like a statement list.
- `_` matches one node, `p*` and `p?` match a run of zero-or-more or
  zero-or-one siblings inside a slot list.
- `a | b` tries `a`, then `b`. Parentheses group.
- `#name` captures whatever the item before it matched.
- `f(args)` expands a pattern function; `$param` refers to a function's
  parameter inside its body.
- `//` starts a comment that runs to the end of the line.
"""

import re
from dataclasses import dataclass
from typing import Mapping, Sequence

from .matcher import CompiledPattern
from .model import (
    Alternation,
    Capture,
    PatternError,
    SlotPattern,
    Variant,
    Wildcard,
    ZeroOrMore,
    ZeroOrOne,
)

# Ordered token specs: WILDCARD must come before NAME
TOKEN_SPECS = [
    ("SKIP", r"[ \t\r\n]+"),
    ("COMMENT", r"//[^\n]*"),
    ("WILDCARD", r"_(?![A-Za-z0-9_])"),
    ("NAME", r"[A-Za-z_][A-Za-z0-9_]*"),
    ("PARAM", r"\$[A-Za-z_][A-Za-z0-9_]*"),
    ("CAPTURE", r"#[A-Za-z_][A-Za-z0-9_]*"),
    ("PUNCT", r"[(),|*?]"),
    ("MISMATCH", r"."),
]

_TOKEN_REGEXES = [(typ, re.compile(pattern)) for typ, pattern in TOKEN_SPECS]


@dataclass(frozen=True)
class Token:
    type: str
    value: str
    position: int


def tokenize(source: str) -> list[Token]:
    """Split pattern text into tokens, dropping whitespace and comments."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(source):
        for typ, regex in _TOKEN_REGEXES:
            m = regex.match(source, pos)
            if not m:
                continue
            if typ == "MISMATCH":
                raise PatternError(f"unexpected character {m.group(0)!r}", source, pos)
            if typ not in ("SKIP", "COMMENT"):
                tokens.append(Token(typ, m.group(0), pos))
            pos = m.end()
            break
    tokens.append(Token("EOF", "", len(source)))
    return tokens


@dataclass(frozen=True)
class _Param:
    """Placeholder for a function parameter inside a function body."""

    name: str


@dataclass(frozen=True)
class PatternFunction:
    """A named, parameterised pattern fragment expanded at compile time."""

    name: str
    params: tuple[str, ...]
    template: SlotPattern

    def expand(self, args: Sequence[SlotPattern]) -> SlotPattern:
        if len(args) != len(self.params):
            raise PatternError(
                f"{self.name}() takes {len(self.params)} argument(s), got {len(args)}"
            )
        return _substitute(self.template, dict(zip(self.params, args)))


FunctionTable = Mapping[str, PatternFunction]


def _substitute(pattern, args: dict):
    if isinstance(pattern, _Param):
        return args[pattern.name]
    if isinstance(pattern, Variant):
        if pattern.slots is None:
            return pattern
        return Variant(pattern.kind, tuple(_substitute(s, args) for s in pattern.slots))
    if isinstance(pattern, Alternation):
        return Alternation(tuple(_substitute(o, args) for o in pattern.options))
    if isinstance(pattern, Capture):
        return Capture(pattern.name, _substitute(pattern.inner, args))
    if isinstance(pattern, ZeroOrMore):
        return ZeroOrMore(_substitute(pattern.inner, args))
    if isinstance(pattern, ZeroOrOne):
        return ZeroOrOne(_substitute(pattern.inner, args))
    return pattern


class PatternParser:
    """Recursive-descent parser producing an unvalidated pattern tree"""

    def __init__(
        self,
        source: str,
        functions: FunctionTable | None = None,
        params: Sequence[str] = (),
    ):
        self.source = source
        self.tokens = tokenize(source)
        self.pos = 0
        self.functions = dict(functions or {})
        self.params = tuple(params)

    def parse(self) -> SlotPattern:
        result = self._parse_alternation()
        token = self._peek()
        if token.type != "EOF":
            self._fail(f"unexpected {token.value!r} after pattern", token)
        return result

    # Utility helpers
    def _peek(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        if token.type != "EOF":
            self.pos += 1
        return token

    def _at(self, value: str) -> bool:
        token = self._peek()
        return token.type == "PUNCT" and token.value == value

    def _expect(self, value: str) -> Token:
        token = self._peek()
        if not self._at(value):
            found = "end of pattern" if token.type == "EOF" else repr(token.value)
            self._fail(f"expected {value!r}, found {found}", token)
        return self._advance()

    def _fail(self, message: str, token: Token):
        raise PatternError(message, self.source, token.position)

    # Grammar
    def _parse_alternation(self) -> SlotPattern:
        options = [self._parse_item()]
        while self._at("|"):
            self._advance()
            options.append(self._parse_item())
        if len(options) == 1:
            return options[0]
        return Alternation(tuple(options))

    def _parse_item(self) -> SlotPattern:
        item = self._parse_atom()
        if self._at("*") or self._at("?"):
            quantifier = self._advance()
            item = ZeroOrMore(item) if quantifier.value == "*" else ZeroOrOne(item)
            if self._at("*") or self._at("?"):
                self._fail("a quantifier cannot be applied to a quantifier", self._peek())
        while self._peek().type == "CAPTURE":
            item = Capture(self._advance().value[1:], item)
        return item

    def _parse_atom(self) -> SlotPattern:
        token = self._peek()

        if token.type == "WILDCARD":
            self._advance()
            return Wildcard()

        if token.type == "PARAM":
            self._advance()
            name = token.value[1:]
            if name not in self.params:
                self._fail(f"unknown parameter ${name}", token)
            return _Param(name)

        if token.type == "NAME":
            self._advance()
            if token.value in self.functions:
                function = self.functions[token.value]
                if not self._at("("):
                    self._fail(f"pattern function {token.value}() must be called with arguments", token)
                args = self._parse_list()
                try:
                    return function.expand(args)
                except PatternError as e:
                    self._fail(e.message, token)
            if not self._at("("):
                return Variant(token.value)
            return Variant(token.value, tuple(self._parse_list()))

        if self._at("("):
            self._advance()
            inner = self._parse_alternation()
            self._expect(")")
            return inner

        found = "end of pattern" if token.type == "EOF" else repr(token.value)
        self._fail(f"expected a pattern, found {found}", token)

    def _parse_list(self) -> list[SlotPattern]:
        """Parse `( slot [,] slot ... )`."""
        self._expect("(")
        items = []
        while not self._at(")"):
            if self._peek().type == "EOF":
                self._fail("unterminated argument list, expected ')'", self._peek())
            items.append(self._parse_alternation())
            if self._at(","):
                self._advance()
        self._expect(")")
        return items


def define_function(
    name: str,
    params: Sequence[str],
    body: str,
    functions: FunctionTable | None = None,
) -> PatternFunction:
    """Parse `body` as the template of a pattern function.

    `functions` lists the functions the body itself may call.
    """
    if len(set(params)) != len(params):
        raise PatternError(f"duplicate parameter in {name}({', '.join(params)})")
    template = PatternParser(body, functions, params).parse()
    return PatternFunction(name=name, params=tuple(params), template=template)


def compile_pattern(
    source: str,
    functions: FunctionTable | None = None,
    name: str | None = None,
) -> CompiledPattern:
    """Parse and validate pattern text. Raises PatternError."""
    pattern = PatternParser(source, functions).parse()
    try:
        return CompiledPattern.build(pattern, name=name, source=source)
    except PatternError as e:
        if name is None:
            raise
        raise PatternError(f"in pattern {name}: {e.message}") from e
