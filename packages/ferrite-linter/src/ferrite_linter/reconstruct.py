"""Turns raw block text back into fragments that can be spliced elsewhere.

Every function here is total: any input, including empty or brace-less
text, produces a string. Snippets come from heuristic scans of real source,
so they must never abort the lint run.
"""


def erode_from_front(s: str) -> str:
    """Eat leading whitespace, then opening braces, then the line break after them.

    Spaces and tabs sitting between the braces and the content (or the line
    break) are eaten too, so

        {
            something();
            inside_a_block();
        }

    becomes

            something();
            inside_a_block();
        }

    and `{ a(); }` becomes `a(); }`.
    """
    i = 0
    n = len(s)
    while i < n and s[i].isspace():
        i += 1
    while i < n and s[i] == "{":
        i += 1
    while i < n and s[i] in " \t":
        i += 1
    while i < n and s[i] in "\r\n":
        i += 1
    return s[i:]


def erode_from_back(s: str) -> str:
    """Eat from the end through the last `}`, then any whitespace before it.

    When there is no closing brace the whole string is eaten and the result
    is empty.
    """
    end = s.rfind("}")
    if end == -1:
        return ""
    return s[:end].rstrip()


def erode_block(s: str) -> str:
    """The contents of a braced block, or "" when there is no closing brace."""
    return erode_from_back(erode_from_front(s))


def _trim_multiline_inner(s: str, ignore_first: bool, ch: str) -> str:
    lines = s.split("\n")
    candidates = lines[1:] if ignore_first else lines
    widths = [len(line) - len(line.lstrip(ch)) for line in candidates if line]
    width = min(widths, default=0)
    if width == 0:
        return s
    return "\n".join(
        line if (ignore_first and i == 0) or not line else line[width:]
        for i, line in enumerate(lines)
    )


def trim_multiline(s: str, ignore_first: bool = False) -> str:
    """Remove the indentation shared by all non-empty lines.

    Spaces, then tabs, then spaces again, so mixed indentation of the form
    `<spaces><tabs><spaces>` is also normalised. Relative indentation between
    lines is kept. With `ignore_first`, the first line is neither measured
    nor changed, which suits snippets that start mid-line.
    """
    s = _trim_multiline_inner(s, ignore_first, " ")
    s = _trim_multiline_inner(s, ignore_first, "\t")
    return _trim_multiline_inner(s, ignore_first, " ")


def indent_multiline(s: str, indent: str) -> str:
    """Prefix every non-empty line with `indent`."""
    return "\n".join(indent + line if line else line for line in s.split("\n"))


def reindent_multiline(s: str, indent: str) -> str:
    """Prefix every non-empty line but the first with `indent`.

    Used when splicing a fragment at a position whose line is already
    indented.
    """
    first, sep, rest = s.partition("\n")
    if not sep:
        return s
    return first + "\n" + indent_multiline(rest, indent)


def starts_with_comment(s: str) -> bool:
    """True when `s`, past whitespace and opening braces, begins with a comment."""
    i = 0
    while i < len(s) and (s[i].isspace() or s[i] == "{"):
        i += 1
    return s.startswith(("//", "/*"), i)
