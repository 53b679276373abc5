import pytest
from ferrite_linter.reconstruct import (
    erode_block,
    erode_from_back,
    erode_from_front,
    indent_multiline,
    reindent_multiline,
    starts_with_comment,
    trim_multiline,
)


def test_erode_block_single_line():
    assert erode_block("{ a(); b(); }") == "a(); b();"


def test_erode_block_multi_line_keeps_inner_indentation():
    block = "{\n        something();\n        inside_a_block();\n    }"
    assert erode_block(block) == "        something();\n        inside_a_block();"


def test_erode_from_front():
    assert erode_from_front("   {\n    x();\n}") == "    x();\n}"
    assert erode_from_front("{{ x }}") == "x }}"
    assert erode_from_front("{   \n  x") == "  x"


def test_erode_from_back():
    assert erode_from_back("{\n    let x = 5;\n}") == "{\n    let x = 5;"
    assert erode_from_back("a } b") == "a"


@pytest.mark.parametrize("text", ["", "   ", "no braces here", "{ open only", "\n\n"])
def test_erode_from_back_without_closing_brace_is_empty(text):
    assert erode_from_back(text) == ""


@pytest.mark.parametrize("text", ["", "{", "}", "{}", " \t\n", "}{", "{{{"])
def test_erosion_is_total(text):
    assert isinstance(erode_block(text), str)
    assert isinstance(erode_from_front(text), str)


def test_erode_empty_block():
    assert erode_block("{}") == ""
    assert erode_block("{\n}") == ""


def test_trim_multiline_removes_common_indentation():
    text = "    if x {\n        y();\n    }"
    assert trim_multiline(text) == "if x {\n    y();\n}"


def test_trim_multiline_ignores_empty_lines():
    text = "    a();\n\n    b();"
    assert trim_multiline(text) == "a();\n\nb();"


def test_trim_multiline_ignore_first():
    text = "{\n        foo();\n    }"
    assert trim_multiline(text, ignore_first=True) == "{\n    foo();\n}"


def test_trim_multiline_tabs():
    assert trim_multiline("\ta();\n\t\tb();") == "a();\n\tb();"


def test_trim_multiline_without_shared_indent_is_unchanged():
    text = "a();\n    b();"
    assert trim_multiline(text) == text


def test_indent_and_reindent():
    assert indent_multiline("a\n\nb", "  ") == "  a\n\n  b"
    assert reindent_multiline("if x {\n    y();\n}", "    ") == "if x {\n        y();\n    }"
    assert reindent_multiline("single", "    ") == "single"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{ // keep\n if b {} }", True),
        ("{\n    /* note */ x();\n}", True),
        ("{ x(); // trailing\n}", False),
        ("", False),
        ("{{ // nested", True),
    ],
)
def test_starts_with_comment(text, expected):
    assert starts_with_comment(text) is expected
