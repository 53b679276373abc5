from ferrite_linter import AutoFixEngine, LinterEngine

NESTED = """fn main() {
    if x {
        if y {
            foo();
        }
    }
}
"""

REDUNDANT_ELSE = """fn main() {
    loop {
        if c {
            g();
        } else {
            continue;
        }
        h();
    }
}
"""

NEGATED = """fn main() {
    loop {
        if c {
            continue;
        } else {
            g();
        }
    }
}
"""


def fix(code):
    diagnostics = LinterEngine().analyze_string(code)
    return AutoFixEngine().apply(code, diagnostics)


def test_collapsible_if_fix_keeps_indentation():
    result = fix(NESTED)
    assert result.modified
    assert result.source == "fn main() {\n    if x && y {\n        foo();\n    }\n}\n"


def test_redundant_else_fix_merges_following_code():
    result = fix(REDUNDANT_ELSE)
    assert [d.rule_id for d in result.applied] == ["needless_continue"]
    assert result.source == (
        "fn main() {\n"
        "    loop {\n"
        "        if c {\n"
        "            g();\n"
        "            h();\n"
        "        }\n"
        "    }\n"
        "}\n"
    )


def test_advisory_suggestions_are_not_applied():
    result = fix(NEGATED)
    assert not result.modified
    assert result.source == NEGATED


def test_overlapping_fixes_leave_the_outer_one_for_later():
    code = "fn main() { if a { if b { if c { f(); } } } }"
    result = fix(code)
    assert len(result.applied) == 1
    assert len(result.skipped) == 1
    assert result.source == "fn main() { if a { if b && c { f(); } } }"

    second = fix(result.source)
    assert second.source == "fn main() { if a && b && c { f(); } }"
    assert not fix(second.source).modified


def test_apply_to_file(tmp_path):
    path = tmp_path / "main.rs"
    path.write_text(NESTED, encoding="utf-8")
    engine = LinterEngine()
    result = AutoFixEngine().apply_to_file(path, engine.analyze_file(path))
    assert result.modified
    assert path.read_text(encoding="utf-8") == result.source
    assert engine.analyze_file(path) == []


def test_fix_with_multibyte_text():
    code = "fn main() { let s = \"héllo\"; if a { if b { f(s); } } }"
    result = fix(code)
    assert result.source == "fn main() { let s = \"héllo\"; if a && b { f(s); } }"


def test_multi_line_string_is_never_reindented():
    code = 'fn main() {\n    if a {\n        if b {\n            print("x\ny");\n        }\n    }\n}\n'
    result = fix(code)
    assert not result.modified
    assert result.source == code
