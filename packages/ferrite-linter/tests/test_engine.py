import pytest
from ferrite_linter import LinterEngine, RuleRegistry, Severity
from ferrite_linter.rules.collapsible_if import CollapsibleIfRule

BOTH = """fn main() {
    loop {
        if a {
            if b {
                f();
            }
        }
        if c {
            g();
        } else {
            continue;
        }
        h();
    }
}
"""


def test_builtin_rules_are_registered():
    registry = RuleRegistry()
    assert [r.rule_id for r in registry.get_all_rules()] == ["collapsible_if", "needless_continue"]
    assert registry.get_rule("needless_continue").category == "pedantic"
    assert registry.get_rule("missing") is None


def test_duplicate_registration_is_rejected():
    registry = RuleRegistry()
    with pytest.raises(ValueError, match="collapsible_if"):
        registry.register(CollapsibleIfRule())


def test_empty_registry():
    assert RuleRegistry(load_builtins=False).get_all_rules() == []


@pytest.mark.parametrize(
    "select, ignore, expected",
    [
        (None, None, ["collapsible_if", "needless_continue"]),
        (["all"], None, ["collapsible_if", "needless_continue"]),
        (["collapsible_if"], None, ["collapsible_if"]),
        (["pedantic"], None, ["needless_continue"]),
        (["all"], ["style"], ["needless_continue"]),
        (None, ["needless_continue"], ["collapsible_if"]),
        (["style"], ["collapsible_if"], []),
    ],
)
def test_rule_selection(select, ignore, expected):
    rules = RuleRegistry().get_enabled_rules(select, ignore)
    assert [r.rule_id for r in rules] == expected


def test_unknown_selection_is_logged(caplog):
    with caplog.at_level("WARNING"):
        assert RuleRegistry().get_enabled_rules(["no_such_rule"]) == []
    assert "no_such_rule" in caplog.text


def test_engine_runs_every_rule_in_source_order():
    diagnostics = LinterEngine().analyze_string(BOTH)
    assert [d.rule_id for d in diagnostics] == ["collapsible_if", "needless_continue"]
    assert [d.line for d in diagnostics] == [3, 10]
    assert all(d.severity is Severity.WARNING for d in diagnostics)


def test_engine_uses_the_given_rules_only():
    diagnostics = LinterEngine().analyze_string(BOTH, rules=[CollapsibleIfRule()])
    assert [d.rule_id for d in diagnostics] == ["collapsible_if"]


def test_clean_source_has_no_diagnostics():
    assert LinterEngine().analyze_string("fn main() {\n    let x = 1;\n}\n") == []


def test_analyze_file(tmp_path):
    path = tmp_path / "lib.rs"
    path.write_text(BOTH, encoding="utf-8")
    diagnostics = LinterEngine().analyze_file(path)
    assert len(diagnostics) == 2
    assert all(d.file_path == path for d in diagnostics)
