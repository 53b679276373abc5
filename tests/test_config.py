import logging

from ferrite_cli.config import LintConfig, find_config
from ferrite_cli.converters import diagnostic_to_lint_issue
from ferrite_cli.models import Severity
from ferrite_linter import LinterEngine, RuleRegistry


def test_defaults_without_file(tmp_path):
    config = LintConfig(tmp_path / "missing.toml")
    assert config.select == ["all"]
    assert config.ignore == []
    assert config.show_advisory is True


def test_dedicated_file_with_top_level_keys(tmp_path):
    path = tmp_path / ".ferrite-lint.toml"
    path.write_text('select = ["style"]\nignore = ["needless_continue"]\nshow-advisory = false\n')
    config = LintConfig(path)
    assert config.select == ["style"]
    assert config.ignore == ["needless_continue"]
    assert config.show_advisory is False


def test_pyproject_table(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n\n[tool.ferrite-lint]\nignore = ["pedantic"]\n')
    config = LintConfig(path)
    assert config.ignore == ["pedantic"]
    assert [r.rule_id for r in config.apply_to_registry(RuleRegistry())] == ["collapsible_if"]


def test_pyproject_without_table_uses_defaults(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n')
    assert LintConfig(path).select == ["all"]


def test_malformed_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / ".ferrite-lint.toml"
    path.write_text("select = [\n")
    with caplog.at_level(logging.WARNING):
        config = LintConfig(path)
    assert config.select == ["all"]
    assert "using defaults" in caplog.text


def test_wrong_types_fall_back_to_defaults(tmp_path, caplog):
    path = tmp_path / ".ferrite-lint.toml"
    path.write_text("select = 3\n")
    with caplog.at_level(logging.WARNING):
        config = LintConfig(path)
    assert config.select == ["all"]
    assert "invalid configuration" in caplog.text


def test_find_config_prefers_dedicated_file(tmp_path):
    assert find_config(tmp_path) is None
    (tmp_path / "pyproject.toml").write_text("")
    assert find_config(tmp_path) == tmp_path / "pyproject.toml"
    (tmp_path / ".ferrite-lint.toml").write_text("")
    assert find_config(tmp_path) == tmp_path / ".ferrite-lint.toml"


def test_diagnostic_to_lint_issue():
    code = "fn main() {\n    if a { if b { f(); } }\n}\n"
    diagnostic = LinterEngine().analyze_string(code)[0]
    issue = diagnostic_to_lint_issue(diagnostic)
    assert issue.severity is Severity.WARNING
    assert issue.file_path == "<string>"
    assert issue.line_number == 2
    assert issue.column == 5
    assert issue.rule_id == "collapsible_if"
    assert issue.suggestion == "if a && b { f(); }"
    assert issue.applicability == "MachineApplicable"
    assert issue.auto_fixable


def test_apply_to_registry_merges_overrides(tmp_path):
    path = tmp_path / ".ferrite-lint.toml"
    path.write_text('select = ["style"]\nignore = ["needless_continue"]\n')
    config = LintConfig(path)
    registry = RuleRegistry()

    assert [r.rule_id for r in config.apply_to_registry(registry)] == ["collapsible_if"]
    # a command line selection replaces the configured one
    assert [r.rule_id for r in config.apply_to_registry(registry, select=["all"])] == ["collapsible_if"]
    assert config.apply_to_registry(registry, ignore=["collapsible_if"]) == []
