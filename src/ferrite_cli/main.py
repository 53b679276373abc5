import logging
from pathlib import Path

import typer
from ferrite_linter.autofix import AutoFixEngine
from ferrite_linter.engine import LinterEngine
from ferrite_linter.registry import RuleRegistry

from .config import LintConfig, find_config
from .converters import diagnostic_to_lint_issue
from .models import LintIssue

app = typer.Typer(help="ferrite-lint - Structural lints for Rust source")

MAX_FIX_PASSES = 10


def _configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def _collect_files(paths: list[Path]) -> list[Path]:
    files = []
    for path in paths:
        if not path.exists():
            typer.echo(f"Error: path not found: {path}", err=True)
            raise typer.Exit(code=2)
        if path.is_dir():
            files.extend(sorted(path.rglob("*.rs")))
        else:
            files.append(path)
    return files


def _print_issue(issue: LintIssue, show_advisory: bool):
    typer.echo(
        f"{issue.file_path}:{issue.line_number}:{issue.column}: "
        f"{issue.severity.value} [{issue.rule_id}] {issue.message}"
    )
    if issue.help:
        typer.echo(f"    help: {issue.help}")
    if issue.suggestion is None:
        return
    if issue.applicability != "MachineApplicable" and not show_advisory:
        return
    typer.echo(f"    suggestion ({issue.applicability}):")
    for line in issue.suggestion.splitlines():
        typer.echo(f"        {line}" if line else "")


@app.command()
def check(
    paths: list[Path] = typer.Argument(..., help="Rust files or directories to lint"),
    config_file: Path = typer.Option(None, "--config", help="Path to config file"),
    select: list[str] = typer.Option(None, help="Rule ids or categories to enable"),
    ignore: list[str] = typer.Option(None, help="Rule ids or categories to disable"),
    fix: bool = typer.Option(False, help="Apply machine-applicable fixes in place"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Run structural lints on Rust files"""
    _configure_logging(verbose)
    config = LintConfig(config_file if config_file is not None else find_config())
    registry = RuleRegistry()
    enabled_rules = config.apply_to_registry(registry, select=select, ignore=ignore)
    engine = LinterEngine(registry)
    autofix = AutoFixEngine()

    files = _collect_files(paths)
    all_issues = []
    fixed = 0

    for file_path in files:
        passes = 0
        current_issues = []

        # Overlapping suggestions are applied one per pass
        while passes < MAX_FIX_PASSES:
            passes += 1
            current_issues = engine.analyze_file(file_path, rules=enabled_rules)

            if not fix:
                break

            fixable = [d for d in current_issues if autofix.can_fix(d)]
            if not fixable:
                break

            result = autofix.apply_to_file(file_path, fixable)
            typer.echo(f"  Applying {len(result.applied)} fix(es) in {file_path.name}...")
            fixed += len(result.applied)

            if passes == MAX_FIX_PASSES:
                typer.echo(f"Warning: Reached max fix passes for {file_path}")

        all_issues.extend(current_issues)

    external_issues = [diagnostic_to_lint_issue(d) for d in all_issues]
    for issue in sorted(external_issues, key=lambda x: (x.file_path, x.line_number, x.column)):
        _print_issue(issue, config.show_advisory)

    if fix:
        typer.echo(f"\nFixed {fixed} issue(s)")
    typer.echo(f"\nTotal issues found: {len(external_issues)}")

    if external_issues:
        raise typer.Exit(code=1)


@app.command()
def rules():
    """List the available lint rules"""
    for rule in RuleRegistry().get_all_rules():
        typer.echo(f"{rule.rule_id:<20} {rule.category:<10} {rule.description}")


if __name__ == "__main__":
    app()
