import asyncio
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from lintstyle.core.config import RuleSetConfig, build_rules, load_config
from lintstyle.core.engine import lint_paths
from lintstyle.core.languages import DEFAULT_LANGUAGE, normalize_language
from lintstyle.core.ports.reader import SourceReader
from lintstyle.core.reporter import OutputFormat, render
from lintstyle.core.rules import RULE_TYPES, Rule
from lintstyle.errors import ConfigurationError
from lintstyle.models import RunResult
from lintstyle.readers import FileSystemReader, InMemoryReader

CODE_PATH = "<code>"

app = typer.Typer(
    name="lintstyle",
    help="Check source files against bracket-and-quote style conventions.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_setup(config: str | None, language: str | None) -> tuple[list[Rule], str | None]:
    rule_config = load_config(config) if config else RuleSetConfig()
    effective_language = language or rule_config.language
    if effective_language:
        try:
            effective_language = normalize_language(effective_language)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
    return build_rules(rule_config), effective_language


def _render_rule_table(rules: list[Rule]) -> None:
    active = {rule.id: rule for rule in rules}
    table = Table(show_lines=False)
    table.add_column("rule", no_wrap=True)
    table.add_column("enabled")
    table.add_column("severity")
    table.add_column("description")
    for rule_id, rule_type in RULE_TYPES.items():
        rule = active.get(rule_id)
        severity = rule.effective_severity if rule else rule_type.default_severity
        table.add_row(rule_id, "yes" if rule else "no", severity.value, rule_type.description)
    console.print(table)


def _print_summary(result: RunResult) -> None:
    checked = len(result.files)
    if not result.violations:
        err_console.print(f"[green]No style violations[/green] in {checked} file(s).")
        return
    colour = "red" if result.has_errors else "yellow"
    err_console.print(
        f"[{colour}]Found {len(result.violations)} style violation(s)[/{colour}] "
        f"({result.error_count} error(s), {result.warning_count} warning(s)) in {checked} file(s)."
    )


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def lint(
    files: Annotated[list[str] | None, typer.Argument(help="Files to check.", show_default=False)] = None,
    config: Annotated[str | None, typer.Option("--config", "-c", help="Rule set configuration (TOML or JSON).")] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Report format.", case_sensitive=False)
    ] = OutputFormat.TEXT,
    language: Annotated[
        str | None, typer.Option(help="Language for every input (e.g. js, ts, java). Default: by extension.")
    ] = None,
    code: Annotated[str | None, typer.Option(help="Source code string to check instead of files.")] = None,
    jobs: Annotated[int | None, typer.Option("--jobs", "-j", min=1, help="Files checked in parallel.")] = None,
    timeout: Annotated[float | None, typer.Option(min=0.001, help="Per-file time limit in seconds.")] = None,
    list_rules: Annotated[bool, typer.Option("--list-rules", help="Show the effective rule set and exit.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Check files for style violations.

    Exits 0 when no error-severity violation is found, 1 otherwise, and 2 on
    invocation or configuration errors.
    """
    _configure_logging(verbose)

    try:
        rules, effective_language = _resolve_setup(config, language)
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        raise typer.Exit(2) from None

    if list_rules:
        _render_rule_table(rules)
        return

    reader: SourceReader
    if code is not None:
        reader = InMemoryReader({CODE_PATH: code})
        paths = [CODE_PATH]
        effective_language = effective_language or DEFAULT_LANGUAGE
    elif files:
        reader = FileSystemReader()
        paths = files
    else:
        err_console.print("[red]No input:[/red] pass one or more files or --code.")
        raise typer.Exit(2)

    result = asyncio.run(lint_paths(paths, rules, reader, language=effective_language, jobs=jobs, timeout=timeout))

    output = render(result, output_format)
    if output:
        typer.echo(output)
    _print_summary(result)
    raise typer.Exit(result.exit_code)


def main() -> None:
    app()
