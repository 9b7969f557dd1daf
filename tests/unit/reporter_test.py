"""Unit tests for report rendering."""

import json

from lintstyle.core.reporter import OutputFormat, format_violation, render
from lintstyle.models import RunResult, Severity, Violation


def _violation(path: str, line: int, rule: str, column: int | None = 1, severity: Severity = Severity.ERROR) -> Violation:
    return Violation(path=path, line=line, column=column, severity=severity, rule=rule, message=f"{rule} message")


def _result() -> RunResult:
    return RunResult(
        files={
            "b.js": [_violation("b.js", 1, "line-length", column=81), _violation("b.js", 3, "final-newline")],
            "a.js": [_violation("a.js", 2, "quote-consistency", severity=Severity.WARNING)],
            "c.js": [],
        }
    )


def test_format_violation() -> None:
    assert (
        format_violation(_violation("src/a.js", 4, "line-length", column=81))
        == "src/a.js:4:81: [error] line-length message (line-length)"
    )


def test_missing_column_renders_as_one() -> None:
    assert format_violation(_violation("a.js", 1, "no-crlf", column=None)).startswith("a.js:1:1: ")


def test_text_is_grouped_by_file_in_input_order() -> None:
    lines = render(_result(), OutputFormat.TEXT).splitlines()
    assert lines == [
        "b.js:1:81: [error] line-length message (line-length)",
        "b.js:3:1: [error] final-newline message (final-newline)",
        "a.js:2:1: [warning] quote-consistency message (quote-consistency)",
    ]


def test_empty_result_renders_empty_text() -> None:
    assert render(RunResult(files={"a.js": []})) == ""


def test_structured_output_is_machine_parseable() -> None:
    records = json.loads(render(_result(), OutputFormat.STRUCTURED))
    assert [record["rule"] for record in records] == ["line-length", "final-newline", "quote-consistency"]
    assert records[0] == {
        "path": "b.js",
        "line": 1,
        "column": 81,
        "severity": "error",
        "rule": "line-length",
        "message": "line-length message",
    }


def test_structured_output_for_clean_run_is_empty_list() -> None:
    assert json.loads(render(RunResult(files={"a.js": []}), OutputFormat.STRUCTURED)) == []


def test_exit_code_follows_error_severity() -> None:
    assert _result().exit_code == 1
    warnings_only = RunResult(files={"a.js": [_violation("a.js", 1, "naming-case", severity=Severity.WARNING)]})
    assert warnings_only.exit_code == 0
    assert warnings_only.warning_count == 1
    assert warnings_only.error_count == 0
