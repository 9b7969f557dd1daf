from enum import Enum

from pydantic import TypeAdapter

from lintstyle.models import RunResult, Violation

_VIOLATIONS_ADAPTER = TypeAdapter(list[Violation])


class OutputFormat(str, Enum):
    TEXT = "text"
    STRUCTURED = "structured"


def format_violation(violation: Violation) -> str:
    column = violation.column or 1
    return (
        f"{violation.path}:{violation.line}:{column}: "
        f"[{violation.severity.value}] {violation.message} ({violation.rule})"
    )


def render_text(result: RunResult) -> str:
    lines = [format_violation(v) for violations in result.files.values() for v in violations]
    return "\n".join(lines)


def render_structured(result: RunResult) -> str:
    return _VIOLATIONS_ADAPTER.dump_json(result.violations, indent=2).decode("utf-8")


def render(result: RunResult, output_format: OutputFormat = OutputFormat.TEXT) -> str:
    if output_format is OutputFormat.STRUCTURED:
        return render_structured(result)
    return render_text(result)
