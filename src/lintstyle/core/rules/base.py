import bisect
from collections.abc import Sequence
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from lintstyle.models import LogicalLine, Severity, SourceFile, Token, TokenKind, Violation


class Rule(BaseModel):
    """A stateless style check.

    Subclasses declare their identity as class variables and their tunable
    parameters as model fields, so configuration validation is just model
    validation. ``check`` must not mutate its inputs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: ClassVar[str]
    description: ClassVar[str]
    default_enabled: ClassVar[bool] = True
    default_severity: ClassVar[Severity] = Severity.ERROR

    severity: Severity | None = None

    @property
    def effective_severity(self) -> Severity:
        return self.severity or self.default_severity

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        raise NotImplementedError

    def violation(self, source: SourceFile, line: int, message: str, column: int | None = None) -> Violation:
        return Violation(
            path=source.path,
            line=line,
            column=column,
            severity=self.effective_severity,
            rule=self.id,
            message=message,
        )


def line_number_at(lines: Sequence[LogicalLine], offset: int) -> int:
    """1-based number of the line containing ``offset``."""
    starts = [line.start for line in lines]
    return max(bisect.bisect_right(starts, offset), 1)


def column_of(lines: Sequence[LogicalLine], token: Token) -> tuple[int, int]:
    number = line_number_at(lines, token.start)
    return number, token.start - lines[number - 1].start + 1


def tokens_by_line(tokens: Sequence[Token], lines: Sequence[LogicalLine]) -> dict[int, list[Token]]:
    """Group tokens under the line their first character sits on."""
    starts = [line.start for line in lines]
    grouped: dict[int, list[Token]] = {}
    for token in tokens:
        number = max(bisect.bisect_right(starts, token.start), 1)
        grouped.setdefault(number, []).append(token)
    return grouped


def enclosed_lines(tokens: Sequence[Token], lines: Sequence[LogicalLine]) -> dict[int, TokenKind]:
    """Map line numbers that begin inside a multi-line comment or string to that token's kind."""
    starts = [line.start for line in lines]
    enclosed: dict[int, TokenKind] = {}
    for token in tokens:
        if token.kind not in (TokenKind.COMMENT, TokenKind.STRING) or "\n" not in token.text:
            continue
        first = bisect.bisect_right(starts, token.start)
        last = bisect.bisect_left(starts, token.end)
        for index in range(first, last):
            enclosed[index + 1] = token.kind
    return enclosed
