"""Layout rules that only need the line model."""

from collections.abc import Sequence

from pydantic import Field

from lintstyle.core.rules.base import Rule, enclosed_lines
from lintstyle.models import LogicalLine, SourceFile, Token, TokenKind, Violation


class IndentWidthRule(Rule):
    id = "indent-width"
    description = "Indent with spaces only, in multiples of the configured width."

    width: int = Field(default=2, ge=1)

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        enclosed = enclosed_lines(tokens, lines)
        violations: list[Violation] = []

        for line in lines:
            if line.is_blank:
                continue
            container = enclosed.get(line.number)
            # Leading whitespace inside a string literal is data.
            if container is TokenKind.STRING:
                continue
            indent = line.indent
            if "\t" in indent:
                violations.append(
                    self.violation(
                        source,
                        line.number,
                        "Indentation contains a tab character; indent with spaces.",
                        column=indent.index("\t") + 1,
                    )
                )
            elif container is None and len(indent) % self.width:
                violations.append(
                    self.violation(
                        source,
                        line.number,
                        f"Indentation of {len(indent)} spaces is not a multiple of {self.width}.",
                        column=1,
                    )
                )

        return violations


class LineLengthRule(Rule):
    id = "line-length"
    description = "Keep lines at or under the configured number of characters."

    max_length: int = Field(default=80, ge=1)

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        return [
            self.violation(
                source,
                line.number,
                f"Line is {line.length} characters long; the maximum is {self.max_length}.",
                column=self.max_length + 1,
            )
            for line in lines
            if line.length > self.max_length
        ]


class FinalNewlineRule(Rule):
    id = "final-newline"
    description = "End every file with a newline."

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        if not lines or lines[-1].terminated:
            return []
        last = lines[-1]
        return [self.violation(source, last.number, "File does not end with a newline.", column=last.length + 1)]


class NoTrailingWhitespaceRule(Rule):
    id = "no-trailing-whitespace"
    description = "Do not leave spaces or tabs at the end of a line."

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        return [
            self.violation(
                source,
                line.number,
                "Trailing whitespace.",
                column=len(line.text.rstrip(" \t")) + 1,
            )
            for line in lines
            if line.trailing_whitespace and not line.is_blank
        ]


class NoCrlfRule(Rule):
    id = "no-crlf"
    description = "Use LF line endings, not CRLF."

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        crlf_lines = [line for line in lines if line.has_cr]
        if not crlf_lines:
            return []
        first = crlf_lines[0]
        return [
            self.violation(
                source,
                first.number,
                f"Line ends with CRLF; use LF line endings ({len(crlf_lines)} CRLF line(s) in file).",
                column=first.length + 1,
            )
        ]
