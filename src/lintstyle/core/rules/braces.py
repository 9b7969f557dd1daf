from collections.abc import Sequence

from lintstyle.core.rules.base import Rule, enclosed_lines, tokens_by_line
from lintstyle.models import LogicalLine, SourceFile, Token, TokenKind, Violation


class BracePlacementRule(Rule):
    id = "brace-placement"
    description = "Put opening braces on the same line as the statement they open."

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        enclosed = enclosed_lines(tokens, lines)
        violations: list[Violation] = []

        for number, line_tokens in sorted(tokens_by_line(tokens, lines).items()):
            if number in enclosed:
                continue
            first = next((t for t in line_tokens if t.kind is not TokenKind.WHITESPACE), None)
            if first is None or first.kind is not TokenKind.PUNCTUATION or first.text != "{":
                continue
            violations.append(
                self.violation(
                    source,
                    number,
                    "Opening brace is on its own line; move it to the end of the previous line.",
                    column=first.start - lines[number - 1].start + 1,
                )
            )

        return violations
