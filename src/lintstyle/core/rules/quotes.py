from collections.abc import Sequence
from typing import Literal

from lintstyle.core.languages import get_profile
from lintstyle.core.rules.base import Rule, column_of
from lintstyle.models import LogicalLine, Severity, SourceFile, Token, TokenKind, Violation

_QUOTES = ('"', "'")


class QuoteConsistencyRule(Rule):
    """Prefer one quote character for string literals.

    The alternate quote is required when the literal contains the preferred
    character but not the alternate, since that avoids escaping. Template
    strings and languages where the two quotes mean different things are
    left alone.
    """

    id = "quote-consistency"
    description = "Use the preferred quote character for string literals."
    default_severity = Severity.WARNING

    preferred: Literal['"', "'"] = '"'

    @property
    def alternate(self) -> str:
        return "'" if self.preferred == '"' else '"'

    def expected_quote(self, body: str) -> str:
        if self.preferred in body and self.alternate not in body:
            return self.alternate
        return self.preferred

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        if not get_profile(source.language).interchangeable_quotes:
            return []

        violations: list[Violation] = []
        for token in tokens:
            if token.kind is not TokenKind.STRING or token.quote not in _QUOTES:
                continue
            expected = self.expected_quote(token.body)
            if token.quote == expected:
                continue
            line, column = column_of(lines, token)
            if expected == self.preferred:
                message = f"String literal should use {self.preferred} quotes."
            else:
                message = f"String literal contains {self.preferred}; use {expected} quotes to avoid escaping."
            violations.append(self.violation(source, line, message, column=column))

        return violations
