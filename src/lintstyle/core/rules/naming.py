import re
from collections.abc import Sequence

from pydantic import field_validator

from lintstyle.core.languages import get_profile
from lintstyle.core.rules.base import Rule, column_of
from lintstyle.core.rules.declarations import iter_declarations
from lintstyle.models import LogicalLine, Severity, SourceFile, Token, TokenKind, Violation

LOWER_CAMEL_CASE = r"^(?:[_$]|[_$]?[a-z][a-zA-Z0-9]*)$"
UPPER_CAMEL_CASE = r"^[A-Z][a-zA-Z0-9]*$"
UPPER_SNAKE_CASE = r"^[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*$"


def _next_significant(tokens: Sequence[Token], index: int) -> Token | None:
    for token in tokens[index + 1 : index + 8]:
        if token.is_trivia:
            continue
        if token.text == "*":  # generator functions
            continue
        return token
    return None


class NamingCaseRule(Rule):
    """Check the case of names bound by declarations.

    - function names: lowerCamelCase
    - names after a constructor keyword (``class``): UpperCamelCase
    - names after a constant keyword (``const``) bound to a literal: UPPER_SNAKE_CASE
    - other variables: lowerCamelCase, or UPPER_SNAKE_CASE when bound to a literal

    Keyword sets default to the file's language profile.
    """

    id = "naming-case"
    description = (
        "Name variables and functions in lowerCamelCase, classes in UpperCamelCase, constants in UPPER_SNAKE_CASE."
    )
    default_severity = Severity.WARNING

    variable_pattern: str = LOWER_CAMEL_CASE
    constructor_pattern: str = UPPER_CAMEL_CASE
    constant_pattern: str = UPPER_SNAKE_CASE
    declaration_keywords: frozenset[str] | None = None
    constant_keywords: frozenset[str] | None = None
    constructor_keywords: frozenset[str] | None = None
    function_keywords: frozenset[str] | None = None

    @field_validator("variable_pattern", "constructor_pattern", "constant_pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {value!r}: {exc}") from exc
        return value

    def _matches(self, pattern: str, name: str) -> bool:
        return re.search(pattern, name) is not None

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        profile = get_profile(source.language)
        declaration_keywords = self.declaration_keywords
        if declaration_keywords is None:
            declaration_keywords = profile.declaration_keywords
        constant_keywords = self.constant_keywords
        if constant_keywords is None:
            constant_keywords = profile.constant_keywords
        constructor_keywords = self.constructor_keywords
        if constructor_keywords is None:
            constructor_keywords = profile.constructor_keywords
        function_keywords = self.function_keywords
        if function_keywords is None:
            function_keywords = profile.function_keywords

        violations: list[Violation] = []

        def report(name: Token, expected: str) -> None:
            line, column = column_of(lines, name)
            violations.append(
                self.violation(source, line, f"Name '{name.text}' should be {expected}.", column=column)
            )

        for index, token in enumerate(tokens):
            if token.kind is not TokenKind.KEYWORD:
                continue
            if token.text in function_keywords:
                name = _next_significant(tokens, index)
                if name is not None and name.kind is TokenKind.IDENTIFIER:
                    if not self._matches(self.variable_pattern, name.text):
                        report(name, "lowerCamelCase")
            elif token.text in constructor_keywords:
                name = _next_significant(tokens, index)
                if name is not None and name.kind is TokenKind.IDENTIFIER:
                    if not self._matches(self.constructor_pattern, name.text):
                        report(name, "UpperCamelCase")

        for declaration in iter_declarations(tokens, declaration_keywords):
            is_constant = declaration.keyword.text in constant_keywords
            for declarator in declaration.declarators:
                name = declarator.name
                if name is None:
                    continue
                if declarator.has_literal_initializer and is_constant:
                    if not self._matches(self.constant_pattern, name.text):
                        report(name, "UPPER_SNAKE_CASE")
                elif declarator.has_literal_initializer:
                    if not (
                        self._matches(self.variable_pattern, name.text)
                        or self._matches(self.constant_pattern, name.text)
                    ):
                        report(name, "lowerCamelCase or UPPER_SNAKE_CASE")
                elif not self._matches(self.variable_pattern, name.text):
                    report(name, "lowerCamelCase")

        return violations
