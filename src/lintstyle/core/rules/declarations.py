"""Declaration statements: a shallow parser plus the rules built on it."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from lintstyle.core.languages import get_profile
from lintstyle.core.rules.base import Rule, column_of
from lintstyle.models import LogicalLine, Severity, SourceFile, Token, TokenKind, Violation

_OPENERS = frozenset("([{")
_CLOSERS = frozenset(")]}")
# A line ending on one of these continues the statement on the next line.
_CONTINUATION = frozenset(",=+-*/%&|^!?:.<>")
_LITERAL_KEYWORDS = frozenset({"true", "false", "null", "undefined", "nil", "nullptr"})


@dataclass(frozen=True)
class Declarator:
    name: Token | None
    initializer: tuple[Token, ...]

    @property
    def has_literal_initializer(self) -> bool:
        init = self.initializer
        if len(init) == 2 and init[0].text in ("-", "+") and init[1].kind is TokenKind.NUMBER:
            return True
        if len(init) != 1:
            return False
        token = init[0]
        if token.kind is TokenKind.STRING:
            return "${" not in token.text
        return token.kind is TokenKind.NUMBER or (token.kind is TokenKind.KEYWORD and token.text in _LITERAL_KEYWORDS)


@dataclass(frozen=True)
class Declaration:
    keyword: Token
    declarators: tuple[Declarator, ...]
    terminator: Token | None


def _split_declarator(segment: list[Token]) -> Declarator:
    target: list[Token] = []
    initializer: list[Token] = []
    section = "target"
    depth = 0

    for token in segment:
        is_punctuation = token.kind is TokenKind.PUNCTUATION
        if is_punctuation and depth == 0 and section != "initializer":
            if token.text == "=":
                section = "initializer"
                continue
            # Type annotation; neither name nor value.
            if token.text == ":" and section == "target":
                section = "annotation"
                continue
        if is_punctuation and token.text in _OPENERS:
            depth += 1
        elif is_punctuation and token.text in _CLOSERS:
            depth -= 1
        if section == "target":
            target.append(token)
        elif section == "initializer":
            initializer.append(token)

    name = None
    if target and all(t.kind in (TokenKind.IDENTIFIER, TokenKind.KEYWORD) for t in target):
        name = next((t for t in target if t.kind is TokenKind.IDENTIFIER), None)
    return Declarator(name=name, initializer=tuple(initializer))


def _parse_declaration(tokens: Sequence[Token], index: int) -> Declaration:
    segments: list[list[Token]] = [[]]
    depth = 0
    last_significant: Token | None = None
    terminator: Token | None = None

    for position in range(index + 1, len(tokens)):
        token = tokens[position]
        if token.kind is TokenKind.NEWLINE:
            if depth == 0 and last_significant is not None and last_significant.text not in _CONTINUATION:
                terminator = token
                break
            continue
        if token.is_trivia:
            continue
        if token.kind is TokenKind.PUNCTUATION:
            if depth == 0 and token.text == ";":
                terminator = token
                break
            if depth == 0 and token.text == ",":
                segments.append([])
                last_significant = token
                continue
            if token.text in _OPENERS:
                depth += 1
            elif token.text in _CLOSERS:
                if depth == 0:
                    terminator = token
                    break
                depth -= 1
        segments[-1].append(token)
        last_significant = token

    declarators = tuple(_split_declarator(segment) for segment in segments if segment)
    return Declaration(keyword=tokens[index], declarators=declarators, terminator=terminator)


def iter_declarations(tokens: Sequence[Token], keywords: frozenset[str]) -> Iterator[Declaration]:
    previous: Token | None = None
    for index, token in enumerate(tokens):
        if token.is_trivia:
            continue
        is_member_access = previous is not None and previous.text == "."
        if token.kind is TokenKind.KEYWORD and token.text in keywords and not is_member_access:
            yield _parse_declaration(tokens, index)
        previous = token


class OneDeclarationPerStatementRule(Rule):
    id = "one-declaration-per-statement"
    description = "Declare one variable per declaration statement."

    declaration_keywords: frozenset[str] | None = None

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        keywords = self.declaration_keywords
        if keywords is None:
            keywords = get_profile(source.language).declaration_keywords

        violations: list[Violation] = []
        for declaration in iter_declarations(tokens, keywords):
            count = len(declaration.declarators)
            if count <= 1:
                continue
            line, column = column_of(lines, declaration.keyword)
            violations.append(
                self.violation(
                    source,
                    line,
                    f"'{declaration.keyword.text}' statement declares {count} variables; use one per statement.",
                    column=column,
                )
            )
        return violations


class SemicolonRule(Rule):
    id = "semicolon"
    description = "Terminate declaration statements with a semicolon."
    default_enabled = False
    default_severity = Severity.WARNING

    declaration_keywords: frozenset[str] | None = None

    def check(
        self, source: SourceFile, tokens: Sequence[Token], lines: Sequence[LogicalLine]
    ) -> list[Violation]:
        keywords = self.declaration_keywords
        if keywords is None:
            keywords = get_profile(source.language).declaration_keywords

        violations: list[Violation] = []
        for declaration in iter_declarations(tokens, keywords):
            terminator = declaration.terminator
            if terminator is not None and terminator.kind is TokenKind.PUNCTUATION:
                continue
            line, column = column_of(lines, declaration.keyword)
            violations.append(
                self.violation(
                    source,
                    line,
                    f"'{declaration.keyword.text}' statement is not terminated with a semicolon.",
                    column=column,
                )
            )
        return violations
