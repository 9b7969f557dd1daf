from enum import Enum

from pydantic import BaseModel, ConfigDict, computed_field


class NewlineStyle(str, Enum):
    LF = "lf"
    CRLF = "crlf"


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class TokenKind(str, Enum):
    STRING = "string-literal"
    COMMENT = "comment"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"


_TRIVIA = frozenset({TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT})


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    start: int
    end: int
    text: str

    @property
    def is_trivia(self) -> bool:
        return self.kind in _TRIVIA

    @property
    def quote(self) -> str | None:
        """Opening delimiter of a string literal, None for other tokens."""
        if self.kind is not TokenKind.STRING:
            return None
        return self.text[0]

    @property
    def terminated(self) -> bool:
        if self.kind is not TokenKind.STRING:
            return True
        if len(self.text) < 2 or self.text[-1] != self.text[0]:
            return False
        # A closing quote preceded by an odd run of backslashes is escaped.
        backslashes = len(self.text[1:-1]) - len(self.text[1:-1].rstrip("\\"))
        return backslashes % 2 == 0

    @property
    def body(self) -> str:
        """String literal contents without delimiters."""
        if self.kind is not TokenKind.STRING:
            return self.text
        return self.text[1:-1] if self.terminated else self.text[1:]


class LogicalLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    start: int
    end: int
    text: str
    trailing_whitespace: bool
    has_cr: bool = False
    terminated: bool = True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip(" \t\f\v")

    @property
    def indent(self) -> str:
        return self.text[: len(self.text) - len(self.text.lstrip(" \t"))]


class SourceFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    text: str
    language: str = "javascript"
    newline_style: NewlineStyle = NewlineStyle.LF

    @classmethod
    def from_text(cls, path: str, text: str, language: str = "javascript") -> "SourceFile":
        from lintstyle.core.lines import detect_newline_style

        return cls(path=path, text=text, language=language, newline_style=detect_newline_style(text))


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    line: int
    column: int | None = None
    severity: Severity
    rule: str
    message: str

    @property
    def sort_key(self) -> tuple[int, int, str]:
        return (self.line, self.column or 0, self.rule)


class RunResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    files: dict[str, list[Violation]]

    @property
    def violations(self) -> list[Violation]:
        return [v for violations in self.files.values() for v in violations]

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity is Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    @property
    def exit_code(self) -> int:
        return 1 if self.has_errors else 0
