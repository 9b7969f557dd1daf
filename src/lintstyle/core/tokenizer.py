"""Lexical scanner producing the token stream shared by all rules.

The scanner is deliberately shallow: it knows strings, comments, identifiers,
numbers and whitespace, and treats every other character as one punctuation
token. It never raises; malformed input degrades to best-effort spans.
"""

import re
from collections.abc import Iterator

from lintstyle.core.languages import DEFAULT_LANGUAGE, LanguageProfile, get_profile
from lintstyle.models import Token, TokenKind

_WHITESPACE_RE = re.compile(r"(?:[ \t\f\v]|\r(?!\n))+")
_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_NUMBER_RE = re.compile(r"[0-9][A-Za-z0-9_.]*")

# Template strings may legally span lines.
_MULTILINE_QUOTES = frozenset("`")


def _scan_string(text: str, pos: int, quote: str) -> int:
    """Return the end offset of the string literal opening at ``pos``."""
    i = pos + 1
    length = len(text)
    multiline = quote in _MULTILINE_QUOTES
    while i < length:
        ch = text[i]
        if ch == "\\":
            # An escaped line break continues the literal; keep CRLF paired.
            if text.startswith("\r\n", i + 1):
                i += 3
            else:
                i += 2
            continue
        if ch == quote:
            return i + 1
        if not multiline and (ch == "\n" or text.startswith("\r\n", i)):
            return i
        i += 1
    return length


def iter_tokens(text: str, profile: LanguageProfile | None = None) -> Iterator[Token]:
    profile = profile or get_profile(DEFAULT_LANGUAGE)
    pos = 0
    length = len(text)

    while pos < length:
        ch = text[pos]

        if ch == "\n":
            yield Token(kind=TokenKind.NEWLINE, start=pos, end=pos + 1, text="\n")
            pos += 1
            continue
        if text.startswith("\r\n", pos):
            yield Token(kind=TokenKind.NEWLINE, start=pos, end=pos + 2, text="\r\n")
            pos += 2
            continue

        match = _WHITESPACE_RE.match(text, pos)
        if match:
            yield Token(kind=TokenKind.WHITESPACE, start=pos, end=match.end(), text=match.group())
            pos = match.end()
            continue

        if text.startswith("//", pos):
            end = pos
            while end < length and text[end] != "\n" and not text.startswith("\r\n", end):
                end += 1
            yield Token(kind=TokenKind.COMMENT, start=pos, end=end, text=text[pos:end])
            pos = end
            continue

        if text.startswith("/*", pos):
            close = text.find("*/", pos + 2)
            end = length if close == -1 else close + 2
            yield Token(kind=TokenKind.COMMENT, start=pos, end=end, text=text[pos:end])
            pos = end
            continue

        if ch in profile.quote_chars:
            end = _scan_string(text, pos, ch)
            yield Token(kind=TokenKind.STRING, start=pos, end=end, text=text[pos:end])
            pos = end
            continue

        match = _IDENTIFIER_RE.match(text, pos)
        if match:
            word = match.group()
            kind = TokenKind.KEYWORD if word in profile.keywords else TokenKind.IDENTIFIER
            yield Token(kind=kind, start=pos, end=match.end(), text=word)
            pos = match.end()
            continue

        match = _NUMBER_RE.match(text, pos)
        if match:
            yield Token(kind=TokenKind.NUMBER, start=pos, end=match.end(), text=match.group())
            pos = match.end()
            continue

        yield Token(kind=TokenKind.PUNCTUATION, start=pos, end=pos + 1, text=ch)
        pos += 1


def tokenize(text: str, profile: LanguageProfile | None = None) -> list[Token]:
    return list(iter_tokens(text, profile))
