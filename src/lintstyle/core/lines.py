from lintstyle.models import LogicalLine, NewlineStyle

_TRAILING_WHITESPACE = (" ", "\t")


def detect_newline_style(text: str) -> NewlineStyle:
    """Newline style of the first line break; LF when the text has none."""
    first_lf = text.find("\n")
    if first_lf > 0 and text[first_lf - 1] == "\r":
        return NewlineStyle.CRLF
    return NewlineStyle.LF


def split_lines(text: str) -> list[LogicalLine]:
    lines: list[LogicalLine] = []
    start = 0
    length = len(text)

    while start < length:
        lf = text.find("\n", start)
        terminated = lf != -1
        end = lf if terminated else length
        has_cr = terminated and end > start and text[end - 1] == "\r"
        if has_cr:
            end -= 1
        content = text[start:end]
        lines.append(
            LogicalLine(
                number=len(lines) + 1,
                start=start,
                end=end,
                text=content,
                trailing_whitespace=content.endswith(_TRAILING_WHITESPACE),
                has_cr=has_cr,
                terminated=terminated,
            )
        )
        start = lf + 1 if terminated else length

    return lines
