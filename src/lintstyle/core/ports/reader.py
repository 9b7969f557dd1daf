from typing import Protocol


class SourceReader(Protocol):
    def read_text(self, path: str) -> str: ...
