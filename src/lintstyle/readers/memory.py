from lintstyle.errors import FileReadError


class InMemoryReader:
    def __init__(self, sources: dict[str, str] | None = None) -> None:
        self.sources: dict[str, str] = dict(sources or {})
        self.reads: list[str] = []

    def add(self, path: str, text: str) -> None:
        self.sources[path] = text

    def read_text(self, path: str) -> str:
        self.reads.append(path)
        try:
            return self.sources[path]
        except KeyError:
            raise FileReadError(path, "file not found") from None
