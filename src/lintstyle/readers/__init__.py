from lintstyle.readers.filesystem import FileSystemReader
from lintstyle.readers.memory import InMemoryReader

__all__ = [
    "FileSystemReader",
    "InMemoryReader",
]
