import logging
from pathlib import Path

from lintstyle.errors import FileReadError

logger = logging.getLogger(__name__)


class FileSystemReader:
    """Read source files from disk as UTF-8, keeping line endings untouched."""

    def read_text(self, path: str) -> str:
        file_path = Path(path)
        try:
            with file_path.open("rb") as handle:
                data = handle.read()
        except FileNotFoundError:
            raise FileReadError(path, "file not found") from None
        except IsADirectoryError:
            raise FileReadError(path, "is a directory") from None
        except OSError as exc:
            raise FileReadError(path, exc.strerror or str(exc)) from exc

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FileReadError(path, f"not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc

        logger.debug("Read %d characters from %s", len(text), path)
        return text.removeprefix("\ufeff")
