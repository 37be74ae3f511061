"""Filesystem provider: read source file content."""

from pathlib import Path
from typing import Callable

from ..exceptions import FileAccessError

SourceReader = Callable[[Path], str]


def read_source(filepath: Path, encoding: str = "utf-8") -> str:
    """
    Read a source file as text.

    Args:
        filepath: File to read
        encoding: Text encoding

    Returns:
        File contents as string

    Raises:
        FileAccessError: If the file is missing, unreadable or not valid text
    """
    try:
        return filepath.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"not valid {encoding}: {e.reason}")
    except OSError as e:
        raise FileAccessError(filepath, e.strerror or str(e))
