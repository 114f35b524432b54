"""Document sources backed by files and text streams."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from ..core.errors import DocumentError
from .base import DocumentSource

STDIN_MARKER = "-"


class FileDocument(DocumentSource):
    """A document read from a file on disk as UTF-8 text."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()
        self.name = str(self.path)
        self._text: Optional[str] = None

    def read_text(self) -> str:
        if self._text is None:
            try:
                if self.path.is_dir():
                    raise DocumentError(f"{self.path} is a directory, not a document.")
                # newline="" keeps CRLF and CR terminators so they are counted
                with open(self.path, encoding="utf-8", errors="replace", newline="") as f:
                    self._text = f.read()
            except FileNotFoundError:
                raise DocumentError(f"Document not found: {self.path}") from None
            except OSError as e:
                raise DocumentError(f"Could not read {self.path}: {e}") from e
        return self._text


class StreamDocument(DocumentSource):
    """A document read once from a text stream, standard input by default."""

    def __init__(self, stream: Optional[TextIO] = None, name: str = "<stdin>"):
        self.stream = stream
        self.name = name
        self._text: Optional[str] = None

    def read_text(self) -> str:
        if self._text is None:
            stream = self.stream if self.stream is not None else sys.stdin
            try:
                # Decode the raw bytes when available so line terminators stay as typed
                raw = getattr(stream, "buffer", None)
                if raw is not None:
                    self._text = raw.read().decode("utf-8", errors="replace")
                else:
                    self._text = stream.read()
            except OSError as e:
                raise DocumentError(f"Could not read {self.name}: {e}") from e
        return self._text


def open_document(target: Optional[str], stdin: Optional[TextIO] = None) -> Optional[DocumentSource]:
    """Resolve a command-line document argument.

    Returns None when no document was given (there is no active document).
    `-` reads standard input.
    """
    if not target:
        return None
    if target == STDIN_MARKER:
        return StreamDocument(stdin)
    return FileDocument(Path(target))
