"""
Defines the abstract base class for document sources.

A document source stands in for the editor's active document: it supplies
the text of a document and, from it, the character count of a line
selection or of the whole document. The statistics core only ever receives
that count, never the text.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core.errors import SelectionError

_RANGE_RE = re.compile(r"^\s*(\d+)\s*(?:[-:]\s*(\d+)\s*)?$")
# Only CRLF, LF and CR end a line; form feeds and other separators do not
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\n|\r)|[^\r\n]+\Z")


@dataclass(frozen=True)
class Selection:
    """A 1-indexed, inclusive range of lines."""

    start_line: int
    end_line: int

    @classmethod
    def parse(cls, text: str) -> "Selection":
        """Parse `A-B`, `A:B` or a single line number `A`."""
        m = _RANGE_RE.match(text or "")
        if not m:
            raise SelectionError(f"Invalid line range '{text}'. Use START-END, e.g. 10-42.")
        start = int(m.group(1))
        end = int(m.group(2)) if m.group(2) else start
        if start < 1:
            raise SelectionError("Line numbers start at 1.")
        if end < start:
            raise SelectionError(f"Line range {start}-{end} ends before it starts.")
        return cls(start, end)


class DocumentSource(ABC):
    """An abstract base class that all document sources must inherit from."""

    name: str = "<document>"

    @abstractmethod
    def read_text(self) -> str:
        """
        Return the full text of the document.

        Implementations raise `DocumentError` when the text cannot be read.
        """
        pass

    def selected_text(self, selection: Optional[Selection] = None) -> str:
        """Text of `selection`, or the whole document when it is empty."""
        text = self.read_text()
        if selection is None:
            return text
        lines = _LINE_RE.findall(text)
        return "".join(lines[selection.start_line - 1 : selection.end_line])

    def character_count(self, selection: Optional[Selection] = None) -> int:
        return len(self.selected_text(selection))
