"""Document sources that supply character counts to the statistics core."""

from .base import DocumentSource, Selection
from .documents import FileDocument, StreamDocument, open_document

__all__ = [
    "DocumentSource",
    "FileDocument",
    "Selection",
    "StreamDocument",
    "open_document",
]
