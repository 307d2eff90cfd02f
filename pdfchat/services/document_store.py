"""
In-memory store for the currently loaded document
"""

import threading
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Document:
    text: str
    file_name: Optional[str] = None


class DocumentStore:
    """Holds the text of the most recently uploaded PDF.

    One document per process. Each upload swaps in a new immutable
    ``Document``; readers take a snapshot with ``current()`` so a request
    never sees half of one upload and half of another.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._document: Optional[Document] = None

    def replace(self, text: str, file_name: Optional[str] = None) -> Document:
        """Replace the current document (last writer wins)"""
        document = Document(text=text, file_name=file_name)
        with self._lock:
            self._document = document
        return document

    def current(self) -> Optional[Document]:
        with self._lock:
            return self._document

    def has_document(self) -> bool:
        document = self.current()
        return document is not None and bool(document.text)

    def clear(self):
        with self._lock:
            self._document = None
