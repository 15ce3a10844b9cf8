from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentSnapshot:
    """Full text of one open document at one point in the session.

    ``generation`` increases with every open or change across the whole
    store, so a larger value always means a newer snapshot.
    """

    uri: str
    text: str
    generation: int


class DocumentStore:
    """URI -> current text for every open document.

    Text is replaced wholesale on each update. One lock guards the whole
    mapping.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._documents: dict[str, DocumentSnapshot] = {}
        self._generations = itertools.count(1)

    def put(self, uri: str, text: str) -> DocumentSnapshot:
        with self._lock:
            snapshot = DocumentSnapshot(uri, text, next(self._generations))
            self._documents[uri] = snapshot
            return snapshot

    def remove(self, uri: str) -> bool:
        with self._lock:
            return self._documents.pop(uri, None) is not None

    def get(self, uri: str) -> DocumentSnapshot | None:
        with self._lock:
            return self._documents.get(uri)

    def text(self, uri: str) -> str:
        """Current text, or an empty document when ``uri`` is not open."""
        snapshot = self.get(uri)
        return snapshot.text if snapshot is not None else ""

    def is_current(self, snapshot: DocumentSnapshot) -> bool:
        with self._lock:
            current = self._documents.get(snapshot.uri)
            return current is not None and current.generation == snapshot.generation

    def __contains__(self, uri: object) -> bool:
        with self._lock:
            return uri in self._documents

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
