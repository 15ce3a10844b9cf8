"""Event handling for open documents.

The controller owns no analysis state. It stores text, runs the analysis
functions, and hands results to a ``publish`` callback supplied by the
protocol layer.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from systemd_lsp.analysis import (
    CompletionCandidate,
    Finding,
    HoverContent,
    Position,
    completions_at,
    diagnose,
    hover_at,
)
from systemd_lsp.server_core.session_store import DocumentSnapshot, DocumentStore

logger = logging.getLogger(__name__)

PublishFn = Callable[[str, list[Finding]], None]


class SessionController:
    def __init__(
        self,
        store: DocumentStore,
        publish: PublishFn,
        *,
        diagnostics_enabled: bool = True,
    ) -> None:
        self.store = store
        self._publish = publish
        self._publish_lock = threading.Lock()
        self.diagnostics_enabled = diagnostics_enabled

    def open(self, uri: str, text: str) -> None:
        logger.info("File opened: %s", uri)
        self._analyze_and_publish(self.store.put(uri, text))

    def change(self, uri: str, text: str) -> None:
        logger.info("File changed: %s", uri)
        self._analyze_and_publish(self.store.put(uri, text))

    def close(self, uri: str) -> None:
        logger.info("File closed: %s", uri)
        with self._publish_lock:
            self.store.remove(uri)
            self._publish(uri, [])

    def completion(self, uri: str, position: Position) -> list[CompletionCandidate]:
        return completions_at(self.store.text(uri), position)

    def hover(self, uri: str, position: Position) -> HoverContent | None:
        return hover_at(self.store.text(uri), position)

    def _analyze_and_publish(self, snapshot: DocumentSnapshot) -> None:
        findings = diagnose(snapshot.text) if self.diagnostics_enabled else []
        with self._publish_lock:
            # A newer open/change for this URI already owns the published set.
            if not self.store.is_current(snapshot):
                logger.debug(
                    "Dropping diagnostics for superseded snapshot %s#%d",
                    snapshot.uri,
                    snapshot.generation,
                )
                return
            self._publish(snapshot.uri, findings)
