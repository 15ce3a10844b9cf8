"""Document session state and event orchestration."""

from .session_controller import PublishFn, SessionController
from .session_store import DocumentSnapshot, DocumentStore

__all__ = ["DocumentSnapshot", "DocumentStore", "PublishFn", "SessionController"]
