from __future__ import annotations

import logging
from typing import Callable

from pygls.lsp.server import LanguageServer
from lsprotocol.types import (
    INITIALIZED,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    InitializedParams,
    LogMessageParams,
    MarkupContent,
    MarkupKind,
    MessageType,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)

from systemd_lsp import __version__
from systemd_lsp.analysis import model
from systemd_lsp.schema import ServerSettings
from systemd_lsp.server_core import DocumentStore, SessionController

logger = logging.getLogger(__name__)

SERVER_NAME = "systemd-language-server"
TRIGGER_CHARACTERS = ["[", "="]

_SEVERITIES = {
    model.Severity.ERROR: DiagnosticSeverity.Error,
    model.Severity.WARNING: DiagnosticSeverity.Warning,
}


def to_range(span: model.Span) -> Range:
    return Range(
        start=Position(line=span.start.line, character=span.start.character),
        end=Position(line=span.end.line, character=span.end.character),
    )


def to_diagnostic(finding: model.Finding) -> Diagnostic:
    return Diagnostic(
        range=to_range(finding.span),
        message=finding.message,
        severity=_SEVERITIES[finding.severity],
        source=finding.source,
    )


def to_completion_item(candidate: model.CompletionCandidate) -> CompletionItem:
    return CompletionItem(label=candidate.label, detail=candidate.detail)


def to_hover(content: model.HoverContent) -> Hover:
    return Hover(
        contents=MarkupContent(kind=MarkupKind.Markdown, value=content.markdown),
        range=to_range(content.span),
    )


def _text_position(position: Position) -> model.Position:
    return model.Position(line=position.line, character=position.character)


class SystemdLanguageServer(LanguageServer):
    """pygls server whose document state lives in a :class:`SessionController`."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.controller = SessionController(DocumentStore(), self.publish_findings)

    def configure(self, settings: ServerSettings) -> None:
        self.controller.diagnostics_enabled = settings.diagnostics_enabled

    def publish_findings(self, uri: str, findings: list[model.Finding]) -> None:
        self.text_document_publish_diagnostics(
            PublishDiagnosticsParams(
                uri=uri,
                diagnostics=[to_diagnostic(finding) for finding in findings],
            )
        )


server = SystemdLanguageServer(
    SERVER_NAME,
    __version__,
    text_document_sync_kind=TextDocumentSyncKind.Full,
)


@server.feature(INITIALIZED)
def initialized(ls: SystemdLanguageServer, params: InitializedParams) -> None:
    logger.info("Systemd Language Server is ready")
    ls.window_log_message(
        LogMessageParams(type=MessageType.Info, message="Systemd Language Server has started")
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: SystemdLanguageServer, params: DidOpenTextDocumentParams) -> None:
    ls.controller.open(params.text_document.uri, params.text_document.text)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: SystemdLanguageServer, params: DidChangeTextDocumentParams) -> None:
    if not params.content_changes:
        return
    # Full sync: the last change carries the whole document.
    ls.controller.change(params.text_document.uri, params.content_changes[-1].text)


@server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: SystemdLanguageServer, params: DidCloseTextDocumentParams) -> None:
    ls.controller.close(params.text_document.uri)


@server.feature(
    TEXT_DOCUMENT_COMPLETION,
    CompletionOptions(trigger_characters=TRIGGER_CHARACTERS, resolve_provider=False),
)
def completion(ls: SystemdLanguageServer, params: CompletionParams) -> list[CompletionItem]:
    candidates = ls.controller.completion(
        params.text_document.uri, _text_position(params.position)
    )
    return [to_completion_item(candidate) for candidate in candidates]


@server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: SystemdLanguageServer, params: HoverParams) -> Hover | None:
    content = ls.controller.hover(params.text_document.uri, _text_position(params.position))
    if content is None:
        return None
    return to_hover(content)


def start(start_fn: Callable[[], None] | None = None) -> None:
    """Serve over stdio unless another start function is given."""
    logger.info("Starting Systemd Language Server %s", __version__)
    (start_fn or server.start_io)()
    logger.info("Systemd Language Server is shutting down")


if __name__ == "__main__":  # pragma: no cover
    start()  # pragma: no cover
