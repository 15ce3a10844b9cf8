from __future__ import annotations

from systemd_lsp.analysis import Finding, Position, diagnose
from systemd_lsp.server_core import DocumentStore, SessionController

URI = "file:///etc/systemd/system/demo.service"


class _Recorder:
    def __init__(self) -> None:
        self.published: list[tuple[str, list[Finding]]] = []

    def __call__(self, uri: str, findings: list[Finding]) -> None:
        self.published.append((uri, findings))


def _controller(**kwargs) -> tuple[SessionController, _Recorder]:
    recorder = _Recorder()
    return SessionController(DocumentStore(), recorder, **kwargs), recorder


def test_open_publishes_diagnostics() -> None:
    controller, recorder = _controller()
    controller.open(URI, "[Service]\nType=bogus\n")
    assert len(recorder.published) == 1
    uri, findings = recorder.published[0]
    assert uri == URI
    assert findings == diagnose("[Service]\nType=bogus\n")


def test_change_replaces_previous_result() -> None:
    controller, recorder = _controller()
    controller.open(URI, "[Service]\nType=bogus\n")
    controller.change(URI, "[Service]\nType=simple\n")
    assert recorder.published[-1] == (URI, [])
    assert controller.store.text(URI) == "[Service]\nType=simple\n"


def test_close_clears_diagnostics_and_state() -> None:
    controller, recorder = _controller()
    controller.open(URI, "[Service]\nExecStart=\n")
    controller.close(URI)
    assert recorder.published[-1] == (URI, [])
    assert URI not in controller.store


def test_queries_after_close_behave_as_empty_document() -> None:
    controller, _recorder = _controller()
    controller.open(URI, "[Service]\n")
    assert controller.completion(URI, Position(1, 0))
    controller.close(URI)
    assert controller.completion(URI, Position(1, 0)) == []
    assert controller.hover(URI, Position(0, 1)) is None


def test_queries_on_unknown_document() -> None:
    controller, recorder = _controller()
    assert controller.completion("file:///nowhere.service", Position(0, 0)) == []
    assert controller.hover("file:///nowhere.service", Position(0, 0)) is None
    assert recorder.published == []


def test_hover_and_completion_use_current_text() -> None:
    controller, _recorder = _controller()
    controller.open(URI, "[Timer]\n")
    controller.change(URI, "[Service]\nType=simple\n")
    content = controller.hover(URI, Position(1, 0))
    assert content is not None
    assert "service type" in content.markdown
    labels = [candidate.label for candidate in controller.completion(URI, Position(2, 0))]
    assert labels[0] == "Type="


def test_disabled_diagnostics_publish_empty_lists() -> None:
    controller, recorder = _controller(diagnostics_enabled=False)
    controller.open(URI, "[Unit\n")
    assert recorder.published == [(URI, [])]


def test_superseded_pass_is_not_published() -> None:
    controller, recorder = _controller()
    stale = controller.store.put(URI, "[Service]\nType=bogus\n")
    controller.change(URI, "[Service]\nType=simple\n")
    controller._analyze_and_publish(stale)
    assert recorder.published == [(URI, [])]


def test_superseded_pass_after_close_is_not_published() -> None:
    controller, recorder = _controller()
    stale = controller.store.put(URI, "[Unit\n")
    controller.close(URI)
    controller._analyze_and_publish(stale)
    assert recorder.published == [(URI, [])]
