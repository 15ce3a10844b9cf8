from __future__ import annotations

import threading

from systemd_lsp.server_core import DocumentStore

URI = "file:///etc/systemd/system/demo.service"


def test_put_replaces_text_wholesale() -> None:
    store = DocumentStore()
    first = store.put(URI, "[Unit]\n")
    second = store.put(URI, "[Service]\n")
    assert store.text(URI) == "[Service]\n"
    assert second.generation > first.generation
    assert len(store) == 1


def test_missing_document_reads_as_empty() -> None:
    store = DocumentStore()
    assert store.text(URI) == ""
    assert store.get(URI) is None
    assert URI not in store


def test_remove_and_currency() -> None:
    store = DocumentStore()
    snapshot = store.put(URI, "[Unit]\n")
    assert store.is_current(snapshot)
    newer = store.put(URI, "[Unit]\nDescription=x\n")
    assert not store.is_current(snapshot)
    assert store.is_current(newer)
    assert store.remove(URI) is True
    assert store.remove(URI) is False
    assert not store.is_current(newer)


def test_reopen_does_not_revive_old_snapshot() -> None:
    store = DocumentStore()
    old = store.put(URI, "same")
    store.remove(URI)
    store.put(URI, "same")
    assert not store.is_current(old)


def test_concurrent_puts_keep_generations_unique() -> None:
    store = DocumentStore()
    generations: list[int] = []
    lock = threading.Lock()

    def _writer(index: int) -> None:
        for step in range(50):
            snapshot = store.put(f"file:///unit{index}.service", f"{step}")
            with lock:
                generations.append(snapshot.generation)

    threads = [threading.Thread(target=_writer, args=(index,)) for index in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(set(generations)) == 200
    assert len(store) == 4
    assert all(store.text(f"file:///unit{index}.service") == "49" for index in range(4))
