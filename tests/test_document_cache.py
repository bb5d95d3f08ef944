"""
Unit Tests for DocumentCache
"""

from unittest.mock import MagicMock

from docrag.documents.services.document_cache import DocumentCache

from conftest import make_document


def test_loads_lazily_and_only_once():
    store = MagicMock()
    store.list_all.return_value = (make_document("1", "a.txt"),)
    cache = DocumentCache(store=store)

    assert not cache.loaded
    first = cache.all()
    second = cache.all()

    assert first is second
    assert cache.loaded
    store.list_all.assert_called_once()


def test_invalidate_reloads_on_next_read():
    store = MagicMock()
    store.list_all.side_effect = [
        (make_document("1", "a.txt"),),
        (make_document("1", "a.txt"), make_document("2", "b.txt")),
    ]
    cache = DocumentCache(store=store)

    assert len(cache.all()) == 1
    cache.invalidate()

    assert not cache.loaded
    assert len(cache.all()) == 2


def test_snapshot_is_immutable():
    store = MagicMock()
    store.list_all.return_value = (make_document("1", "a.txt"),)

    assert isinstance(DocumentCache(store=store).all(), tuple)


# ---------------------------------------------------------------------------
# REVALIDATION
# ---------------------------------------------------------------------------


class Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_store(*snapshots, fingerprints):
    store = MagicMock()
    store.list_all.side_effect = list(snapshots)
    store.fingerprint.side_effect = list(fingerprints)
    return store


def test_fresh_snapshot_skips_the_store():
    clock = Clock()
    store = make_store((make_document("1", "a.txt"),), fingerprints=[(1, "t1")])
    cache = DocumentCache(store=store, max_age_seconds=30, clock=clock)

    cache.all()
    clock.now = 29
    cache.all()

    store.fingerprint.assert_called_once()
    store.list_all.assert_called_once()


def test_reloads_when_the_store_changed_elsewhere():
    clock = Clock()
    store = make_store(
        (make_document("1", "a.txt"),),
        (make_document("1", "a.txt"), make_document("2", "b.txt")),
        fingerprints=[(1, "t1"), (2, "t2"), (2, "t2")],
    )
    cache = DocumentCache(store=store, max_age_seconds=30, clock=clock)

    assert len(cache.all()) == 1
    clock.now = 31

    assert len(cache.all()) == 2
    assert store.list_all.call_count == 2


def test_unchanged_store_keeps_the_snapshot_and_restarts_the_timer():
    clock = Clock()
    store = make_store((make_document("1", "a.txt"),), fingerprints=[(1, "t1"), (1, "t1")])
    cache = DocumentCache(store=store, max_age_seconds=30, clock=clock)

    first = cache.all()
    clock.now = 31
    second = cache.all()
    clock.now = 60
    third = cache.all()

    assert first is second is third
    store.list_all.assert_called_once()
    assert store.fingerprint.call_count == 2
