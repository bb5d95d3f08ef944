"""
Document Cache

In-process read replica of the document store feeding the selector
and the ranker.

Contract:
    - Loaded lazily from the store on first read
    - Every mutation (upload, add, delete, clear) calls invalidate()
      after its commit; the next read reloads
    - Writes this process never sees (another worker, a direct DB edit)
      are picked up by revalidation: once the snapshot is older than
      DOCUMENT_CACHE_TTL_SECONDS, the next read compares the store's
      fingerprint (row count, newest updated_at) and reloads on change
    - Readers get an immutable tuple snapshot, never a list being mutated
    - Not persisted; a restart always starts from the store
"""

# Python Packages
import threading
import time
from typing import Callable, Optional, Tuple
from loguru import logger

# Store
from .document_store import DocumentRecord, DocumentStore

# Constants
from ...base import constants





class DocumentCache:

    def __init__(
        self,
        store: Optional[DocumentStore] = None,
        max_age_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Args:
            store:           Source of truth (default: DocumentStore)
            max_age_seconds: Snapshot age before the fingerprint is checked
                             again (default: DOCUMENT_CACHE_TTL_SECONDS)
            clock:           Seconds source (monotonic)
        """

        self._store = store or DocumentStore()
        self.max_age_seconds = constants.DOCUMENT_CACHE_TTL_SECONDS if max_age_seconds is None else max_age_seconds
        self._clock = clock
        self._lock = threading.Lock()

        self._snapshot: Optional[Tuple[DocumentRecord, ...]] = None
        self._fingerprint = None
        self._checked_at = 0.0


    def all(self) -> Tuple[DocumentRecord, ...]:
        """
        Current snapshot, loading or revalidating it against the store if needed
        """

        snapshot = self._snapshot
        if snapshot is not None and not self._expired():
            return snapshot

        with self._lock:
            if self._snapshot is None:
                self._load()

            elif self._expired():
                fingerprint = self._store.fingerprint()

                if fingerprint != self._fingerprint:
                    logger.info("🔄 Document store changed outside this process, reloading cache")
                    self._load()
                else:
                    self._checked_at = self._clock()

            return self._snapshot


    def invalidate(self):
        with self._lock:
            self._snapshot = None
            self._fingerprint = None


    @property
    def loaded(self) -> bool:
        return self._snapshot is not None



    # ── Private ────────────────────────────────────────────────────────────────
    def _expired(self) -> bool:
        return self._clock() - self._checked_at >= self.max_age_seconds


    def _load(self):
        # Fingerprint first: a write landing between the two reads makes the
        # next revalidation reload rather than be missed
        self._fingerprint = self._store.fingerprint()
        self._snapshot = self._store.list_all()
        self._checked_at = self._clock()

        logger.info(f"📂 Loaded {len(self._snapshot)} documents into cache")



# Shared instance for the whole process
document_cache = DocumentCache()
