"""
vendors/rate_throttler.py
==========================
Paces every outbound call to the AI provider under two limits at once:

    - a minimum delay between consecutive calls   (RATE_LIMIT_DELAY_MS)
    - a maximum number of calls per 60 s window    (MAX_REQUESTS_PER_MINUTE)

Flask serves requests on threads, so acquire() holds a lock for its whole
duration: callers queue on the lock and leave one at a time, paced.

The per-minute cap is checked before the per-call delay so a caller near the
window boundary waits once, not twice.

acquire() never raises; the only outcome is a delay.
"""

# Python Packages
import threading
import time
from typing import Callable, Dict, Optional, TypeVar
from loguru import logger

# Constants
from ..base import constants


WINDOW_SECONDS = 60.0

T = TypeVar("T")





class RateThrottler:
    """
    Dual-constraint throttler. One instance is shared by the whole process
    (see get_rate_throttler); tests build their own with a fake clock.
    """

    def __init__(
        self,
        min_delay_ms: int,
        max_per_minute: int,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Args:
            min_delay_ms:   Minimum gap between two calls, in milliseconds.
            max_per_minute: Maximum calls inside one 60 s window.
            clock:          Seconds source (monotonic).
            sleep:          Blocking wait, in seconds.
        """

        self.min_delay = max(min_delay_ms, 0) / 1000.0
        self.max_per_minute = max_per_minute
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()

        # Rate window
        self._last_request_at: Optional[float] = None
        self._request_count = 0
        self._window_started_at = clock()



    def acquire(self):
        """ Block until a call is allowed, then record it... """

        with self._lock:
            now = self._clock()

            # ── Step 1: Roll the window ────────────────────────────────────
            if now - self._window_started_at > WINDOW_SECONDS:
                self._request_count = 0
                self._window_started_at = now

            # ── Step 2: Per-minute cap ─────────────────────────────────────
            if self.max_per_minute > 0 and self._request_count >= self.max_per_minute:
                wait = WINDOW_SECONDS - (now - self._window_started_at)
                if wait > 0:
                    logger.info(f"⏱️  Rate limiting: reached max requests per minute, waiting {wait:.1f}s...")
                    self._pause(wait)
                self._request_count = 0
                self._window_started_at = self._clock()

            # ── Step 3: Minimum delay ──────────────────────────────────────
            if self._last_request_at is not None:
                elapsed = self._clock() - self._last_request_at
                if elapsed < self.min_delay:
                    delay = self.min_delay - elapsed
                    logger.info(f"⏱️  Rate limiting: waiting {delay:.1f}s before next request...")
                    self._pause(delay)

            # ── Step 4: Record ─────────────────────────────────────────────
            self._last_request_at = self._clock()
            self._request_count += 1



    def snapshot(self) -> Dict:
        """ Current limits and window usage, for /stats... """

        with self._lock:
            return {
                "min_delay_ms": int(self.min_delay * 1000),
                "max_requests_per_minute": self.max_per_minute,
                "current_request_count": self._request_count,
                "window_started_seconds_ago": round(self._clock() - self._window_started_at, 1)
            }



    def call(self, request: Callable[[], T], retries: int = 0) -> T:
        """
        Run request() once per acquired slot.

        Every attempt, retries included, goes through acquire(), so a retry
        is paced like any other provider call. The last error propagates.
        """

        attempt = 0

        while True:
            self.acquire()

            try:
                return request()

            except Exception as error:
                if attempt >= retries:
                    raise

                attempt += 1
                logger.warning(f"⚠️  Provider call failed ({error}), retry {attempt}/{retries}")



    # ── Private ────────────────────────────────────────────────────────────────
    def _pause(self, seconds: float):
        try:
            self._sleep(seconds)
        except Exception as error:
            # A broken sleep must not surface to callers
            logger.warning(f"⚠️  Rate limiter sleep interrupted: {error}")





_throttler: Optional[RateThrottler] = None
_throttler_lock = threading.Lock()


def get_rate_throttler() -> RateThrottler:
    """
    Process-wide throttler built from RATE_LIMIT_DELAY_MS / MAX_REQUESTS_PER_MINUTE.
    """

    global _throttler

    if _throttler is None:
        with _throttler_lock:
            if _throttler is None:
                _throttler = RateThrottler(
                    min_delay_ms = constants.RATE_LIMIT_DELAY_MS,
                    max_per_minute = constants.MAX_REQUESTS_PER_MINUTE
                )

    return _throttler
