"""Process-wide cache for the locally running version."""

import logging
import threading
from concurrent.futures import Future
from typing import Callable

logger = logging.getLogger(__name__)


class VersionCache:
    """Resolves the local version once and keeps it for the process lifetime.

    Lifecycle: created empty at startup, set at most once, never invalidated.
    Callers arriving while the first lookup is still running (from another
    thread) wait on the same in-flight Future instead of issuing their own
    fetch. A failed lookup is handed to every waiter and then forgotten, so
    the next call retries.
    """

    def __init__(self, fetch_local_version: Callable[[], str]):
        self._fetch = fetch_local_version
        self._lock = threading.Lock()
        self._value: str | None = None
        self._pending: Future | None = None

    @property
    def resolved(self) -> bool:
        return self._value is not None

    def get_local_version(self) -> str:
        with self._lock:
            if self._value is not None:
                return self._value
            pending = self._pending
            owner = pending is None
            if owner:
                pending = self._pending = Future()

        if not owner:
            # Another caller is fetching; share its outcome
            return pending.result()

        try:
            value = self._fetch()
        except BaseException as e:
            with self._lock:
                self._pending = None
            logger.warning("Local version lookup failed: %s", e)
            pending.set_exception(e)
            raise

        with self._lock:
            self._value = value
            self._pending = None
        logger.info("Local version resolved: %s", value)
        pending.set_result(value)
        return value
