"""Update checker: compares the cached local version with the remote manifest.

Architecture:
  UpdateChecker      pure Python logic (no Qt dependency), blocking check()
  UpdateCheckWorker  QThread wrapper that delivers the verdict to the GUI thread
"""

import logging

from packaging.version import Version, InvalidVersion

from prochub.core.models import (
    CheckFailed, CheckVerdict, FailureKind, FetchError, UpdateAvailable,
    UpdateCheckError, UpToDate, VersionInfo,
)
from prochub.core.version_cache import VersionCache
from prochub.core.version_source import RemoteVersionSource, normalize_version_info

logger = logging.getLogger(__name__)


def compare(local: str, remote: VersionInfo) -> CheckVerdict:
    """Exact text comparison: any difference counts as an available update."""
    if remote.version == local:
        return UpToDate()
    return UpdateAvailable(remote)


def describe_direction(local: str, remote: str) -> str:
    """'newer', 'older' or 'unordered', for log lines only, never for the verdict."""
    try:
        local_v, remote_v = Version(local), Version(remote)
    except InvalidVersion:
        return "unordered"
    if remote_v > local_v:
        return "newer"
    if remote_v < local_v:
        return "older"
    return "unordered"


def _collaborator_call(fn):
    """Any non-UpdateCheckError from a version lookup is a FetchError."""
    try:
        return fn()
    except UpdateCheckError:
        raise
    except Exception as e:
        raise FetchError(f"{type(e).__name__}: {e}") from e


class UpdateChecker:
    """Fetches remote metadata and decides whether an update is offered.

    check() is blocking; run it on a worker thread from the GUI.
    """

    def __init__(self, cache: VersionCache, source: RemoteVersionSource):
        self._cache = cache
        self.source = source

    def check(self) -> CheckVerdict:
        """Never raises; every failure becomes CheckFailed and is logged."""
        try:
            local = _collaborator_call(self._cache.get_local_version)
            info = normalize_version_info(
                _collaborator_call(self.source.fetch_remote_version_info))
            verdict = compare(local, info)
        except Exception as e:
            kind = FailureKind.of(e)
            if kind is FailureKind.UNKNOWN:
                logger.exception("Version check failed")
            else:
                logger.warning("Version check failed (%s): %s", kind.value, e)
            return CheckFailed(kind, str(e))

        if isinstance(verdict, UpdateAvailable):
            logger.info("Update available: %s -> %s (%s)",
                        local, info.version, describe_direction(local, info.version))
        else:
            logger.info("Version is up to date: %s", local)
        return verdict


# ── QThread Worker ───────────────────────────────────────────────────

# Import PyQt6 only when the worker is actually used (lazy import
# to keep UpdateChecker itself free of Qt dependency)

def _get_worker_class():
    """Lazy import to avoid PyQt6 at module level."""
    from PyQt6.QtCore import QThread, pyqtSignal

    class UpdateCheckWorker(QThread):
        """Runs one blocking check off the GUI thread.

        verdict_ready is emitted from the worker thread and delivered to
        connected slots on the GUI thread (queued connection).
        """

        verdict_ready = pyqtSignal(object)    # CheckVerdict

        def __init__(self, evaluate, parent=None):
            super().__init__(parent)
            self._evaluate = evaluate    # UpdateChecker.check or UpdatePrompt.evaluate

        def run(self):
            self.verdict_ready.emit(self._evaluate())

    return UpdateCheckWorker


# Module-level accessor
_UpdateCheckWorkerClass = None


def get_update_worker_class():
    """Get the UpdateCheckWorker class (lazy-imported to avoid PyQt6 at import time)."""
    global _UpdateCheckWorkerClass
    if _UpdateCheckWorkerClass is None:
        _UpdateCheckWorkerClass = _get_worker_class()
    return _UpdateCheckWorkerClass
