"""Update availability checker — catalog lookup plus version/OS comparison.

Architecture:
  UpdateChecker      — pure Python logic (no Qt dependency), blocking methods
  UpdateCheckWorker  — QThread wrapper with pyqtSignal for thread-safe UI updates
"""

import logging
from typing import Callable

from appfresh.core.cache import ListingCache
from appfresh.core.catalog import CatalogClient
from appfresh.core.models import FailureReason, UpdateStatus, UpdateVerdict
from appfresh.core.version import is_older

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "us"


def _no_identifier() -> str | None:
    return None


class UpdateChecker:
    """Checks whether a newer, installable release is listed in the catalog.

    All methods are synchronous (blocking) and safe to call from several
    threads at once; each call performs exactly one lookup. The only shared
    state is the injected ``ListingCache``.
    """

    def __init__(self, client: CatalogClient | None = None,
                 cache: ListingCache | None = None,
                 default_identifier: Callable[[], str | None] = _no_identifier):
        self.client = client or CatalogClient()
        self.cache = cache if cache is not None else ListingCache()
        self.default_identifier = default_identifier

    # ── Check ────────────────────────────────────────────────────────

    def check(self, current_app_version: str | None, current_os_version: str,
              bundle_id: str | None = None,
              country_code: str = DEFAULT_COUNTRY) -> UpdateVerdict:
        """Run one update check and return the detailed verdict.

        ``bundle_id`` overrides the identifier from ``default_identifier``.
        The fetched listing is cached even when the verdict is negative, so
        a later ``UpdateLauncher`` call sees the same record.
        """
        identifier = bundle_id or self.default_identifier()
        if not identifier:
            logger.error("No bundle identifier found. Provide one.")
            return UpdateVerdict.failed(FailureReason.NO_IDENTIFIER)

        listing = self.client.fetch_listing(identifier, country_code)
        if listing is None:
            return UpdateVerdict.failed(FailureReason.FETCH_FAILED)
        self.cache.store(listing)

        latest_version = listing.latest_version
        if latest_version is None:
            logger.warning("Could not extract latest app version from the app info.")
            return UpdateVerdict.failed(FailureReason.NO_LATEST_VERSION, listing)

        if current_app_version is None:
            logger.warning("No current app version supplied")
            return UpdateVerdict.failed(FailureReason.NO_CURRENT_VERSION, listing)

        # No minimum OS in the listing: assume it runs everywhere
        minimum_os = listing.minimum_os_version
        if minimum_os is not None and is_older(current_os_version, minimum_os):
            logger.info("v%s requires OS %s, device runs %s",
                        latest_version, minimum_os, current_os_version)
            return UpdateVerdict(UpdateStatus.INCOMPATIBLE, listing=listing)

        if is_older(current_app_version, latest_version):
            logger.info("Update available: %s -> %s", current_app_version, latest_version)
            return UpdateVerdict(UpdateStatus.UPDATE_AVAILABLE, listing=listing)
        return UpdateVerdict(UpdateStatus.UP_TO_DATE, listing=listing)

    def has_update(self, current_app_version: str | None, current_os_version: str,
                   bundle_id: str | None = None,
                   country_code: str = DEFAULT_COUNTRY) -> bool:
        """True if an update is both available and installable on this OS.

        Failures collapse to False; the detail is only in the log.
        """
        return self.check(current_app_version, current_os_version,
                          bundle_id=bundle_id, country_code=country_code).update_available


# ── QThread Worker ───────────────────────────────────────────────────

# Import PyQt6 only when the worker is actually used (lazy import
# to keep UpdateChecker itself free of Qt dependency)

def _get_worker_class():
    """Lazy import to avoid PyQt6 at module level."""
    from PyQt6.QtCore import QThread, pyqtSignal

    class UpdateCheckWorker(QThread):
        """Background worker for update checks.

        Emits signals that are automatically dispatched to the receiver's
        (main) thread. A started check always runs to completion.
        """

        check_finished = pyqtSignal(object)     # UpdateVerdict
        update_available = pyqtSignal(object)   # ListingRecord

        def __init__(self, checker: UpdateChecker, current_app_version: str | None,
                     current_os_version: str, bundle_id: str | None = None,
                     country_code: str = DEFAULT_COUNTRY, parent=None):
            super().__init__(parent)
            self._checker = checker
            self._app_version = current_app_version
            self._os_version = current_os_version
            self._bundle_id = bundle_id
            self._country_code = country_code

        def check(self):
            """Start background update check."""
            self.start()

        def run(self):
            """Thread entry point."""
            verdict = self._checker.check(
                self._app_version, self._os_version,
                bundle_id=self._bundle_id, country_code=self._country_code,
            )
            if verdict.update_available:
                self.update_available.emit(verdict.listing)
            self.check_finished.emit(verdict)

    return UpdateCheckWorker


# Module-level accessor
_UpdateCheckWorkerClass = None


def get_update_worker_class():
    """Get the UpdateCheckWorker class (lazy-imported to avoid PyQt6 at import time)."""
    global _UpdateCheckWorkerClass
    if _UpdateCheckWorkerClass is None:
        _UpdateCheckWorkerClass = _get_worker_class()
    return _UpdateCheckWorkerClass
