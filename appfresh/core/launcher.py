"""Send the user to the cached listing's catalog page.

The actual "open external URL" primitive belongs to the host, so it is
injected as an opener: any object with ``open_url(url)`` that raises
``LaunchError`` when the host cannot take the request. Openers dispatch and
return; the launcher never waits for the page to open.
"""

import logging
import threading
import webbrowser
from urllib.parse import urlparse

from appfresh.core.cache import ListingCache

logger = logging.getLogger(__name__)


class LaunchError(RuntimeError):
    """Host could not accept a request to open a URL."""


def is_openable_url(url: str | None) -> bool:
    if not url:
        return False
    parsed = urlparse(url.strip())
    return bool(parsed.scheme) and bool(parsed.netloc)


class UpdateLauncher:
    """Opens the destination URL of the most recently fetched listing."""

    def __init__(self, cache: ListingCache, opener):
        self._cache = cache
        self._opener = opener

    def open_listing_destination(self):
        """Fire-and-forget: ask the host to open the catalog page.

        Requires a prior ``UpdateChecker.check``; never triggers a fetch
        itself. Unmet preconditions and launch failures are only logged.
        """
        listing = self._cache.read()
        url = listing.destination_url if listing is not None else None
        if not is_openable_url(url):
            logger.warning("There is no app url to open. "
                           "Run an update check first.")
            return

        try:
            self._opener.open_url(url.strip())
        except LaunchError as e:
            logger.error("Could not open %s: %s", url, e)


# ── Openers ──────────────────────────────────────────────────────────

class BrowserOpener:
    """Opens URLs in the system browser on a daemon thread."""

    def open_url(self, url: str):
        try:
            browser = webbrowser.get()
        except webbrowser.Error as e:
            raise LaunchError(str(e)) from e
        threading.Thread(target=self._open, args=(browser, url), daemon=True).start()

    @staticmethod
    def _open(browser, url: str):
        try:
            opened = browser.open(url)
        except (OSError, webbrowser.Error) as e:
            logger.warning("Browser failed to open %s: %s", url, e)
            return
        if not opened:
            logger.warning("Browser refused to open %s", url)


def _get_qt_opener_class():
    """Lazy import to avoid PyQt6 at module level."""
    from PyQt6.QtCore import QCoreApplication, QObject, QUrl, pyqtSignal, pyqtSlot
    from PyQt6.QtGui import QDesktopServices

    class QtUrlOpener(QObject):
        """Opens URLs through QDesktopServices on the UI thread.

        Create it on the UI thread. ``open_url`` may be called from any
        thread; the queued signal hands the URL over to the UI thread.
        """

        _open_requested = pyqtSignal(str)

        def __init__(self, parent=None):
            super().__init__(parent)
            self._open_requested.connect(self._open)

        def open_url(self, url: str):
            if QCoreApplication.instance() is None:
                raise LaunchError("no Qt application is running")
            self._open_requested.emit(url)

        @pyqtSlot(str)
        def _open(self, url: str):
            if not QDesktopServices.openUrl(QUrl(url)):
                logger.error("Host could not open %s", url)

    return QtUrlOpener


_QtUrlOpenerClass = None


def get_qt_opener_class():
    """Get the QtUrlOpener class (lazy-imported to avoid PyQt6 at import time)."""
    global _QtUrlOpenerClass
    if _QtUrlOpenerClass is None:
        _QtUrlOpenerClass = _get_qt_opener_class()
    return _QtUrlOpenerClass
