"""Update notification bar.

Amber-styled bar with a status label and an Update button. A host wires it
between the background check and the launcher:

    worker = get_update_worker_class()(checker, app_version, os_version)
    worker.update_available.connect(panel.show_update)
    panel.update_requested.connect(launcher.open_listing_destination)
    worker.check()

where ``launcher`` is an ``UpdateLauncher`` sharing the checker's cache and
using a ``QtUrlOpener``.
"""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton

from appfresh.core.models import ListingRecord


class UpdatePanel(QWidget):
    """Update notification bar — shown when an update is available."""

    update_requested = pyqtSignal()  # Emitted when user clicks "Update"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedHeight(40)
        self.setVisible(False)

        self.setStyleSheet(
            "UpdatePanel { background-color: #451A03; "
            "border-bottom: 1px solid #92400E; }"
        )

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 0, 14, 0)
        layout.setSpacing(12)

        self._label = QLabel("")
        self._label.setStyleSheet(
            "color: #FDE68A; font-weight: bold; font-size: 12px; "
            "background: transparent; border: none;"
        )
        layout.addWidget(self._label, 1)

        self._btn = QPushButton("Update")
        self._btn.setFixedSize(90, 28)
        self._btn.setStyleSheet(
            "QPushButton { background-color: #F59E0B; color: #FFFFFF; "
            "font-weight: bold; border: none; border-radius: 4px; } "
            "QPushButton:hover { background-color: #D97706; } "
            "QPushButton:pressed { background-color: #B45309; }"
        )
        self._btn.clicked.connect(self.update_requested.emit)
        layout.addWidget(self._btn)

    def label_text(self) -> str:
        return self._label.text()

    def show_update(self, listing: ListingRecord):
        """Show the notification for ``listing``."""
        name = f"{listing.display_name} " if listing.display_name else ""
        self._label.setText(f"Update available: {name}v{listing.latest_version}")
        # Nothing to open without a catalog page
        self._btn.setVisible(bool(listing.destination_url))
        self.setVisible(True)

    def hide_panel(self):
        """Hide the panel entirely."""
        self.setVisible(False)
