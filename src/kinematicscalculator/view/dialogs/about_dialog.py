"""
About Dialog
"""
import logging
import os

from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QDialogButtonBox
from PySide6.QtCore import Qt

from kinematicscalculator.config import ABOUT_PATH, APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)

FALLBACK_TEXT = (
    "<h3>{app}</h3>"
    "<p>Version {version}</p>"
    "<p>Solves the constant-acceleration kinematics equations for one unknown "
    "from three known values.</p>"
)


def load_about_text(path: str = ABOUT_PATH) -> str:
    """Read the about text from the assets, falling back to a built-in text."""
    text = FALLBACK_TEXT
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    else:
        logger.warning(f"About text not found at {path}, using built-in text.")
    return text.replace("{app}", APP_NAME).replace("{version}", APP_VERSION)


class AboutDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"About {APP_NAME}")

        layout = QVBoxLayout(self)

        lbl = QLabel(load_about_text())
        lbl.setTextFormat(Qt.RichText)
        lbl.setWordWrap(True)
        lbl.setOpenExternalLinks(True)
        layout.addWidget(lbl)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok)
        buttons.accepted.connect(self.accept)
        layout.addWidget(buttons)
