from __future__ import annotations

import os
from typing import Optional

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices, QGuiApplication
from PySide6.QtWidgets import QApplication, QFileDialog


def _ensure_app() -> QApplication:
    # Ensure one QApplication exists
    return QApplication.instance() or QApplication([])


def pick_folder(title: str, start_dir: str = "") -> Optional[str]:
    """
    Native folder picker. Returns None when the dialog is cancelled.
    """
    _ensure_app()
    folder = QFileDialog.getExistingDirectory(None, title, start_dir)
    if not folder:
        return None
    return os.path.normpath(folder)


def copy_to_clipboard(text: str) -> None:
    _ensure_app()
    QGuiApplication.clipboard().setText(text)


def open_in_editor(path: str) -> bool:
    _ensure_app()
    return QDesktopServices.openUrl(QUrl.fromLocalFile(os.path.abspath(path)))
