"""Qt presenter for the update prompt: message boxes and the system browser."""

import logging

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import QMessageBox

from prochub.branding import AppBranding
from prochub.core.update_prompt import NoticeKind

logger = logging.getLogger(__name__)


class QtPromptPresenter:
    """Shows boxes with open() so the caller never waits on the user."""

    def __init__(self, parent=None):
        self._parent = parent
        self._boxes: list[QMessageBox] = []     # Keep open boxes alive

    def present_confirm_dialog(self, title, body, confirm_label, cancel_label,
                               on_accept, on_decline=None):
        box = QMessageBox(self._parent)
        box.setIcon(QMessageBox.Icon.Question)
        box.setWindowTitle(title)
        box.setText(body)
        yes_btn = box.addButton(confirm_label, QMessageBox.ButtonRole.YesRole)
        no_btn = box.addButton(cancel_label, QMessageBox.ButtonRole.NoRole)
        box.setDefaultButton(yes_btn)
        box.setEscapeButton(no_btn)

        def _finished(_result):
            self._release(box)
            if box.clickedButton() is yes_btn:
                on_accept()
            elif on_decline is not None:
                on_decline()

        box.finished.connect(_finished)
        self._boxes.append(box)
        box.open()

    def present_notice(self, kind: NoticeKind, text: str):
        box = QMessageBox(self._parent)
        if kind is NoticeKind.ERROR:
            box.setIcon(QMessageBox.Icon.Critical)
        else:
            box.setIcon(QMessageBox.Icon.Information)
        box.setWindowTitle(AppBranding.APP_NAME)
        box.setText(text)
        box.setStandardButtons(QMessageBox.StandardButton.Ok)
        box.finished.connect(lambda _result: self._release(box))
        self._boxes.append(box)
        box.open()

    def open_external_location(self, url: str):
        if not QDesktopServices.openUrl(QUrl(url)):
            logger.warning("System browser refused to open %s", url)

    def _release(self, box: QMessageBox):
        if box in self._boxes:
            self._boxes.remove(box)
        box.deleteLater()
