"""Main application window."""

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QToolBar, QStatusBar,
    QLabel,
)

from prochub.branding import AppBranding
from prochub.config.settings import AppSettings
from prochub.core.models import UpdateAvailable
from prochub.core.scheduler import AutoCheckScheduler
from prochub.core.update_checker import UpdateChecker, get_update_worker_class
from prochub.core.update_prompt import UpdatePrompt
from prochub.core.version_cache import VersionCache
from prochub.core.version_source import HttpVersionSource
from prochub.i18n import Translator
from prochub.ui.prompt_presenter import QtPromptPresenter
from prochub.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """ProcHub main window."""

    def __init__(self, settings: AppSettings, version_cache: VersionCache,
                 translator: Translator):
        super().__init__()
        self._settings = settings
        self._cache = version_cache
        self._t = translator
        self._workers = []              # Running UpdateCheckWorker threads

        self._checker = UpdateChecker(self._cache, self._build_source())
        self._prompt = UpdatePrompt(self._checker, QtPromptPresenter(self), self._t)
        self._scheduler = AutoCheckScheduler(self.start_update_check)

        self._setup_ui()

    def _build_source(self) -> HttpVersionSource:
        return HttpVersionSource(self._settings.update_api_url,
                                 timeout=self._settings.request_timeout)

    def _setup_ui(self):
        self.setWindowTitle(AppBranding.window_title())
        self.setMinimumSize(640, 400)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._create_brand_header())
        layout.addStretch()

        self.addToolBar(self._create_toolbar())

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_label = QLabel(self._t('app.ready'))
        self._status_bar.addWidget(self._status_label, 1)

    def _create_brand_header(self) -> QWidget:
        header = QWidget()
        header.setFixedHeight(56)
        header.setStyleSheet(
            "QWidget { background-color: #27272A; border-bottom: 1px solid #3F3F46; }"
        )
        h_layout = QHBoxLayout(header)
        h_layout.setContentsMargins(16, 8, 16, 8)

        name_label = QLabel(AppBranding.APP_NAME)
        name_label.setStyleSheet(
            "font-size: 18px; font-weight: bold; color: #3B82F6; background: transparent; border: none;"
        )
        h_layout.addWidget(name_label)

        ver_label = QLabel(f"v{AppBranding.VERSION}")
        ver_label.setStyleSheet(
            "font-size: 12px; color: #71717A; margin-left: 8px; background: transparent; border: none;"
        )
        ver_label.setAlignment(Qt.AlignmentFlag.AlignVCenter)
        h_layout.addWidget(ver_label)

        h_layout.addStretch()
        return header

    def _create_toolbar(self) -> QToolBar:
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)

        self._act_check = QAction(self._t('app.checkUpdates'), self)
        self._act_check.triggered.connect(self._on_check_updates)
        toolbar.addAction(self._act_check)

        self._act_settings = QAction(self._t('app.settings'), self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        toolbar.addAction(self._act_settings)

        toolbar.addSeparator()

        self._act_quit = QAction(self._t('app.quit'), self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        toolbar.addAction(self._act_quit)

        return toolbar

    # --- Updates ---

    def schedule_auto_check(self):
        """Silent update check shortly after startup (once per session)."""
        if self._settings.auto_check_updates:
            self._scheduler.schedule_once(self._settings.auto_check_delay_ms)

    def start_update_check(self, show_latest_message: bool = False,
                           show_error_message: bool = False):
        """Run the check on a worker thread; the prompt reacts on the GUI thread."""
        worker_cls = get_update_worker_class()
        worker = worker_cls(self._prompt.evaluate, self)

        def _on_verdict(verdict):
            found = self._prompt.handle_verdict(verdict,
                                                show_latest_message=show_latest_message,
                                                show_error_message=show_error_message)
            if found and isinstance(verdict, UpdateAvailable):
                self._status_label.setText(
                    self._t('settings.version.updateAvailable') + f": {verdict.info.version}")
            else:
                self._status_label.setText(self._t('app.ready'))

        def _on_finished():
            if worker in self._workers:
                self._workers.remove(worker)
            self._act_check.setEnabled(not self._workers)
            worker.deleteLater()

        worker.verdict_ready.connect(_on_verdict)
        worker.finished.connect(_on_finished)
        self._workers.append(worker)
        self._act_check.setEnabled(False)
        self._status_label.setText(self._t('app.checking'))
        worker.start()

    def _on_check_updates(self):
        self.start_update_check(show_latest_message=True, show_error_message=True)

    def _on_settings(self):
        dialog = SettingsDialog(self, self._settings, self._t)
        if dialog.exec():
            self._settings = dialog.get_settings()
            self._settings.save()
            self._t.locale = self._settings.locale
            self._checker.source = self._build_source()

    def closeEvent(self, event):
        task = self._scheduler.task
        if task is not None:
            task.cancel()
        # A worker blocks in urlopen for up to request_timeout
        wait_ms = self.shutdown_wait_ms()
        for worker in list(self._workers):
            if not worker.wait(wait_ms):
                logger.warning("Update check worker still running after %d ms", wait_ms)
        event.accept()

    def shutdown_wait_ms(self) -> int:
        return int((max(0, self._settings.request_timeout) + 1) * 1000)
