import os
from unittest.mock import Mock

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from prochub.config.settings import AppSettings
from prochub.core.version_cache import VersionCache
from prochub.i18n import Translator
from prochub.ui.main_window import MainWindow
from prochub.ui.settings_dialog import SettingsDialog


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    return AppSettings(data_dir=str(tmp_path), locale="en")


class TestSettingsDialog:

    def test_sub_second_delay_is_kept(self, qapp, settings):
        settings.auto_check_delay_ms = 1500
        dialog = SettingsDialog(None, settings, Translator("en"))

        assert dialog.get_settings().auto_check_delay_ms == 1500

    def test_edited_delay_is_written_in_ms(self, qapp, settings):
        dialog = SettingsDialog(None, settings, Translator("en"))
        dialog._delay_spin.setValue(2500)

        assert dialog.get_settings().auto_check_delay_ms == 2500


class TestMainWindowClose:

    def _window(self, settings):
        return MainWindow(settings, VersionCache(Mock(return_value="0.1.0")),
                          Translator("en"))

    def test_waits_longer_than_request_timeout(self, qapp, settings):
        settings.request_timeout = 10
        window = self._window(settings)
        worker = Mock()
        worker.wait.return_value = True
        window._workers.append(worker)

        event = Mock()
        window.closeEvent(event)

        wait_ms = worker.wait.call_args[0][0]
        assert wait_ms > settings.request_timeout * 1000
        event.accept.assert_called_once()

    def test_cancels_pending_auto_check(self, qapp, settings):
        window = self._window(settings)
        window.schedule_auto_check()
        task = window._scheduler.task

        window.closeEvent(Mock())
        assert task.cancelled
