"""Shared fakes for the update check tests."""

from unittest.mock import Mock

import pytest

from prochub.core.update_checker import UpdateChecker
from prochub.core.update_prompt import UpdatePrompt
from prochub.core.version_cache import VersionCache
from prochub.i18n import Translator


class FakeSource:
    """Remote source returning a fixed payload, or raising it if it's an exception."""

    def __init__(self, payload):
        self.payload = payload
        self.calls = 0

    def fetch_remote_version_info(self):
        self.calls += 1
        if isinstance(self.payload, BaseException):
            raise self.payload
        return self.payload


class FakePresenter:
    """Records dialogs and notices; tests answer dialogs via accept()/decline()."""

    def __init__(self):
        self.dialogs = []
        self.notices = []
        self.opened = []

    def present_confirm_dialog(self, title, body, confirm_label, cancel_label,
                               on_accept, on_decline=None):
        self.dialogs.append({
            'title': title,
            'body': body,
            'confirm': confirm_label,
            'cancel': cancel_label,
            'on_accept': on_accept,
            'on_decline': on_decline,
        })

    def present_notice(self, kind, text):
        self.notices.append((kind, text))

    def open_external_location(self, url):
        self.opened.append(url)

    def accept(self, index=-1):
        self.dialogs[index]['on_accept']()

    def decline(self, index=-1):
        self.dialogs[index]['on_decline']()


class FakeTimer:
    """Stands in for a single-shot QTimer; fire() plays the event loop."""

    def __init__(self):
        self.timeout = Mock()
        self.started_with = None
        self.stopped = False

    def start(self, ms):
        self.started_with = ms

    def stop(self):
        self.stopped = True

    def fire(self):
        callback = self.timeout.connect.call_args[0][0]
        callback()


@pytest.fixture
def presenter():
    return FakePresenter()


@pytest.fixture
def translator():
    return Translator("en")


@pytest.fixture
def make_prompt(presenter, translator):
    """make_prompt(remote_payload, local='1.2.0') -> (prompt, source, fetch_local)"""

    def _make(payload, local="1.2.0"):
        source = FakeSource(payload)
        if isinstance(local, BaseException):
            fetch_local = Mock(side_effect=local)
        else:
            fetch_local = Mock(return_value=local)
        checker = UpdateChecker(VersionCache(fetch_local), source)
        return UpdatePrompt(checker, presenter, translator), source, fetch_local

    return _make
