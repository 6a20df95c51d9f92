"""Update prompt: turns a check verdict into notices and a confirm dialog.

The check itself (evaluate) may block on the network and is safe to run on a
worker thread. react() touches the UI and must run on the GUI thread. The
confirm dialog is non-blocking: react() returns before the user answers, and
the answer is only observable through the side effect of opening the URL.
"""

import logging
from enum import Enum
from typing import Callable, Protocol

from prochub.core.models import (
    CheckFailed, CheckVerdict, UpdateAvailable, UpToDate,
)
from prochub.core.update_checker import UpdateChecker

logger = logging.getLogger(__name__)


class NoticeKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


class PromptState(Enum):
    IDLE = "idle"
    CHECKING = "checking"
    UP_TO_DATE = "up_to_date"
    UPDATE_AVAILABLE = "update_available"
    CONFIRMING = "confirming"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    FAILED = "failed"


class PromptPresenter(Protocol):
    """UI side of the prompt; implemented with Qt in prochub.ui.prompt_presenter."""

    def present_confirm_dialog(self, title: str, body: str,
                               confirm_label: str, cancel_label: str,
                               on_accept: Callable[[], None],
                               on_decline: Callable[[], None] | None = None) -> None:
        ...

    def present_notice(self, kind: NoticeKind, text: str) -> None:
        ...

    def open_external_location(self, url: str) -> None:
        ...


class UpdatePrompt:
    """Drives one check: Idle → Checking → verdict → (Confirming) → Idle.

    At most one confirm dialog is outstanding at a time. A check that finds
    an update while an earlier dialog is still open reports True but does
    not stack a second dialog.
    """

    def __init__(self, checker: UpdateChecker, presenter: PromptPresenter,
                 translate: Callable[..., str]):
        self._checker = checker
        self._presenter = presenter
        self._t = translate
        self.state = PromptState.IDLE
        self._dialog_open = False
        self.last_dialog_outcome: PromptState | None = None    # ACCEPTED or DECLINED

    @property
    def dialog_open(self) -> bool:
        return self._dialog_open

    def check_version_and_prompt(self, show_latest_message: bool = False,
                                 show_error_message: bool = False) -> bool:
        """Run the whole flow synchronously. True iff an update was found."""
        return self.react(self.evaluate(),
                          show_latest_message=show_latest_message,
                          show_error_message=show_error_message)

    def evaluate(self) -> CheckVerdict:
        self.state = PromptState.CHECKING
        return self._checker.check()

    def handle_verdict(self, verdict: CheckVerdict, show_latest_message: bool = False,
                       show_error_message: bool = False) -> bool:
        """react() for Qt slots: UI errors are logged and reported as False.

        An exception escaping a PyQt6 slot aborts the process.
        """
        try:
            return self.react(verdict,
                              show_latest_message=show_latest_message,
                              show_error_message=show_error_message)
        except Exception:
            logger.exception("Failed to present update check result")
            return False

    def react(self, verdict: CheckVerdict, show_latest_message: bool = False,
              show_error_message: bool = False) -> bool:
        try:
            if isinstance(verdict, UpToDate):
                self.state = PromptState.UP_TO_DATE
                if show_latest_message:
                    self._presenter.present_notice(
                        NoticeKind.SUCCESS, self._t('settings.version.latestVersion'))
                return False

            if isinstance(verdict, UpdateAvailable):
                self.state = PromptState.UPDATE_AVAILABLE
                if verdict.info.url:
                    self._confirm(verdict)
                else:
                    logger.info("Update %s has no download URL, nothing to open",
                                verdict.info.version)
                return True

            if isinstance(verdict, CheckFailed):
                self.state = PromptState.FAILED
                logger.error("Version check failed: [%s] %s",
                             verdict.kind.value, verdict.reason)
                if show_error_message:
                    self._presenter.present_notice(
                        NoticeKind.ERROR, self._t('settings.version.checkFailed'))
                return False

            raise TypeError(f"Unexpected verdict: {verdict!r}")
        finally:
            self.state = PromptState.IDLE

    def _confirm(self, verdict: UpdateAvailable):
        if self._dialog_open:
            logger.info("Update dialog already open, not showing another for %s",
                        verdict.info.version)
            return

        url = verdict.info.url
        self.state = PromptState.CONFIRMING
        self._dialog_open = True

        def on_accept():
            self._dialog_open = False
            self.last_dialog_outcome = PromptState.ACCEPTED
            logger.info("User accepted update %s, opening %s", verdict.info.version, url)
            self._presenter.open_external_location(url)

        def on_decline():
            self._dialog_open = False
            self.last_dialog_outcome = PromptState.DECLINED
            logger.info("User declined update %s", verdict.info.version)

        try:
            self._presenter.present_confirm_dialog(
                self._t('settings.version.updateAvailable'),
                self._t('settings.version.updateConfirm', {'version': verdict.info.version}),
                self._t('common.yes'),
                self._t('common.no'),
                on_accept,
                on_decline,
            )
        except Exception:
            self._dialog_open = False
            raise
