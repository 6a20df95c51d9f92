"""Settings dialog."""

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QLineEdit, QSpinBox, QCheckBox,
    QComboBox, QDialogButtonBox, QTabWidget, QWidget, QFormLayout,
)

from prochub.branding import AppBranding
from prochub.config.settings import AppSettings
from prochub.i18n import LOCALE_NAMES, Translator


class SettingsDialog(QDialog):
    """Application settings dialog with tabs."""

    def __init__(self, parent=None, settings: AppSettings = None,
                 translator: Translator = None):
        super().__init__(parent)
        self._settings = settings or AppSettings()
        self._t = translator or Translator(self._settings.locale)
        self.setWindowTitle(self._t('settings.title'))
        self.setMinimumWidth(450)

        layout = QVBoxLayout(self)

        tabs = QTabWidget()
        tabs.addTab(self._create_general_tab(), self._t('settings.general'))
        tabs.addTab(self._create_updates_tab(), self._t('settings.version.title'))
        layout.addWidget(tabs)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _create_general_tab(self) -> QWidget:
        widget = QWidget()
        form = QFormLayout(widget)

        self._locale_combo = QComboBox()
        for code, name in LOCALE_NAMES.items():
            self._locale_combo.addItem(name, code)
        index = self._locale_combo.findData(self._settings.locale)
        if index >= 0:
            self._locale_combo.setCurrentIndex(index)
        form.addRow(self._t('settings.language'), self._locale_combo)

        return widget

    def _create_updates_tab(self) -> QWidget:
        widget = QWidget()
        form = QFormLayout(widget)

        form.addRow(QLabel(self._t('settings.version.current',
                                   {'version': AppBranding.VERSION})))

        self._auto_check = QCheckBox(self._t('settings.version.autoCheck'))
        self._auto_check.setChecked(self._settings.auto_check_updates)
        form.addRow(self._auto_check)

        # Startup delay, stored as milliseconds in settings.json
        self._delay_spin = QSpinBox()
        self._delay_spin.setRange(0, 600_000)
        self._delay_spin.setSingleStep(500)
        self._delay_spin.setSuffix(" ms")
        self._delay_spin.setValue(min(self._settings.auto_check_delay_ms, 600_000))
        form.addRow(self._t('settings.version.autoCheckDelay'), self._delay_spin)

        self._url_edit = QLineEdit(self._settings.update_api_url)
        form.addRow(self._t('settings.version.apiUrl'), self._url_edit)

        return widget

    def get_settings(self) -> AppSettings:
        """Return updated settings."""
        self._settings.locale = self._locale_combo.currentData()
        self._settings.auto_check_updates = self._auto_check.isChecked()
        self._settings.auto_check_delay_ms = self._delay_spin.value()
        self._settings.update_api_url = self._url_edit.text().strip() or AppBranding.UPDATE_API_URL
        return self._settings
