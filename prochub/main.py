"""ProcHub — entry point."""

import sys
import os
import logging

from prochub.branding import AppBranding
from prochub.config.settings import AppSettings
from prochub.core.version_cache import VersionCache
from prochub.core.version_source import read_local_version
from prochub.i18n import Translator


def setup_logging(data_dir: str):
    """Configure logging to file and console."""
    log_dir = os.path.join(data_dir, 'logs')
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'prochub.log')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(),
        ],
    )


def main():
    # High-DPI support
    os.environ.setdefault('QT_ENABLE_HIGHDPI_SCALING', '1')

    # Load settings early (before any GUI init)
    settings = AppSettings.load()
    settings.ensure_dirs()

    setup_logging(settings.data_dir)
    logger = logging.getLogger(__name__)
    logger.info("%s %s starting", AppBranding.APP_NAME, AppBranding.VERSION)

    # One cache for the whole process: the local version never changes while running
    version_cache = VersionCache(read_local_version)
    translator = Translator(settings.locale)

    from PyQt6.QtWidgets import QApplication
    from prochub.ui.main_window import MainWindow

    app = QApplication(sys.argv)
    app.setApplicationName(AppBranding.APP_NAME)
    app.setApplicationVersion(AppBranding.VERSION)
    app.setStyleSheet(DARK_STYLE)

    window = MainWindow(settings, version_cache, translator)
    window.show()
    window.schedule_auto_check()

    exit_code = app.exec()

    settings.save()
    logger.info("Goodbye")
    sys.exit(exit_code)


DARK_STYLE = """
QWidget {
    background-color: #1e1e1e;
    color: #cccccc;
    font-size: 13px;
}
QMainWindow {
    background-color: #1e1e1e;
}
QToolBar {
    background-color: #2d2d2d;
    border: none;
    spacing: 6px;
    padding: 4px;
}
QToolBar QToolButton {
    background-color: #3d3d3d;
    border: 1px solid #555;
    border-radius: 3px;
    padding: 4px 10px;
    color: #cccccc;
}
QToolBar QToolButton:hover {
    background-color: #4d4d4d;
}
QToolBar QToolButton:disabled {
    color: #666;
}
QComboBox, QLineEdit, QSpinBox {
    background-color: #3d3d3d;
    border: 1px solid #555;
    border-radius: 3px;
    padding: 4px;
    color: #cccccc;
}
QPushButton {
    background-color: #3d3d3d;
    border: 1px solid #555;
    border-radius: 3px;
    padding: 5px 15px;
    color: #cccccc;
}
QPushButton:hover {
    background-color: #4d4d4d;
}
QTabWidget::pane {
    border: 1px solid #333;
}
QTabBar::tab {
    background-color: #2d2d2d;
    border: 1px solid #333;
    padding: 6px 12px;
}
QTabBar::tab:selected {
    background-color: #3d3d3d;
}
QStatusBar {
    background-color: #2d2d2d;
    color: #888;
}
QDialog, QMessageBox {
    background-color: #1e1e1e;
}
"""


if __name__ == '__main__':
    main()
