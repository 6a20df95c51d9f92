"""User-visible strings in English and Chinese."""

import logging

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    'en': {
        'common.yes': "Yes",
        'common.no': "No",
        'common.ok': "OK",
        'common.cancel': "Cancel",
        'app.ready': "Ready",
        'app.quit': "Quit",
        'app.checkUpdates': "Check for updates",
        'app.settings': "Settings",
        'app.checking': "Checking for updates...",
        'settings.title': "Settings",
        'settings.general': "General",
        'settings.language': "Language:",
        'settings.version.title': "Updates",
        'settings.version.current': "Current version: {version}",
        'settings.version.autoCheck': "Check for updates on startup",
        'settings.version.autoCheckDelay': "Startup check delay:",
        'settings.version.apiUrl': "Update URL:",
        'settings.version.latestVersion': "You are using the latest version",
        'settings.version.updateAvailable': "New version available",
        'settings.version.updateConfirm': "Version {version} is available. Open the download page?",
        'settings.version.checkFailed': "Failed to check for updates",
    },
    'zh': {
        'common.yes': "是",
        'common.no': "否",
        'common.ok': "确定",
        'common.cancel': "取消",
        'app.ready': "就绪",
        'app.quit': "退出",
        'app.checkUpdates': "检查更新",
        'app.settings': "设置",
        'app.checking': "正在检查更新...",
        'settings.title': "设置",
        'settings.general': "常规",
        'settings.language': "语言：",
        'settings.version.title': "更新",
        'settings.version.current': "当前版本：{version}",
        'settings.version.autoCheck': "启动时检查更新",
        'settings.version.autoCheckDelay': "启动检查延迟：",
        'settings.version.apiUrl': "更新地址：",
        'settings.version.latestVersion': "当前已是最新版本",
        'settings.version.updateAvailable': "发现新版本",
        'settings.version.updateConfirm': "新版本 {version} 已发布，是否前往下载？",
        'settings.version.checkFailed': "检查更新失败",
    },
}

LOCALE_NAMES = {
    'en': "English",
    'zh': "中文",
}


class Translator:
    """Looks up keys in the active locale, then English, then echoes the key."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str):
        if value not in MESSAGES:
            logger.warning("Unknown locale %r, falling back to %s", value, DEFAULT_LOCALE)
            value = DEFAULT_LOCALE
        self._locale = value

    def translate(self, key: str, params: dict | None = None) -> str:
        text = MESSAGES[self._locale].get(key)
        if text is None:
            text = MESSAGES[DEFAULT_LOCALE].get(key, key)
        if params:
            try:
                text = text.format(**params)
            except (KeyError, IndexError, ValueError) as e:
                logger.warning("Bad params for %s: %s", key, e)
        return text

    __call__ = translate
