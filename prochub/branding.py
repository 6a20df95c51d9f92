"""Centralized branding constants — single source of truth for version."""

import platform
import subprocess
import sys

_PLATFORM_NAMES = {
    'darwin': "macOS",
    'win32': "Windows",
    'linux': "Linux",
}

_ARCH_NAMES = {
    'x86_64': "x64",
    'amd64': "x64",
    'arm64': "arm64",
    'aarch64': "arm64",
    'i386': "x86",
    'i686': "x86",
    'x86': "x86",
}


class AppBranding:
    """Application identity constants."""

    APP_NAME = "ProcHub"
    SLUG = "prochub"
    VERSION = "0.1.0"
    # Placeholder endpoint; deployments set update_api_url in settings.json
    UPDATE_API_URL = "https://open.modstart.com/open_version/prochub"

    @classmethod
    def window_title(cls) -> str:
        return f"{cls.APP_NAME}  v{cls.VERSION}"

    @classmethod
    def user_agent(cls) -> str:
        """Open/{AppName}/{Version}/{Platform}/{PlatformArch}/{PlatformVersion}"""
        return "Open/{}/{}/{}/{}/{}".format(
            cls.APP_NAME,
            cls.VERSION,
            platform_name(),
            platform_arch(),
            platform_version(),
        )


def platform_name() -> str:
    for prefix, name in _PLATFORM_NAMES.items():
        if sys.platform.startswith(prefix):
            return name
    return sys.platform


def platform_arch() -> str:
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine or "unknown")


def platform_version() -> str:
    """OS version string, "0" when it cannot be determined."""
    if sys.platform == 'darwin':
        try:
            result = subprocess.run(
                ['sw_vers', '-productVersion'],
                capture_output=True, text=True, timeout=5,
            )
            if result.returncode == 0 and result.stdout.strip():
                return result.stdout.strip()
        except (OSError, subprocess.SubprocessError):
            pass
    elif sys.platform == 'win32':
        # "10.0.19041"
        version = platform.version()
        if version:
            return version
    elif sys.platform.startswith('linux'):
        try:
            with open('/etc/os-release', 'r', encoding='utf-8') as f:
                for line in f:
                    if line.startswith('VERSION_ID='):
                        return line.split('=', 1)[1].strip().strip('"')
        except OSError:
            pass
    return "0"
