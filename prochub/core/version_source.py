"""Version lookups: local version file and the remote version endpoint.

The remote endpoint may answer with a structured value or with the same
data encoded as JSON text. normalize_version_info() is the single place
where either shape becomes a VersionInfo.
"""

import json
import logging
import os
import sys
from collections.abc import Mapping
from http.client import HTTPException
from typing import Protocol, Union
from urllib.error import URLError
from urllib.request import Request, urlopen

from prochub.branding import AppBranding
from prochub.core.models import (
    FetchError, ParseError, UNKNOWN_VERSION, VersionInfo,
)

logger = logging.getLogger(__name__)

VERSION_FILENAME = "version.json"

RemotePayload = Union[VersionInfo, Mapping, str, bytes]


class RemoteVersionSource(Protocol):
    """Anything that can report the latest published build."""

    def fetch_remote_version_info(self) -> RemotePayload:
        ...


def normalize_version_info(payload: RemotePayload) -> VersionInfo:
    """Turn a remote payload into VersionInfo.

    Structured shapes are validated first; text is JSON-decoded and then
    validated the same way. Raises ParseError on anything else.
    """
    if isinstance(payload, VersionInfo):
        return VersionInfo(
            version=payload.version or UNKNOWN_VERSION,
            url=payload.url or "",
        )
    if isinstance(payload, Mapping):
        return _from_mapping(payload)
    if isinstance(payload, (str, bytes)):
        try:
            decoded = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Version payload is not valid JSON: {e}") from e
        if not isinstance(decoded, Mapping):
            raise ParseError(
                f"Version payload must be a JSON object, got {type(decoded).__name__}"
            )
        return _from_mapping(decoded)
    raise ParseError(f"Unsupported version payload type: {type(payload).__name__}")


def _from_mapping(data: Mapping) -> VersionInfo:
    version = data.get('version')
    url = data.get('url')
    if version is not None and not isinstance(version, str):
        raise ParseError(f"'version' must be a string, got {type(version).__name__}")
    if url is not None and not isinstance(url, str):
        raise ParseError(f"'url' must be a string, got {type(url).__name__}")
    return VersionInfo(version=version or UNKNOWN_VERSION, url=url or "")


class HttpVersionSource:
    """Fetches the version manifest over HTTP, returns the raw body text."""

    def __init__(self, url: str, timeout: float = 10):
        self.url = url
        self.timeout = timeout

    def fetch_remote_version_info(self) -> str:
        if not self.url:
            raise FetchError("No update API URL configured")

        try:
            # Request() itself rejects URLs without a scheme (ValueError)
            req = Request(self.url, headers={
                'User-Agent': AppBranding.user_agent(),
                'Accept': 'application/json',
            })
            with urlopen(req, timeout=self.timeout) as resp:
                status = getattr(resp, 'status', 200)
                if status != 200:
                    raise FetchError(f"Update API returned HTTP {status}")
                body = resp.read().decode('utf-8')
        except (URLError, OSError, ValueError, HTTPException) as e:
            raise FetchError(f"Failed to fetch version info: {e}") from e

        logger.debug("Fetched version info from %s: %s", self.url, body)
        return body


def default_version_file() -> str:
    """version.json next to the executable (frozen build) or the package root."""
    if getattr(sys, 'frozen', False):
        base = os.path.dirname(sys.executable)
    else:
        base = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base, VERSION_FILENAME)


def read_local_version(path: str | None = None) -> str:
    """Local version from version.json, falling back to AppBranding.VERSION.

    A file that exists but cannot be read is a FetchError, so the caller's
    cache retries on the next lookup instead of settling on a wrong value.
    """
    if path is None:
        path = default_version_file()

    if not os.path.isfile(path):
        return AppBranding.VERSION or UNKNOWN_VERSION

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FetchError(f"Cannot read {path}: {e}") from e

    if isinstance(data, dict):
        value = data.get('version') or ""
    elif isinstance(data, str):
        value = data
    else:
        value = ""
    value = value.strip() if isinstance(value, str) else ""
    return value or UNKNOWN_VERSION
