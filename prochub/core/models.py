"""Update check data models and error types."""

from dataclasses import dataclass
from enum import Enum

# Sentinel for a version that could not be determined
UNKNOWN_VERSION = "unknown"


class UpdateCheckError(Exception):
    """Base class for failures raised during an update check."""


class FetchError(UpdateCheckError):
    """A collaborator call (local or remote version lookup) failed."""


class ParseError(UpdateCheckError):
    """Remote payload is not valid JSON or does not have the expected shape."""


class FailureKind(Enum):
    FETCH_ERROR = "fetch_error"
    PARSE_ERROR = "parse_error"
    UNKNOWN = "unknown"

    @classmethod
    def of(cls, exc: BaseException) -> 'FailureKind':
        if isinstance(exc, FetchError):
            return cls.FETCH_ERROR
        if isinstance(exc, ParseError):
            return cls.PARSE_ERROR
        return cls.UNKNOWN


@dataclass(frozen=True)
class VersionInfo:
    """Metadata about the latest published build."""

    version: str
    url: str = ""       # Download page; empty means nothing to open


class CheckVerdict:
    """Outcome of comparing the local version with remote metadata."""


@dataclass(frozen=True)
class UpToDate(CheckVerdict):
    pass


@dataclass(frozen=True)
class UpdateAvailable(CheckVerdict):
    info: VersionInfo


@dataclass(frozen=True)
class CheckFailed(CheckVerdict):
    kind: FailureKind
    reason: str
