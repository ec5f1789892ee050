"""Exception hierarchy for classifying and acquiring source trees.

Every failure raised by the core derives from `SourceAcquisitionError`, so a
caller can catch the whole family at once and still tell a malformed URL from
a failed `git clone` or a broken download when it needs to.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

__all__ = [
    "SourceAcquisitionError",
    "UrlParseError",
    "ToolInvocationError",
    "TransferError",
    "TransferConnectionError",
    "TransferWriteError",
    "FilesystemError",
]


class SourceAcquisitionError(RuntimeError):
    """Base exception for classification, acquisition and update failures."""


class UrlParseError(SourceAcquisitionError, ValueError):
    """Raised when a URL cannot be parsed or has no usable path segment."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class ToolInvocationError(SourceAcquisitionError):
    """Raised when an external tool could not be launched or exited non-zero.

    `status` is the exit code, or ``None`` when the process never started
    (executable missing, working directory absent, permission denied...).
    """

    def __init__(
        self,
        tool: str,
        args: Sequence[str],
        status: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.tool = tool
        self.args_list = list(args)
        self.status = status
        cmd = " ".join(self.args_list)
        if status is None:
            message = f"could not launch {tool}: {cmd}"
        else:
            message = f"{tool} exited with status {status}: {cmd}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    @property
    def launched(self) -> bool:
        return self.status is not None


class TransferError(SourceAcquisitionError):
    """Raised when fetching a URL into a local file fails."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class TransferConnectionError(TransferError):
    """The remote side failed: connection refused, DNS error, non-2xx status."""

    def __init__(
        self, url: str, message: str, status_code: Optional[int] = None
    ) -> None:
        super().__init__(url, message)
        self.status_code = status_code


class TransferWriteError(TransferError):
    """The body was received but could not be written to disk."""

    def __init__(self, url: str, path: Path, message: str) -> None:
        super().__init__(url, message)
        self.path = path


class FilesystemError(SourceAcquisitionError):
    """Raised when a destination cannot be used as a directory."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
