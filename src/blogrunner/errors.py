# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum


class BlogRunnerError(Exception):
    """Base class for errors raised by the probe harness."""


class PollTimeoutError(BlogRunnerError, TimeoutError):
    """The homepage never showed the polling token before the deadline."""

    def __init__(self, url: str, token: str, timeout: float, attempts: int):
        super().__init__(f"Token {token!r} did not appear on {url} within {timeout:g}s ({attempts} attempts)")
        self.url = url
        self.token = token
        self.timeout = timeout
        self.attempts = attempts


class MarkersNotFoundError(BlogRunnerError):
    """The homepage was fetched but the injected content markers were not in it."""


class RemoteApiError(BlogRunnerError):
    """Any failure reported by (or while talking to) the blog client."""

    def __init__(self, method: str, message: str):
        super().__init__(f"{method} failed: {message}")
        self.method = method


class DuplicateKeyError(BlogRunnerError, KeyError):
    """A probe recorded two results under the same key."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Duplicate result key: {self.key!r}"


class ProbePreconditionError(BlogRunnerError):
    """The target blog cannot support this probe (e.g. not enough categories)."""


class ConfigError(BlogRunnerError):
    """Malformed run configuration or provider document."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    MARKERS_NOT_FOUND = "MARKERS_NOT_FOUND"
    REMOTE_API_ERROR = "REMOTE_API_ERROR"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    PRECONDITION = "PRECONDITION"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map harness/httpx exceptions to ErrorCategory.
    """
    import httpx

    if isinstance(exc, PollTimeoutError):
        return ErrorCategory.TIMEOUT
    if isinstance(exc, MarkersNotFoundError):
        return ErrorCategory.MARKERS_NOT_FOUND
    if isinstance(exc, RemoteApiError):
        return ErrorCategory.REMOTE_API_ERROR
    if isinstance(exc, DuplicateKeyError):
        return ErrorCategory.DUPLICATE_KEY
    if isinstance(exc, ProbePreconditionError):
        return ErrorCategory.PRECONDITION

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT
    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR
    if isinstance(exc, TimeoutError):
        return ErrorCategory.TIMEOUT
    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Post never appeared on the homepage",
        ErrorCategory.MARKERS_NOT_FOUND: "Injected content markers were not rendered",
        ErrorCategory.REMOTE_API_ERROR: "Blog API call failed",
        ErrorCategory.DUPLICATE_KEY: "Probe recorded a result key twice",
        ErrorCategory.PRECONDITION: "Blog does not meet probe preconditions",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.UNKNOWN_ERROR: "Unexpected probe failure",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Unexpected probe failure")
