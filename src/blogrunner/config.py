# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for BlogRunner."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"BlogRunner/{__version__} (blog provider capability probe)"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults for homepage fetches."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("BLOGRUNNER_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=_float_env("BLOGRUNNER_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("BLOGRUNNER_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("BLOGRUNNER_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("BLOGRUNNER_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


@dataclass
class RunSettings:
    """Probe pass defaults: homepage polling and post cleanup."""

    poll_timeout: float = 120.0
    poll_interval: float = 1.0
    clean_up_posts: bool = True

    @classmethod
    def from_env(cls) -> "RunSettings":
        poll_timeout = _float_env("BLOGRUNNER_POLL_TIMEOUT", cls.poll_timeout)
        if poll_timeout < 0:
            poll_timeout = cls.poll_timeout
        poll_interval = _float_env("BLOGRUNNER_POLL_INTERVAL", cls.poll_interval)
        if poll_interval < 0:
            poll_interval = cls.poll_interval
        return cls(
            poll_timeout=poll_timeout,
            poll_interval=poll_interval,
            clean_up_posts=_bool_env("BLOGRUNNER_CLEAN_UP_POSTS", cls.clean_up_posts),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_run_settings() -> RunSettings:
    """Load probe pass settings from environment with sensible defaults."""
    return RunSettings.from_env()
