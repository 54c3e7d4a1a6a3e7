# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
BlogRunner package entrypoint.

BlogRunner probes live blog providers over their remote posting APIs to find
out which optional features each one really supports (embeds, scripts, empty
titles, future-dated and draft posts, multiple categories, title encoding),
and records the answers in the provider capability document. Homepage HTTP
and the blog API are both injectable, so probes run against fakes in tests.
"""

from .blogclient import BlogClient, BlogCredentials, create_blog_client
from .capabilities import CapabilityDocument
from .config import HttpSettings, RunSettings, load_http_settings, load_run_settings
from .errors import (
    BlogRunnerError,
    ConfigError,
    DuplicateKeyError,
    ErrorCategory,
    MarkersNotFoundError,
    PollTimeoutError,
    RemoteApiError,
)
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, create_default_http_client
from .log import setup_logging
from .markers import new_marker
from .models import BlogConfig, BlogPost, ProviderConfig, ProviderRunReport, ResultSink
from .probes import Probe, RunContext, build_default_probes
from .runconfig import RunConfig, load_run_config
from .runner import ProbeRunner
from .runtime import BlogRunner
from .version import __version__

__all__ = [
    "BlogClient",
    "BlogConfig",
    "BlogCredentials",
    "BlogPost",
    "BlogRunner",
    "BlogRunnerError",
    "CapabilityDocument",
    "ConfigError",
    "DuplicateKeyError",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "MarkersNotFoundError",
    "PollTimeoutError",
    "Probe",
    "ProbeRunner",
    "ProviderConfig",
    "ProviderRunReport",
    "RemoteApiError",
    "ResultSink",
    "RunConfig",
    "RunContext",
    "RunSettings",
    "build_default_probes",
    "create_blog_client",
    "create_default_http_client",
    "load_http_settings",
    "load_run_config",
    "load_run_settings",
    "new_marker",
    "setup_logging",
    "__version__",
]
