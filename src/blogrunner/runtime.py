# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level BlogRunner facade for a full probe pass over configured providers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from contextlib import suppress

from .blogclient import BlogClientFactory, create_blog_client
from .capabilities import CapabilityDocument
from .config import RunSettings, load_http_settings, load_run_settings
from .errors import categorize_exception
from .http.client import HttpClient, create_default_http_client
from .log import log_section
from .models import ProbeOutcome, ProviderConfig, ProviderRunReport
from .probes import Probe, RunContext, build_default_probes
from .runconfig import RunConfig
from .runner import ProbeRunner

logger = logging.getLogger(__name__)

ProbeFactory = Callable[[Iterable[str]], list[Probe]]


class BlogRunner:
    """
    Wires one homepage HTTP client and one RunContext across all providers.

    Providers are probed one at a time; a provider whose setup fails (bad
    client type, blog-id discovery error) is reported and the pass moves on.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        run_settings: RunSettings | None = None,
        client_factory: BlogClientFactory = create_blog_client,
        probe_factory: ProbeFactory = build_default_probes,
    ):
        self.http_settings = load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.run_settings = run_settings or load_run_settings()
        self.context = RunContext.from_settings(self.http_client, self.run_settings)
        self.client_factory = client_factory
        self.probe_factory = probe_factory

    def select_providers(
        self,
        document: CapabilityDocument,
        config: RunConfig,
        provider_ids: Iterable[str] | None = None,
    ) -> list[ProviderConfig]:
        """Configured providers with a test blog, in provider-document order."""
        wanted = set(provider_ids or ())
        selected: list[ProviderConfig] = []
        for provider_id in document.provider_ids():
            if wanted and provider_id not in wanted:
                continue
            provider = config.get_provider(provider_id)
            if provider is None or provider.blog is None:
                continue
            if not provider.client_type:
                provider.client_type = document.client_type(provider_id) or ""
            selected.append(provider)
        return selected

    def probe_provider(
        self,
        provider: ProviderConfig,
        document: CapabilityDocument,
    ) -> tuple[CapabilityDocument, ProviderRunReport]:
        runner = ProbeRunner(self.probe_factory(provider.exclude), self.context, self.client_factory)
        with log_section(provider.display_name):
            try:
                return runner.run_tests(provider, provider.blog, document)
            except Exception as exc:  # noqa: BLE001
                category = categorize_exception(exc)
                logger.error(
                    "Provider %s could not be probed [%s]: %s",
                    provider.display_name,
                    category.value,
                    exc,
                    exc_info=exc,
                )
                report = ProviderRunReport(provider_id=provider.id, provider_name=provider.display_name)
                report.outcomes.append(ProbeOutcome(probe="setup", error_category=category, error_message=str(exc)))
                return document, report

    def run(
        self,
        document: CapabilityDocument,
        config: RunConfig,
        provider_ids: Iterable[str] | None = None,
        *,
        on_provider: Callable[[ProviderConfig], None] | None = None,
    ) -> tuple[CapabilityDocument, list[ProviderRunReport]]:
        reports: list[ProviderRunReport] = []
        for provider in self.select_providers(document, config, provider_ids):
            if on_provider is not None:
                on_provider(provider)
            document, report = self.probe_provider(provider, document)
            reports.append(report)
        return document, reports

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> BlogRunner:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["BlogRunner", "ProbeFactory"]
