# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run a provider's probes with per-probe failure isolation and merge the results."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .blogclient import BlogClient, BlogClientFactory, BlogCredentials, create_blog_client
from .capabilities import CapabilityDocument
from .errors import categorize_exception
from .models import BlogConfig, ProbeOutcome, ProviderConfig, ProviderRunReport, ResultSink
from .probes import Probe, RunContext

logger = logging.getLogger(__name__)


class ProbeRunner:
    """
    Runs probes one after another against a single provider's blog.

    Probes share the blog client and run strictly in sequence. A probe that
    raises is reported and skipped; its siblings still run.
    """

    def __init__(
        self,
        probes: Iterable[Probe],
        context: RunContext,
        client_factory: BlogClientFactory = create_blog_client,
    ):
        self.probes: list[Probe] = list(probes)
        self.context = context
        self.client_factory = client_factory

    def _create_client(self, provider: ProviderConfig, blog: BlogConfig, credentials: BlogCredentials) -> BlogClient:
        return self.client_factory(provider.client_type, blog.api_url, credentials, blog.blog_id)

    def connect(self, provider: ProviderConfig, blog: BlogConfig) -> BlogClient:
        """
        Create the provider's client, discovering the blog id when unset.

        Some clients need the blog id at construction time, so the client is
        re-created once the id is known.
        """
        credentials = BlogCredentials(username=blog.username, password=blog.password)
        client = self._create_client(provider, blog, credentials)
        if blog.blog_id is None:
            blogs = client.list_my_blogs()
            if len(blogs) == 1:
                blog.blog_id = blogs[0].id
                logger.debug("Discovered blog id %s for %s", blog.blog_id, provider.display_name)
                client = self._create_client(provider, blog, credentials)
            else:
                logger.warning(
                    "Could not pick a blog id for %s: account lists %d blogs",
                    provider.display_name,
                    len(blogs),
                )
        return client

    def run_tests(
        self,
        provider: ProviderConfig,
        blog: BlogConfig,
        document: CapabilityDocument,
    ) -> tuple[CapabilityDocument, ProviderRunReport]:
        """Return the document with this provider's results merged in, plus a run report."""
        if provider is None:
            raise ValueError("provider is required")
        if blog is None:
            raise ValueError("blog is required")

        client = self.connect(provider, blog)
        report = ProviderRunReport(provider_id=provider.id, provider_name=provider.display_name)
        collected: list[ResultSink] = []

        for probe in self.probes:
            name = type(probe).__name__
            logger.info("Running probe %s", name)
            try:
                results = probe.run(blog, client, self.context)
            except Exception as exc:  # noqa: BLE001
                category = categorize_exception(exc)
                logger.error(
                    "Probe %s failed for provider %s [%s]: %s",
                    name,
                    provider.display_name,
                    category.value,
                    exc,
                    exc_info=exc,
                )
                report.outcomes.append(ProbeOutcome(probe=name, error_category=category, error_message=str(exc)))
                continue
            logger.debug("Probe %s results:\n%s", name, results.dump())
            report.outcomes.append(ProbeOutcome(probe=name, results=results.to_dict()))
            collected.append(results)

        for results in collected:
            document = document.merge(provider.id, results)
        return document, report


__all__ = ["ProbeRunner"]
