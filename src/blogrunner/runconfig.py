# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run configuration: which providers to probe, with which test blog and exclusions."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from lxml import etree

from .capabilities import CapabilityDocument
from .errors import ConfigError
from .models import BlogConfig, ProviderConfig

logger = logging.getLogger(__name__)


def _text(element: etree._Element, name: str) -> str | None:
    child = element.find(name)
    if child is None or child.text is None:
        return None
    value = child.text.strip()
    return value or None


def _parse_blog(element: etree._Element | None, provider_id: str) -> BlogConfig | None:
    if element is None:
        return None
    homepage_url = _text(element, "homepageUrl")
    api_url = _text(element, "apiUrl")
    if not homepage_url or not api_url:
        raise ConfigError(f"Provider {provider_id}: <blog> needs both homepageUrl and apiUrl")
    return BlogConfig(
        homepage_url=homepage_url,
        api_url=api_url,
        username=_text(element, "username") or "",
        password=_text(element, "password") or "",
        blog_id=_text(element, "blogId"),
    )


def _parse_provider(element: etree._Element) -> ProviderConfig:
    provider_id = _text(element, "id")
    if not provider_id:
        raise ConfigError("Run configuration has a <provider> without an <id>")
    return ProviderConfig(
        id=provider_id,
        name=_text(element, "name") or "",
        blog=_parse_blog(element.find("blog"), provider_id),
        exclude=[el.text.strip() for el in element.findall("exclude") if el.text and el.text.strip()],
    )


@dataclass
class RunConfig:
    providers: list[ProviderConfig] = field(default_factory=list)

    def get_provider(self, provider_id: str) -> ProviderConfig | None:
        for provider in self.providers:
            if provider.id == provider_id:
                return provider
        return None

    @classmethod
    def parse(cls, data: bytes | str) -> RunConfig:
        if isinstance(data, str):
            data = data.encode("utf-8")
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as exc:
            raise ConfigError(f"Malformed run configuration: {exc}") from exc
        if root.tag != "config":
            raise ConfigError(f"Expected <config> root element, found <{root.tag}>")
        return cls(providers=[_parse_provider(el) for el in root.findall("providers/provider")])


def resolve_client_types(config: RunConfig, providers: CapabilityDocument) -> RunConfig:
    """Copy each provider's ``clientType`` from the provider document; unknown ids are fatal."""
    for provider in config.providers:
        if providers.find_provider(provider.id) is None:
            logger.error("Unknown provider ID: %s", provider.id)
            raise ConfigError(f"Unknown provider ID: {provider.id}")
        provider.client_type = providers.client_type(provider.id) or ""
        if not provider.name:
            provider.name = providers.provider_name(provider.id) or ""
    return config


def load_run_config(path: str | os.PathLike[str], providers: CapabilityDocument) -> RunConfig:
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as exc:
        raise ConfigError(f"Cannot read run configuration {os.fspath(path)}: {exc}") from exc
    return resolve_client_types(RunConfig.parse(data), providers)


__all__ = ["RunConfig", "load_run_config", "resolve_client_types"]
