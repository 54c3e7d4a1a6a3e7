# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""BlogRunner CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from ..capabilities import CapabilityDocument
from ..config import load_run_settings
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import ProviderConfig, ProviderRunReport
from ..runconfig import load_run_config
from ..runtime import BlogRunner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Probe blog providers for optional features and update the provider capability document",
    )
    parser.add_argument("provider_ids", nargs="*", metavar="PROVIDER_ID", help="Only probe these providers")
    parser.add_argument("--providers", required=True, help="Path to the provider capability document (BlogProviders.xml)")
    parser.add_argument("--config", required=True, help="Path to the BlogRunner run configuration")
    parser.add_argument("--output", help="Path to write the updated document (default: the --providers path)")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--error-log", help="Also log errors to the specified file")
    parser.add_argument("--pause", action="store_true", help="Pause before exiting")
    parser.add_argument("--no-cleanup", action="store_true", help="Leave published test posts on the blogs")
    parser.add_argument("--json", action="store_true", help="Print per-provider run reports as JSON")
    return parser


def _print_provider(provider: ProviderConfig) -> None:
    homepage = provider.blog.homepage_url if provider.blog else ""
    print(f"{provider.display_name} ({homepage})")


def _print_summary(reports: list[ProviderRunReport]) -> None:
    for report in reports:
        failures = report.failures
        print(f"{report.provider_name}: {len(report.outcomes)} probe(s), {len(failures)} failed")
        for outcome in report.outcomes:
            for key, value in outcome.results.items():
                print(f"  {key}: {value}")
        for outcome in failures:
            print(f"  [{outcome.error_category.value}] {outcome.probe}: {outcome.error_message}")


def _print_json(reports: list[ProviderRunReport]) -> None:
    payload: list[dict[str, Any]] = [report.to_dict() for report in reports]
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pause() -> None:
    print()
    print()
    try:
        input("Press Enter to continue...")
    except EOFError:
        pass


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None, error_log=args.error_log)

    try:
        output_path = args.output or args.providers
        document = CapabilityDocument.load(args.providers)
        config = load_run_config(args.config, document)

        settings = load_run_settings()
        if args.no_cleanup:
            settings.clean_up_posts = False

        http_client = create_default_http_client()
        with BlogRunner(http_client=http_client, run_settings=settings) as runner:
            document, reports = runner.run(document, config, args.provider_ids, on_provider=_print_provider)

        document.write(output_path)
        if args.json:
            _print_json(reports)
        else:
            _print_summary(reports)
        return 0
    except Exception as exc:  # noqa: BLE001
        logger.error("%s", exc, exc_info=exc)
        return 1
    finally:
        if args.pause:
            _pause()


if __name__ == "__main__":
    raise SystemExit(main())
