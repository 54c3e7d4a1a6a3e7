# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Post-run report: what changed in the capability document, and did anything fail.

Exit codes: 0 nothing to report, 1 changes and/or errors found, 2 fatal error.
"""

from __future__ import annotations

import argparse
import logging
import os
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage

from .capabilities import CapabilityDocument
from .log import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionChange:
    provider_id: str
    key: str
    old: str | None
    new: str | None

    @property
    def kind(self) -> str:
        if self.old is None:
            return "added"
        if self.new is None:
            return "removed"
        return "changed"

    def describe(self) -> str:
        if self.kind == "added":
            return f"{self.provider_id}/{self.key}: added {self.new!r}"
        if self.kind == "removed":
            return f"{self.provider_id}/{self.key}: removed (was {self.old!r})"
        return f"{self.provider_id}/{self.key}: {self.old!r} -> {self.new!r}"


def diff_documents(before: CapabilityDocument, after: CapabilityDocument) -> list[OptionChange]:
    changes: list[OptionChange] = []
    before_ids = before.provider_ids()
    provider_ids = before_ids + [pid for pid in after.provider_ids() if pid not in before_ids]
    for provider_id in provider_ids:
        old = before.options(provider_id) if before.find_provider(provider_id) is not None else {}
        new = after.options(provider_id) if after.find_provider(provider_id) is not None else {}
        for key in sorted(set(old) | set(new), key=str.casefold):
            if old.get(key) != new.get(key):
                changes.append(OptionChange(provider_id, key, old.get(key), new.get(key)))
    return changes


def notification_type(has_changes: bool, has_errors: bool) -> str:
    if has_changes and has_errors:
        return "changes and errors"
    return "errors" if has_errors else "changes"


def build_report_text(changes: list[OptionChange], errors: str) -> str:
    lines: list[str] = []
    if changes:
        lines.append(f"{len(changes)} option change(s):")
        lines.extend(f"  {change.describe()}" for change in changes)
    if errors:
        lines.append("Errors:")
        lines.extend(f"  {line}" for line in errors.splitlines())
    return "\n".join(lines) + "\n"


def send_notification(
    *,
    smtp_host: str,
    mail_from: str,
    mail_to: str,
    subject_kind: str,
    body: str,
    output_path: str,
    errors: str,
) -> None:
    message = EmailMessage()
    message["From"] = mail_from
    message["To"] = mail_to
    message["Subject"] = f"Blog provider {subject_kind} detected"
    message.set_content(f"{subject_kind} detected while running blog provider tests.\n\n{body}")
    with open(output_path, "rb") as fh:
        message.add_attachment(fh.read(), maintype="text", subtype="xml", filename=os.path.basename(output_path))
    if errors:
        message.add_attachment(errors, filename="errors.txt")
    with smtplib.SMTP(smtp_host) as smtp:
        smtp.send_message(message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Report capability changes and errors from a BlogRunner pass")
    parser.add_argument("input", help="Capability document before the run")
    parser.add_argument("output", help="Capability document written by the run")
    parser.add_argument("errors", help="Error log written by the run (--error-log)")
    parser.add_argument("--smtp-host", help="Send the report through this SMTP server")
    parser.add_argument("--mail-from", default="blogrunner@localhost")
    parser.add_argument("--mail-to", help="Report recipient (required with --smtp-host)")
    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        for label, path in (("input", args.input), ("output", args.output), ("errors", args.errors)):
            if not os.path.exists(path):
                raise FileNotFoundError(f"The {label} file {path} does not exist")

        with open(args.errors, encoding="utf-8", errors="replace") as fh:
            errors = fh.read().strip()
        changes = diff_documents(CapabilityDocument.load(args.input), CapabilityDocument.load(args.output))

        if not changes and not errors:
            return 0

        body = build_report_text(changes, errors)
        print(body, end="")
        if args.smtp_host:
            if not args.mail_to:
                raise ValueError("--mail-to is required with --smtp-host")
            send_notification(
                smtp_host=args.smtp_host,
                mail_from=args.mail_from,
                mail_to=args.mail_to,
                subject_kind=notification_type(bool(changes), bool(errors)),
                body=body,
                output_path=args.output,
                errors=errors,
            )
        return 1
    except Exception as exc:  # noqa: BLE001
        logger.error("%s", exc, exc_info=exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
