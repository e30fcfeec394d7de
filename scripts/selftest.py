#!/usr/bin/env python3
"""Send a test alert to Alertmanager using the configured adapter settings.

Usage::

    # Test alert with config/settings.yaml defaults
    python scripts/selftest.py

    # Custom config file, extra labels
    python scripts/selftest.py --config config/prod.yaml \\
        --label severity=page --annotation summary="test from ops"
"""

from __future__ import annotations

import argparse
import asyncio
import sys

import structlog

from amnotify.alertmanager.exceptions import AlertmanagerError
from amnotify.alertmanager.service import AlertmanagerService
from amnotify.core.config import load_settings
from amnotify.core.logging import setup_logging

logger = structlog.get_logger(__name__)


def _split_pairs(raw: list[str], flag: str) -> tuple[list[str], list[str]]:
    names: list[str] = []
    values: list[str] = []
    for item in raw:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise SystemExit(f"{flag} expects name=value, got {item!r}")
        names.append(name)
        values.append(value)
    return names, values


async def run(args: argparse.Namespace) -> int:
    """Build the test alert from settings plus CLI overrides and send it."""
    settings = load_settings(args.config)
    setup_logging(level=args.log_level)

    async with AlertmanagerService(settings.alertmanager) as service:
        options = service.test_options()
        if args.room:
            options.room = args.room
        if args.label:
            options.label_names, options.label_values = _split_pairs(args.label, "--label")
        if args.annotation:
            options.annotation_names, options.annotation_values = _split_pairs(
                args.annotation, "--annotation"
            )

        logger.info(
            "selftest_starting",
            room=options.room,
            labels=len(options.label_names),
            annotations=len(options.annotation_names),
        )
        try:
            await service.test(options)
        except AlertmanagerError as exc:
            logger.error("selftest_failed", error=str(exc), error_type=type(exc).__name__)
            print(f"Self-test failed: {exc}", file=sys.stderr)
            return 1

    logger.info("selftest_ok")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Alertmanager adapter self-test")
    parser.add_argument("--config", default=None, help="Path to settings YAML")
    parser.add_argument("--log-level", default=None, help="Override log level")
    parser.add_argument("--room", default=None, help="Override the default room")
    parser.add_argument(
        "--label", action="append", default=[], metavar="NAME=VALUE",
        help="Label to attach (repeatable; replaces configured test labels)",
    )
    parser.add_argument(
        "--annotation", action="append", default=[], metavar="NAME=VALUE",
        help="Annotation to attach (repeatable; replaces configured test annotations)",
    )
    args = parser.parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
