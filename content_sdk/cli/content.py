"""CLI for checking field values and querying the content service.

Usage::

    # Check a value against the field rules (no network)
    python -m content_sdk.cli validate subdomain my-wedding
    python -m content_sdk.cli validate title "  Our Big Day  "

    # Ask the service whether a subdomain is free
    python -m content_sdk.cli check-subdomain my-wedding --session-id 0b6a...

    # Show a published event the way a guest would see it
    python -m content_sdk.cli get-event my-wedding
    python -m content_sdk.cli get-event my-wedding --json

The service location comes from ``CONTENT_SERVICE_SCHEME`` and
``CONTENT_SERVICE_HOST`` (see :class:`content_sdk.config.settings.Settings`).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Callable
from enum import Enum
from typing import Any

import httpx

from content_sdk.config.settings import Settings
from content_sdk.models.entities import Event
from content_sdk.models.session import SessionToken
from content_sdk.utils.errors import ContentError
from content_sdk.utils.logging import configure_logging
from content_sdk.utils.validators import classify_address, classify_subdomain, classify_title

_CLASSIFIERS: dict[str, Callable[[Any], Enum]] = {
    "title": classify_title,
    "address": classify_address,
    "subdomain": classify_subdomain,
}


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _format_event(event: Event) -> str:
    """Render a short human-readable summary of *event*."""
    held = sum(1 for details in event.sub_event_details if details.have_event)
    lines = [
        f"Event #{event.id}: {event.title}",
        f"  Subdomain:    {event.sub_domain}",
        f"  State:        {event.state.name}",
        f"  Plan:         {event.plan.value}",
        f"  Pictures:     {len(event.picture_set.pictures)}",
        f"  Sub-events:   {held} of {len(event.sub_event_details)} held",
        f"  Looks active: {'yes' if event.does_look_active else 'no'}",
        f"  Updated:      {event.time_last_updated.isoformat()}",
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def _handle_validate(args: argparse.Namespace) -> int:
    """Classify a value against the rules for its field."""
    reason = _CLASSIFIERS[args.field](args.value)
    print(reason.value)
    return 0 if reason.value == "OK" else 1


async def _handle_check_subdomain(args: argparse.Namespace) -> int:
    """Ask the private API whether a subdomain is free."""
    from content_sdk.providers.content.http_client import new_content_private_client

    app_settings = Settings()
    async with httpx.AsyncClient() as client:
        content = new_content_private_client(app_settings, client)
        if args.session_id:
            content = content.with_context(SessionToken(session_id=args.session_id))
        try:
            available = await content.check_subdomain_available(args.subdomain)
        except ContentError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    print(f"{args.subdomain}: {'available' if available else 'taken'}")
    return 0


async def _handle_get_event(args: argparse.Namespace) -> int:
    """Fetch and print a published event by subdomain."""
    from content_sdk.providers.content.http_client import new_content_public_client

    app_settings = Settings()
    async with httpx.AsyncClient() as client:
        content = new_content_public_client(app_settings, client)
        try:
            event = await content.get_event_by_subdomain(args.subdomain)
        except ContentError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    if args.json:
        print(event.model_dump_json(by_alias=True, indent=2))
    else:
        print(_format_event(event))
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the content CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m content_sdk.cli",
        description="Validate event fields and query the content service.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Content commands")

    # -- validate --
    validate_parser = subparsers.add_parser(
        "validate", help="Check a value against a field's rules"
    )
    validate_parser.add_argument("field", choices=sorted(_CLASSIFIERS), help="Field to check")
    validate_parser.add_argument("value", help="Value to check")

    # -- check-subdomain --
    check_parser = subparsers.add_parser(
        "check-subdomain", help="Ask whether a subdomain is available"
    )
    check_parser.add_argument("subdomain", help="Subdomain to look up")
    check_parser.add_argument(
        "--session-id",
        default=None,
        help="Session id to send as explicit call context",
    )

    # -- get-event --
    get_parser = subparsers.add_parser(
        "get-event", help="Show the public event for a subdomain"
    )
    get_parser.add_argument("subdomain", help="Subdomain of the event")
    get_parser.add_argument(
        "--json", action="store_true", help="Print the event as JSON"
    )

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the content tool."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    configure_logging(Settings().log_level)

    if args.command == "validate":
        exit_code = _handle_validate(args)
    elif args.command == "check-subdomain":
        exit_code = asyncio.run(_handle_check_subdomain(args))
    elif args.command == "get-event":
        exit_code = asyncio.run(_handle_get_event(args))
    else:
        parser.print_help()
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
