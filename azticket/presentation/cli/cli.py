"""
CLI Module

Architectural Intent:
- Command-line interface for azticket
- Entry point for all user interactions
- Delegates to application use cases via composition root
- Supports --verbose/--debug flags for log level control
- Wraps each command in a telemetry span when an OTLP endpoint is configured

Commands:
  create            File a ticket from flags, prompting for anything missing
  guided            Reduced-field interactive entry (also: azticket-guided)
  services          List support services
  classifications   List problem classifications of one service
"""

import argparse
import asyncio
import json
import sys
import time
import traceback
from typing import NoReturn, Optional, Sequence

from azticket import composition_root
from azticket.application.dtos.ticket_dtos import TicketOptions
from azticket.domain.entities.ticket import TicketResult
from azticket.domain.errors import TicketWorkflowError
from azticket.infrastructure.config import load_config
from azticket.infrastructure.logging import configure_logging, resolve_level

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="azticket",
        description="azticket: guided Azure support ticket creation",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs as JSON lines on stderr"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to JSON config (default: azticket.json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    create_parser = subparsers.add_parser("create", help="Create a support ticket")
    create_parser.add_argument(
        "--subscription-id", help="Subscription GUID (default: current az account)"
    )
    create_parser.add_argument(
        "--dry-run", action="store_true", help="Preview the request without creating a ticket"
    )
    create_parser.add_argument(
        "--severity",
        help="1|A|B|C|critical|moderate|minimal|highest-critical (prompted if omitted)",
    )
    create_parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="Never prompt; service and classification need an id or pattern",
    )
    create_parser.add_argument("--service-id", help="Full service resource id")
    create_parser.add_argument(
        "--service-pattern", help="Case-insensitive substring of the service name"
    )
    create_parser.add_argument(
        "--classification-id", help="Full problem classification resource id"
    )
    create_parser.add_argument(
        "--classification-pattern",
        help="Case-insensitive substring of the problem classification name",
    )
    create_parser.add_argument(
        "--auto-pick-first",
        action="store_true",
        help="Use the first match when a pattern matches several entries",
    )
    create_parser.add_argument("--title", help="Ticket title")
    create_parser.add_argument("--description", help="Ticket description")
    create_parser.add_argument("--contact-first-name")
    create_parser.add_argument("--contact-last-name")
    create_parser.add_argument("--contact-email")
    create_parser.add_argument("--contact-phone")
    create_parser.add_argument("--contact-country", help="2- or 3-letter country code")
    create_parser.add_argument("--contact-timezone", help="Zone name or abbreviation (PST, CET...)")
    create_parser.add_argument("--contact-language", help="Language tag (default: en-US)")
    create_parser.add_argument(
        "--contact-method", choices=["email", "phone"], help="Preferred contact method"
    )
    create_parser.add_argument("--output-file", help="Write the ticket result as JSON")

    guided_parser = subparsers.add_parser(
        "guided", help="Answer a few questions and pick service/classification from menus"
    )
    guided_parser.add_argument(
        "--dry-run", action="store_true", help="Preview the request without creating a ticket"
    )
    guided_parser.add_argument("--output-file", help="Write the ticket result as JSON")

    subparsers.add_parser("services", help="List support services")

    classifications_parser = subparsers.add_parser(
        "classifications", help="List problem classifications of a service"
    )
    classifications_parser.add_argument(
        "--service-name", "-s", required=True, help="Service short name (see 'services')"
    )

    return parser


def _options_from_args(args: argparse.Namespace) -> TicketOptions:
    return TicketOptions(
        subscription_id=args.subscription_id,
        severity=args.severity,
        service_id=args.service_id,
        service_pattern=args.service_pattern,
        classification_id=args.classification_id,
        classification_pattern=args.classification_pattern,
        title=args.title,
        description=args.description,
        contact_first_name=args.contact_first_name,
        contact_last_name=args.contact_last_name,
        contact_email=args.contact_email,
        contact_phone=args.contact_phone,
        contact_country=args.contact_country,
        contact_timezone=args.contact_timezone,
        contact_language=args.contact_language,
        contact_method=args.contact_method,
        non_interactive=args.non_interactive,
        auto_pick_first=args.auto_pick_first,
        dry_run=args.dry_run,
    )


def _report_result(
    container, command: str, result: TicketResult, output_file: Optional[str]
) -> None:
    container.telemetry.record_ticket_outcome(command, result)
    if result.dry_run:
        print("[*] Dry run: no ticket was created. Request preview:")
        print(json.dumps(result.payload, indent=2))
        request = container.file_ticket.request
        if request is not None:
            arguments = container.submitter.build_arguments(
                request.with_ticket_name(result.ticket_id)
            )
            print(f"[*] Command: {container.provider.format_create_command(arguments)}")
    else:
        print(f"[+] Support ticket created: {result.ticket_id} (status: {result.status})")

    if output_file:
        path = container.result_repository.save(result, output_file)
        print(f"[*] Result written to {path}")


def _fail(message: str, verbose: bool, hint: Optional[str] = None) -> NoReturn:
    print(f"[-] {message}")
    if hint:
        print(f"[*] Hint: {hint}")
    if verbose:
        traceback.print_exc()
    sys.exit(EXIT_FAILURE)


async def _dispatch(container, args: argparse.Namespace, verbose: bool) -> None:
    if args.command == "services":
        services = await container.list_services.execute()
        for service in services:
            print(f"{service.id}\t{service.short_name}\t{service.display_name}")

    elif args.command == "classifications":
        classifications = await container.list_classifications.execute(args.service_name)
        for classification in classifications:
            print(f"{classification.id}\t{classification.display_name}")

    elif args.command == "guided":
        result = await container.guided_entry.execute(dry_run=args.dry_run)
        _report_result(container, args.command, result, args.output_file)

    elif args.command == "create":
        try:
            options = _options_from_args(args)
        except ValueError as e:
            _fail(str(e), verbose)
        print("[*] Preparing Azure support ticket...")
        result = await container.file_ticket.execute(options)
        _report_result(container, args.command, result, args.output_file)


async def async_main(argv: Optional[Sequence[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"[-] Invalid configuration: {e}")
        sys.exit(EXIT_FAILURE)

    configure_logging(
        level=resolve_level(args.debug, args.verbose, config.log_level),
        json_format=args.json_logs or config.json_logs,
    )
    verbose = args.verbose or args.debug

    if args.command is None:
        parser.print_help()
        return

    container = composition_root.create_container(config)
    telemetry = container.telemetry
    await telemetry.initialize()
    span = telemetry.start_span(f"azticket.{args.command}")
    started = time.monotonic()
    error: Optional[BaseException] = None

    try:
        await _dispatch(container, args, verbose)
    except TicketWorkflowError as e:
        error = e
        telemetry.record_failure(args.command, e, container.file_ticket.state.name)
        prefix = "Ticket creation failed: " if args.command == "guided" else ""
        _fail(f"{prefix}{e}", verbose, getattr(e, "hint", None))
    except (KeyboardInterrupt, EOFError) as e:
        error = e
        print("\n[*] Aborted.")
        sys.exit(EXIT_INTERRUPTED)
    except OSError as e:
        error = e
        _fail(f"Could not write output: {e}", verbose)
    finally:
        telemetry.record_duration(args.command, (time.monotonic() - started) * 1000)
        telemetry.end_span(span, error)
        await telemetry.export()


def _run(argv: Optional[Sequence[str]] = None) -> None:
    try:
        asyncio.run(async_main(argv))
    except KeyboardInterrupt:
        print("\n[*] Aborted.")
        sys.exit(EXIT_INTERRUPTED)


def main():
    _run()


def guided_main():
    _run(["guided", *sys.argv[1:]])


if __name__ == "__main__":
    main()
