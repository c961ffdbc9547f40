# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: CLI commands (add, list, delete, edit).
Thin console layer — parses arguments, delegates ALL logic to ScheduleService,
maps store errors to a message on stderr plus exit code 1.
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from scheduler.core.dependencies import get_schedule_service
from scheduler.core.errors import StoreError
from scheduler.core.logging import get_logger
from scheduler.services.schedule_service import ScheduleService

logger = get_logger(__name__)

PROG = "scheduler"

USAGE = (
    f"Usage: {PROG} <command> [arguments]\n"
    "Commands:\n"
    "  add <title> <time> [details]          Add a new schedule\n"
    "  list                                  List all schedules\n"
    "  delete <id>                           Remove a schedule\n"
    "  edit <id> <title> <time> [details]    Edit a schedule"
)

EXIT_OK = 0
EXIT_FAILURE = 1


class UsageError(Exception):
    """Bad command-line arguments for a known command."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise UsageError(message)


# ── Parsers ──

def _add_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=f"{PROG} add", description="Add a new schedule")
    parser.add_argument("title", help="Schedule title")
    parser.add_argument("time", help="Schedule time (free-form)")
    parser.add_argument("details", nargs="?", default=None, help="Optional details")
    return parser


def _list_parser() -> argparse.ArgumentParser:
    return _ArgumentParser(prog=f"{PROG} list", description="List all schedules")


def _delete_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=f"{PROG} delete", description="Remove a schedule")
    parser.add_argument("id", type=int, help="Schedule id")
    return parser


def _edit_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=f"{PROG} edit", description="Edit a schedule")
    parser.add_argument("id", type=int, help="Schedule id")
    parser.add_argument("title", help="New title")
    parser.add_argument("time", help="New time (free-form)")
    parser.add_argument("details", nargs="?", default=None, help="New details")
    return parser


# ── Handlers ──

def _handle_add(service: ScheduleService, args: argparse.Namespace) -> None:
    schedule = service.add_schedule(args.title, args.time, args.details)
    print(f"Schedule {schedule.id} added")


def _handle_list(service: ScheduleService, args: argparse.Namespace) -> None:
    for s in service.list_schedules():
        print(f"{s.id}: {s.title} ({s.time})")


def _handle_delete(service: ScheduleService, args: argparse.Namespace) -> None:
    service.delete_schedule(args.id)
    print(f"Schedule {args.id} deleted")


def _handle_edit(service: ScheduleService, args: argparse.Namespace) -> None:
    service.edit_schedule(args.id, args.title, args.time, args.details)
    print(f"Schedule {args.id} updated")


Handler = Callable[[ScheduleService, argparse.Namespace], None]

# command -> (parser factory, handler, action label used in failure messages)
COMMANDS: dict[str, tuple[Callable[[], argparse.ArgumentParser], Handler, str]] = {
    "add": (_add_parser, _handle_add, "Add"),
    "list": (_list_parser, _handle_list, "List"),
    "delete": (_delete_parser, _handle_delete, "Delete"),
    "edit": (_edit_parser, _handle_edit, "Edit"),
}


def run(argv: Sequence[str], path: Optional[Union[str, Path]] = None) -> int:
    """Execute one CLI invocation and return the process exit code."""
    service = get_schedule_service(path)

    try:
        service.prepare_storage()
    except StoreError as exc:
        logger.debug("Storage initialization failed", exc_info=exc, extra={"operation": exc.operation})
        print(f"Failed to initialize storage: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if not argv:
        print(USAGE)
        return EXIT_OK

    command, rest = argv[0], list(argv[1:])
    entry = COMMANDS.get(command)
    if entry is None:
        print(f"Unknown command: {command}")
        return EXIT_OK

    parser_factory, handler, action = entry
    parser = parser_factory()
    # all arguments are positional, so free-form text may start with "-"
    if rest[:1] == ["--"]:
        rest = rest[1:]
    if rest:
        rest = ["--", *rest]
    try:
        args = parser.parse_args(rest)
    except UsageError as exc:
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        handler(service, args)
    except StoreError as exc:
        logger.debug(
            "%s failed",
            action,
            exc_info=exc,
            extra={"operation": exc.operation, "schedule_id": exc.schedule_id},
        )
        print(f"{action} failed: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK
