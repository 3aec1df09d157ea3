"""
CLI for managing chores stored in the local JSON file.

Usage:
    chores list --filter uncompleted
    chores add "Water the plants" --deadline 2026-10-25
    chores toggle "Water the plants" --deadline 2026-10-25
    chores menu
"""

import argparse
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from chore_tracker import logging_setup
from chore_tracker.domain.chore import ChoreFilter
from chore_tracker.exceptions import ChoreError
from chore_tracker.interactive.menu import ChoreMenu
from chore_tracker.repositories.file import FileChoreRepository
from chore_tracker.services.chore_service import ChoreService
from chore_tracker.services.report import chores_to_frame, summarize
from chore_tracker.settings import get_settings

logger = logging.getLogger(__name__)


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    cfg = get_settings()

    parser = argparse.ArgumentParser(
        prog="chores",
        description="Track personal chores in a JSON file."
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=cfg.chores_path,
        help="Path to the chore file (.json)"
    )
    parser.add_argument(
        "--log-level",
        default=cfg.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List chores")
    list_cmd.add_argument(
        "--filter",
        choices=[f.value for f in ChoreFilter],
        default=ChoreFilter.ALL.value,
        help="Which chores to show"
    )

    for name, help_text in [
        ("add", "Add a chore"),
        ("toggle", "Mark a chore completed or pending"),
        ("delete", "Delete a chore"),
        ("edit", "Change a chore's description or deadline"),
    ]:
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("description", help="Chore description")
        cmd.add_argument("--deadline", type=_iso_date, required=True, help="Deadline (YYYY-MM-DD)")
        if name == "edit":
            cmd.add_argument("--new-description", default=None, help="Replacement description")
            cmd.add_argument("--new-deadline", type=_iso_date, default=None, help="Replacement deadline")

    sub.add_parser("summary", help="Show completed/pending/overdue counts")
    sub.add_parser("menu", help="Interactive menu")

    return parser


def run_command(args: argparse.Namespace, service: ChoreService) -> int:
    if args.command == "menu":
        return ChoreMenu(service).run()

    service.load_chores()

    if args.command == "list":
        chores = service.filter_chores(ChoreFilter(args.filter))
        if chores:
            print(chores_to_frame(chores).to_string(index=False))
        else:
            print("No chores found.")
        return 0

    if args.command == "summary":
        for key, value in summarize(service.chores, service.today()).items():
            print(f"{key:10s}: {value}")
        return 0

    if args.command == "add":
        service.add_chore(args.description, args.deadline)
    elif args.command == "toggle":
        service.toggle_chore(args.description, args.deadline)
    elif args.command == "delete":
        service.delete_chore(args.description, args.deadline)
    elif args.command == "edit":
        service.edit_chore(
            args.description,
            args.deadline,
            new_description=args.new_description,
            new_deadline=args.new_deadline,
        )

    if not service.save_chores():
        print(f"Could not save chores to {args.file}")
        return 1

    print(f"Chore '{args.description}' updated ({args.command})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging_setup.setup_logging(args.log_level)

    service = ChoreService(FileChoreRepository(args.file))
    try:
        return run_command(args, service)
    except ChoreError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
