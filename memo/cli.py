"""CLI: command-line interface for memo."""

import argparse
import sys
from datetime import date

from memo.app import App
from memo.config import ConfigError, parse_date
from memo.models import SessionConfig
from memo.render import render_link, render_table
from memo.session import ReviewDateError
from memo.store import StoreError


def _date_arg(text: str) -> date:
    try:
        return parse_date(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _count_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="memo", description="Scientific memorizing helper.")
    parser.add_argument("-s", "--subject", help="Only review notes in this subject folder")
    parser.add_argument("--dry", action="store_true",
                        help="Show what would be reviewed without saving")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--top", nargs="?", type=_count_arg, const=-1, metavar="N",
                      help="Pick the N highest-weight notes (default: files_per_day)")
    mode.add_argument("--weighted", action="store_true",
                      help="Draw notes at random in proportion to their weight")
    parser.add_argument("--count", type=_count_arg,
                        help="Notes per day for random draws (default: files_per_day)")
    parser.add_argument("--date", type=_date_arg, metavar="YYYY-MM-DD",
                        help="Pretend today is this date")
    parser.add_argument("--seed", type=int, help="Seed for the random draw")
    parser.add_argument("--list", action="store_true",
                        help="Print the weight table before selecting")
    parser.add_argument("--prune", action="store_true",
                        help="Forget notes that no longer exist in the vault")
    parser.add_argument("--plain", action="store_true",
                        help="Print note names without terminal hyperlinks")
    return parser


def cmd_review(args, app: App):
    count = args.count if args.count is not None else app.settings["files_per_day"]
    top_n = None
    if args.top is not None:
        top_n = count if args.top == -1 else args.top

    config = SessionConfig(
        today=args.date or date.today(),
        dry=args.dry,
        top_n=top_n,
        count=count,
        subject=args.subject,
        weighted=args.weighted,
        seed=args.seed,
        prune=args.prune,
    )
    result = app.review(config)

    if args.list:
        pool = [s for s in result.scored
                if config.subject is None or s.record.subject == config.subject]
        for line in render_table(pool):
            print(line)
        print(f"{result.pool_size} note(s) in pool\n")

    for record in result.pruned:
        print(f"Pruned {record.path}")

    if not result.chosen:
        print("Nothing to review.")
    hyperlink = not args.plain and sys.stdout.isatty()
    for s in result.chosen:
        print(render_link(s.record.path, app.vault_name, hyperlink=hyperlink))

    if not result.committed:
        print(f"\nDry run: {app.store_path} not updated.")


def main():
    parser = build_parser()
    args = parser.parse_args()

    try:
        app = App()
        if not app.vault_dir.is_dir():
            print(f"Error: vault directory {app.vault_dir} does not exist", file=sys.stderr)
            sys.exit(1)
        cmd_review(args, app)
    except (ConfigError, StoreError, ReviewDateError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
