import argparse
import logging
import sys
from pathlib import Path

from habits.domain.WeekKey import WeekKey
from habits.domain.errors import WeekStoreError
from habits.events.Event_Bus import EventBus
from habits.events.status_observers import StatusLog
from habits.infra.Week_Repository import WeekStore
from habits.infra.paths import DATA_DIR
from habits.infra.pdf_utils import generate_pdf_for_week
from habits.logic.commands.command_dispatcher import CommandDispatcher, Session
from habits.ui.tui import HabitTrackerApp
from habits.utilities.constants import APP_NAME, APP_VERSION
from habits.utilities.logger import setup_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Weekly habit checklist in the terminal.")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR,
                        help=f"directory holding one JSON file per ISO week (default: {DATA_DIR})")
    parser.add_argument("--week", type=WeekKey.parse, default=None, metavar="YYYY-Www",
                        help="open this ISO week instead of the current one")
    parser.add_argument("--export-pdf", type=Path, default=None, metavar="FILE",
                        help="write the week as a printable PDF and exit")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger()
    store = WeekStore(args.data_dir)

    # Without a readable week there is nothing to show
    try:
        session = Session.start(store, args.week)
    except WeekStoreError as e:
        logger.error(f"Startup aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.export_pdf is not None:
        args.export_pdf.write_bytes(generate_pdf_for_week(session.grid, session.key))
        logger.info(f"Exported week {session.key} to {args.export_pdf}")
        print(f"Week {session.key} written to {args.export_pdf}")
        return 0

    bus = EventBus()
    status_log = StatusLog().attach(bus)
    HabitTrackerApp(CommandDispatcher(session, bus), status_log).run()
    logger.info("Session ended")
    return 0


if __name__ == "__main__":
    sys.exit(main())
