"""Console application module."""
import argparse
from pathlib import Path

from oes.eventdesk.config import CommandLineConfig, get_config
from oes.eventdesk.log import setup_logging
from oes.eventdesk.menu import run_menu
from oes.eventdesk.services.event import EventStore


def main():
    """Main entry point."""
    args = parse_args()
    setup_logging(args.debug, args.audit_log)

    config = get_config(args.config)
    store = EventStore.create(config)
    run_menu(store)


def parse_args() -> CommandLineConfig:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="OES event registration desk",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="enable debug logging",
        default=False,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="path to the config file",
        default=Path("config.yml"),
    )

    parser.add_argument(
        "--audit-log",
        type=Path,
        help="file to append the audit log to",
        default=None,
    )

    args = parser.parse_args()
    return CommandLineConfig(
        debug=args.debug,
        config=args.config,
        audit_log=args.audit_log,
    )


if __name__ == "__main__":
    main()
