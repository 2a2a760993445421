"""
EAV Entity Migration Generator

Entry point for the entity migration script.
"""

import argparse
from pathlib import Path

from eav_migrations.cli.command import MigrationCommand


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create the main and attribute migrations of an EAV entity."
    )
    parser.add_argument("name", help="Entity name, used as the table name")
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Directory the migrations are written to",
    )
    parser.add_argument(
        "--base-class",
        default=None,
        help="Class the generated migrations extend",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the entity migration script.

    Parses the command line and runs MigrationCommand.
    """
    args = parse_args(argv)
    command = MigrationCommand(args.name, path=args.path, base_class=args.base_class)
    command.run()


if __name__ == "__main__":
    main()
