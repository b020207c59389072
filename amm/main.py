"""Entry point for amm - JWM menu generator."""

from __future__ import annotations

import argparse
import sys

from amm import __app_name__, __version__
from amm.app import AmmApp, AmmError, AmmOptions
from amm.core.config import Config
from amm.core.logger import get_log_path, setup_logging
from amm.core.stats import SUMMARY_TYPES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Create a JWM menu from FreeDesktop .desktop files.",
        epilog=f"Log file: {get_log_path()}",
    )
    parser.add_argument("-o", "--output-file", help="file to write the menu to")
    parser.add_argument(
        "-i", "--input-directory",
        action="append",
        dest="input_directories",
        metavar="DIR",
        help="directory to scan for .desktop files; repeat or separate with ':' "
             "(default: XDG application directories)",
    )
    parser.add_argument("-c", "--category-file", help="file with custom subcategories")
    parser.add_argument(
        "--iconize",
        nargs="?",
        const="",
        default=None,
        metavar="THEME",
        help="resolve icons to full paths using an icon theme (default theme: hicolor)",
    )
    parser.add_argument("-a", "--icon-extension", metavar="EXT", help="append EXT (e.g. .png) to every icon name")
    parser.add_argument("-s", "--summary", choices=SUMMARY_TYPES, dest="summary_type", help="summary detail")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"{__app_name__} {__version__}")
    return parser


def options_from_args(args: argparse.Namespace, config: Config) -> AmmOptions:
    """Command line options override the saved configuration."""
    options = AmmOptions.from_config(config)
    if args.output_file:
        options.output_file = args.output_file
    if args.input_directories:
        options.input_directories = [
            d for value in args.input_directories for d in value.split(":") if d
        ]
    if args.category_file:
        options.category_file = args.category_file
    if args.iconize is not None:
        options.iconize = True
        if args.iconize:
            options.icon_theme = args.iconize
    if args.icon_extension:
        options.icon_extension = args.icon_extension
    if args.summary_type:
        options.summary_type = args.summary_type
    return options


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    config = Config()
    options = options_from_args(args, config)
    if options.summary_type not in SUMMARY_TYPES:
        parser.error(f"bad summary type in settings: {options.summary_type}")
    if options.iconize and options.icon_extension:
        print("Both --iconize and --icon-extension given; using --iconize", file=sys.stderr)

    try:
        AmmApp(options).run()
    except AmmError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
