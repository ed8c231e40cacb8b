# main.py

"""Entry point for the Tiliches catalog (TUI or headless listing)."""

import argparse
import asyncio
import logging
import sys

from tiliches.config.logging_config import setup_logging

logger = logging.getLogger("tiliches.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tiliches",
        description="Browse the Fake Store product catalog.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_products",
        help="Print the catalog and exit instead of launching the TUI.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for --list (default: json).",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from tiliches.ui.app import TilichesApp

    try:
        app = TilichesApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("Tiliches TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Print the catalog headlessly and exit."""
    from tiliches.cli.runner import cli_list

    exit_code = asyncio.run(cli_list(output_format=args.output_format))
    sys.exit(exit_code)


def main() -> None:
    """Route to the TUI (no flags) or the headless listing (--list)."""
    args = _build_parser().parse_args()

    log_file = setup_logging(tui=not args.list_products)
    logger.info("Tiliches starting, log file: %s", log_file)

    if args.list_products:
        _run_list(args)
    else:
        _run_tui()


if __name__ == "__main__":
    main()
