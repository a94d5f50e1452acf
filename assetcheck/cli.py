"""Command line entry point for assetcheck."""

from __future__ import annotations

import argparse

from . import __version__
from .checker import AssetCheck
from .config import DEFAULT_USER_AGENT, LOG_DEBUG, LOG_INFO
from .logging_utils import configure_report_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assetcheck",
        description="Check your assetlinks.json file",
    )
    parser.add_argument(
        "filename",
        help="Local path, URL or hostname of the assetlinks.json file",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show linked websites and apps",
    )
    parser.add_argument(
        "-u",
        "--user-agent",
        default=DEFAULT_USER_AGENT,
        metavar="AGENT",
        help="User-Agent header for remote requests",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for assetcheck."""
    args = build_parser().parse_args(argv)

    configure_report_logging(debug=args.debug)

    log_level = LOG_DEBUG if args.debug else LOG_INFO
    checker = AssetCheck(args.filename, log_level, args.user_agent)
    raise SystemExit(checker.run())


if __name__ == "__main__":
    main()
