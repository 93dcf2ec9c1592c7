"""Command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from resumerefresh import config
from resumerefresh.core.errors import MissingCredentialsError
from resumerefresh.core.types import FailureCause, RunResult
from resumerefresh.inputs.credentials import load_credentials
from resumerefresh.runner import run_workflow

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_PRECONDITION = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resumerefresh",
        description="Log in to Naukri, re-save the resume headline and upload a resume.",
    )
    parser.add_argument(
        "--assets-dir",
        default=config.env_str(config.ASSETS_DIR_ENV, config.DEFAULT_ASSETS_DIR),
        help="directory scanned for the resume file (default: %(default)s)",
    )
    parser.add_argument(
        "--screenshot",
        default=config.env_str(config.SCREENSHOT_ENV, config.DEFAULT_SCREENSHOT_PATH),
        help="where to save the full-page screenshot on failure (default: %(default)s)",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        default=not config.env_flag(config.HEADLESS_ENV, config.HEADLESS),
        help="show the browser window",
    )
    parser.add_argument(
        "--log-level",
        default=config.env_str(config.LOG_LEVEL_ENV, config.LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return parser


def exit_code_for(result: RunResult) -> int:
    if result.succeeded:
        return EXIT_OK
    if result.cause == FailureCause.PRECONDITION:
        return EXIT_PRECONDITION
    return EXIT_RUN_FAILED


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    try:
        credentials = load_credentials()
    except MissingCredentialsError as exc:
        logger.error("%s", exc)
        return EXIT_PRECONDITION

    logger.info("Starting Naukri resume refresh")
    result = asyncio.run(
        run_workflow(
            credentials,
            headless=not args.headed,
            assets_dir=args.assets_dir,
            screenshot_path=args.screenshot,
        )
    )
    if result.succeeded:
        logger.info("Resume headline refreshed and resume uploaded")
    else:
        logger.error("%s", result.summary())
    return exit_code_for(result)


if __name__ == "__main__":
    sys.exit(main())
