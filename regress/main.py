"""
Main entry point for the regress command.

Downloads reference files, runs the command under test on each and
exits with the number of failed tests (0 when everything passed).

Usage:
    regress                                  # tools/regress/tests.txt
    regress path/to/tests.txt --cache-dir files
    python -m regress.main --log-format json
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from regress.core.config import Settings, get_settings
from regress.core.constants import VERSION, ExitCode
from regress.core.exceptions import RegressError
from regress.core.logging import configure_logging, get_logger
from regress.harness.suite import RegressionSuite


logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regress",
        description="Run regression tests against downloaded reference files.",
    )
    parser.add_argument(
        "spec_path",
        nargs="?",
        help="test-spec file (default: REGRESS_SPEC_PATH or tools/regress/tests.txt)",
    )
    parser.add_argument("--cache-dir", help="directory of downloaded test files")
    parser.add_argument(
        "--normalize-whitespace",
        action="store_true",
        default=None,
        help="ignore whitespace differences when comparing output",
    )
    parser.add_argument("--command-timeout", type=float, help="seconds allowed per test command")
    parser.add_argument("--http-timeout", type=float, help="seconds allowed per download")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--log-format", choices=["console", "json"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Overlay command-line flags on environment settings.

    Raises:
        ValidationError: A flag value is invalid.
    """
    base = base or get_settings()
    overrides = {
        "spec_path": args.spec_path,
        "cache_dir": args.cache_dir,
        "normalize_whitespace": args.normalize_whitespace,
        "command_timeout_seconds": args.command_timeout,
        "http_timeout_seconds": args.http_timeout,
        "log_level": args.log_level,
        "log_format": args.log_format,
    }
    update = {key: value for key, value in overrides.items() if value is not None}
    # model_copy skips validation, so re-validate the merged values
    return Settings.model_validate({**base.model_dump(), **update})


def exit_status(failed: int) -> int:
    """Process exit status for ``failed`` tests, clamped to one byte."""
    return min(failed, int(ExitCode.MAX_FAILURES))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        print(f"error: invalid option: {e}", file=sys.stderr)
        return int(ExitCode.FATAL)

    configure_logging(settings)
    logger.info("regress", version=VERSION, spec_path=settings.spec_path, cache_dir=settings.cache_dir)

    try:
        failed = RegressionSuite(settings).run()
    except RegressError as e:
        logger.error("Regression run aborted", error_type=type(e).__name__, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return int(ExitCode.FATAL)
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return int(ExitCode.INTERRUPTED)
    return exit_status(failed)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
