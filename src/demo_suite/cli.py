"""
command-line interface for the demo suite

this module provides CLI commands for:
- list: show every demo case and the outcome it demonstrates
- run: hand the bundled demos to pytest

usage:
    python -m demo_suite.cli list [--module NAME]
    python -m demo_suite.cli run [--module NAME] [-k EXPR] [--delay SECONDS]
"""

import argparse
import logging
import os
import sys

import pytest

from demo_suite.catalog import UnknownDemoError, cases_for, demo_path, modules
from demo_suite.config import PARAM_DELAY_ENV, check_delay, load_config

logger = logging.getLogger(__name__)


def run_list(args) -> None:
    """log each demo case with its expected outcome

    Args:
        args: parsed command line arguments
    """
    cases = cases_for(args.module)
    logger.info(f"{len(cases)} demo cases")
    for case in cases:
        if case.reason:
            logger.info(f"{case.node_id}: {case.outcome.value} ({case.reason})")
        else:
            logger.info(f"{case.node_id}: {case.outcome.value}")


def run_demos(args) -> int:
    """run the bundled demos with pytest

    Args:
        args: parsed command line arguments

    Returns:
        pytest exit code
    """
    path = demo_path(args.module)

    previous_delay = os.environ.get(PARAM_DELAY_ENV)
    if args.delay is not None:
        os.environ[PARAM_DELAY_ENV] = str(check_delay(args.delay))

    try:
        # validate env before pytest sees it
        config = load_config()
        logger.info(f"running demos from {path} (param delay {config.param_delay}s)")

        pytest_args = [str(path), "-rs"]
        if args.keyword:
            pytest_args += ["-k", args.keyword]

        exit_code = int(pytest.main(pytest_args))
    finally:
        if previous_delay is None:
            os.environ.pop(PARAM_DELAY_ENV, None)
        else:
            os.environ[PARAM_DELAY_ENV] = previous_delay

    logger.info(f"pytest finished with exit code {exit_code}")
    return exit_code


def create_parser() -> argparse.ArgumentParser:
    """create argument parser for CLI

    Returns:
        configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="pass, fail and skip demo cases",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="available commands")

    module_help = f"demo module to use ({', '.join(modules())}; default: all)"

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="show demo cases and expected outcomes",
    )
    list_parser.add_argument(
        "--module",
        type=str,
        help=module_help,
    )

    # run command
    run_parser = subparsers.add_parser(
        "run",
        help="run demo cases with pytest",
    )
    run_parser.add_argument(
        "--module",
        type=str,
        help=module_help,
    )
    run_parser.add_argument(
        "-k",
        dest="keyword",
        type=str,
        help="only run cases matching the pytest keyword expression",
    )
    run_parser.add_argument(
        "--delay",
        type=float,
        help=f"seconds each parameterized case sleeps (or set {PARAM_DELAY_ENV})",
    )

    return parser


def main(argv=None) -> None:
    """main CLI entry point"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "list":
            run_list(args)
        elif args.command == "run":
            sys.exit(run_demos(args))
        else:
            logger.error(f"unknown command: {args.command}")
            sys.exit(1)
    except UnknownDemoError as e:
        logger.error(f"unknown demo module: {e.args[0]}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"invalid configuration: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
