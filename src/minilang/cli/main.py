# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the MiniLang command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from minilang.compiler.errors import AnalysisError
from minilang.compiler.session import AnalysisSession
from minilang.workspace.config import AnalyzerConfig, ConfigError, find_config, load_config

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the MiniLang CLI."""
    parser = argparse.ArgumentParser(
        prog="minilang",
        description="MiniLang - lexical and syntax analyzer",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the token stream of a program",
        description="Scan a source file and print one (kind,payload) pair per token.",
    )
    _add_common_arguments(tokens_parser)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the syntax of a program",
        description="Validate a source file against the MiniLang grammar and report the first error.",
    )
    _add_common_arguments(check_parser)

    # tables subcommand
    tables_parser = subparsers.add_parser(
        "tables",
        help="Print the identifier and string tables of a program as JSON",
        description="Scan a source file and dump the resulting symbol tables.",
    )
    _add_common_arguments(tables_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("file", help="MiniLang source file")
    subparser.add_argument(
        "--config",
        default=None,
        help="Configuration file (default: .minilang.yaml next to the source file, if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    path = Path(args.file)
    try:
        config_file = _config_file(args, path)
        config = AnalyzerConfig() if config_file is None else load_config(config_file)
    except ConfigError as exc:
        _print_error(f"Error: {exc}")
        return 1

    _configure_logging("DEBUG" if args.verbose else config.log_level)
    if config_file is not None:
        logger.debug("Using configuration file %s", config_file)

    if args.command == "tokens":
        return _cmd_tokens(path, config)
    if args.command == "check":
        return _cmd_check(path, config)
    if args.command == "tables":
        return _cmd_tables(path, config)
    return 0


def _config_file(args: argparse.Namespace, path: Path) -> Path | None:
    if args.config is not None:
        return Path(args.config)
    return find_config(path.resolve().parent)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("minilang").setLevel(getattr(logging, level))


def _print_error(message: str) -> None:
    print(chalk.red(message), file=sys.stderr)


def _open_session(path: Path, config: AnalyzerConfig) -> AnalysisSession:
    return AnalysisSession.from_file(path, config.encoding, legacy_constants=config.legacy_constants)


def _cmd_tokens(path: Path, config: AnalyzerConfig) -> int:
    """Handle the tokens subcommand."""
    try:
        with _open_session(path, config) as session:
            for token in session.tokens():
                print(f"{token}\t{session.scanner.spell(token)}")
    except AnalysisError as exc:
        _print_error(f"Error: {path}: {exc}")
        return 1
    print("End of program.")
    return 0


def _cmd_check(path: Path, config: AnalyzerConfig) -> int:
    """Handle the check subcommand."""
    try:
        with _open_session(path, config) as session:
            session.analyze()
    except AnalysisError as exc:
        _print_error(f"Error: {path}: {exc}")
        return 1
    print(f"OK: {path}")
    return 0


def _cmd_tables(path: Path, config: AnalyzerConfig) -> int:
    """Handle the tables subcommand."""
    try:
        with _open_session(path, config) as session:
            for _token in session.tokens():
                pass
            snapshot = session.tables.snapshot()
    except AnalysisError as exc:
        _print_error(f"Error: {path}: {exc}")
        return 1
    print(snapshot.model_dump_json(indent=2))
    return 0
