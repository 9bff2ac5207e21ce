# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point and orchestration for listops commands."""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

from listops import __version__, list_utils
from listops._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from listops.cli.io import echo, render_result
from listops.config import Config, load_config
from listops.core.model_types import LogComponent, OutputFormat
from listops.exceptions import ListOpsError

logger: logging.Logger = logging.getLogger("listops.cli")

LISTOPS_VERSION: Final[str] = __version__
EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 2


@dataclass(slots=True, frozen=True)
class CLIContext:
    """Settings resolved from the command line and configuration.

    Attributes:
        delimiter: Delimiter used to parse list arguments.
        output_format: Rendering of the command result.
    """

    delimiter: str
    output_format: OutputFormat

    def parse(self, raw: str) -> list[str]:
        """Split a delimited list argument."""
        return list_utils.split(raw, self.delimiter)


CommandHandler = Callable[[argparse.Namespace, CLIContext], "str | bool | list[str]"]


def _run_join(args: argparse.Namespace, context: CLIContext) -> str:
    return list_utils.join(args.values, context.delimiter)


def _run_split(args: argparse.Namespace, context: CLIContext) -> list[str]:
    return context.parse(args.source)


def _run_concat(args: argparse.Namespace, context: CLIContext) -> list[str]:
    lists = [context.parse(raw) for raw in args.lists]
    if len(lists) == 2:
        return list_utils.concat(lists[0], lists[1])
    return list_utils.concat_all(*lists)


def _run_merge(args: argparse.Namespace, context: CLIContext) -> list[str]:
    lists = [context.parse(raw) for raw in args.lists]
    if len(lists) == 2:
        return list_utils.merge(lists[0], lists[1])
    return list_utils.merge_all(*lists)


def _binary(operation: Callable[[list[str], list[str]], list[str]]) -> CommandHandler:
    def handler(args: argparse.Namespace, context: CLIContext) -> list[str]:
        return operation(context.parse(args.first), context.parse(args.second))

    return handler


def _run_has_duplicates(args: argparse.Namespace, context: CLIContext) -> bool:
    return list_utils.has_duplicates(context.parse(args.values))


def _command_handlers() -> dict[str, CommandHandler]:
    """Return a mapping of command names to their handler functions."""
    return {
        "join": _run_join,
        "split": _run_split,
        "concat": _run_concat,
        "merge": _run_merge,
        "intersection": _binary(list_utils.intersection),
        "difference": _binary(list_utils.difference),
        "full-difference": _binary(list_utils.full_difference),
        "has-duplicates": _run_has_duplicates,
    }


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with global options and every subcommand.

    Returns:
        argparse.ArgumentParser: Fully configured argument parser.
    """
    common = argparse.ArgumentParser(add_help=False)
    _ = common.add_argument(
        "--config",
        type=pathlib.Path,
        default=None,
        help="Read settings from this TOML file instead of listops.toml.",
    )
    _ = common.add_argument(
        "--delimiter",
        default=None,
        help="Delimiter separating list elements (defaults to the configured delimiter).",
    )
    _ = common.add_argument(
        "--format",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="Render results as text or JSON.",
    )
    _ = common.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Select logging output format (human-readable text or structured JSON).",
    )
    _ = common.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Set verbosity of logged events.",
    )
    parser = argparse.ArgumentParser(
        prog="listops",
        description="Join, split, merge and compare delimited lists.",
    )
    _ = parser.add_argument("--version", action="store_true", help="Print the listops version and exit.")
    subparsers = parser.add_subparsers(dest="command")

    join = subparsers.add_parser("join", parents=[common], help="Join values with the delimiter")
    _ = join.add_argument("values", nargs="*", help="Values to join.")

    split = subparsers.add_parser("split", parents=[common], help="Split text at the delimiter")
    _ = split.add_argument("source", help="Delimited text to split.")

    for name, help_text in (
        ("concat", "Concatenate lists, keeping order and duplicates"),
        ("merge", "Merge lists into their unique elements"),
    ):
        command = subparsers.add_parser(name, parents=[common], help=help_text)
        _ = command.add_argument("lists", nargs="+", help="Delimited lists.")

    for name, help_text in (
        ("intersection", "Elements present in both lists"),
        ("difference", "Elements of the first list missing from the second"),
        ("full-difference", "Elements present in exactly one of the lists"),
    ):
        command = subparsers.add_parser(name, parents=[common], help=help_text)
        _ = command.add_argument("first", help="First delimited list.")
        _ = command.add_argument("second", help="Second delimited list.")

    has_duplicates = subparsers.add_parser(
        "has-duplicates",
        parents=[common],
        help="Report whether a list repeats any element",
    )
    _ = has_duplicates.add_argument("values", help="Delimited list to inspect.")
    return parser


def _build_context(args: argparse.Namespace, config: Config) -> CLIContext:
    output_format = (
        OutputFormat.from_str(args.output_format) if args.output_format else config.output_format
    )
    return CLIContext(delimiter=args.delimiter or config.delimiter, output_format=output_format)


def _report_failure(command: str, exc: ListOpsError) -> int:
    echo(f"[listops] {exc}", err=True)
    logger.error(
        "Command %s failed: %s",
        command,
        exc,
        extra=structured_extra(LogComponent.CLI, operation=command, exit_code=EXIT_FAILURE),
    )
    return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the listops command-line interface.

    Parses command-line arguments, loads configuration, configures logging, and
    dispatches to the selected command.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code (0 for success, 2 for an invalid configuration).
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"listops {LISTOPS_VERSION}")
        return EXIT_OK
    if args.command is None:
        parser.error("No command provided.")
    try:
        config = load_config(args.config)
    except ListOpsError as exc:
        _ = configure_logging(args.log_format, log_level=args.log_level)
        return _report_failure(args.command, exc)
    _ = configure_logging(
        args.log_format or config.log_format,
        log_level=args.log_level or config.log_level,
    )
    handler = _command_handlers()[args.command]
    context = _build_context(args, config)
    result = handler(args, context)
    echo(render_result(result, context.output_format, context.delimiter))
    logger.debug(
        "Command %s completed",
        args.command,
        extra=structured_extra(LogComponent.CLI, operation=args.command, exit_code=EXIT_OK),
    )
    return EXIT_OK


__all__ = ["CLIContext", "main"]
