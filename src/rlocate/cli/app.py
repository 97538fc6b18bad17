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

"""CLI entry point and orchestration for rlocate commands."""

from __future__ import annotations

import argparse
import json
import logging
import shlex
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

from rlocate import __version__
from rlocate._infra.error_codes import describe_error
from rlocate._internal.exceptions import RlocateError
from rlocate._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from rlocate.api import create_from_settings, discover
from rlocate.cli.helpers import echo, register_argument
from rlocate.cli.models import DiscoveryReport, ResolutionEntry, ResolutionReport
from rlocate.config.settings import RunfilesSettings
from rlocate.core.model_types import LogComponent, LogFormat, OutputFormat
from rlocate.runfiles.environment import as_environ
from rlocate.runfiles.locator import DiscoveredLocation

if TYPE_CHECKING:
    from rlocate.runfiles.resolver import Runfiles

logger: logging.Logger = logging.getLogger("rlocate.cli")

RLOCATE_VERSION: Final[str] = __version__
EXIT_OK: Final[int] = 0
EXIT_UNRESOLVED: Final[int] = 1
EXIT_ERROR: Final[int] = 2

CommandHandler = Callable[[argparse.Namespace, RunfilesSettings], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: ``0`` on success, ``1`` when a path did not resolve, ``2`` when
            runfiles could not be loaded.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"rlocate {RLOCATE_VERSION}")
        return EXIT_OK
    if args.command is None:
        parser.error("No command provided.")
    log_format = LogFormat.from_str(args.log_format) if args.log_format is not None else None
    _ = configure_logging(log_format, log_level=args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    settings = RunfilesSettings.from_sources(
        argv0=args.argv0,
        cli_manifest=args.manifest,
        cli_directory=args.directory,
    )
    try:
        return handler(args, settings)
    except RlocateError as exc:
        logger.debug(
            "Command %s failed",
            args.command,
            exc_info=True,
            extra=structured_extra(LogComponent.CLI, details={"command": args.command}),
        )
        echo(f"[rlocate] {describe_error(exc)}", err=True)
        return EXIT_ERROR


def _common_options(*, suppress_defaults: bool) -> argparse.ArgumentParser:
    """Return a parent parser carrying the flags accepted before or after a command.

    The copy attached to subcommands must not set defaults, otherwise it would
    overwrite flags already parsed before the command name.
    """

    def _default(value: object) -> object:
        return argparse.SUPPRESS if suppress_defaults else value

    common = argparse.ArgumentParser(add_help=False)
    register_argument(
        common,
        "--argv0",
        default=_default(None),
        help="Launch path of the program whose runfiles to use (default: this process).",
    )
    register_argument(
        common,
        "--manifest",
        default=_default(None),
        help="Runfiles manifest hint; overrides RUNFILES_MANIFEST_FILE.",
    )
    register_argument(
        common,
        "--directory",
        default=_default(None),
        help="Runfiles directory hint; overrides RUNFILES_DIR.",
    )
    register_argument(
        common,
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=_default(OutputFormat.TEXT.value),
        help="Stdout format.",
    )
    register_argument(
        common,
        "--log-format",
        choices=LOG_FORMATS,
        default=_default(None),
        help="Select logging output format (default: $RLOCATE_LOG_FORMAT or text).",
    )
    register_argument(
        common,
        "--log-level",
        choices=LOG_LEVELS,
        default=_default(None),
        help="Set verbosity of logged events (default: $RLOCATE_LOG_LEVEL or warning).",
    )
    return common


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rlocate",
        parents=[_common_options(suppress_defaults=False)],
        description="Locate runfiles of a program built in a hermetic build sandbox.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(parser, "--version", action="store_true", help="Print the rlocate version and exit.")
    subparsers = parser.add_subparsers(dest="command")
    common = _common_options(suppress_defaults=True)

    _ = subparsers.add_parser(
        "discover",
        help="Show the runfiles manifest and directory in use",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=[common],
    )
    resolve = subparsers.add_parser(
        "resolve",
        help="Resolve logical runfiles paths",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=[common],
    )
    register_argument(resolve, "paths", nargs="+", metavar="PATH", help="Logical runfiles path.")
    env = subparsers.add_parser(
        "env",
        help="Print the variables to export to child processes",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=[common],
    )
    register_argument(
        env,
        "--shell",
        action="store_true",
        help="Emit quoted 'export NAME=value' lines (text format only).",
    )
    return parser


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "discover": _execute_discover,
        "resolve": _execute_resolve,
        "env": _execute_env,
    }


def _execute_discover(args: argparse.Namespace, settings: RunfilesSettings) -> int:
    location = discover(settings.argv0, env_lookup=settings.env_lookup())
    report = DiscoveryReport.from_location(location)
    if OutputFormat.from_str(args.format) is OutputFormat.JSON:
        echo(report.model_dump_json(indent=2))
    else:
        echo(f"manifest: {report.manifest or '(none)'}")
        echo(f"directory: {report.directory or '(none)'}")
    return EXIT_OK


def _describe(runfiles: Runfiles) -> DiscoveryReport:
    return DiscoveryReport.from_location(
        DiscoveredLocation(manifest=runfiles.manifest, directory=runfiles.directory),
    )


def _execute_resolve(args: argparse.Namespace, settings: RunfilesSettings) -> int:
    runfiles = create_from_settings(settings)
    report = ResolutionReport(
        runfiles=_describe(runfiles),
        results=[ResolutionEntry(path=path, resolved=runfiles.rlocation(path) or None) for path in args.paths],
    )
    if OutputFormat.from_str(args.format) is OutputFormat.JSON:
        echo(report.model_dump_json(indent=2))
    else:
        for entry in report.results:
            echo(entry.resolved or "")
    for path in report.unresolved:
        logger.warning(
            "Unresolved runfiles path: %s",
            path,
            extra=structured_extra(LogComponent.CLI, path=path),
        )
    return EXIT_UNRESOLVED if report.unresolved else EXIT_OK


def _execute_env(args: argparse.Namespace, settings: RunfilesSettings) -> int:
    pairs = create_from_settings(settings).env_vars()
    if OutputFormat.from_str(args.format) is OutputFormat.JSON:
        echo(json.dumps(as_environ(pairs), indent=2))
        return EXIT_OK
    for name, value in pairs:
        if args.shell:
            echo(f"export {name}={shlex.quote(value)}")
        else:
            echo(f"{name}={value}")
    return EXIT_OK


__all__ = ["main"]
