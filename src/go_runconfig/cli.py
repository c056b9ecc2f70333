#!/usr/bin/env python3
"""
Generate a GoLand run configuration for a Go executable directory.

Example:
    go-runconfig -workingDir=cmd/api/server -moduleName=myapp -package=github.com/acme/myapp

writes ``.idea/runConfigurations/api_server.xml``. With ``-current`` the file
is named ``current_api_server.xml``, grouped under the ``current`` folder, and
previous ``current_*`` configurations are removed first.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import log
from .errors import InvalidInputError, MissingRequiredInputError, RunConfigError
from .generator import REQUIRED_FLAGS, GenerationRequest, generate, plan
from .settings import load_settings

logger = logging.getLogger(__name__)

TRUE_VALUES = ("1", "t", "true", "yes", "y", "on")
FALSE_VALUES = ("0", "f", "false", "no", "n", "off")


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {raw!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="go-runconfig",
        description="Generate a GoLand 'Go Application' run configuration under .idea/runConfigurations.",
        allow_abbrev=False,
    )
    # presence is checked after parsing so the error matches the Go-style usage line
    parser.add_argument("-workingDir", "--working-dir", dest="working_dir", default="",
                        help="Working directory (required).")
    parser.add_argument("-moduleName", "--module-name", dest="module_name", default="",
                        help="Module name (required).")
    parser.add_argument("-package", "--package", dest="package", default="",
                        help="Go package root (required).")
    parser.add_argument(
        "-current",
        "--current",
        dest="current",
        nargs="?",
        const=True,
        default=False,
        type=parse_bool,
        help="Generate a disposable 'current' configuration and remove previous ones.",
    )
    parser.add_argument("-outputDir", "--output-dir", dest="output_dir", default=None,
                        help="Output directory (default: .idea/runConfigurations).")
    parser.add_argument("-config", "--config", dest="config", default=None,
                        help="TOML file with a [go_runconfig] settings table.")
    parser.add_argument("-dryRun", "--dry-run", dest="dry_run", action="store_true",
                        help="Print the XML instead of writing it.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    log.configure(args.verbose)

    request = GenerationRequest(
        working_dir=args.working_dir,
        module_name=args.module_name,
        package=args.package,
        current=args.current,
    )
    try:
        request.check_required()
    except MissingRequiredInputError:
        print(f"All flags are required: {', '.join(REQUIRED_FLAGS.values())}")
        return 1

    try:
        settings = load_settings(
            Path(args.config) if args.config else None,
            output_dir=Path(args.output_dir) if args.output_dir else None,
        )
        if args.dry_run:
            sys.stdout.write(plan(request, settings).payload.decode("utf-8") + "\n")
            return 0
        generate(request, settings)
    except InvalidInputError as exc:
        logger.error("Error: %s", exc)
        return 1
    except RunConfigError as exc:
        # best effort: report and leave the exit status untouched
        logger.error("%s", exc)
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
