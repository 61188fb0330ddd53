"""Command line entry point: check Java files for commented package visibility."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from pkgvisibility import __version__
from pkgvisibility.check.pattern import PatternConfigError
from pkgvisibility.check.pipeline import CheckPipeline
from pkgvisibility.check.window import StartFallback
from pkgvisibility.models.config import CheckConfig
from pkgvisibility.parser.config import ConfigFileError, load_check_config
from pkgvisibility.settings import Settings

logger = logging.getLogger("pkgvisibility.cli")

EXIT_CLEAN = 0
EXIT_DIAGNOSTICS = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkgvisibility",
        description="Check that package-private Java declarations are commented as such",
    )
    parser.add_argument("paths", nargs="+", type=Path,
                        help="Java files or directories to check")
    parser.add_argument("--format", dest="format",
                        help="Regular expression of the marker comment")
    parser.add_argument("--trailing-whitespace", action=argparse.BooleanOptionalAction,
                        help="Require whitespace after the marker comment")
    parser.add_argument("--start-fallback", choices=[f.value for f in StartFallback],
                        help="Window start for declarations without a previous sibling")
    parser.add_argument("--ignore-case", action=argparse.BooleanOptionalAction,
                        help="Match the marker format case-insensitively")
    parser.add_argument("--config", type=Path,
                        help="YAML file with check options")
    parser.add_argument("--log-level", help="Logging level (default from settings)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _cli_overrides(args: argparse.Namespace) -> CheckConfig:
    options: dict[str, object] = {}
    if args.format is not None:
        options["format"] = args.format
    if args.trailing_whitespace is not None:
        options["require_trailing_whitespace"] = args.trailing_whitespace
    if args.start_fallback is not None:
        options["start_fallback"] = StartFallback(args.start_fallback)
    if args.ignore_case is not None:
        options["ignore_case"] = args.ignore_case
    return CheckConfig(**options)


def resolve_config(args: argparse.Namespace, settings: Settings) -> CheckConfig:
    """Defaults < environment < config file < command line."""
    config = CheckConfig().overlay(settings.check_config())
    config_file = args.config or settings.config_file
    if config_file is not None:
        config = load_check_config(config_file, base=config)
    return config.overlay(_cli_overrides(args))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
        logging.basicConfig(level=(args.log_level or settings.log_level).upper())
        logger.info("pkgvisibility v%s starting", __version__)
        config = resolve_config(args, settings)
        pipeline = CheckPipeline(config)
    except (ConfigFileError, PatternConfigError, ValidationError) as exc:
        print(f"pkgvisibility: configuration error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    reports = pipeline.check_paths(args.paths)

    status = EXIT_CLEAN
    for report in reports:
        if report.error is not None:
            print(f"{report.file}: error: {report.error}", file=sys.stderr)
            status = EXIT_FAILURE
        for diagnostic in report.diagnostics:
            print(diagnostic.format())
        if report.diagnostics and status == EXIT_CLEAN:
            status = EXIT_DIAGNOSTICS
    return status


if __name__ == "__main__":
    sys.exit(main())
