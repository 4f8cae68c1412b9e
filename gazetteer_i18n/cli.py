"""Command line entry point for building address hierarchy files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gazetteer_i18n.builder import AddressHierarchyBuilder
from gazetteer_i18n.paths import DEFAULT_GAZETTEER_FILE, DEFAULT_TARGET_DIR
from gazetteer_i18n.types import GazetteerConfig, Severity


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gazetteer-i18n",
        description="Build the address hierarchy CSV and message property files from a gazetteer CSV.",
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=DEFAULT_GAZETTEER_FILE,
        help=f"gazetteer CSV (default: {DEFAULT_GAZETTEER_FILE})",
    )
    parser.add_argument(
        "--target-dir",
        type=Path,
        default=DEFAULT_TARGET_DIR,
        help=f"directory for the generated files (default: {DEFAULT_TARGET_DIR})",
    )
    parser.add_argument("--config", type=Path, default=None, help="ini file with a [gazetteer] section")
    parser.add_argument("--country-token", default=None, help="override the country message token")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="write logs to this file")
    return parser


def configure_logging(verbose: int, log_file: Path | None) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=handlers)


def load_config(args: argparse.Namespace) -> GazetteerConfig:
    config = GazetteerConfig.from_ini(args.config) if args.config else GazetteerConfig.create_default()
    if args.country_token:
        config = config.with_overrides(country_token=args.country_token)
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.log_file)

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        raise SystemExit(f"invalid configuration: {e}")

    builder = AddressHierarchyBuilder(config)
    try:
        result = builder.run(args.input, args.target_dir)
    except FileNotFoundError as e:
        raise SystemExit(str(e))

    print(
        f"Resolved {result.resolved_count} villages, dropped {result.dropped_count}, "
        f"{len(result.identifiers.forward)} identifiers, "
        f"{len(result.log)} log entries ({result.log.count(Severity.ERROR)} errors) -> {args.target_dir}",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
