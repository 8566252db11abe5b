"""CLI entrypoint for cachetop."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from cachetop import __version__
from cachetop.cache import CacheHome, resolve_cache_home
from cachetop.config import CachetopConfig, load_config
from cachetop.config.loader import ensure_positive_int, normalize_categories
from cachetop.constants.config import VALID_GROUPINGS
from cachetop.constants.layout import DEFAULT_CATEGORIES
from cachetop.exceptions import CacheHomeError, ConfigError, UnrecoverableFilesystemError
from cachetop.reporting import summarize_cache_home

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="cachetop",
        description="Rank the largest packages in a package-manager cache.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    top = subparsers.add_parser("top", help="Show the largest items per cache category")
    top.add_argument("--home", type=Path, default=None, help="Cache home directory (default: $CARGO_HOME or ~/.cargo)")
    top.add_argument("-n", "--limit", type=int, default=None, help="Number of items to show per category")
    top.add_argument(
        "-C",
        "--category",
        action="append",
        default=None,
        help=f"Category to report (repeat for multiple): {', '.join(DEFAULT_CATEGORIES)}",
    )
    top.add_argument(
        "--grouping",
        choices=sorted(VALID_GROUPINGS),
        default=None,
        help="Aggregation strategy: group (default, any order) or adjacent (fold sorted runs)",
    )
    top.add_argument("-j", "--workers", type=int, default=None, help="Worker bound for size collection")
    top.add_argument("-c", "--config", type=Path, help="Explicit config file")
    top.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    try:
        config = _apply_overrides(load_config(Path.cwd(), args.config), args)
        home = resolve_cache_home(args.home, config.cache_home)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except CacheHomeError as exc:
        print(exc, file=sys.stderr)
        return 1

    logger.debug("Reporting %s from %s", ", ".join(config.categories), home)
    try:
        report = summarize_cache_home(
            CacheHome(home, workers=config.workers),
            config.selected_categories,
            config.limit,
            strategy=config.grouping,
        )
    except UnrecoverableFilesystemError as exc:
        print(f"Fatal filesystem error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(report)
    return 0


def _apply_overrides(config: CachetopConfig, args: argparse.Namespace) -> CachetopConfig:
    """Layer command-line flags over the loaded config."""
    overrides: dict[str, object] = {}
    if args.limit is not None:
        overrides["limit"] = ensure_positive_int(args.limit, "--limit")
    if args.category:
        overrides["categories"] = normalize_categories(args.category)
    if args.grouping is not None:
        overrides["grouping"] = args.grouping
    if args.workers is not None:
        overrides["workers"] = ensure_positive_int(args.workers, "--workers")
    return replace(config, **overrides) if overrides else config


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Load the config and report whether it is valid."""
    try:
        load_config(Path.cwd(), args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
