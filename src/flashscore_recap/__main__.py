from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional, Sequence

from .config import RENDERERS, ConfigError, load_config
from .dates import parse_day
from .runner import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a Markdown recap of yesterday's Flashscore results."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: built-in competition list).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for recap-YYYY-MM-DD.md (default: out).",
    )
    parser.add_argument(
        "--timezone",
        default=None,
        help="IANA timezone that defines 'yesterday' (default: Europe/Amsterdam).",
    )
    parser.add_argument(
        "--date",
        default=None,
        help="Collect results for this YYYY-MM-DD day instead of yesterday.",
    )
    parser.add_argument(
        "--competition",
        action="append",
        default=None,
        metavar="URL",
        help="Results page to scrape; repeat to scrape several. Replaces the configured list.",
    )
    parser.add_argument(
        "--renderer",
        choices=RENDERERS,
        default=None,
        help="Use a headless browser or static HTML snapshots (default: browser).",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window while scraping.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        overrides: Dict[str, object] = {}
        if args.output_dir is not None:
            overrides["output_dir"] = args.output_dir
        if args.timezone is not None:
            overrides["timezone"] = args.timezone
        if args.competition:
            overrides["competitions"] = tuple(args.competition)
        if args.renderer is not None:
            overrides["renderer"] = args.renderer
        if args.headed:
            overrides["headless"] = False
        if overrides:
            config = replace(config, **overrides)
        target_day = parse_day(args.date) if args.date else None
    except (ConfigError, ValueError, OSError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        path = asyncio.run(run(config, target_day=target_day))
    except Exception as exc:
        print(f"Recap failed: {exc}", file=sys.stderr)
        return 1

    print(f"✅ Recap saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
