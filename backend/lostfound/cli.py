"""Command-line search over a JSON file of found items."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog

from lostfound.core.bootstrap import configure
from lostfound.core.matching import SearchQuery, search_active_items
from lostfound.core.store import ACTIVE_STATUS, InMemoryItemStore

logger = structlog.get_logger("lostfound.cli")


def _split_list(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lostfound-match",
        description="Rank found items against a lost-item search",
    )
    parser.add_argument("items", type=Path, help="JSON file holding a list of found-item records")
    parser.add_argument("--tags", type=_split_list, default=[], help="Comma-separated tags")
    parser.add_argument("--colors", type=_split_list, default=[], help="Comma-separated colors")
    parser.add_argument("--category", default="", help="Category label")
    parser.add_argument("--description", default=None, help="Free-text description")
    parser.add_argument(
        "--min-score",
        type=int,
        default=None,
        help="Minimum score to report (defaults to the search threshold from settings)",
    )
    parser.add_argument(
        "--log-stdout",
        action="store_true",
        help="Log to stdout instead of the logs directory",
    )
    return parser


def load_items(path: Path) -> list[dict[str, Any]]:
    """Read found-item records from a JSON file.

    Records without a status are treated as active.

    Raises:
        OSError: If the file can't be read
        ValueError: If it isn't a JSON list of objects
    """
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError("expected a JSON list of item objects")

    for item in data:
        item.setdefault("status", ACTIVE_STATUS)
    return data


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure(log_to_file=not args.log_stdout)

    try:
        items = load_items(args.items)
    except (OSError, ValueError) as e:
        logger.error("Failed to load items", path=str(args.items), error=str(e))
        sys.stderr.write(f"lostfound-match: cannot read {args.items}: {e}\n")
        return 1

    query = SearchQuery(
        tags=args.tags,
        colors=args.colors,
        category=args.category,
        description=args.description,
    )
    response = search_active_items(InMemoryItemStore(items), query, min_score=args.min_score)

    json.dump(response, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
