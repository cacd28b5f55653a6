#!/usr/bin/env python3
"""Print a TMDb person's works (all / actor / director / other) as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from person_works.widget import WIDGET_METADATA, invoke
from person_works.works.credits import FetchError
from person_works.utils.env import load_env


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fetch_person_works",
        description="Fetch a TMDb person's combined credits and print the shaped works list.",
    )
    parser.add_argument("--person-id", required=True, help="TMDb person ID.")
    parser.add_argument(
        "--module",
        default="allWorks",
        choices=[m.id for m in WIDGET_METADATA.modules],
        help="Widget module to run (default: allWorks).",
    )
    parser.add_argument("--language", default="zh-CN", help="TMDb language (default: zh-CN).")
    parser.add_argument("--type", default="all", choices=["all", "movie", "tv"], help="Media type filter.")
    parser.add_argument(
        "--sort-by",
        default="popularity.desc",
        choices=["release_date.desc", "vote_average.desc", "popularity.desc"],
        help="Sort order (default: popularity.desc).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    load_env()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    module = WIDGET_METADATA.module(args.module)
    params = {
        "personId": args.person_id,
        "language": args.language,
        "type": args.type,
        "sort_by": args.sort_by,
    }
    try:
        works = invoke(module.function_name, params)
    except FetchError as exc:
        print(f"ERROR: {exc} ({exc.reason})", file=sys.stderr)
        return 1

    print(json.dumps(works, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
