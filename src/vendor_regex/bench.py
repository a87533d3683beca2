"""
Benchmark the abbreviator against a collision pool.

Abbreviates every label of a pool file against the full pool and reports the
time taken, the patterns above a length threshold and the full-label
fallbacks (labels for which no short unique pattern exists).

Usage:
    vendor-regex-bench pool.yaml --threshold 6 --limit 20
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from .abbreviator import abbreviate, is_fallback
from .config import AbbreviatorConfig
from .exceptions import PoolLoadError
from .pool import CollisionPool, default_fragments

logger = logging.getLogger("vendor-regex")


def run_benchmark(
    pool: CollisionPool,
    config: AbbreviatorConfig,
) -> tuple[list[tuple[str, str]], float]:
    """Abbreviate every pool label; return (label, pattern) pairs and seconds."""
    entries = pool.entries()
    start = time.perf_counter()
    results = [(label, abbreviate(label, entries, config)) for label in pool.labels]
    return results, time.perf_counter() - start


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Benchmark search-box abbreviations for every label in a pool file."
    )
    parser.add_argument("pool", type=Path, help="YAML pool file (labels, fragments, descriptions, base_names)")
    parser.add_argument(
        "--threshold",
        type=int,
        default=6,
        help="Report patterns longer than this many characters (default: 6)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Maximum number of long patterns to list (default: 20)",
    )
    parser.add_argument(
        "--bundled-fragments",
        action="store_true",
        help="Use the bundled text fragments instead of the file's own",
    )
    parser.add_argument("--all", action="store_true", help="Print every pattern")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``vendor-regex-bench``."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    try:
        config = AbbreviatorConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid VENDOR_REGEX_* settings: {e}")
        return 2

    try:
        pool = CollisionPool.from_yaml(args.pool)
    except PoolLoadError as e:
        logger.error(e.message)
        return 1

    if args.bundled_fragments:
        pool = pool.model_copy(update={"fragments": default_fragments()})

    print("Collision pool sizes:")
    print(f"  Labels: {len(pool.labels)}")
    print(f"  Fragments: {len(pool.fragments)}")
    print(f"  Descriptions: {len(pool.descriptions)}")
    print(f"  Base names: {len(pool.base_names)}")

    if not pool.labels:
        print("\nNo labels to abbreviate.")
        return 0

    print(f"\nAbbreviating {len(pool.labels)} labels...")
    results, elapsed = run_benchmark(pool, config)
    per_label_ms = elapsed * 1000 / len(results)
    print(f"Done in {elapsed:.1f}s ({per_label_ms:.1f}ms per label)\n")

    long_patterns = [(label, pattern) for label, pattern in results if len(pattern) > args.threshold]
    print(f"Patterns > {args.threshold} chars: {len(long_patterns)} of {len(results)}")
    for label, pattern in long_patterns[:args.limit]:
        print(f"  {label:<40} -> {pattern}")

    fallbacks = [label for label, pattern in results if is_fallback(label, pattern)]
    print(f"\nFull-label fallbacks: {len(fallbacks)}")
    for label in fallbacks:
        print(f"  {label}")

    if args.all:
        print("\n--- All Abbreviation Patterns ---")
        for label, pattern in results:
            print(f"  {label:<40} -> {pattern} ({len(pattern)} chars)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
