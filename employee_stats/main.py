"""Command line entry point: generate, validate and process datasets."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import codec, storage
from .aggregator import aggregate
from .config import DEFAULT_AGE_THRESHOLD, DEFAULT_COUNT, DEFAULT_TOP_DEPARTMENT
from .errors import DatasetError, DecodeError, PersistenceError, ValidationError
from .generator import generate
from .report import EXPECTED_FORMAT_HINT, render_report
from .validator import validate

logger = logging.getLogger(__name__)


def _read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise PersistenceError(path, exc) from exc


def cmd_generate(args: argparse.Namespace) -> int:
    dataset = generate(args.count, seed=args.seed)
    text = codec.encode(dataset)
    path = storage.persist_dataset(text, args.output)
    print(f"Generated {len(dataset)} employee records")
    print(f"Dataset saved to: {path} ({storage.format_file_size(len(text))})")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    dataset = validate(codec.decode(_read_file(args.file)))
    print(f"{args.file}: {len(dataset)} valid employee records")
    return 0


def cmd_process(args: argparse.Namespace) -> int:
    content = _read_file(args.file) if args.file else storage.load_dataset_text()
    dataset = validate(codec.decode(content))
    report = aggregate(
        dataset, department=args.department, age_threshold=args.age_threshold
    )
    print(render_report(report), end="")
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="employee_stats",
        description="Generate, validate and summarize employee datasets.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate and save a synthetic dataset.")
    gen.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COUNT,
        help=f"Number of employees to generate (default: {DEFAULT_COUNT}).",
    )
    gen.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducible output."
    )
    gen.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the dataset (default: the persisted dataset file).",
    )
    gen.set_defaults(func=cmd_generate)

    val = sub.add_parser("validate", help="Check a dataset file without saving it.")
    val.add_argument("file", type=Path, help="JSON dataset to check.")
    val.set_defaults(func=cmd_validate)

    proc = sub.add_parser("process", help="Print summary statistics for a dataset.")
    proc.add_argument(
        "file",
        type=Path,
        nargs="?",
        default=None,
        help="JSON dataset to summarize (default: the persisted dataset file).",
    )
    proc.add_argument(
        "--department",
        default=DEFAULT_TOP_DEPARTMENT,
        help=f"Department for the top earner (default: '{DEFAULT_TOP_DEPARTMENT}').",
    )
    proc.add_argument(
        "--age-threshold",
        type=int,
        default=DEFAULT_AGE_THRESHOLD,
        help=f"Count employees strictly older than this (default: {DEFAULT_AGE_THRESHOLD}).",
    )
    proc.set_defaults(func=cmd_process)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running command %s", args.command)
    try:
        return args.func(args)
    except DatasetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if isinstance(exc, (DecodeError, ValidationError)):
            print(EXPECTED_FORMAT_HINT, file=sys.stderr, end="")
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
