"""Command-line interface for the N-shortest-path segmenter."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .config import Config
from .dictionary import load_dictionary
from .errors import SegmentationError
from .pipeline import SegmentationPipeline
from .segmenter import NShortestPathSegmenter


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="nsp-segment",
        description="Dictionary-driven N-shortest-path word segmentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Segment one sentence
  nsp-segment segment --sentence "围城故事发生于1920到1940年代" --dict words.txt --n-path 3

  # Segment a JSONL file using a config file
  nsp-segment run --config config.yaml

  # Direct arguments
  nsp-segment run --input data/input.jsonl --dict words.txt --output data/output
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    segment_parser = subparsers.add_parser("segment", help="Segment a single sentence")
    setup_segment_parser(segment_parser)

    run_parser = subparsers.add_parser("run", help="Segment a JSONL file")
    setup_run_parser(run_parser)

    return parser


def _add_engine_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dict",
        dest="dict_path",
        type=Path,
        help="Dictionary file (one word per line, or a JSON list)",
    )
    parser.add_argument(
        "--n-path",
        type=int,
        help="Number of lightest weight classes to keep (default: 10)",
    )
    parser.add_argument(
        "--max-word-len",
        type=int,
        help="Longest dictionary word matched (default: 6)",
    )
    parser.add_argument(
        "--max-paths",
        type=int,
        help="Fail when more paths than this are materialized",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_segment_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for segment command."""
    parser.add_argument("--sentence", required=True, help="Sentence to segment")
    parser.add_argument(
        "--delimiter",
        default="-",
        help="Separator printed between words (default: -)",
    )
    parser.add_argument(
        "--count-only",
        action="store_true",
        help="Only print the number of segmentations",
    )
    _add_engine_arguments(parser)


def setup_run_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for run command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input JSONL file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for CSV files",
    )
    parser.add_argument(
        "--no-split-clauses",
        action="store_true",
        help="Segment each line whole instead of clause by clause",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: 1)",
    )
    parser.add_argument(
        "--no-single-lines",
        action="store_true",
        help="Skip saving individual line files",
    )
    parser.add_argument(
        "--no-full-files",
        action="store_true",
        help="Skip saving combined file with all rows",
    )
    _add_engine_arguments(parser)


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    data = config.model_dump()

    if getattr(args, "input", None):
        data["input_file"] = args.input
    if getattr(args, "output", None):
        data["output"]["output_dir"] = args.output
    if args.dict_path:
        data["dictionary"]["path"] = args.dict_path

    seg = data["segmentation"]
    if args.n_path is not None:
        seg["n_path"] = args.n_path
    if args.max_word_len is not None:
        seg["max_word_len"] = args.max_word_len
    if args.max_paths is not None:
        seg["max_paths"] = args.max_paths
    if getattr(args, "delimiter", None) is not None:
        seg["delimiter"] = args.delimiter
    if getattr(args, "no_split_clauses", False):
        seg["split_clauses"] = False
    if getattr(args, "workers", None) is not None:
        seg["workers"] = args.workers

    if getattr(args, "no_single_lines", False):
        data["output"]["save_single_lines"] = False
    if getattr(args, "no_full_files", False):
        data["output"]["save_full_files"] = False

    # Re-validate so overrides go through the same field constraints
    return Config(**data)


def handle_segment(args: argparse.Namespace) -> int:
    """Handle segment command."""
    try:
        config = build_config(args)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        dictionary = (
            load_dictionary(config.dictionary.path) if config.dictionary.path else frozenset()
        )
        seg = config.segmentation
        segmenter = NShortestPathSegmenter(
            n_path=seg.n_path,
            dictionary=dictionary,
            max_word_len=seg.max_word_len,
            max_paths=seg.max_paths,
            delimiter=seg.delimiter,
        )
        paths = segmenter.segment(args.sentence)
    except (FileNotFoundError, ValueError, SegmentationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.count_only:
        for path in paths:
            print(path)
    print(f"len(paths): {len(paths)}")
    return 0


def handle_run(args: argparse.Namespace) -> int:
    """Handle run command."""
    try:
        config = build_config(args)
    except (ValidationError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1
    if not config.dictionary.path:
        print("Error: Dictionary is required (use --dict or --config)", file=sys.stderr)
        return 1

    try:
        pipeline = SegmentationPipeline(config)
        line_count = pipeline.run()
        print(f"\nProcessed {line_count} lines")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Segmentation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "segment":
        return handle_segment(args)
    return handle_run(args)


if __name__ == "__main__":
    sys.exit(main())
