"""Command-line demo: clean every row of a delimited file and report token statistics."""

import os
import time
import argparse
from typing import Dict, Any, List, Optional

from .config import (
    CLEAN_LOG_FILENAME, DEFAULT_CLEANER, DEFAULT_DELIMITER, DEFAULT_LOG_BATCH_SIZE,
    DEFAULT_TOKEN_MIN_LENGTH, LOG_DIR, CleanerConfig
)
from .cleaners import CLEANERS, get_cleaner_class
from .stemming import SUPPORTED_ALGORITHMS
from .tokens import count_ownership
from .utils.data_utils import batched
from .utils.io_utils import get_input_column, read_delimited
from .utils.logging import ensure_logdir, reset_log, write_jsonl


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    ap = argparse.ArgumentParser("b-cleaner", description="Clean tokenized bibliographic records.")

    # Input configuration
    ap.add_argument("--input", required=True,
                    help="Delimited file with one record per row")
    ap.add_argument("--cleaner", default=DEFAULT_CLEANER, choices=sorted(CLEANERS),
                    help="Cleaner to apply to each record")
    ap.add_argument("--column", default=None,
                    help="Column to clean (name, or index with --no-header); auto-detected by default")
    ap.add_argument("--delimiter", default=DEFAULT_DELIMITER,
                    help="Field delimiter of the input file (default: tab)")
    ap.add_argument("--no-header", action="store_true",
                    help="Input file has no header row")
    ap.add_argument("--test-limit", type=int, default=None,
                    help="Limit processing to N records for testing")

    # Cleaner configuration
    ap.add_argument("--min_length", type=int, default=DEFAULT_TOKEN_MIN_LENGTH,
                    help="Tokens of this length or shorter are dropped (title/text cleaners)")
    ap.add_argument("--html", action="store_true",
                    help="Decode HTML entities before cleaning")
    ap.add_argument("--stem", default=None, choices=SUPPORTED_ALGORITHMS,
                    help="Stem cleaned tokens with this Snowball algorithm")

    # Logging
    ap.add_argument("--log_dir", default=LOG_DIR,
                    help="Directory for the per-record audit log")
    ap.add_argument("--log_batch_size", type=int, default=DEFAULT_LOG_BATCH_SIZE,
                    help="Number of records per audit log flush")

    return ap


def process_arguments(args):
    """Process and validate command-line arguments.

    Args:
        args: Parsed argument namespace
    """
    args.input = os.path.abspath(args.input)
    args.log_dir = os.path.abspath(args.log_dir)

    from . import config
    config.LOG_DIR = args.log_dir


def build_config(args) -> CleanerConfig:
    return CleanerConfig(
        token_min_length=args.min_length,
        html_decode=args.html,
        stemming=args.stem is not None,
        stem_algorithm=args.stem or CleanerConfig.stem_algorithm,
    )


def run_cleaning(args) -> Dict[str, Any]:
    """Clean every record of the input file.

    Args:
        args: Parsed and processed argument namespace

    Returns:
        Summary statistics
    """
    ensure_logdir(args.log_dir)
    audit_path = reset_log(CLEAN_LOG_FILENAME, args.log_dir)

    df = read_delimited(args.input, delimiter=args.delimiter, header=not args.no_header)
    if args.test_limit:
        original_len = len(df)
        df = df.head(min(args.test_limit, len(df)))
        print(f"[clean][TEST] Using {len(df)} of {original_len} records.")

    column = get_input_column(df, args.cleaner, args.column)
    cleaner_cls = get_cleaner_class(args.cleaner)
    cleaner_config = build_config(args)
    print(f"[clean] Cleaning column {column!r} of {args.input} with the {args.cleaner} cleaner")

    stats = {
        "records": 0,
        "empty_records": 0,
        "total_tokens": 0,
        "kept_tokens": 0,
        "owned": 0,
        "view": 0,
    }

    start = time.perf_counter()
    for batch in batched(enumerate(df[column]), args.log_batch_size):
        log_batch: List[dict] = []
        for row_idx, value in batch:
            raw = value.split()
            cleaner = cleaner_cls(raw, cleaner_config)
            cleaner.clean()
            if cleaner_config.stemming:
                cleaner.stem()

            owned, view = count_ownership(cleaner.tokens())
            stats["records"] += 1
            stats["total_tokens"] += len(raw)
            stats["kept_tokens"] += len(cleaner)
            stats["owned"] += owned
            stats["view"] += view
            if not len(cleaner):
                stats["empty_records"] += 1

            log_batch.append({
                "stage": "clean",
                "cleaner": args.cleaner,
                "row": row_idx,
                "tokens_before": raw,
                "tokens_after": cleaner.strings(),
                "owned": owned,
                "view": view,
            })
        write_jsonl(audit_path, log_batch)
    stats["elapsed"] = time.perf_counter() - start

    print(f"[clean] Processed {stats['records']:,} records ({stats['empty_records']:,} emptied)")
    print(f"[clean] Total number of tokens {stats['total_tokens']:,}, kept {stats['kept_tokens']:,}")
    print(f"[clean] Owned count {stats['owned']:,}")
    print(f"[clean] View count {stats['view']:,}")
    print(f"[clean] Elapsed {stats['elapsed']:.3f}s")
    print(f"[clean] Audit log: {audit_path}")
    return stats


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    process_arguments(args)
    run_cleaning(args)
