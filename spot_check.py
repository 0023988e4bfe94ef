#!/usr/bin/env python3
"""
Quick spot check script to review the cleaning audit log.
Usage: python spot_check.py [log_path]
  log_path: audit log written by b-cleaner (default: logs/01_clean.jsonl)
"""

import sys
import os
from collections import Counter

import pandas as pd

DEFAULT_LOG_PATH = os.path.join("logs", "01_clean.jsonl")


def check_clean_log(path: str):
    """Print a breakdown of the cleaning audit log."""
    if not os.path.exists(path):
        print(f"❌ {path} not found. Run: b-cleaner --input titres.tsv --cleaner title")
        return

    df = pd.read_json(path, lines=True)
    if df.empty:
        print(f"❌ {path} is empty.")
        return

    print(f"\n{'='*60}")
    print(f"CLEANING LOG: {path}")
    print(f"{'='*60}")
    print(f"Cleaner(s): {', '.join(sorted(df['cleaner'].unique()))}")
    print(f"Total records: {len(df):,}")

    tokens_before = df["tokens_before"].map(len)
    tokens_after = df["tokens_after"].map(len)
    emptied = df[tokens_after == 0]
    print(f"Tokens before: {tokens_before.sum():,}")
    print(f"Tokens after:  {tokens_after.sum():,} ({tokens_after.sum()/max(tokens_before.sum(), 1)*100:.1f}%)")
    print(f"Records emptied: {len(emptied):,} ({len(emptied)/len(df)*100:.1f}%)")

    owned = int(df["owned"].sum())
    view = int(df["view"].sum())
    total = max(owned + view, 1)
    print(f"\nOwned tokens: {owned:,} ({owned/total*100:.1f}%)")
    print(f"View tokens:  {view:,} ({view/total*100:.1f}%)")

    dropped = Counter()
    for before, after in zip(df["tokens_before"], df["tokens_after"]):
        dropped[len(before) - len(after)] += 1
    print(f"\nTokens dropped per record:")
    for n, count in sorted(dropped.items())[:10]:
        print(f"  {n}: {count:,}")

    if not emptied.empty:
        print(f"\n{'='*60}")
        print("EXAMPLES OF EMPTIED RECORDS:")
        print(f"{'='*60}")
        for _, row in emptied.head(5).iterrows():
            print(f"\n❌ Row {row['row']}")
            print(f"   Before: {' '.join(row['tokens_before'])[:120]}")

    print(f"\n{'='*60}")
    print("SAMPLE CLEANED RECORDS:")
    print(f"{'='*60}")
    for _, row in df[tokens_after > 0].head(10).iterrows():
        print(f"\n✅ Row {row['row']}")
        print(f"   Before: {' '.join(row['tokens_before'])[:120]}")
        print(f"   After:  {' '.join(row['tokens_after'])[:120]}")


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_LOG_PATH
    check_clean_log(path)


if __name__ == "__main__":
    main()
