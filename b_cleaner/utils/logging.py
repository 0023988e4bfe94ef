"""Audit log utilities for the cleaning CLI."""

import os
from typing import Iterable, List, Optional

import orjson

from .. import config


def ensure_logdir(path: Optional[str] = None):
    """Ensure the log directory exists.

    Args:
        path: Directory path to create, defaults to LOG_DIR
    """
    target = path or config.LOG_DIR
    if target:
        os.makedirs(target, exist_ok=True)


def log_path(filename: str, log_dir: Optional[str] = None) -> str:
    return os.path.join(log_dir or config.LOG_DIR, filename)


def write_jsonl(path: str, recs: Iterable[dict]):
    """Append records to a JSONL file.

    Args:
        path: Output file path
        recs: Iterable of dictionary records
    """
    ensure_logdir(os.path.dirname(path) or ".")
    with open(path, "ab") as f:
        for r in recs:
            f.write(orjson.dumps(r))
            f.write(b"\n")


def reset_log(filename: str, log_dir: Optional[str] = None) -> str:
    """Reset (delete) a log file if it exists.

    Args:
        filename: Name of the log file to reset
        log_dir: Directory holding the log, defaults to LOG_DIR

    Returns:
        Full path to the log file
    """
    path = log_path(filename, log_dir)
    if os.path.exists(path):
        os.remove(path)
    return path


def read_jsonl(path: str) -> List[dict]:
    """Read JSONL file and return list of dicts.

    Args:
        path: Path to JSONL file

    Returns:
        List of dictionary records
    """
    if not os.path.exists(path):
        return []
    records = []
    with open(path, "rb") as f:
        for line in f:
            if line.strip():
                records.append(orjson.loads(line))
    return records
