"""Utility functions for logging, I/O, and data manipulation."""

from .logging import write_jsonl, reset_log, read_jsonl, ensure_logdir, log_path
from .io_utils import pick_col, read_delimited, get_input_column
from .data_utils import batched

__all__ = [
    "write_jsonl",
    "reset_log",
    "read_jsonl",
    "ensure_logdir",
    "log_path",
    "pick_col",
    "read_delimited",
    "get_input_column",
    "batched"
]
