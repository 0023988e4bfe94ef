"""Configuration constants and settings for the b-cleaner pipeline."""

from dataclasses import dataclass

# Token filtering
DEFAULT_TOKEN_MIN_LENGTH = 3  # inclusive: tokens with len <= threshold are dropped

# Structural markers
STRONG_PUNCTUATION = (".", ":", "?", "!")
PARENTHESES = ("(", ")")
BRACKETS = ("[", "]")

# Characters
ASCII_WHITESPACE = " \t\n\r\x0c"

# Stemming
DEFAULT_STEM_ALGORITHM = "english"

# Output and logging configuration
LOG_DIR = "logs"
CLEAN_LOG_FILENAME = "01_clean.jsonl"

# CLI processing configuration
DEFAULT_CLEANER = "title"
DEFAULT_DELIMITER = "\t"
DEFAULT_LOG_BATCH_SIZE = 1000

# Column name candidates for delimited input
TITLE_COL_CANDIDATES = ["title", "titre", "name"]
AUTHOR_COL_CANDIDATES = ["author", "authors", "auteur", "creator"]
TEXT_COL_CANDIDATES = ["text", "abstract", "content", "body"]


@dataclass
class CleanerConfig:
    """Per-cleaner settings.

    ``html_decode`` and ``stemming`` gate optional stages. When a flag is off
    the corresponding stage is left out of the pipeline entirely.
    """

    token_min_length: int = DEFAULT_TOKEN_MIN_LENGTH
    html_decode: bool = False
    stemming: bool = False
    stem_algorithm: str = DEFAULT_STEM_ALGORITHM
