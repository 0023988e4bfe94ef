"""
b-cleaner - bibliographic token cleaning.

Normalizes tokenized titles and author names into lowercase ASCII tokens
for record alignment:
  title:  subtitle → () / [] spans → min length → per-token → empty purge
  author: () / [] spans → per-token → empty purge

Usage:
    from b_cleaner import TitleCleaner, clean_author

    TitleCleaner("Lorem ipsum dolor : sit amet".split()).clean().strings()
    clean_author(["John", "W.", "Doe", "(1950-2020)"])
"""

from .bindings import clean_author, clean_text, clean_title
from .cleaners import AuthorCleaner, Cleaner, TextCleaner, TitleCleaner
from .config import CleanerConfig
from .stemming import SUPPORTED_ALGORITHMS, Stemmer
from .text_processing import remove_tokens_between_delimiters
from .tokens import Token, count_ownership, make_tokens

__version__ = "1.0.0"

__all__ = [
    "clean_title",
    "clean_author",
    "clean_text",
    "Cleaner",
    "TextCleaner",
    "TitleCleaner",
    "AuthorCleaner",
    "CleanerConfig",
    "Stemmer",
    "SUPPORTED_ALGORITHMS",
    "remove_tokens_between_delimiters",
    "Token",
    "make_tokens",
    "count_ownership",
]
