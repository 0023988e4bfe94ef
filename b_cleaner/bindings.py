"""Plain list-in, list-out entry points for callers that do not need tokens."""

from typing import List, Sequence

from .cleaners import AuthorCleaner, TextCleaner, TitleCleaner
from .config import DEFAULT_TOKEN_MIN_LENGTH


def clean_title(tokens: Sequence[str], html_decode: bool = False,
                min_length: int = DEFAULT_TOKEN_MIN_LENGTH) -> List[str]:
    """Clean a tokenized title.

    >>> clean_title(["Lorem", "ipsum", "dolor", ":", "sit", "amet"])
    ['lorem', 'ipsum', 'dolor']
    """
    cleaner = TitleCleaner(tokens, html_decode=html_decode, token_min_length=min_length)
    return cleaner.clean().strings()


def clean_author(tokens: Sequence[str], html_decode: bool = False) -> List[str]:
    """Clean a tokenized author list.

    >>> clean_author(["John", "W.", "Doe", "(1950-2020)"])
    ['john', 'w', 'doe']
    """
    return AuthorCleaner(tokens, html_decode=html_decode).clean().strings()


def clean_text(tokens: Sequence[str], html_decode: bool = False,
               min_length: int = DEFAULT_TOKEN_MIN_LENGTH) -> List[str]:
    cleaner = TextCleaner(tokens, html_decode=html_decode, token_min_length=min_length)
    return cleaner.clean().strings()
