"""Transforms over a whole token sequence.

These functions mutate the list in place and never reorder the tokens that
survive. They accept lists of :class:`~b_cleaner.tokens.Token` or plain
strings.
"""

from typing import List, Tuple

from ..config import STRONG_PUNCTUATION


def filter_min_length(tokens: List, threshold: int):
    """Drop tokens whose length is lower than or equal to ``threshold``."""
    tokens[:] = [t for t in tokens if len(t) > threshold]


def purge_empty(tokens: List):
    tokens[:] = [t for t in tokens if len(t)]


def remove_tokens_between_delimiters(tokens: List, delimiters: Tuple[str, str]):
    """Remove every span running from a token starting with the opening
    marker to the next token ending with the closing marker, inclusive.

    Scanning stops at the first opening marker with no closing token after
    it; that token and everything following it are kept.

    Args:
        tokens: Token list, modified in place
        delimiters: Pair of (start marker, end marker), e.g. ``("(", ")")``
    """
    start_marker, end_marker = delimiters
    while True:
        start = next((i for i, t in enumerate(tokens) if t.startswith(start_marker)), None)
        if start is None:
            return
        end = next((i for i in range(start, len(tokens)) if tokens[i].endswith(end_marker)), None)
        if end is None:
            return
        del tokens[start:end + 1]


def split_at_strong_punctuation(tokens: List):
    """Drop the subtitle.

    Everything from the first token ending with ``.``, ``:``, ``?`` or ``!``
    onwards is removed, that token included.
    """
    for i, token in enumerate(tokens):
        if token.endswith(STRONG_PUNCTUATION):
            del tokens[i:]
            return
