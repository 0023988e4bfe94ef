"""Per-token transforms.

Every transform takes a :class:`~b_cleaner.tokens.Token`, checks whether it
has anything to do, and only then builds a replacement string.
"""

import html
import re
import string

from unidecode import unidecode

from ..config import ASCII_WHITESPACE
from ..tokens import Token

_ASCII_DIGITS = frozenset(string.digits)
_ASCII_PUNCTUATION = frozenset(string.punctuation)
_DIGITS_AND_PUNCTUATION = _ASCII_DIGITS | _ASCII_PUNCTUATION

# Exactly one named or numeric entity, semicolon terminated
_entity_re = re.compile(r"&(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);")


def decode_token_html_entities(token: Token):
    """Decode a token made of a single HTML entity, e.g. ``&amp;``.

    Tokens holding anything besides one entity are left alone, as are
    unknown entities, which the decoder returns unchanged.
    """
    text = token.text
    if text.startswith("&") and text.endswith(";") and _entity_re.fullmatch(text):
        token.replace(html.unescape(text))


def _is_upper_cased(char: str) -> bool:
    return char.isupper() or char.istitle()


def token_to_lowercase(token: Token):
    if any(_is_upper_cased(c) for c in token.text):
        token.replace(token.text.lower())


def transliterate_token(token: Token):
    """Replace non-ASCII characters by their closest ASCII equivalent.

    Accented letters fold to their base letter, other scripts are
    romanized (``толстой`` becomes ``tolstoi``).
    """
    text = token.text
    if text.isascii():
        return
    token.replace(unidecode(text))


def remove_token_non_ascii_chars(token: Token):
    text = token.text
    if not text.isascii():
        token.replace("".join(c for c in text if c.isascii()))


def _strip_chars(token: Token, removable: frozenset):
    # A hyphen strictly inside the token joins words and is kept, unless the
    # stripping leaves it at an edge (``1950-2020``)
    text = token.text
    if not any(c in removable for c in text):
        return
    last = len(text) - 1
    stripped = "".join(
        c for i, c in enumerate(text)
        if c not in removable or (c == "-" and 0 < i < last)
    )
    if "-" in removable:
        stripped = stripped.strip("-")
    token.replace(stripped)


def remove_token_digit(token: Token):
    _strip_chars(token, _ASCII_DIGITS)


def remove_token_punctuation(token: Token):
    """Remove ASCII punctuation, keeping inner hyphens."""
    _strip_chars(token, _ASCII_PUNCTUATION)


def remove_token_digit_and_punctuation(token: Token):
    """Remove ASCII digits and punctuation, keeping inner hyphens.

    ``well-known`` is left alone, ``-known`` and ``known-`` lose the hyphen.
    """
    _strip_chars(token, _DIGITS_AND_PUNCTUATION)


def token_trim(token: Token):
    text = token.text
    if text and (text[0] in ASCII_WHITESPACE or text[-1] in ASCII_WHITESPACE):
        token.replace(text.strip(ASCII_WHITESPACE))
