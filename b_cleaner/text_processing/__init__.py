"""Token and token-sequence transforms used by the cleaning pipelines."""

from .transforms import (
    decode_token_html_entities,
    token_to_lowercase,
    transliterate_token,
    remove_token_non_ascii_chars,
    remove_token_digit,
    remove_token_punctuation,
    remove_token_digit_and_punctuation,
    token_trim,
)
from .sequence import (
    filter_min_length,
    purge_empty,
    remove_tokens_between_delimiters,
    split_at_strong_punctuation,
)

__all__ = [
    "decode_token_html_entities",
    "token_to_lowercase",
    "transliterate_token",
    "remove_token_non_ascii_chars",
    "remove_token_digit",
    "remove_token_punctuation",
    "remove_token_digit_and_punctuation",
    "token_trim",
    "filter_min_length",
    "purge_empty",
    "remove_tokens_between_delimiters",
    "split_at_strong_punctuation",
]
