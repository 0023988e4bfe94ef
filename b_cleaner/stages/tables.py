"""Stage order of the text, title and author pipelines."""

from ..config import BRACKETS, PARENTHESES
from ..text_processing import (
    decode_token_html_entities,
    filter_min_length,
    purge_empty,
    remove_token_digit_and_punctuation,
    remove_token_non_ascii_chars,
    remove_tokens_between_delimiters,
    split_at_strong_punctuation,
    token_to_lowercase,
    token_trim,
    transliterate_token,
)
from .base import sequence_stage, token_stage


def _min_length(tokens, config):
    filter_min_length(tokens, config.token_min_length)


def _parentheses(tokens, config):
    remove_tokens_between_delimiters(tokens, PARENTHESES)


def _brackets(tokens, config):
    remove_tokens_between_delimiters(tokens, BRACKETS)


def _subtitle(tokens, config):
    split_at_strong_punctuation(tokens)


def _purge_empty(tokens, config):
    purge_empty(tokens)


HTML_DECODE = token_stage("html_decode", decode_token_html_entities, requires="html_decode")
LOWERCASE = token_stage("lowercase", token_to_lowercase)
TRANSLITERATE = token_stage("transliterate", transliterate_token)
STRIP_NON_ASCII = token_stage("strip_non_ascii", remove_token_non_ascii_chars)
STRIP_DIGIT_PUNCTUATION = token_stage("strip_digit_punctuation", remove_token_digit_and_punctuation)
TRIM = token_stage("trim", token_trim)

MIN_LENGTH = sequence_stage("min_length", _min_length)
PURGE_EMPTY = sequence_stage("purge_empty", _purge_empty)
REMOVE_PARENTHESES = sequence_stage("remove_parentheses", _parentheses)
REMOVE_BRACKETS = sequence_stage("remove_brackets", _brackets)
REMOVE_SUBTITLE = sequence_stage("remove_subtitle", _subtitle)

TEXT_PRIMITIVES = (
    HTML_DECODE,
    LOWERCASE,
    TRANSLITERATE,
    STRIP_NON_ASCII,
    STRIP_DIGIT_PUNCTUATION,
    TRIM,
)

# Punctuation goes before transliteration so raw accented letters are not
# treated as punctuation
AUTHOR_PRIMITIVES = (
    HTML_DECODE,
    LOWERCASE,
    STRIP_DIGIT_PUNCTUATION,
    TRANSLITERATE,
    STRIP_NON_ASCII,
    TRIM,
)

TEXT_STAGES = (MIN_LENGTH,) + TEXT_PRIMITIVES + (PURGE_EMPTY,)

TITLE_STAGES = (
    REMOVE_SUBTITLE,
    REMOVE_PARENTHESES,
    REMOVE_BRACKETS,
    MIN_LENGTH,
) + TEXT_PRIMITIVES + (PURGE_EMPTY,)

AUTHOR_STAGES = (
    REMOVE_PARENTHESES,
    REMOVE_BRACKETS,
) + AUTHOR_PRIMITIVES + (PURGE_EMPTY,)
