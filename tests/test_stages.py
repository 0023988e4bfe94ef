import pytest

from b_cleaner.config import CleanerConfig
from b_cleaner.stages import AUTHOR_STAGES, TEXT_STAGES, TITLE_STAGES, Stage, build_stages, run_stages
from b_cleaner.stages.base import sequence_stage, token_stage
from b_cleaner.tokens import make_tokens


def names(stages):
    return [s.name for s in stages]


def test_title_stage_order():
    assert names(build_stages(TITLE_STAGES, CleanerConfig())) == [
        "remove_subtitle",
        "remove_parentheses",
        "remove_brackets",
        "min_length",
        "lowercase",
        "transliterate",
        "strip_non_ascii",
        "strip_digit_punctuation",
        "trim",
        "purge_empty",
    ]


def test_text_stage_order_with_html():
    assert names(build_stages(TEXT_STAGES, CleanerConfig(html_decode=True))) == [
        "min_length",
        "html_decode",
        "lowercase",
        "transliterate",
        "strip_non_ascii",
        "strip_digit_punctuation",
        "trim",
        "purge_empty",
    ]


def test_author_stage_order():
    assert names(build_stages(AUTHOR_STAGES, CleanerConfig())) == [
        "remove_parentheses",
        "remove_brackets",
        "lowercase",
        "strip_digit_punctuation",
        "transliterate",
        "strip_non_ascii",
        "trim",
        "purge_empty",
    ]


def test_disabled_stage_is_absent():
    for table in (TEXT_STAGES, TITLE_STAGES, AUTHOR_STAGES):
        assert "html_decode" not in names(build_stages(table, CleanerConfig()))


def test_token_stages_run_in_order_per_token():
    calls = []

    def first(token):
        calls.append(("first", token.text))

    def second(token):
        calls.append(("second", token.text))

    def drop_last(tokens, config):
        calls.append(("sequence", len(tokens)))
        del tokens[-1]

    stages = [token_stage("first", first), token_stage("second", second), sequence_stage("drop", drop_last)]
    tokens = make_tokens(["a", "b"])
    run_stages(stages, tokens, CleanerConfig())

    assert calls == [
        ("first", "a"), ("second", "a"),
        ("first", "b"), ("second", "b"),
        ("sequence", 2),
    ]
    assert tokens == ["a"]


def test_unknown_stage_kind():
    with pytest.raises(ValueError):
        run_stages([Stage("odd", "other", print)], [], CleanerConfig())
