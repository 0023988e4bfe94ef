import pytest

from b_cleaner import SUPPORTED_ALGORITHMS, Stemmer, TitleCleaner
from b_cleaner.tokens import Token


def test_supported_algorithms():
    assert "english" in SUPPORTED_ALGORITHMS
    assert "french" in SUPPORTED_ALGORITHMS


def test_unsupported_algorithm_fails_fast():
    with pytest.raises(ValueError):
        Stemmer("klingon")


def test_unsupported_algorithm_fails_at_cleaner_construction():
    with pytest.raises(ValueError):
        TitleCleaner(["Lorem"], stemming=True, stem_algorithm="klingon")


def test_algorithm_name_is_case_insensitive():
    assert Stemmer("English").algorithm == "english"


def test_stem_token_only_replaces_when_different():
    stemmer = Stemmer("english")
    token = Token("running")
    stemmer.stem_token(token)
    assert token.text == "run"
    assert token.owned

    raw = "cat"
    token = Token(raw)
    stemmer.stem_token(token)
    assert token.text is raw
    assert not token.owned


def test_cleaner_stem_after_clean():
    title = TitleCleaner(["Running", "Cats"], stemming=True)
    assert title.clean().stem().strings() == ["run", "cat"]


def test_cleaner_stem_requires_stemming_enabled():
    title = TitleCleaner(["Running", "Cats"]).clean()
    with pytest.raises(RuntimeError):
        title.stem()


def test_cleaner_stem_uses_configured_algorithm():
    title = TitleCleaner(["Running"], stemming=True, stem_algorithm="porter")
    assert title.clean().stem().strings() == ["run"]


def test_stem_takes_no_algorithm_argument():
    title = TitleCleaner(["Running"], stemming=True).clean()
    with pytest.raises(TypeError):
        title.stem("porter")
