import pytest

from b_cleaner import AuthorCleaner, CleanerConfig, TextCleaner, TitleCleaner, count_ownership


def test_title_cleaner_drops_subtitle():
    title = TitleCleaner(["Lorem", "ipsum", "dolor", ":", "sit", "amet"])
    title.clean()
    assert title.tokens() == ["lorem", "ipsum", "dolor"]


def test_title_cleaner_min_length_boundary():
    title = TitleCleaner(["Lorem", "ipsum", "dolor", "sit", "amet"])
    title.clean()
    assert title.strings() == ["lorem", "ipsum", "dolor", "amet"]


def test_title_cleaner_custom_min_length():
    title = TitleCleaner(["Lorem", "ipsum", "dolor", "sit", "amet"])
    title.set_min_length(4).clean()
    assert title.strings() == ["lorem", "ipsum", "dolor"]


def test_title_cleaner_removes_annotations():
    title = TitleCleaner(["Histoire", "(nouvelle", "édition)", "des", "Médecins", "[Texte", "imprimé]"])
    title.clean()
    assert title.strings() == ["histoire", "medecins"]


def test_title_cleaner_constructor_does_not_copy():
    raw = ["Lorem", "ipsum", "dolor"]
    title = TitleCleaner(raw)
    assert title.tokens() == raw
    assert all(t.text is r for t, r in zip(title.tokens(), raw))


def test_title_clean_only_copies_changed_tokens():
    raw = ["Lorem", "ipsum", "dolor"]
    title = TitleCleaner(raw).clean()
    tokens = title.tokens()
    assert tokens[0].owned
    assert tokens[1].text is raw[1]
    assert tokens[2].text is raw[2]
    assert count_ownership(tokens) == (1, 2)


def test_text_cleaner():
    text = TextCleaner(["Lorem", "ipsum", "dolor", ":", "sit", "amet"])
    text.clean()
    assert text.strings() == ["lorem", "ipsum", "dolor", "amet"]


def test_text_cleaner_custom_min_length():
    text = TextCleaner(["Lorem", "ipsum", "dolor", ":", "sit", "amet"])
    text.set_min_length(4)
    text.clean()
    assert text.strings() == ["lorem", "ipsum", "dolor"]


def test_author_cleaner():
    author = AuthorCleaner(["John", "W.", "Doe", "(1950-2020)"])
    author.clean()
    assert author.tokens() == ["john", "w", "doe"]


def test_author_cleaner_keeps_initials_and_accents():
    author = AuthorCleaner(["Émile", "Zola", "[pseud.]", "É."])
    assert author.clean().strings() == ["emile", "zola", "e"]


def test_author_cleaner_has_no_min_length():
    assert not hasattr(AuthorCleaner([]), "set_min_length")


def test_clean_returns_self():
    title = TitleCleaner(["Lorem"])
    assert title.clean() is title


@pytest.mark.parametrize("cleaner_cls,raw", [
    (TitleCleaner, ["Lorem", "ipsum", "dolor", ":", "sit", "amet"]),
    (TitleCleaner, ["L'Économie", "politique", "(1848)", "et", "Société"]),
    (TextCleaner, ["Straße", "und", "Wege", "(1920)"]),
    (AuthorCleaner, ["John", "W.", "Doe", "(1950-2020)"]),
    (AuthorCleaner, ["Søren", "Kierkegaard,", "(1813-1855)"]),
    (AuthorCleaner, ["Doe,", "John,", "1950-2020"]),
    (AuthorCleaner, ["Лев", "Толстой", "Όμηρος"]),
    (TitleCleaner, ["Europe", "1939-1945"]),
    (TitleCleaner, ["Ιστορία", "της", "Ελλάδας"]),
])
def test_clean_is_idempotent(cleaner_cls, raw):
    once = cleaner_cls(raw).clean().strings()
    twice = cleaner_cls(once).clean().strings()
    assert twice == once


def test_second_clean_call_changes_nothing():
    title = TitleCleaner(["Lorem", "ipsum", "dolor"]).clean()
    before = title.strings()
    assert title.clean().strings() == before


def test_order_is_preserved():
    raw = ["Zeta", "(x)", "alpha", "to", "Mid", "beta"]
    assert TitleCleaner(raw).clean().strings() == ["zeta", "alpha", "beta"]


@pytest.mark.parametrize("cleaner_cls", [TextCleaner, TitleCleaner, AuthorCleaner])
def test_empty_input(cleaner_cls):
    assert cleaner_cls([]).clean().strings() == []


def test_everything_filtered_out():
    assert TitleCleaner(["...", "(a)", "12"]).clean().strings() == []


def test_html_decode_disabled_by_default():
    text = TextCleaner(["&amp;", "Science"])
    assert text.clean().strings() == ["amp", "science"]


def test_html_decode_enabled():
    text = TextCleaner(["&amp;", "Science"], html_decode=True)
    assert text.clean().strings() == ["science"]


def test_html_decode_letter_entity():
    author = AuthorCleaner(["&Eacute;mile", "&eacute;;", "&#233;"], html_decode=True)
    # only tokens made of exactly one entity are decoded
    assert author.clean().strings() == ["eacutemile", "eacute", "e"]


def test_config_object_and_overrides():
    config = CleanerConfig(token_min_length=4)
    title = TitleCleaner(["Lorem", "amet"], config, html_decode=True)
    assert title.config.token_min_length == 4
    assert title.config.html_decode is True
    assert config.html_decode is False
    assert title.clean().strings() == ["lorem"]


def test_set_min_length_does_not_touch_shared_config():
    config = CleanerConfig()
    TitleCleaner(["Lorem"], config).set_min_length(10)
    assert config.token_min_length == 3


def test_author_cleaner_romanizes_non_latin_names():
    author = AuthorCleaner(["Лев", "Толстой", "Όμηρος"])
    assert author.clean().strings() == ["lev", "tolstoi", "omeros"]


def test_digit_ranges_leave_no_hyphen_behind():
    assert AuthorCleaner(["Doe,", "John,", "1950-2020"]).clean().strings() == ["doe", "john"]
    assert TitleCleaner(["Europe", "1939-1945"]).clean().strings() == ["europe"]
