"""Text, title and author cleaners.

All three cleaners share one engine and differ only by their stage table:

    text:   min length → primitives → empty purge
    title:  subtitle → () spans → [] spans → min length → primitives → empty purge
    author: () spans → [] spans → author primitives → empty purge

Usage:
    title = TitleCleaner(["Lorem", "ipsum", "dolor", ":", "sit", "amet"])
    title.clean()
    title.strings()  # ["lorem", "ipsum", "dolor"]
"""

from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from .config import CleanerConfig
from .stages import AUTHOR_STAGES, TEXT_STAGES, TITLE_STAGES, Stage, build_stages, run_stages
from .stemming import get_stemmer
from .tokens import Token, make_tokens


class Cleaner:
    """Base cleaner: holds one token sequence and runs a stage table over it.

    Tokens start as views on the caller's strings; nothing is copied until a
    transform actually changes a token.

    Args:
        tokens: Pre-tokenized input, e.g. a whitespace-split title
        config: Cleaner settings, defaults to ``CleanerConfig()``
        **overrides: Individual ``CleanerConfig`` fields to override

    Raises:
        ValueError: If stemming is enabled with an unsupported algorithm
    """

    name = "base"
    stages: Tuple[Stage, ...] = ()

    def __init__(self, tokens: Iterable[str], config: Optional[CleanerConfig] = None, **overrides):
        config = config or CleanerConfig()
        self.config = replace(config, **overrides) if overrides else config
        self._tokens = make_tokens(tokens)
        self._stemmer = get_stemmer(self.config.stem_algorithm) if self.config.stemming else None

    def tokens(self) -> List[Token]:
        return self._tokens

    def strings(self) -> List[str]:
        return [t.text for t in self._tokens]

    def clean(self) -> "Cleaner":
        run_stages(build_stages(self.stages, self.config), self._tokens, self.config)
        return self

    def stem(self) -> "Cleaner":
        """Replace each token by its stem with the configured algorithm.
        Call after :meth:`clean`.

        Raises:
            RuntimeError: If stemming is not enabled in the config
        """
        if self._stemmer is None:
            raise RuntimeError("Stemming requested without enabling stemming in the cleaner config.")
        self._stemmer.stem_tokens(self._tokens)
        return self

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.strings()!r})"


class TextCleaner(Cleaner):
    """Clean free text: short tokens are dropped, then each token is
    lowercased, folded to ASCII and stripped of digits and punctuation."""

    name = "text"
    stages = TEXT_STAGES

    def set_min_length(self, threshold: int) -> "TextCleaner":
        """Set the inclusive length threshold; tokens with len <= threshold are removed."""
        self.config = replace(self.config, token_min_length=threshold)
        return self


class TitleCleaner(TextCleaner):
    """Clean a title: the subtitle and parenthesised or bracketed
    annotations are removed before the text cleaning steps."""

    name = "title"
    stages = TITLE_STAGES


class AuthorCleaner(Cleaner):
    """Clean author names. No length filtering, so initials survive."""

    name = "author"
    stages = AUTHOR_STAGES


CLEANERS = {
    TextCleaner.name: TextCleaner,
    TitleCleaner.name: TitleCleaner,
    AuthorCleaner.name: AuthorCleaner,
}


def get_cleaner_class(name: str):
    """Look up a cleaner class by name ("text", "title" or "author")."""
    try:
        return CLEANERS[name]
    except KeyError:
        raise ValueError(f"Unknown cleaner: {name}") from None
