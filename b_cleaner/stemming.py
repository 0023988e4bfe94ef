"""Optional stemming stage backed by NLTK's Snowball stemmers."""

from functools import lru_cache
from typing import Iterable

from nltk.stem.snowball import SnowballStemmer

from .tokens import Token

SUPPORTED_ALGORITHMS = tuple(SnowballStemmer.languages)


class Stemmer:
    """Stem tokens with one Snowball algorithm.

    Args:
        algorithm: Language identifier, one of ``SUPPORTED_ALGORITHMS``

    Raises:
        ValueError: If the algorithm is not supported
    """

    def __init__(self, algorithm: str):
        key = algorithm.lower() if isinstance(algorithm, str) else algorithm
        if key not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"Unsupported stemming algorithm: {algorithm!r}. "
                f"Choose one of: {', '.join(SUPPORTED_ALGORITHMS)}"
            )
        self.algorithm = key
        self._stemmer = SnowballStemmer(key)

    def stem_token(self, token: Token):
        token.replace(self._stemmer.stem(token.text))

    def stem_tokens(self, tokens: Iterable[Token]):
        for token in tokens:
            self.stem_token(token)


@lru_cache(maxsize=None)
def get_stemmer(algorithm: str) -> Stemmer:
    """Shared :class:`Stemmer` per algorithm; stemmers hold no per-input state."""
    return Stemmer(algorithm)
