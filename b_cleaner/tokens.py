"""Ownership-tagged tokens.

A token starts as a *view*: it holds the exact string object the caller
handed in. A transform only swaps in a new string (making the token *owned*)
when its output actually differs, so tokens that are already canonical never
cost a new string.
"""

from typing import Iterable, List, Tuple


class Token:
    """A string value plus an ownership tag."""

    __slots__ = ("text", "owned")

    def __init__(self, text: str, owned: bool = False):
        self.text = text
        self.owned = owned

    @classmethod
    def view(cls, value) -> "Token":
        if isinstance(value, str):
            return cls(value)
        return cls(str(value), owned=True)

    def replace(self, text: str) -> bool:
        """Swap in ``text`` if it differs from the current content.

        Returns:
            True if the token changed
        """
        if text == self.text:
            return False
        self.text = text
        self.owned = True
        return True

    def startswith(self, prefix) -> bool:
        return self.text.startswith(prefix)

    def endswith(self, suffix) -> bool:
        return self.text.endswith(suffix)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        tag = "owned" if self.owned else "view"
        return f"Token({self.text!r}, {tag})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Token):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    # text is mutable, so tokens cannot be set members or dict keys
    __hash__ = None


def make_tokens(values: Iterable) -> List[Token]:
    """Wrap each input string in a view token, preserving order."""
    return [Token.view(v) for v in values]


def count_ownership(tokens: Iterable[Token]) -> Tuple[int, int]:
    """Count owned and view tokens.

    Returns:
        Tuple of (owned, view)
    """
    owned = 0
    view = 0
    for token in tokens:
        if token.owned:
            owned += 1
        else:
            view += 1
    return owned, view
