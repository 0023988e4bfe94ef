"""Stage descriptors and the runner shared by every cleaning pipeline."""

from typing import Callable, Iterable, List, NamedTuple, Optional

from ..config import CleanerConfig
from ..tokens import Token

SEQUENCE = "sequence"
TOKEN = "token"


class Stage(NamedTuple):
    """One step of a pipeline.

    Sequence stages are called as ``func(tokens, config)`` and may add or
    remove tokens. Token stages are called as ``func(token)`` for every token.
    ``requires`` names a boolean :class:`CleanerConfig` field; the stage only
    exists in the built pipeline when that flag is set.
    """

    name: str
    kind: str
    func: Callable
    requires: Optional[str] = None


def sequence_stage(name: str, func: Callable, requires: Optional[str] = None) -> Stage:
    return Stage(name, SEQUENCE, func, requires)


def token_stage(name: str, func: Callable, requires: Optional[str] = None) -> Stage:
    return Stage(name, TOKEN, func, requires)


def build_stages(table: Iterable[Stage], config: CleanerConfig) -> List[Stage]:
    """Select the stages of ``table`` enabled by ``config``, keeping their order."""
    return [s for s in table if s.requires is None or getattr(config, s.requires)]


def run_stages(stages: List[Stage], tokens: List[Token], config: CleanerConfig):
    """Run built stages over ``tokens`` in place.

    Consecutive token stages are applied to each token in a single pass.
    """
    pending: List[Callable] = []

    def flush():
        if pending:
            for token in tokens:
                for func in pending:
                    func(token)
            pending.clear()

    for stage in stages:
        if stage.kind == TOKEN:
            pending.append(stage.func)
        elif stage.kind == SEQUENCE:
            flush()
            stage.func(tokens, config)
        else:
            raise ValueError(f"Unknown stage kind: {stage.kind}")
    flush()
