"""Pipeline stages for the b-cleaner cleaners."""

from .base import Stage, SEQUENCE, TOKEN, build_stages, run_stages
from .tables import TEXT_STAGES, TITLE_STAGES, AUTHOR_STAGES

__all__ = [
    "Stage",
    "SEQUENCE",
    "TOKEN",
    "build_stages",
    "run_stages",
    "TEXT_STAGES",
    "TITLE_STAGES",
    "AUTHOR_STAGES",
]
