"""Data manipulation utility functions."""

from itertools import islice
from typing import Any, Iterable, Iterator, List


def batched(xs: Iterable[Any], n: int) -> Iterator[List[Any]]:
    """Yield successive n-sized chunks from an iterable.

    Args:
        xs: Items to batch
        n: Batch size

    Yields:
        Batches of size n (last batch may be smaller)
    """
    it = iter(xs)
    while True:
        chunk = list(islice(it, n))
        if not chunk:
            return
        yield chunk
