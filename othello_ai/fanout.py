"""
Fan-out - Fork one task per root candidate and join them all.

A fresh ThreadPoolExecutor is created per call and sized to the number of
tasks. Results come back in completion order. Any task that raises turns the
whole join into a ConcurrencyFailure, so callers never act on a partial set.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Hashable, List, Sequence, Tuple, TypeVar

from othello.errors import ConcurrencyFailure

logger = logging.getLogger(__name__)

K = TypeVar('K', bound=Hashable)
T = TypeVar('T')


def fan_out(keys: Sequence[K], task: Callable[[K], T]) -> List[Tuple[K, T]]:
    """Run ``task(key)`` for every key concurrently; return (key, result) pairs."""
    if not keys:
        return []

    results = []
    with ThreadPoolExecutor(max_workers=len(keys)) as executor:
        futures = {executor.submit(task, key): key for key in keys}
        for future in as_completed(futures):
            key = futures[future]
            try:
                results.append((key, future.result()))
            except Exception as e:
                logger.error(f"Forked evaluation for {key} failed: {e}")
                raise ConcurrencyFailure(f"Subtree evaluation for {key} failed") from e
    return results
