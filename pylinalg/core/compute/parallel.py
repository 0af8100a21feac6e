"""
Bounded fan-out over independent units of work.

The pool size never depends on how many units there are: an order-20
adjoint submits 400 tasks but runs at most DEFAULT_MAX_WORKERS of them
at once. fan_out() returns only after every unit has finished, so a
caller never sees partial output.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from collections.abc import Callable, Iterable
from typing import TypeVar
import logging
import os

from pylinalg.core.validation import check_positive_int

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')

# Same sizing rule as ThreadPoolExecutor's own default.
DEFAULT_MAX_WORKERS = min(32, (os.cpu_count() or 1) + 4)


def resolve_max_workers(max_workers: int | None) -> int:
    """
    Resolve a per-call worker count.

    Args:
        max_workers: Requested worker count, or None for the default

    Returns:
        Worker count to use

    Raises:
        ValidationError: If max_workers is not an integer >= 1
    """
    if max_workers is None:
        return DEFAULT_MAX_WORKERS
    return check_positive_int(max_workers, 'max_workers')


def fan_out(
    fn: Callable[[T], R],
    units: Iterable[T],
    max_workers: int | None = None,
) -> list[R]:
    """
    Apply fn to every unit on a bounded thread pool and join.

    Args:
        fn: Work function; must only read shared state
        units: Units of work
        max_workers: Pool size, or None for DEFAULT_MAX_WORKERS

    Returns:
        Results in the same order as units

    Raises:
        Whatever fn raised first (in unit order); remaining units still
        run to completion before the pool shuts down.
    """
    workers = resolve_max_workers(max_workers)
    units = list(units)
    logger.debug("fan_out: %d units on %d workers", len(units), workers)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(fn, unit) for unit in units]
    # Leaving the with-block waits for every future.
    return [f.result() for f in futures]
