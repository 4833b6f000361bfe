"""River extraction from a heightfield: flow directions and accumulation."""

from collections.abc import Callable, Iterable

import numpy as np

NO_DOWNSTREAM = -1
_U32_MAX = 0xFFFFFFFF

Neighbors = Callable[[int], Iterable[int]]


def compute_flow_directions_8(heights, neighbors8: Neighbors) -> np.ndarray:
    """Steepest-descent downstream index per cell, or ``NO_DOWNSTREAM`` for sinks.

    Only strictly lower neighbours are considered; ties are ignored.
    """
    h = np.asarray(heights, dtype=float)
    down = np.full(h.size, NO_DOWNSTREAM, dtype=np.int64)
    for i, h0 in enumerate(h.tolist()):
        best_idx = NO_DOWNSTREAM
        best_h = h0
        for n in neighbors8(i):
            hn = h[n]
            if hn < best_h:
                best_h = hn
                best_idx = n
        down[i] = best_idx
    return down


def compute_flow_accumulation(heights, downstream) -> np.ndarray:
    """Number of cells draining through each cell (each cell counts itself)."""
    h = np.asarray(heights, dtype=float)
    down = np.asarray(downstream, dtype=np.int64)
    if h.size != down.size:
        raise ValueError("heights and downstream must have the same length")

    # Highest first, so upstream contributions arrive before they are passed on.
    order = np.argsort(-h, kind="stable")
    accum = [1] * h.size
    for i in order.tolist():
        d = int(down[i])
        if d != NO_DOWNSTREAM:
            accum[d] = min(accum[d] + accum[i], _U32_MAX)
    return np.array(accum, dtype=np.int64)


def river_mask_from_accum(accum, threshold: int) -> np.ndarray:
    """Binary river mask: 255 where accumulation reaches ``threshold``, else 0."""
    a = np.asarray(accum)
    return np.where(a >= threshold, 255, 0).astype(np.uint8)


def rivers_from_heights(heights, neighbors8: Neighbors, river_threshold: int):
    """Return ``(downstream, accumulation, river_mask)`` for a heightfield."""
    downstream = compute_flow_directions_8(heights, neighbors8)
    accum = compute_flow_accumulation(heights, downstream)
    mask = river_mask_from_accum(accum, river_threshold)
    return downstream, accum, mask