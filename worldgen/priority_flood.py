"""Priority-Flood depression filling on an arbitrary cell graph.

A closed planet has no boundary, so outlets are seeded from an outlet model
(every cell at or below sea level).
"""

import heapq
import itertools
import math
from collections.abc import Callable, Iterable

import numpy as np

from .erosion_config import SeaLevelOutlet

Neighbors = Callable[[int], Iterable[int]]


def priority_flood_fill(heights, neighbors4: Neighbors, outlet: SeaLevelOutlet) -> np.ndarray:
    """Return ``heights`` with every depression filled to its spill level.

    ``neighbors4(idx)`` yields the indices of the cells adjacent to ``idx``.
    If no cell lies at or below sea level, the global minimum is the outlet.
    """
    source = np.asarray(heights, dtype=float)
    filled = source.copy()
    visited = np.zeros(source.size, dtype=bool)
    counter = itertools.count()
    heap: list[tuple[float, int, int]] = []

    for idx in np.flatnonzero(source <= outlet.sea_level):
        idx = int(idx)
        visited[idx] = True
        heap.append((float(source[idx]), next(counter), idx))
    heapq.heapify(heap)

    if not heap and source.size:
        min_i, min_h = 0, math.inf
        for i, h in enumerate(source):
            if h < min_h:
                min_i, min_h = i, float(h)
        visited[min_i] = True
        heap.append((min_h, next(counter), min_i))

    while heap:
        h_cur, _, idx = heapq.heappop(heap)
        for n_idx in neighbors4(idx):
            if visited[n_idx]:
                continue
            visited[n_idx] = True
            new_h = max(float(filled[n_idx]), h_cur)
            filled[n_idx] = new_h
            heapq.heappush(heap, (new_h, next(counter), n_idx))

    return filled