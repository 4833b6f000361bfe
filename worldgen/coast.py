"""Distance from the coastline over a cell graph."""

from collections import deque
from collections.abc import Callable, Iterable

import numpy as np

Neighbors = Callable[[int], Iterable[int]]


def compute_coast_distance_km(heights, sea_level: float, neighbors4: Neighbors, step_km: float, inland_steps: int) -> np.ndarray:
    """Distance (km) from every land cell to the nearest coastline.

    A coastline cell is land with an ocean neighbour. Ocean cells get 0. Land
    that no coastline reaches (e.g. an all-land planet) is treated as far
    inland: ``step_km * inland_steps``.
    """
    h = np.asarray(heights, dtype=float)
    is_ocean = h <= sea_level
    total = h.size

    dist = [-1] * total
    queue: deque[int] = deque()
    for idx in range(total):
        if is_ocean[idx]:
            continue
        if any(is_ocean[n] for n in neighbors4(idx)):
            dist[idx] = 0
            queue.append(idx)

    while queue:
        idx = queue.popleft()
        d = dist[idx]
        for n in neighbors4(idx):
            if dist[n] == -1:
                dist[n] = d + 1
                queue.append(n)

    out = np.zeros(total, dtype=float)
    for idx, ds in enumerate(dist):
        if is_ocean[idx]:
            continue
        out[idx] = step_km * (inland_steps if ds == -1 else ds)
    return out