import numpy as np
import pytest

from worldgen.rivers import (
    NO_DOWNSTREAM,
    compute_flow_accumulation,
    compute_flow_directions_8,
    river_mask_from_accum,
    rivers_from_heights,
)


def grid_neighbors8(n):
    def nb(idx):
        y, x = divmod(idx, n)
        out = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                out.append(((y + dy) % n) * n + (x + dx) % n)
        return out

    return nb


def bowl(n):
    c = (n - 1) / 2
    ys, xs = np.mgrid[0:n, 0:n]
    return ((xs - c) ** 2 + (ys - c) ** 2 + 0.01 * xs + 0.001 * ys).ravel()


def test_flat_field_has_no_flow():
    h = np.zeros(16)
    down = compute_flow_directions_8(h, grid_neighbors8(4))
    assert (down == NO_DOWNSTREAM).all()
    accum = compute_flow_accumulation(h, down)
    assert (accum == 1).all()


def test_downstream_is_strictly_lower_steepest_neighbor():
    n = 6
    h = bowl(n)
    nb = grid_neighbors8(n)
    down = compute_flow_directions_8(h, nb)
    for i, d in enumerate(down):
        lower = [h[j] for j in nb(i) if h[j] < h[i]]
        if d == NO_DOWNSTREAM:
            assert not lower
        else:
            assert h[d] < h[i]
            assert h[d] == min(lower)


def test_accumulation_conserves_cells_at_sinks():
    n = 7
    h = bowl(n)
    down = compute_flow_directions_8(h, grid_neighbors8(n))
    accum = compute_flow_accumulation(h, down)
    sinks = down == NO_DOWNSTREAM
    assert accum[sinks].sum() == h.size
    assert (accum >= 1).all()


def test_accumulation_is_one_plus_upstream_sum():
    n = 5
    h = bowl(n)
    down = compute_flow_directions_8(h, grid_neighbors8(n))
    accum = compute_flow_accumulation(h, down)
    for i in range(h.size):
        upstream = [accum[j] for j in range(h.size) if down[j] == i]
        assert accum[i] == 1 + sum(upstream)


def test_accumulation_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        compute_flow_accumulation([1.0, 2.0], [NO_DOWNSTREAM])


def test_river_mask_threshold():
    mask = river_mask_from_accum([1, 5, 10, 3], 5)
    assert mask.tolist() == [0, 255, 255, 0]
    assert mask.dtype == np.uint8


def test_rivers_from_heights_is_consistent():
    n = 6
    h = bowl(n)
    nb = grid_neighbors8(n)
    down, accum, mask = rivers_from_heights(h, nb, 3)
    assert np.array_equal(down, compute_flow_directions_8(h, nb))
    assert np.array_equal(accum, compute_flow_accumulation(h, down))
    assert np.array_equal(mask == 255, accum >= 3)