"""Vector helpers shared by the climate computations."""

import math

import numpy as np

_UP = np.array([0.0, 1.0, 0.0])
_X = np.array([1.0, 0.0, 0.0])
_Z = np.array([0.0, 0.0, 1.0])


def _normalize_or_zero(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0 or not math.isfinite(length):
        return np.zeros(3)
    return v / length


def local_tangent_basis(p) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(east, north)`` unit tangents at unit sphere point ``p``.

    Near the poles an arbitrary but stable orthonormal basis is used.
    """
    p = np.asarray(p, dtype=float)
    north = _UP - p * float(np.dot(_UP, p))
    nlen = float(np.linalg.norm(north))
    if nlen < 1e-6:
        a = _X if abs(p[0]) < 0.9 else _Z
        north = _normalize_or_zero(a - p * float(np.dot(a, p)))
    else:
        north = north / nlen
    east = _normalize_or_zero(np.cross(p, north))
    return east, north


def month_phase_sin(month_idx: int, months: int, phase: float) -> float:
    """Seasonal sine sampled at the centre of ``month_idx``; in [-1, 1]."""
    months = max(months, 1)
    frac = (month_idx + 0.5) / months
    return math.sin(math.tau * (frac + phase))


def great_circle_step(p, tangent_dir, angle_rad: float) -> np.ndarray:
    """Step from ``p`` along tangent ``tangent_dir`` by ``angle_rad`` radians."""
    p = np.asarray(p, dtype=float)
    t = np.asarray(tangent_dir, dtype=float)
    return _normalize_or_zero(p * math.cos(angle_rad) + t * math.sin(angle_rad))