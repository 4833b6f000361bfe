"""Monthly temperature model."""

import math

from .climate_config import ClimateConfig
from .climate_util import month_phase_sin


def _clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def temperature_c(
    latitude_rad: float,
    elevation_km: float,
    is_ocean: bool,
    coast_distance_km: float,
    month_idx: int,
    cfg: ClimateConfig,
) -> float:
    """Monthly temperature (degrees C) at a point.

    Combines a latitudinal gradient, a hemisphere-aware seasonal swing
    (damped over ocean), an altitude lapse and maritime buffering of land
    near the coast.
    """
    abs_lat = abs(latitude_rad)
    t = _clamp(abs_lat / (math.pi / 2.0), 0.0, 1.0)

    # Nonlinear curve gives larger polar contrast.
    lat_w = t ** 1.15
    baseline = cfg.equator_temp_c * (1.0 - lat_w) + cfg.pole_temp_c * lat_w

    # Positive at northern-hemisphere summer; sin(lat) flips the south.
    tilt_scale = _clamp(cfg.axial_tilt_deg / 23.44, 0.0, 2.0)
    s = month_phase_sin(month_idx, cfg.months, cfg.season_phase)
    seasonal = s * cfg.seasonality_c * tilt_scale * math.sin(latitude_rad)
    if is_ocean:
        seasonal *= 0.35

    above_sea_km = max(elevation_km - cfg.sea_level, 0.0)
    lapse = cfg.lapse_rate_c_per_km * above_sea_km

    temp = baseline + seasonal - lapse

    if not is_ocean and math.isfinite(coast_distance_km):
        w = _clamp(math.exp(-coast_distance_km / max(cfg.maritime_buffer_km, 1.0)), 0.0, 1.0)
        ocean_baseline = baseline * 0.6 + cfg.ocean_temp_c * 0.4
        temp = temp * (1.0 - w) + ocean_baseline * w

    return temp