import math

import pytest

from worldgen.climate_config import ClimateConfig
from worldgen.temperature import temperature_c


def test_equator_is_warmer_than_pole_in_annual_baseline():
    cfg = ClimateConfig()
    equator = temperature_c(0.0, 0.0, False, 1e9, 0, cfg)
    pole = temperature_c(math.pi / 2, 0.0, False, 1e9, 0, cfg)
    assert equator > pole


def test_higher_elevation_is_colder_by_lapse_rate():
    cfg = ClimateConfig(sea_level=0.0)
    coast_far = 1e9
    lat = 0.25
    t0 = temperature_c(lat, 0.0, False, coast_far, 0, cfg)
    t1 = temperature_c(lat, 1.0, False, coast_far, 0, cfg)
    assert abs((t0 - t1) - cfg.lapse_rate_c_per_km) < 1e-3


def test_below_sea_level_has_no_lapse():
    cfg = ClimateConfig()
    a = temperature_c(0.3, 0.0, True, 0.0, 2, cfg)
    b = temperature_c(0.3, -3.0, True, 0.0, 2, cfg)
    assert a == pytest.approx(b)


def test_no_tilt_means_hemispheres_match():
    cfg = ClimateConfig(axial_tilt_deg=0.0)
    for month in range(12):
        north = temperature_c(0.6, 0.0, False, math.inf, month, cfg)
        south = temperature_c(-0.6, 0.0, False, math.inf, month, cfg)
        assert north == pytest.approx(south)


def test_seasons_are_opposite_half_a_year_apart():
    cfg = ClimateConfig()
    d0 = temperature_c(0.5, 0.0, False, math.inf, 0, cfg) - temperature_c(-0.5, 0.0, False, math.inf, 0, cfg)
    d6 = temperature_c(0.5, 0.0, False, math.inf, 6, cfg) - temperature_c(-0.5, 0.0, False, math.inf, 6, cfg)
    assert d0 == pytest.approx(-d6)
    assert abs(d0) > 0.0


def test_ocean_damps_seasonal_swing():
    cfg = ClimateConfig()
    land = temperature_c(0.5, 0.0, False, math.inf, 1, cfg) - temperature_c(-0.5, 0.0, False, math.inf, 1, cfg)
    ocean = temperature_c(0.5, 0.0, True, math.inf, 1, cfg) - temperature_c(-0.5, 0.0, True, math.inf, 1, cfg)
    assert ocean == pytest.approx(0.35 * land)


def test_coastline_land_is_fully_buffered():
    cfg = ClimateConfig()
    low = temperature_c(0.4, 0.0, False, 0.0, 3, cfg)
    high = temperature_c(0.4, 2.0, False, 0.0, 3, cfg)
    assert low == pytest.approx(high)


def test_infinite_coast_distance_matches_far_inland():
    cfg = ClimateConfig()
    far = temperature_c(0.4, 0.5, False, 1e9, 3, cfg)
    inf = temperature_c(0.4, 0.5, False, math.inf, 3, cfg)
    assert far == pytest.approx(inf)