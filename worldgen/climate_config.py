"""Climate simulation parameters."""

from dataclasses import dataclass


@dataclass
class ClimateConfig:
    """Settings for the climate simulation.

    Temperatures are in degrees Celsius, elevation and distances in km and
    precipitation in mm.
    """

    sea_level: float = 0.0
    axial_tilt_deg: float = 23.44

    # Season model: number of months and a fractional year phase in [0, 1).
    months: int = 12
    season_phase: float = 0.0

    # Temperature model.
    equator_temp_c: float = 30.0
    pole_temp_c: float = -20.0
    lapse_rate_c_per_km: float = 6.5
    maritime_buffer_km: float = 450.0
    ocean_temp_c: float = 27.0
    seasonality_c: float = 25.0

    # Wind model.
    itcz_shift_deg: float = 10.0
    meridional_strength: float = 0.25

    # Moisture and precipitation model.
    ocean_evap_base_mm: float = 6.0
    rainout_rate: float = 0.06
    orographic_scale: float = 0.6
    iterations: int = 64

    @classmethod
    def earth_like(cls) -> "ClimateConfig":
        """Return the default, Earth-like configuration."""
        return cls()