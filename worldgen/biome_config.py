"""Configuration for biome classification and derived map generation."""

from dataclasses import dataclass


@dataclass
class BiomeConfig:
    """Biome classification settings.

    Heights are in km, temperatures in degrees Celsius and precipitation in
    mm/year.
    """

    # Pixels at or below this height (km) are ocean and masked out.
    sea_level: float = 0.0
    # Seed for biome boundary jitter (ecotones).
    seed: int = 0

    # Ecotone jitter (noise-perturbed boundaries).
    jitter_temp_c: float = 1.5
    jitter_precip_mm: float = 120.0
    jitter_frequency: float = 1.25

    # Derived maps.
    roughness_scale: float = 0.75
    river_veg_boost: float = 0.25

    # Snow overlay is 0 at/above melt and 1 at/below freeze.
    snow_melt_temp_c: float = 2.0
    snow_freeze_temp_c: float = -12.0