"""Erosion configuration."""

import math
from dataclasses import dataclass, field
from enum import Enum


class ErosionBackend(Enum):
    """Which implementation runs hydraulic and thermal erosion."""

    AUTO = "auto"
    GPU_ONLY = "gpu_only"
    CPU_ONLY = "cpu_only"


@dataclass(frozen=True)
class SeaLevelOutlet:
    """Outlet model: every cell at or below ``sea_level`` drains freely."""

    sea_level: float = 0.0


@dataclass
class ErosionConfig:
    """Parameters for hydraulic and thermal erosion."""

    backend: ErosionBackend = ErosionBackend.AUTO
    hydraulic_steps: int = 200
    rainfall: float = 0.01
    evaporation: float = 0.02

    erosion_rate: float = 0.02
    deposition_rate: float = 0.02
    sediment_capacity: float = 0.05

    thermal_iterations: int = 150
    angle_of_repose_rad: float = math.radians(35.0)
    thermal_strength: float = 0.25

    outlet_model: SeaLevelOutlet = field(default_factory=SeaLevelOutlet)

    river_accum_threshold: int = 500
    keep_intermediates: bool = False
    # Record the net per-cell height change caused by erosion.
    track_deposition: bool = False