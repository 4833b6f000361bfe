"""Pan and zoom state of the equirectangular cube-map viewer."""

import math
from dataclasses import dataclass

MODE_HEIGHT = 0
MODE_BIOMES = 1

_HALF_PI = math.pi / 2.0
_MIN_ZOOM = 0.25
_MAX_ZOOM = 128.0


def _clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def lon_lat_from_screen(uv, center_lon: float, center_lat: float, zoom: float, aspect: float) -> tuple[float, float]:
    """Longitude and latitude (radians) shown at normalized screen point ``uv``.

    The full map keeps 2:1 proportions; latitude is clamped to the poles.
    """
    ux, uy = uv
    lon = center_lon + (ux - 0.5) * (math.pi * aspect) / zoom
    lat = center_lat + (0.5 - uy) * math.pi / zoom
    return lon, _clamp(lat, -_HALF_PI, _HALF_PI)


def wrap_lon(lon: float) -> float:
    """Wrap a longitude into [-pi, pi]."""
    x = lon
    if x > math.pi:
        x -= math.tau * math.floor((x + math.pi) / math.tau)
    if x < -math.pi:
        x += math.tau * math.floor((-x + math.pi) / math.tau)
    return _clamp(x, -math.pi, math.pi)


@dataclass
class ViewState:
    """Centre, zoom and display mode of the viewer window."""

    width: int = 960
    height: int = 540
    has_biomes: bool = False
    center_lon: float = 0.0
    center_lat: float = 0.0
    zoom_level: float = 1.0
    mode: int = MODE_HEIGHT

    def __post_init__(self) -> None:
        self.width = max(int(self.width), 1)
        self.height = max(int(self.height), 1)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def resize(self, width: int, height: int) -> None:
        """Adopt a new window size; zero sizes are treated as one pixel."""
        self.width = max(int(width), 1)
        self.height = max(int(height), 1)

    def pan_pixels(self, dx: float, dy: float) -> None:
        """Move the view by a cursor drag of ``(dx, dy)`` pixels."""
        lon_delta = (dx / self.width) * (math.pi * self.aspect) / self.zoom_level
        lat_delta = (-dy / self.height) * math.pi / self.zoom_level
        self.center_lon += lon_delta
        self.center_lat = _clamp(self.center_lat + lat_delta, -_HALF_PI, _HALF_PI)

    def zoom(self, scroll_y: float, cursor=None) -> None:
        """Zoom by ``1.1 ** scroll_y``, keeping the point under ``cursor`` fixed."""
        old_zoom = self.zoom_level
        new_zoom = _clamp(old_zoom * 1.1 ** scroll_y, _MIN_ZOOM, _MAX_ZOOM)

        if cursor is not None:
            cx, cy = cursor
            uv = (cx / self.width, cy / self.height)
            lon0, lat0 = lon_lat_from_screen(uv, self.center_lon, self.center_lat, old_zoom, self.aspect)
            lon1, lat1 = lon_lat_from_screen(uv, self.center_lon, self.center_lat, new_zoom, self.aspect)
            self.center_lon += lon0 - lon1
            self.center_lat = _clamp(self.center_lat + (lat0 - lat1), -_HALF_PI, _HALF_PI)

        self.zoom_level = new_zoom

    def select_mode(self, mode: int) -> None:
        """Switch display mode; the biome mode needs biome data."""
        if mode == MODE_HEIGHT:
            self.mode = MODE_HEIGHT
        elif mode == MODE_BIOMES:
            if self.has_biomes:
                self.mode = MODE_BIOMES
        else:
            raise ValueError(f"unknown view mode: {mode}")