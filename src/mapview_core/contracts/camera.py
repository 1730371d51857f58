from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LatLng:
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True)
class CameraPosition:
    """Initial camera pose: where the map looks and from which angle."""
    target: Optional[LatLng] = None
    zoom: float = 0.0
    bearing: float = 0.0  # degrees clockwise from north
    tilt: float = 0.0     # degrees from nadir
