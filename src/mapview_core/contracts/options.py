from __future__ import annotations

"""The map options record and its fluent builder.

``MapOptions`` is a frozen snapshot handed to whatever constructs the map
surface. ``MapOptionsBuilder`` is the mutable, chainable surface used to put a
snapshot together (or to re-open one via ``MapOptions.to_builder()``).
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Hashable, Optional, Sequence, Tuple

import numpy as np

from ..constants import MAXIMUM_ZOOM, MINIMUM_ZOOM
from .camera import CameraPosition
from .colors import NO_TINT, TRANSPARENT
from .errors import ValidationError
from .gravity import Gravity
from .images import ImageHandle
from .provenance import ArtifactFingerprint

# left, top, right, bottom
Margins = Tuple[int, int, int, int]

_SEQUENCE_FIELDS = (
    "compass_margins",
    "logo_margins",
    "attribution_margins",
    "my_location_background_padding",
)
_IMAGE_FIELDS = (
    "my_location_foreground_drawable",
    "my_location_foreground_bearing_drawable",
    "my_location_background_drawable",
)
_ZOOM_FIELDS = ("min_zoom", "max_zoom")


def coerce_margins(value: Optional[Sequence[int]], name: str = "margins") -> Optional[Margins]:
    """Normalize an LTRB sequence to a 4-tuple; ``None`` stays unset."""
    if value is None:
        return None
    if isinstance(value, (str, bytes)):
        raise ValidationError(f"{name} must be a sequence of 4 ints")
    items = tuple(int(v) for v in value)
    if len(items) != 4:
        raise ValidationError(f"{name} must have exactly 4 values (left, top, right, bottom), got {len(items)}")
    return items  # type: ignore[return-value]


def quantize_zoom(value: float) -> float:
    """Round a zoom level to the nearest 32-bit float, the width records store it at.

    Magnitudes past the 32-bit range become infinities, as a narrowing cast would.
    """
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def image_key(handle: Any) -> Hashable:
    """Equality key for an indicator image handle.

    Named ``ImageHandle`` values compare by name; any other handle (decoded
    pixels, arrays, platform objects) compares by identity, never by content.
    """
    if handle is None or isinstance(handle, ImageHandle):
        return handle
    return ("identity", id(handle))


@dataclass(frozen=True)
class MapOptions:
    """Initial state of a map view: camera, chrome, gestures, zoom bounds, location indicator."""

    camera: Optional[CameraPosition] = None
    debug_active: bool = False

    compass_enabled: bool = True
    compass_gravity: int = Gravity.TOP | Gravity.END
    compass_margins: Optional[Margins] = None

    logo_enabled: bool = True
    logo_gravity: int = Gravity.BOTTOM | Gravity.START
    logo_margins: Optional[Margins] = None

    attribution_enabled: bool = True
    attribution_gravity: int = Gravity.BOTTOM
    attribution_margins: Optional[Margins] = None
    attribution_tint_color: int = NO_TINT

    min_zoom: float = MINIMUM_ZOOM
    max_zoom: float = MAXIMUM_ZOOM

    rotate_gestures_enabled: bool = True
    scroll_gestures_enabled: bool = True
    tilt_gestures_enabled: bool = True
    zoom_gestures_enabled: bool = True
    zoom_controls_enabled: bool = False

    location_enabled: bool = False
    my_location_foreground_drawable: Any = field(default=None, compare=False)
    my_location_foreground_bearing_drawable: Any = field(default=None, compare=False)
    my_location_background_drawable: Any = field(default=None, compare=False)
    my_location_foreground_tint_color: int = TRANSPARENT
    my_location_background_tint_color: int = TRANSPARENT
    my_location_background_padding: Optional[Margins] = None
    my_location_accuracy_tint_color: int = 0
    my_location_accuracy_alpha: int = 0

    style_url: Optional[str] = None
    access_token: Optional[str] = None  # deprecated, kept for older layouts

    def __post_init__(self) -> None:
        for name in _SEQUENCE_FIELDS:
            object.__setattr__(self, name, coerce_margins(getattr(self, name), name))
        for name in _ZOOM_FIELDS:
            object.__setattr__(self, name, quantize_zoom(getattr(self, name)))

    def _identity(self) -> Tuple[Hashable, ...]:
        compared = tuple(getattr(self, f.name) for f in fields(self) if f.compare)
        return compared + tuple(image_key(getattr(self, name)) for name in _IMAGE_FIELDS)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._identity() == other._identity()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._identity())

    @staticmethod
    def builder() -> "MapOptionsBuilder":
        return MapOptionsBuilder()

    def to_builder(self) -> "MapOptionsBuilder":
        return MapOptionsBuilder(self)

    def without_images(self) -> "MapOptions":
        """Copy with the three indicator image handles cleared."""
        return self.to_builder().my_location_foreground_drawables(None, None).my_location_background_drawable(None).build()

    def has_images(self) -> bool:
        return any(getattr(self, name) is not None for name in _IMAGE_FIELDS)

    def fingerprint(self) -> ArtifactFingerprint:
        return ArtifactFingerprint.of_json(options_payload(self))


def _image_payload(handle: Any) -> Any:
    if handle is None:
        return None
    if isinstance(handle, ImageHandle):
        return handle.name
    return f"<{type(handle).__name__}>"


def _camera_payload(camera: Optional[CameraPosition]) -> Optional[dict[str, Any]]:
    if camera is None:
        return None
    target = camera.target
    return {
        "target": None if target is None else {"latitude": target.latitude, "longitude": target.longitude},
        "zoom": camera.zoom,
        "bearing": camera.bearing,
        "tilt": camera.tilt,
    }


def options_payload(options: MapOptions) -> dict[str, Any]:
    """Plain-data view of a record (JSON-friendly; image handles by name)."""
    payload: Dict[str, Any] = {}
    for f in fields(MapOptions):
        value = getattr(options, f.name)
        if f.name == "camera":
            payload[f.name] = _camera_payload(value)
        elif f.name in _IMAGE_FIELDS:
            payload[f.name] = _image_payload(value)
        elif f.name in _SEQUENCE_FIELDS:
            payload[f.name] = None if value is None else list(value)
        else:
            payload[f.name] = value
    return payload


class MapOptionsBuilder:
    """Chainable setters over a working copy; ``build()`` returns a frozen ``MapOptions``."""

    def __init__(self, base: Optional[MapOptions] = None) -> None:
        base = base if base is not None else MapOptions()
        self._values: Dict[str, Any] = {f.name: getattr(base, f.name) for f in fields(MapOptions)}

    def _set(self, name: str, value: Any) -> "MapOptionsBuilder":
        self._values[name] = value
        return self

    def _set_margins(self, name: str, value: Optional[Sequence[int]]) -> "MapOptionsBuilder":
        return self._set(name, coerce_margins(value, name))

    def camera(self, camera: Optional[CameraPosition]) -> "MapOptionsBuilder":
        return self._set("camera", camera)

    def access_token(self, token: Optional[str]) -> "MapOptionsBuilder":
        return self._set("access_token", token)

    def style_url(self, url: Optional[str]) -> "MapOptionsBuilder":
        return self._set("style_url", url)

    def debug_active(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("debug_active", enabled)

    def min_zoom(self, zoom: float) -> "MapOptionsBuilder":
        return self._set("min_zoom", zoom)

    def max_zoom(self, zoom: float) -> "MapOptionsBuilder":
        return self._set("max_zoom", zoom)

    def compass_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("compass_enabled", enabled)

    def compass_gravity(self, gravity: int) -> "MapOptionsBuilder":
        return self._set("compass_gravity", gravity)

    def compass_margins(self, margins: Optional[Sequence[int]]) -> "MapOptionsBuilder":
        return self._set_margins("compass_margins", margins)

    def logo_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("logo_enabled", enabled)

    def logo_gravity(self, gravity: int) -> "MapOptionsBuilder":
        return self._set("logo_gravity", gravity)

    def logo_margins(self, margins: Optional[Sequence[int]]) -> "MapOptionsBuilder":
        return self._set_margins("logo_margins", margins)

    def attribution_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("attribution_enabled", enabled)

    def attribution_gravity(self, gravity: int) -> "MapOptionsBuilder":
        return self._set("attribution_gravity", gravity)

    def attribution_margins(self, margins: Optional[Sequence[int]]) -> "MapOptionsBuilder":
        return self._set_margins("attribution_margins", margins)

    def attribution_tint_color(self, color: int) -> "MapOptionsBuilder":
        return self._set("attribution_tint_color", color)

    def rotate_gestures_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("rotate_gestures_enabled", enabled)

    def scroll_gestures_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("scroll_gestures_enabled", enabled)

    def tilt_gestures_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("tilt_gestures_enabled", enabled)

    def zoom_gestures_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("zoom_gestures_enabled", enabled)

    def zoom_controls_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("zoom_controls_enabled", enabled)

    def location_enabled(self, enabled: bool) -> "MapOptionsBuilder":
        return self._set("location_enabled", enabled)

    def my_location_foreground_drawables(self, foreground: Any, bearing: Any) -> "MapOptionsBuilder":
        self._set("my_location_foreground_drawable", foreground)
        return self._set("my_location_foreground_bearing_drawable", bearing)

    def my_location_foreground_drawable(self, foreground: Any) -> "MapOptionsBuilder":
        return self._set("my_location_foreground_drawable", foreground)

    def my_location_background_drawable(self, background: Any) -> "MapOptionsBuilder":
        return self._set("my_location_background_drawable", background)

    def my_location_foreground_tint_color(self, color: int) -> "MapOptionsBuilder":
        return self._set("my_location_foreground_tint_color", color)

    def my_location_background_tint_color(self, color: int) -> "MapOptionsBuilder":
        return self._set("my_location_background_tint_color", color)

    def my_location_background_padding(self, padding: Optional[Sequence[int]]) -> "MapOptionsBuilder":
        return self._set_margins("my_location_background_padding", padding)

    def my_location_accuracy_tint(self, color: int) -> "MapOptionsBuilder":
        return self._set("my_location_accuracy_tint_color", color)

    def my_location_accuracy_alpha(self, alpha: int) -> "MapOptionsBuilder":
        # 0..255 by convention; not enforced.
        return self._set("my_location_accuracy_alpha", alpha)

    def build(self) -> MapOptions:
        return MapOptions(**self._values)
