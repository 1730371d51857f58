from __future__ import annotations

"""Build ``MapOptions`` from a styled attribute source.

Every field has a literal default used when the source has no value. Margin
and padding groups are read as four independent dimension queries and scaled
to device pixels at the import density, which is also bound to sources that
convert pixel dimensions themselves. The source is recycled on every exit
path; whatever it raises propagates unchanged.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple
import logging

from ..constants import (
    DEFAULT_ACCURACY_ALPHA,
    DIMENSION_SEVEN_DP,
    DIMENSION_SEVENTY_SIX_DP,
    DIMENSION_SIXTEEN_DP,
    DIMENSION_TEN_DP,
    MAXIMUM_ZOOM,
    MINIMUM_ZOOM,
)
from ..contracts.attributes import AttributeSource, DensityAware
from ..contracts.camera import CameraPosition, LatLng
from ..contracts.colors import DEFAULT_PRIMARY_COLOR, NO_TINT, TRANSPARENT
from ..contracts.enums import CAMERA_KEYS, AttributeKey as K
from ..contracts.gravity import Gravity
from ..contracts.images import (
    MY_LOCATION_BACKGROUND,
    MY_LOCATION_FOREGROUND,
    MY_LOCATION_FOREGROUND_BEARING,
)
from ..contracts.options import MapOptions, MapOptionsBuilder
from .units import check_density, to_pixels

logger = logging.getLogger(__name__)

MarginKeys = Tuple[Tuple[K, float], Tuple[K, float], Tuple[K, float], Tuple[K, float]]

COMPASS_MARGINS: MarginKeys = (
    (K.compass_margin_left, DIMENSION_TEN_DP),
    (K.compass_margin_top, DIMENSION_TEN_DP),
    (K.compass_margin_right, DIMENSION_TEN_DP),
    (K.compass_margin_bottom, DIMENSION_TEN_DP),
)
LOGO_MARGINS: MarginKeys = (
    (K.logo_margin_left, DIMENSION_SIXTEEN_DP),
    (K.logo_margin_top, DIMENSION_SIXTEEN_DP),
    (K.logo_margin_right, DIMENSION_SIXTEEN_DP),
    (K.logo_margin_bottom, DIMENSION_SIXTEEN_DP),
)
# Wide left margin keeps the attribution clear of the logo.
ATTRIBUTION_MARGINS: MarginKeys = (
    (K.attribution_margin_left, DIMENSION_SEVENTY_SIX_DP),
    (K.attribution_margin_top, DIMENSION_SEVEN_DP),
    (K.attribution_margin_right, DIMENSION_SEVEN_DP),
    (K.attribution_margin_bottom, DIMENSION_SEVEN_DP),
)
MY_LOCATION_BACKGROUND_PADDING: MarginKeys = (
    (K.my_location_background_left, 0.0),
    (K.my_location_background_top, 0.0),
    (K.my_location_background_right, 0.0),
    (K.my_location_background_bottom, 0.0),
)


@dataclass(frozen=True)
class ImporterConfig:
    """Theme-dependent fallbacks the attribute source itself cannot provide."""

    primary_color: int = DEFAULT_PRIMARY_COLOR  # accuracy ring tint
    foreground_drawable: Any = MY_LOCATION_FOREGROUND
    foreground_bearing_drawable: Any = MY_LOCATION_FOREGROUND_BEARING
    background_drawable: Any = MY_LOCATION_BACKGROUND


def read_margins(source: AttributeSource, keys: Sequence[Tuple[K, float]], density: float) -> Tuple[int, ...]:
    dims = [source.get_dimension(key, default) for key, default in keys]
    return to_pixels(dims, density)


def read_camera(source: AttributeSource) -> Optional[CameraPosition]:
    """Camera pose, or ``None`` when the source sets none of the camera attributes."""
    if not any(source.has_value(key) for key in CAMERA_KEYS):
        return None
    latitude = source.get_float(K.camera_latitude, 0.0)
    longitude = source.get_float(K.camera_longitude, 0.0)
    return CameraPosition(
        target=LatLng(latitude=latitude, longitude=longitude),
        zoom=source.get_float(K.camera_zoom, 0.0),
        bearing=source.get_float(K.camera_bearing, 0.0),
        tilt=source.get_float(K.camera_tilt, 0.0),
    )


class AttributeImporter:
    def __init__(self, config: Optional[ImporterConfig] = None) -> None:
        self.config = config or ImporterConfig()

    def import_from(self, source: AttributeSource, density: float) -> MapOptions:
        logger.debug("importing map options (density=%s)", density)
        try:
            density = check_density(density)
            if isinstance(source, DensityAware):
                source.bind_density(density)
            options = self._read(source, density)
        finally:
            source.recycle()
        if options.min_zoom > options.max_zoom:
            logger.warning(
                "imported min_zoom %.2f is greater than max_zoom %.2f; keeping both as given",
                options.min_zoom,
                options.max_zoom,
            )
        return options

    def _read(self, source: AttributeSource, density: float) -> MapOptions:
        cfg = self.config
        b = MapOptionsBuilder()

        b.debug_active(source.get_boolean(K.debug_active, False))
        b.camera(read_camera(source))
        b.access_token(source.get_string(K.access_token))
        b.style_url(source.get_string(K.style_url))

        b.zoom_gestures_enabled(source.get_boolean(K.zoom_enabled, True))
        b.scroll_gestures_enabled(source.get_boolean(K.scroll_enabled, True))
        b.rotate_gestures_enabled(source.get_boolean(K.rotate_enabled, True))
        b.tilt_gestures_enabled(source.get_boolean(K.tilt_enabled, True))
        b.zoom_controls_enabled(source.get_boolean(K.zoom_controls_enabled, False))

        b.max_zoom(source.get_float(K.zoom_max, MAXIMUM_ZOOM))
        b.min_zoom(source.get_float(K.zoom_min, MINIMUM_ZOOM))

        b.compass_enabled(source.get_boolean(K.compass_enabled, True))
        b.compass_gravity(source.get_int(K.compass_gravity, Gravity.TOP | Gravity.END))
        b.compass_margins(read_margins(source, COMPASS_MARGINS, density))

        b.logo_enabled(source.get_boolean(K.logo_enabled, True))
        b.logo_gravity(source.get_int(K.logo_gravity, Gravity.BOTTOM | Gravity.START))
        b.logo_margins(read_margins(source, LOGO_MARGINS, density))

        b.attribution_tint_color(source.get_color(K.attribution_tint, NO_TINT))
        b.attribution_enabled(source.get_boolean(K.attribution_enabled, True))
        b.attribution_gravity(source.get_int(K.attribution_gravity, Gravity.BOTTOM))
        b.attribution_margins(read_margins(source, ATTRIBUTION_MARGINS, density))

        b.location_enabled(source.get_boolean(K.my_location_enabled, False))
        b.my_location_foreground_tint_color(source.get_color(K.my_location_foreground_tint, TRANSPARENT))
        b.my_location_background_tint_color(source.get_color(K.my_location_background_tint, TRANSPARENT))

        foreground = source.get_drawable(K.my_location_foreground)
        if foreground is None:
            foreground = cfg.foreground_drawable
        bearing = source.get_drawable(K.my_location_foreground_bearing)
        if bearing is None:
            bearing = cfg.foreground_bearing_drawable
        background = source.get_drawable(K.my_location_background)
        if background is None:
            background = cfg.background_drawable
        b.my_location_foreground_drawables(foreground, bearing)
        b.my_location_background_drawable(background)

        b.my_location_background_padding(read_margins(source, MY_LOCATION_BACKGROUND_PADDING, density))
        b.my_location_accuracy_alpha(source.get_int(K.my_location_accuracy_alpha, DEFAULT_ACCURACY_ALPHA))
        b.my_location_accuracy_tint(source.get_color(K.my_location_accuracy_tint, cfg.primary_color))
        return b.build()


def import_options(source: AttributeSource, density: float, *, config: Optional[ImporterConfig] = None) -> MapOptions:
    return AttributeImporter(config).import_from(source, density)
