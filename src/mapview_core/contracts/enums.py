from __future__ import annotations

from enum import Enum


class AttributeKey(str, Enum):
    """Closed set of styled attributes understood by the importer."""

    debug_active = "debug_active"
    access_token = "access_token"
    style_url = "style_url"

    camera_latitude = "camera_latitude"
    camera_longitude = "camera_longitude"
    camera_zoom = "camera_zoom"
    camera_bearing = "camera_bearing"
    camera_tilt = "camera_tilt"

    zoom_enabled = "zoom_enabled"
    scroll_enabled = "scroll_enabled"
    rotate_enabled = "rotate_enabled"
    tilt_enabled = "tilt_enabled"
    zoom_controls_enabled = "zoom_controls_enabled"
    zoom_max = "zoom_max"
    zoom_min = "zoom_min"

    compass_enabled = "compass_enabled"
    compass_gravity = "compass_gravity"
    compass_margin_left = "compass_margin_left"
    compass_margin_top = "compass_margin_top"
    compass_margin_right = "compass_margin_right"
    compass_margin_bottom = "compass_margin_bottom"

    logo_enabled = "logo_enabled"
    logo_gravity = "logo_gravity"
    logo_margin_left = "logo_margin_left"
    logo_margin_top = "logo_margin_top"
    logo_margin_right = "logo_margin_right"
    logo_margin_bottom = "logo_margin_bottom"

    attribution_tint = "attribution_tint"
    attribution_enabled = "attribution_enabled"
    attribution_gravity = "attribution_gravity"
    attribution_margin_left = "attribution_margin_left"
    attribution_margin_top = "attribution_margin_top"
    attribution_margin_right = "attribution_margin_right"
    attribution_margin_bottom = "attribution_margin_bottom"

    my_location_enabled = "my_location_enabled"
    my_location_foreground_tint = "my_location_foreground_tint"
    my_location_background_tint = "my_location_background_tint"
    my_location_foreground = "my_location_foreground"
    my_location_foreground_bearing = "my_location_foreground_bearing"
    my_location_background = "my_location_background"
    my_location_background_left = "my_location_background_left"
    my_location_background_top = "my_location_background_top"
    my_location_background_right = "my_location_background_right"
    my_location_background_bottom = "my_location_background_bottom"
    my_location_accuracy_alpha = "my_location_accuracy_alpha"
    my_location_accuracy_tint = "my_location_accuracy_tint"


CAMERA_KEYS = (
    AttributeKey.camera_latitude,
    AttributeKey.camera_longitude,
    AttributeKey.camera_zoom,
    AttributeKey.camera_bearing,
    AttributeKey.camera_tilt,
)
