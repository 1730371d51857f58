import pytest

from mapview_core import CameraPosition, Gravity, ImageHandle, LatLng, MapOptions


@pytest.fixture
def full_options() -> MapOptions:
    """Record with every field moved off its zero-value default (no image handles)."""
    return (
        MapOptions.builder()
        .camera(CameraPosition(target=LatLng(52.37, 4.89), zoom=11.5, bearing=30.0, tilt=45.0))
        .debug_active(True)
        .compass_enabled(False)
        .compass_gravity(Gravity.BOTTOM | Gravity.LEFT)
        .compass_margins((1, 2, 3, 4))
        .logo_enabled(False)
        .logo_gravity(Gravity.TOP)
        .logo_margins([5, 6, 7, 8])
        .attribution_enabled(False)
        .attribution_gravity(Gravity.TOP | Gravity.RIGHT)
        .attribution_margins((9, 10, 11, 12))
        .attribution_tint_color(-16711936)
        .min_zoom(2.5)
        .max_zoom(17.25)
        .rotate_gestures_enabled(False)
        .scroll_gestures_enabled(False)
        .tilt_gestures_enabled(False)
        .zoom_gestures_enabled(False)
        .zoom_controls_enabled(True)
        .location_enabled(True)
        .my_location_foreground_tint_color(-65536)
        .my_location_background_tint_color(-16776961)
        .my_location_background_padding((13, 14, 15, 16))
        .my_location_accuracy_tint(-256)
        .my_location_accuracy_alpha(42)
        .style_url("mapbox://styles/mapbox/streets-v9")
        .access_token("pk.test-token")
        .build()
    )


@pytest.fixture
def handles():
    return ImageHandle("fg"), ImageHandle("fg_bearing"), ImageHandle("bg")
