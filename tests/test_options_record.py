from dataclasses import fields, replace
import math

import numpy as np
import pytest

from mapview_core import CameraPosition, Gravity, ImageHandle, LatLng, MapOptions, MapOptionsBuilder
from mapview_core.constants import MAXIMUM_ZOOM, MINIMUM_ZOOM
from mapview_core.contracts.colors import argb, to_signed32
from mapview_core.contracts.errors import ValidationError


ALTERNATES = {
    "camera": CameraPosition(target=LatLng(1.0, 2.0), zoom=3.0),
    "debug_active": True,
    "compass_enabled": False,
    "compass_gravity": Gravity.LEFT,
    "compass_margins": (1, 1, 1, 1),
    "logo_enabled": False,
    "logo_gravity": Gravity.RIGHT,
    "logo_margins": (2, 2, 2, 2),
    "attribution_enabled": False,
    "attribution_gravity": Gravity.TOP,
    "attribution_margins": (3, 3, 3, 3),
    "attribution_tint_color": 0x00112233,
    "min_zoom": 1.0,
    "max_zoom": 18.0,
    "rotate_gestures_enabled": False,
    "scroll_gestures_enabled": False,
    "tilt_gestures_enabled": False,
    "zoom_gestures_enabled": False,
    "zoom_controls_enabled": True,
    "location_enabled": True,
    "my_location_foreground_drawable": ImageHandle("a"),
    "my_location_foreground_bearing_drawable": ImageHandle("b"),
    "my_location_background_drawable": ImageHandle("c"),
    "my_location_foreground_tint_color": 5,
    "my_location_background_tint_color": 6,
    "my_location_background_padding": (0, 0, 0, 0),
    "my_location_accuracy_tint_color": 7,
    "my_location_accuracy_alpha": 255,
    "style_url": "asset://style.json",
    "access_token": "pk.abc",
}


def test_zero_value_record_defaults():
    options = MapOptions()
    assert options.camera is None
    assert options.debug_active is False
    assert options.compass_enabled is True
    assert options.compass_gravity == Gravity.TOP | Gravity.END
    assert options.logo_gravity == Gravity.BOTTOM | Gravity.START
    assert options.attribution_gravity == Gravity.BOTTOM
    assert options.attribution_tint_color == -1
    assert options.compass_margins is None
    assert options.my_location_background_padding is None
    assert options.min_zoom == MINIMUM_ZOOM
    assert options.max_zoom == MAXIMUM_ZOOM
    assert options.zoom_controls_enabled is False
    assert options.rotate_gestures_enabled and options.scroll_gestures_enabled
    assert options.tilt_gestures_enabled and options.zoom_gestures_enabled
    assert options.style_url is None and options.access_token is None


def test_builder_setters_chain_and_build_snapshot():
    builder = MapOptions.builder()
    assert isinstance(builder, MapOptionsBuilder)
    assert builder.compass_enabled(False) is builder

    first = builder.build()
    builder.compass_enabled(True)
    second = builder.build()

    assert first.compass_enabled is False
    assert second.compass_enabled is True


def test_to_builder_leaves_original_untouched(full_options):
    changed = full_options.to_builder().debug_active(False).build()
    assert full_options.debug_active is True
    assert changed.debug_active is False
    assert changed != full_options


def test_margins_are_normalized_to_tuples():
    options = MapOptions(compass_margins=[1, 2, 3, 4])
    assert options.compass_margins == (1, 2, 3, 4)
    assert isinstance(options.compass_margins, tuple)


def test_unset_margins_differ_from_zero_margins():
    assert MapOptions() != MapOptions(logo_margins=(0, 0, 0, 0))


@pytest.mark.parametrize("bad", [(1, 2, 3), (1, 2, 3, 4, 5), "1234"])
def test_margins_must_have_four_values(bad):
    with pytest.raises(ValidationError):
        MapOptions.builder().attribution_margins(bad)
    with pytest.raises(ValidationError):
        MapOptions(my_location_background_padding=bad)


def test_min_zoom_above_max_zoom_is_accepted():
    options = MapOptions.builder().min_zoom(15.0).max_zoom(3.0).build()
    assert options.min_zoom == 15.0
    assert options.max_zoom == 3.0


def test_foreground_drawables_sets_both_handles(handles):
    fg, bearing, _ = handles
    options = MapOptions.builder().my_location_foreground_drawables(fg, bearing).build()
    assert options.my_location_foreground_drawable is fg
    assert options.my_location_foreground_bearing_drawable is bearing
    assert options.has_images()


def test_without_images_clears_handles(handles):
    fg, bearing, bg = handles
    options = MapOptions.builder().my_location_foreground_drawables(fg, bearing).my_location_background_drawable(bg).build()
    cleared = options.without_images()
    assert not cleared.has_images()
    assert cleared == replace(options, my_location_foreground_drawable=None,
                              my_location_foreground_bearing_drawable=None,
                              my_location_background_drawable=None)


def test_equal_records_hash_equal(full_options):
    twin = full_options.to_builder().build()
    assert twin == full_options
    assert hash(twin) == hash(full_options)
    assert len({twin, full_options}) == 1


def test_margin_contents_compare_element_wise():
    a = MapOptions(compass_margins=[1, 2, 3, 4])
    b = MapOptions(compass_margins=(1, 2, 3, 4))
    c = MapOptions(compass_margins=(1, 2, 3, 5))
    assert a == b and hash(a) == hash(b)
    assert a != c


def test_alternates_cover_every_field():
    assert set(ALTERNATES) == {f.name for f in fields(MapOptions)}


@pytest.mark.parametrize("name", sorted(ALTERNATES))
def test_changing_one_field_breaks_equality(name):
    base = MapOptions()
    changed = replace(base, **{name: ALTERNATES[name]})
    assert changed != base


def test_opaque_image_handles_compare_by_identity():
    handle = object()
    a = MapOptions(my_location_background_drawable=handle)
    b = MapOptions(my_location_background_drawable=handle)
    c = MapOptions(my_location_background_drawable=object())
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_unhashable_image_handle_still_hashes_by_identity():
    pixels = bytearray(b"\x89PNG")
    a = MapOptions(my_location_background_drawable=pixels)
    b = MapOptions(my_location_background_drawable=pixels)
    assert a == b
    assert hash(a) == hash(b)
    assert a != MapOptions(my_location_background_drawable=bytearray(b"\x89PNG"))


def test_array_image_handles_compare_without_elementwise_truth():
    first = np.zeros((2, 2))
    a = MapOptions(my_location_foreground_drawable=first)
    b = MapOptions(my_location_foreground_drawable=np.zeros((2, 2)))
    assert a != b
    assert not (a == b)
    assert a == MapOptions(my_location_foreground_drawable=first)
    assert len({a, MapOptions(my_location_foreground_drawable=first)}) == 1


def test_equal_pixel_bytes_in_distinct_handles_are_different_images():
    a = MapOptions(my_location_background_drawable=bytes(bytearray(b"dot")))
    b = MapOptions(my_location_background_drawable=bytes(bytearray(b"dot")))
    assert a != b


def test_named_image_handles_compare_by_name():
    a = MapOptions(my_location_foreground_drawable=ImageHandle("dot"))
    b = MapOptions(my_location_foreground_drawable=ImageHandle("dot"))
    assert a == b


def test_fingerprint_is_stable_and_content_based(full_options):
    assert full_options.fingerprint() == full_options.to_builder().build().fingerprint()
    assert full_options.fingerprint() != MapOptions().fingerprint()


def test_color_helpers_pack_signed_argb():
    assert argb(255, 255, 0, 0) == -65536
    assert argb(0, 0, 0, 0) == 0
    assert to_signed32(0xFFFFFFFF) == -1
    assert to_signed32(0x7FFFFFFF) == 0x7FFFFFFF
    assert MapOptions(attribution_tint_color=to_signed32(0xFF00FF00)).attribution_tint_color == -16711936


def test_zoom_bounds_are_held_at_32_bit_precision():
    options = MapOptions.builder().min_zoom(0.1).max_zoom(18.3).build()
    assert options.min_zoom == float(np.float32(0.1))
    assert options.max_zoom == float(np.float32(18.3))
    assert options == MapOptions(min_zoom=options.min_zoom, max_zoom=options.max_zoom)


def test_zoom_beyond_32_bit_range_narrows_to_infinity():
    options = MapOptions(max_zoom=1e39, min_zoom=-1e39)
    assert options.max_zoom == math.inf
    assert options.min_zoom == -math.inf
