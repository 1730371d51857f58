import struct

import numpy as np
import pytest

from mapview_core import CameraPosition, MapOptions
from mapview_core.attributes import XmlAttributeSource, import_options
from mapview_core.codec import ParcelReader, ParcelWriter, decode_options, encode_options
from mapview_core.constants import RECORD_MAGIC
from mapview_core.contracts.errors import CodecError


def test_roundtrip_preserves_every_field(full_options):
    assert decode_options(encode_options(full_options)) == full_options


def test_roundtrip_of_zero_value_record():
    assert decode_options(encode_options(MapOptions())) == MapOptions()


def test_legacy_layout_of_zero_value_record():
    expected = struct.pack(
        "<BB" "Bii" "Bii" "Biii" "ff" "BBBBB" "B" "iiiii" "ii",
        0, 0,                       # camera absent, debug
        1, 8388661, -1,             # compass: enabled, TOP|END, no margins
        1, 8388691, -1,             # logo: enabled, BOTTOM|START, no margins
        1, 80, -1, -1,              # attribution: enabled, BOTTOM, no margins, no tint
        0.0, 20.0,                  # zoom bounds
        1, 1, 1, 0, 1,              # rotate, scroll, tilt, zoom controls, zoom
        0,                          # location enabled
        0, 0, -1, 0, 0,             # fg tint, bg tint, no padding, alpha, accuracy tint
        -1, -1,                     # style, access token
    )
    record = encode_options(MapOptions())
    assert record == expected
    assert len(record) == 75


def test_zoom_controls_are_written_before_zoom_gestures():
    record = encode_options(MapOptions(zoom_controls_enabled=True, zoom_gestures_enabled=False))
    assert record[44] == 1
    assert record[45] == 0


def test_accuracy_alpha_is_written_before_accuracy_tint():
    record = encode_options(MapOptions(my_location_accuracy_alpha=100, my_location_accuracy_tint_color=7))
    alpha, tint = struct.unpack_from("<ii", record, 59)
    assert (alpha, tint) == (100, 7)


def test_image_handles_are_not_serialized(full_options, handles):
    fg, bearing, bg = handles
    with_images = (
        full_options.to_builder()
        .my_location_foreground_drawables(fg, bearing)
        .my_location_background_drawable(bg)
        .build()
    )
    record = encode_options(with_images)
    assert record == encode_options(full_options)

    decoded = decode_options(record)
    assert decoded.my_location_foreground_drawable is None
    assert decoded.my_location_foreground_bearing_drawable is None
    assert decoded.my_location_background_drawable is None
    assert decoded == with_images.without_images()


def test_camera_without_target_roundtrips():
    options = MapOptions(camera=CameraPosition(zoom=4.0, bearing=90.0, tilt=10.0))
    decoded = decode_options(encode_options(options))
    assert decoded.camera == options.camera
    assert decoded.camera.target is None


def test_strings_roundtrip_as_utf8():
    options = MapOptions(style_url="asset://стиль.json", access_token="")
    decoded = decode_options(encode_options(options))
    assert decoded.style_url == "asset://стиль.json"
    assert decoded.access_token == ""


def test_truncated_record_raises_codec_error(full_options):
    record = encode_options(full_options)
    with pytest.raises(CodecError):
        decode_options(record[:-3])


def test_legacy_decode_ignores_trailing_bytes():
    record = encode_options(MapOptions()) + b"\x00\x01\x02"
    assert decode_options(record) == MapOptions()


def test_color_outside_int32_is_rejected_on_encode():
    with pytest.raises(CodecError):
        encode_options(MapOptions(attribution_tint_color=0xFF000000))


def test_versioned_record_roundtrips(full_options):
    record = encode_options(full_options, versioned=True)
    assert record.startswith(RECORD_MAGIC)
    assert record[10:] == encode_options(full_options)
    assert decode_options(record, versioned=True) == full_options


def test_versioned_decode_rejects_legacy_record():
    with pytest.raises(CodecError):
        decode_options(encode_options(MapOptions()), versioned=True)


def test_versioned_decode_rejects_unknown_version():
    record = bytearray(encode_options(MapOptions(), versioned=True))
    struct.pack_into("<H", record, 4, 99)
    with pytest.raises(CodecError, match="version"):
        decode_options(bytes(record), versioned=True)


def test_versioned_decode_rejects_length_mismatch():
    record = encode_options(MapOptions(), versioned=True) + b"\x00"
    with pytest.raises(CodecError, match="length"):
        decode_options(record, versioned=True)


def test_parcel_primitives_read_back_in_order():
    writer = ParcelWriter()
    writer.write_bool(True)
    writer.write_int(-7)
    writer.write_float(1.5)
    writer.write_double(-2.25)
    writer.write_int_array(None)
    writer.write_int_array([3, 4])
    writer.write_string(None)
    writer.write_string("ok")

    reader = ParcelReader(writer.to_bytes())
    assert reader.read_bool() is True
    assert reader.read_int() == -7
    assert reader.read_float() == 1.5
    assert reader.read_double() == -2.25
    assert reader.read_int_array() is None
    assert reader.read_int_array() == (3, 4)
    assert reader.read_string() is None
    assert reader.read_string() == "ok"
    assert reader.remaining() == 0


def test_zoom_bounds_without_exact_binary_form_roundtrip():
    options = MapOptions.builder().min_zoom(0.1).max_zoom(18.3).build()
    decoded = decode_options(encode_options(options))
    assert decoded == options
    assert decoded.max_zoom == float(np.float32(18.3))


def test_imported_zoom_bounds_roundtrip_through_record():
    source = XmlAttributeSource.from_string('<MapView zoom_min="0.1" zoom_max="18.3" />')
    options = import_options(source, density=1.0)
    assert decode_options(encode_options(options)) == options
    assert decode_options(encode_options(options, versioned=True), versioned=True) == options


def test_zoom_outside_float32_range_is_a_codec_error():
    writer = ParcelWriter()
    with pytest.raises(CodecError, match="32-bit float"):
        writer.write_float(1e39)


def test_margin_array_of_foreign_length_is_a_codec_error():
    record = bytearray(encode_options(MapOptions(compass_margins=(1, 2, 3, 4))))
    # compass margins length prefix follows camera, debug, enabled and gravity
    assert struct.unpack_from("<i", record, 7) == (4,)
    struct.pack_into("<i", record, 7, 3)
    with pytest.raises(CodecError, match="3 entries"):
        decode_options(bytes(record))


def test_invalid_utf8_string_is_a_codec_error():
    record = bytearray(encode_options(MapOptions(style_url="ab")))
    # style bytes sit just before the 4-byte absent access token
    assert record[-6:-4] == b"ab"
    record[-6:-4] = b"\xff\xfe"
    with pytest.raises(CodecError, match="UTF-8"):
        decode_options(bytes(record))

    writer = ParcelWriter()
    writer.write_int(1)
    writer.write_raw(b"\x80")
    with pytest.raises(CodecError):
        ParcelReader(writer.to_bytes()).read_string()
