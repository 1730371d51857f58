"""Positional binary layout for ``MapOptions``.

The legacy layout has no header, no version and no field tags; fields are
written and read in one fixed order. Decoding bytes that were not produced by
this layout yields wrong values rather than an error. The three location
indicator image handles are never written, so a decoded record always has
them unset.

Passing ``versioned=True`` wraps the same payload in a small header
(magic, version, payload length) that is checked on decode.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..constants import RECORD_MAGIC, RECORD_VERSION
from ..contracts.camera import CameraPosition, LatLng
from ..contracts.errors import CodecError
from ..contracts.options import MapOptions, MapOptionsBuilder
from .parcel import ParcelReader, ParcelWriter

logger = logging.getLogger(__name__)

# magic + u16 version + u32 payload length
HEADER_SIZE = len(RECORD_MAGIC) + 2 + 4


def _write_camera(writer: ParcelWriter, camera: Optional[CameraPosition]) -> None:
    writer.write_bool(camera is not None)
    if camera is None:
        return
    target = camera.target
    writer.write_bool(target is not None)
    if target is not None:
        writer.write_double(target.latitude)
        writer.write_double(target.longitude)
    writer.write_double(camera.bearing)
    writer.write_double(camera.tilt)
    writer.write_double(camera.zoom)


def _read_camera(reader: ParcelReader) -> Optional[CameraPosition]:
    if not reader.read_bool():
        return None
    target = None
    if reader.read_bool():
        latitude = reader.read_double()
        longitude = reader.read_double()
        target = LatLng(latitude=latitude, longitude=longitude)
    bearing = reader.read_double()
    tilt = reader.read_double()
    zoom = reader.read_double()
    return CameraPosition(target=target, zoom=zoom, bearing=bearing, tilt=tilt)


def _read_margins(reader: ParcelReader) -> Optional[tuple[int, ...]]:
    offset = reader.position
    values = reader.read_int_array()
    if values is not None and len(values) != 4:
        raise CodecError(f"margin array at offset {offset} has {len(values)} entries, expected 4")
    return values


def write_options(writer: ParcelWriter, options: MapOptions) -> None:
    """Append the legacy field sequence for ``options`` to ``writer``."""
    _write_camera(writer, options.camera)
    writer.write_bool(options.debug_active)

    writer.write_bool(options.compass_enabled)
    writer.write_int(options.compass_gravity)
    writer.write_int_array(options.compass_margins)

    writer.write_bool(options.logo_enabled)
    writer.write_int(options.logo_gravity)
    writer.write_int_array(options.logo_margins)

    writer.write_bool(options.attribution_enabled)
    writer.write_int(options.attribution_gravity)
    writer.write_int_array(options.attribution_margins)
    writer.write_int(options.attribution_tint_color)

    writer.write_float(options.min_zoom)
    writer.write_float(options.max_zoom)

    writer.write_bool(options.rotate_gestures_enabled)
    writer.write_bool(options.scroll_gestures_enabled)
    writer.write_bool(options.tilt_gestures_enabled)
    writer.write_bool(options.zoom_controls_enabled)
    writer.write_bool(options.zoom_gestures_enabled)

    writer.write_bool(options.location_enabled)
    # indicator image handles are not relocatable and are skipped
    writer.write_int(options.my_location_foreground_tint_color)
    writer.write_int(options.my_location_background_tint_color)
    writer.write_int_array(options.my_location_background_padding)
    writer.write_int(options.my_location_accuracy_alpha)
    writer.write_int(options.my_location_accuracy_tint_color)

    writer.write_string(options.style_url)
    writer.write_string(options.access_token)


def read_options(reader: ParcelReader) -> MapOptions:
    """Read one record in exactly the order ``write_options`` produced it."""
    b = MapOptionsBuilder()
    b.camera(_read_camera(reader))
    b.debug_active(reader.read_bool())

    b.compass_enabled(reader.read_bool())
    b.compass_gravity(reader.read_int())
    b.compass_margins(_read_margins(reader))

    b.logo_enabled(reader.read_bool())
    b.logo_gravity(reader.read_int())
    b.logo_margins(_read_margins(reader))

    b.attribution_enabled(reader.read_bool())
    b.attribution_gravity(reader.read_int())
    b.attribution_margins(_read_margins(reader))
    b.attribution_tint_color(reader.read_int())

    b.min_zoom(reader.read_float())
    b.max_zoom(reader.read_float())

    b.rotate_gestures_enabled(reader.read_bool())
    b.scroll_gestures_enabled(reader.read_bool())
    b.tilt_gestures_enabled(reader.read_bool())
    b.zoom_controls_enabled(reader.read_bool())
    b.zoom_gestures_enabled(reader.read_bool())

    b.location_enabled(reader.read_bool())
    b.my_location_foreground_tint_color(reader.read_int())
    b.my_location_background_tint_color(reader.read_int())
    b.my_location_background_padding(_read_margins(reader))
    b.my_location_accuracy_alpha(reader.read_int())
    b.my_location_accuracy_tint(reader.read_int())

    b.style_url(reader.read_string())
    b.access_token(reader.read_string())
    return b.build()


def encode_options(options: MapOptions, *, versioned: bool = False) -> bytes:
    body = ParcelWriter()
    write_options(body, options)
    if options.has_images():
        logger.debug("encode_options: dropping location indicator image handles")
    if not versioned:
        logger.debug("encode_options: %d bytes (legacy layout)", len(body))
        return body.to_bytes()

    out = ParcelWriter()
    out.write_raw(RECORD_MAGIC)
    out.write_uint16(RECORD_VERSION)
    out.write_uint32(len(body))
    out.write_raw(body.to_bytes())
    logger.debug("encode_options: %d bytes (versioned v%d)", len(out), RECORD_VERSION)
    return out.to_bytes()


def decode_options(data: bytes, *, versioned: bool = False) -> MapOptions:
    """Decode a record produced by ``encode_options`` with the same ``versioned`` flag.

    Legacy records carry no framing: trailing bytes are ignored and foreign or
    reordered data decodes to wrong values. Running out of bytes raises
    ``CodecError``.
    """
    reader = ParcelReader(data)
    if not versioned:
        return read_options(reader)

    magic = reader.read_raw(len(RECORD_MAGIC))
    if magic != RECORD_MAGIC:
        raise CodecError(f"bad record magic {magic!r}, expected {RECORD_MAGIC!r}")
    version = reader.read_uint16()
    if version != RECORD_VERSION:
        raise CodecError(f"unsupported record version {version}, expected {RECORD_VERSION}")
    length = reader.read_uint32()
    if length != reader.remaining():
        raise CodecError(f"record length mismatch: header says {length}, payload has {reader.remaining()}")
    options = read_options(reader)
    if reader.remaining():
        raise CodecError(f"record has {reader.remaining()} unread payload bytes")
    return options
