from __future__ import annotations

"""Fixed-width primitives for flat binary records.

Everything is little-endian. There is no tagging: a reader must consume values
in exactly the order the writer produced them.
"""

from typing import Optional, Sequence
import struct

from ..contracts.errors import CodecError

_BYTE = struct.Struct("<B")
_INT = struct.Struct("<i")
_UINT16 = struct.Struct("<H")
_UINT32 = struct.Struct("<I")
_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")

# Length prefix used for absent arrays and strings.
NULL_LENGTH = -1


class ParcelWriter:
    def __init__(self) -> None:
        self._buf = bytearray()

    def write_bool(self, value: bool) -> None:
        self._buf += _BYTE.pack(1 if value else 0)

    def write_byte(self, value: int) -> None:
        self._buf += _BYTE.pack(value & 0xFF)

    def write_int(self, value: int) -> None:
        try:
            self._buf += _INT.pack(value)
        except struct.error as exc:
            raise CodecError(f"value {value!r} does not fit a signed 32-bit field") from exc

    def write_uint16(self, value: int) -> None:
        self._buf += _UINT16.pack(value)

    def write_uint32(self, value: int) -> None:
        self._buf += _UINT32.pack(value)

    def write_float(self, value: float) -> None:
        try:
            self._buf += _FLOAT.pack(value)
        except (struct.error, OverflowError) as exc:
            raise CodecError(f"value {value!r} does not fit a 32-bit float field") from exc

    def write_double(self, value: float) -> None:
        try:
            self._buf += _DOUBLE.pack(value)
        except struct.error as exc:
            raise CodecError(f"value {value!r} is not a float") from exc

    def write_int_array(self, values: Optional[Sequence[int]]) -> None:
        if values is None:
            self.write_int(NULL_LENGTH)
            return
        self.write_int(len(values))
        for v in values:
            self.write_int(v)

    def write_string(self, value: Optional[str]) -> None:
        if value is None:
            self.write_int(NULL_LENGTH)
            return
        data = value.encode("utf-8")
        self.write_int(len(data))
        self._buf += data

    def write_raw(self, data: bytes) -> None:
        self._buf += data

    def __len__(self) -> int:
        return len(self._buf)

    def to_bytes(self) -> bytes:
        return bytes(self._buf)


class ParcelReader:
    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = memoryview(bytes(data))
        self._pos = offset

    @property
    def position(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _unpack(self, fmt: struct.Struct):
        try:
            (value,) = fmt.unpack_from(self._data, self._pos)
        except struct.error as exc:
            raise CodecError(f"record exhausted at offset {self._pos}: {exc}") from exc
        self._pos += fmt.size
        return value

    def read_bool(self) -> bool:
        return self._unpack(_BYTE) != 0

    def read_byte(self) -> int:
        return self._unpack(_BYTE)

    def read_int(self) -> int:
        return self._unpack(_INT)

    def read_uint16(self) -> int:
        return self._unpack(_UINT16)

    def read_uint32(self) -> int:
        return self._unpack(_UINT32)

    def read_float(self) -> float:
        return self._unpack(_FLOAT)

    def read_double(self) -> float:
        return self._unpack(_DOUBLE)

    def read_int_array(self) -> Optional[tuple[int, ...]]:
        length = self.read_int()
        if length < 0:
            return None
        return tuple(self.read_int() for _ in range(length))

    def read_raw(self, length: int) -> bytes:
        if length < 0 or self._pos + length > len(self._data):
            raise CodecError(f"record exhausted at offset {self._pos}: need {length} bytes, have {self.remaining()}")
        chunk = bytes(self._data[self._pos:self._pos + length])
        self._pos += length
        return chunk

    def read_string(self) -> Optional[str]:
        length = self.read_int()
        if length < 0:
            return None
        start = self._pos
        data = self.read_raw(length)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CodecError(f"string at offset {start} is not valid UTF-8: {exc}") from exc
