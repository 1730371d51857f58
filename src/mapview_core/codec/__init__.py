from .parcel import ParcelReader, ParcelWriter
from .options_codec import decode_options, encode_options, read_options, write_options
from .operators import DecodeOptionsOperator, EncodeOptionsOperator

__all__ = [
    "ParcelReader",
    "ParcelWriter",
    "encode_options",
    "decode_options",
    "read_options",
    "write_options",
    "EncodeOptionsOperator",
    "DecodeOptionsOperator",
]
