from .contracts.camera import CameraPosition, LatLng
from .contracts.images import ImageHandle
from .contracts.options import MapOptions, MapOptionsBuilder, Margins
from .contracts.attributes import AttributeSource
from .contracts.enums import AttributeKey
from .contracts.gravity import Gravity
from .contracts.errors import (
    MapViewError,
    ContractError,
    ValidationError,
    AttributeSourceError,
    AttributeTypeError,
    RecycledSourceError,
    CodecError,
)
from .contracts.operators import Operator, OperatorResult
from .contracts.provenance import ArtifactFingerprint, Provenance, RecordLayout
from .attributes import (
    AttributeImporter,
    ImporterConfig,
    ImportOptionsOperator,
    MappingAttributeSource,
    XmlAttributeSource,
    import_options,
)
from .codec import DecodeOptionsOperator, EncodeOptionsOperator, decode_options, encode_options

__version__ = "0.1.0"

__all__ = [
    # record
    "CameraPosition",
    "LatLng",
    "ImageHandle",
    "MapOptions",
    "MapOptionsBuilder",
    "Margins",
    "Gravity",
    "AttributeKey",
    # errors
    "MapViewError",
    "ContractError",
    "ValidationError",
    "AttributeSourceError",
    "AttributeTypeError",
    "RecycledSourceError",
    "CodecError",
    # protocols
    "AttributeSource",
    "Operator",
    "OperatorResult",
    # importer
    "AttributeImporter",
    "ImporterConfig",
    "ImportOptionsOperator",
    "MappingAttributeSource",
    "XmlAttributeSource",
    "import_options",
    # codec
    "encode_options",
    "decode_options",
    "EncodeOptionsOperator",
    "DecodeOptionsOperator",
    # provenance
    "ArtifactFingerprint",
    "Provenance",
    "RecordLayout",
]
