from .camera import CameraPosition, LatLng
from .images import ImageHandle
from .options import (
    MapOptions,
    MapOptionsBuilder,
    Margins,
    coerce_margins,
    image_key,
    options_payload,
    quantize_zoom,
)
from .attributes import AttributeSource, DensityAware
from .operators import Operator, OperatorResult
from .gravity import Gravity, parse_gravity
from .colors import argb, to_signed32
from .errors import *
from .enums import *
from .provenance import ArtifactFingerprint, Provenance, RecordLayout
