from __future__ import annotations

from typing import Any, Mapping

from ..contracts.errors import ValidationError
from ..contracts.operators import IMAGE_HANDLES_DROPPED, Operator, OperatorResult
from ..contracts.options import MapOptions
from ..contracts.provenance import ArtifactFingerprint, Provenance, RecordLayout
from .options_codec import decode_options, encode_options


def _versioned_flag(inputs: Mapping[str, Any], default: bool) -> bool:
    versioned = inputs.get("versioned", default)
    if not isinstance(versioned, bool):
        raise ValidationError("versioned must be a boolean")
    return versioned


class EncodeOptionsOperator(Operator):
    """Serialize MapOptions into a flat binary record."""

    name = "encode_options"
    version = "0.1.0"

    def __init__(self, versioned: bool = False) -> None:
        self.versioned = versioned

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        options = inputs.get("options")
        if not isinstance(options, MapOptions):
            raise ValidationError("options must be provided as MapOptions")
        versioned = _versioned_flag(inputs, self.versioned)

        provenance = Provenance(operator=self.name, version=self.version, layout=RecordLayout.of(versioned))
        provenance.inputs["options"] = options.fingerprint()

        record = encode_options(options, versioned=versioned)
        warnings = []
        if options.has_images():
            warnings.append(IMAGE_HANDLES_DROPPED)

        provenance.outputs["record"] = ArtifactFingerprint.of_bytes(record)
        provenance.record_size = len(record)
        return OperatorResult(provenance=provenance, outputs={"record": record}, warnings=warnings)


class DecodeOptionsOperator(Operator):
    """Rebuild MapOptions from a record produced by EncodeOptionsOperator."""

    name = "decode_options"
    version = "0.1.0"

    def __init__(self, versioned: bool = False) -> None:
        self.versioned = versioned

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        record = inputs.get("record")
        if not isinstance(record, (bytes, bytearray)):
            raise ValidationError("record must be provided as bytes")
        versioned = _versioned_flag(inputs, self.versioned)
        record = bytes(record)

        provenance = Provenance(operator=self.name, version=self.version, layout=RecordLayout.of(versioned))
        provenance.inputs["record"] = ArtifactFingerprint.of_bytes(record)
        provenance.record_size = len(record)

        options = decode_options(record, versioned=versioned)

        provenance.outputs["options"] = options.fingerprint()
        return OperatorResult(provenance=provenance, outputs={"options": options})
