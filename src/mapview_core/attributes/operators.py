from __future__ import annotations

from typing import Any, Mapping, Optional

from ..contracts.attributes import AttributeSource
from ..contracts.errors import ValidationError
from ..contracts.operators import MIN_ZOOM_ABOVE_MAX_ZOOM, Operator, OperatorResult
from ..contracts.provenance import ArtifactFingerprint, Provenance
from .importer import AttributeImporter, ImporterConfig


class ImportOptionsOperator(Operator):
    """Operator that imports MapOptions from an attribute source."""

    name = "import_options"
    version = "0.1.0"

    def __init__(self, config: Optional[ImporterConfig] = None) -> None:
        self.importer = AttributeImporter(config)

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        source = inputs.get("source")
        if not isinstance(source, AttributeSource):
            raise ValidationError("source must implement AttributeSource")
        density = inputs.get("density", 1.0)
        if isinstance(density, bool) or not isinstance(density, (int, float)):
            raise ValidationError("density must be a number")

        provenance = Provenance(operator=self.name, version=self.version)
        provenance.inputs["density"] = ArtifactFingerprint.of_json(float(density))

        options = self.importer.import_from(source, density)

        warnings = []
        if options.min_zoom > options.max_zoom:
            warnings.append(MIN_ZOOM_ABOVE_MAX_ZOOM)
        provenance.outputs["options"] = options.fingerprint()
        return OperatorResult(provenance=provenance, outputs={"options": options}, warnings=warnings)
