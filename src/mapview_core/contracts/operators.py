from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Protocol, runtime_checkable

from .provenance import Provenance

# warning codes
IMAGE_HANDLES_DROPPED = "image_handles_dropped"
MIN_ZOOM_ABOVE_MAX_ZOOM = "min_zoom_above_max_zoom"


@dataclass
class OperatorResult:
    provenance: Provenance
    outputs: Dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


@runtime_checkable
class Operator(Protocol):
    """One step of the import -> encode -> decode pipeline: named inputs in, named outputs out."""
    name: str
    version: str

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        ...
