from __future__ import annotations

"""Content fingerprints for options records and the trace an operator leaves."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
import hashlib
import json
import math


class RecordLayout(str, Enum):
    legacy = "legacy"
    versioned = "versioned"

    @classmethod
    def of(cls, versioned: bool) -> "RecordLayout":
        return cls.versioned if versioned else cls.legacy


def _to_jsonable(obj: Any) -> Any:
    if obj is None or isinstance(obj, (str, int, bool)):
        return obj
    if isinstance(obj, float):
        # Strict JSON doesn't permit NaN/Infinity.
        return obj if math.isfinite(obj) else repr(obj)
    if isinstance(obj, (tuple, list)):
        return [_to_jsonable(v) for v in obj]
    if isinstance(obj, dict):
        return {str(k): _to_jsonable(v) for k, v in obj.items()}
    return str(obj)


@dataclass(frozen=True)
class ArtifactFingerprint:
    """SHA-256 identity of a record, an options payload or an import parameter."""
    sha256: str

    @classmethod
    def of_bytes(cls, data: bytes) -> "ArtifactFingerprint":
        return cls(sha256=hashlib.sha256(bytes(data)).hexdigest())

    @classmethod
    def of_json(cls, obj: Any) -> "ArtifactFingerprint":
        """Hash of ``obj`` as canonical JSON (sorted keys, tuples as lists)."""
        text = json.dumps(_to_jsonable(obj), sort_keys=True, separators=(",", ":"), allow_nan=False)
        return cls.of_bytes(text.encode("utf-8"))


@dataclass
class Provenance:
    """What an operator consumed and produced.

    ``layout`` and ``record_size`` are set by the codec operators for the
    record they wrote or read.
    """
    operator: str
    version: str
    inputs: Dict[str, ArtifactFingerprint] = field(default_factory=dict)
    outputs: Dict[str, ArtifactFingerprint] = field(default_factory=dict)
    layout: Optional[RecordLayout] = None
    record_size: Optional[int] = None
