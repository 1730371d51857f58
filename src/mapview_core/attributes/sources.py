from __future__ import annotations

"""Bundled attribute sources: a mapping-backed one and an XML layout reader."""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
import logging
import xml.etree.ElementTree as ET

from ..contracts.attributes import AttributeSource, DensityAware
from ..contracts.colors import to_signed32
from ..contracts.enums import AttributeKey
from ..contracts.errors import (
    AttributeSourceError,
    AttributeTypeError,
    RecycledSourceError,
    ValidationError,
)
from ..contracts.gravity import parse_gravity
from ..contracts.images import ImageHandle
from .units import check_density, parse_bool, parse_color, parse_dimension

logger = logging.getLogger(__name__)

KeyLike = Union[AttributeKey, str]

_DRAWABLE_PREFIX = "@drawable/"


def _normalize_key(key: KeyLike) -> Optional[AttributeKey]:
    if isinstance(key, AttributeKey):
        return key
    try:
        return AttributeKey(str(key))
    except ValueError:
        return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class MappingAttributeSource(AttributeSource, DensityAware):
    """Attribute source over a plain mapping.

    Values are native Python values (``True``, ``16.0``, ``0xFF00FF00``) or the
    string forms found in layout files (``"true"``, ``"16dp"``,
    ``"#FF00FF00"``, ``"top|end"``). Keys outside ``AttributeKey`` are ignored.

    ``"px"`` dimensions are converted with ``density``. Leave it unset to take
    the density the importer binds; a source built for one density refuses to
    be imported at another.
    """

    def __init__(self, values: Mapping[KeyLike, Any], density: Optional[float] = None) -> None:
        self.density: Optional[float] = None if density is None else check_density(density)
        self._values: Dict[AttributeKey, Any] = {}
        self.ignored: list[str] = []
        for raw_key, value in values.items():
            key = _normalize_key(raw_key)
            if key is None:
                self.ignored.append(str(raw_key))
                continue
            self._values[key] = value
        if self.ignored:
            logger.debug("ignoring unknown attributes: %s", ", ".join(sorted(self.ignored)))
        self._recycled = False

    @property
    def recycled(self) -> bool:
        return self._recycled

    def _lookup(self, key: AttributeKey) -> Any:
        if self._recycled:
            raise RecycledSourceError(f"attribute source queried for '{key.value}' after recycle()")
        return self._values.get(key)

    def _convert(self, key: AttributeKey, value: Any, kind: str, parse) -> Any:
        try:
            return parse(value)
        except ValidationError as exc:
            raise AttributeTypeError(f"attribute '{key.value}' is not a valid {kind}: {exc}") from exc

    def has_value(self, key: AttributeKey) -> bool:
        return self._lookup(key) is not None

    def get_boolean(self, key: AttributeKey, default: bool) -> bool:
        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return self._convert(key, value, "boolean", parse_bool)
        raise AttributeTypeError(f"attribute '{key.value}' is not a boolean: {value!r}")

    def get_int(self, key: AttributeKey, default: int) -> int:
        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            # flag attributes (gravity) accept names as well as numbers
            return self._convert(key, value, "integer", parse_gravity)
        raise AttributeTypeError(f"attribute '{key.value}' is not an integer: {value!r}")

    def get_float(self, key: AttributeKey, default: float) -> float:
        value = self._lookup(key)
        if value is None:
            return default
        if _is_number(value):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError as exc:
                raise AttributeTypeError(f"attribute '{key.value}' is not a float: {value!r}") from exc
        raise AttributeTypeError(f"attribute '{key.value}' is not a float: {value!r}")

    def get_dimension(self, key: AttributeKey, default: float) -> float:
        value = self._lookup(key)
        if value is None:
            return default
        if _is_number(value):
            return float(value)
        if isinstance(value, str):
            return self._convert(key, value, "dimension", self._parse_dimension)
        raise AttributeTypeError(f"attribute '{key.value}' is not a dimension: {value!r}")

    def _parse_dimension(self, text: str) -> float:
        if self.density is None and text.strip().lower().endswith("px"):
            raise ValidationError("pixel dimensions need a density; none was given or bound")
        return parse_dimension(text, 1.0 if self.density is None else self.density)

    def get_color(self, key: AttributeKey, default: int) -> int:
        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, int) and not isinstance(value, bool):
            return to_signed32(value)
        if isinstance(value, str):
            return self._convert(key, value, "color", parse_color)
        raise AttributeTypeError(f"attribute '{key.value}' is not a color: {value!r}")

    def get_drawable(self, key: AttributeKey, default: Any = None) -> Any:
        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, str):
            name = value[len(_DRAWABLE_PREFIX):] if value.startswith(_DRAWABLE_PREFIX) else value
            return ImageHandle(name.strip())
        return value

    def get_string(self, key: AttributeKey) -> Optional[str]:
        value = self._lookup(key)
        if value is None or isinstance(value, str):
            return value
        raise AttributeTypeError(f"attribute '{key.value}' is not a string: {value!r}")

    def bind_density(self, density: float) -> None:
        density = check_density(density)
        if self.density is None:
            self.density = density
        elif self.density != density:
            raise ValidationError(
                f"attribute source converts px at density {self.density}, cannot import at density {density}"
            )

    def recycle(self) -> None:
        if self._recycled:
            raise RecycledSourceError("attribute source recycled twice")
        self._recycled = True


def _local_name(name: str) -> str:
    # "{namespace-uri}compass_enabled" or "app:compass_enabled" -> "compass_enabled"
    if name.startswith("{"):
        name = name.split("}", 1)[1]
    return name.rsplit(":", 1)[-1]


class XmlAttributeSource(MappingAttributeSource):
    """Attributes of one element in a layout XML document.

    The element is the first one whose tag ends with ``element`` (default
    ``"MapView"``); when none matches, the document root is used. Namespace
    prefixes on attribute names are dropped.
    """

    @classmethod
    def from_string(cls, text: str, density: Optional[float] = None, element: str = "MapView") -> "XmlAttributeSource":
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise AttributeSourceError(f"invalid layout XML: {exc}") from exc
        return cls._from_root(root, density, element)

    @classmethod
    def from_path(cls, path: Union[str, Path], density: Optional[float] = None, element: str = "MapView") -> "XmlAttributeSource":
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise AttributeSourceError(f"cannot read layout file {path}: {exc}") from exc
        return cls.from_string(text, density=density, element=element)

    @classmethod
    def _from_root(cls, root: ET.Element, density: Optional[float], element: str) -> "XmlAttributeSource":
        target = root
        for node in root.iter():
            if _local_name(node.tag).endswith(element):
                target = node
                break
        values = {_local_name(name): value for name, value in target.attrib.items()}
        return cls(values, density=density)
