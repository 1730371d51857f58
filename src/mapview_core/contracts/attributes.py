from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from .enums import AttributeKey


@runtime_checkable
class AttributeSource(Protocol):
    """Typed lookups over styled attributes; every getter takes the fallback value.

    A source is a scoped resource: callers release it with ``recycle()`` once
    they are done, and must not query it afterwards.
    """

    def has_value(self, key: AttributeKey) -> bool:
        ...

    def get_boolean(self, key: AttributeKey, default: bool) -> bool:
        ...

    def get_int(self, key: AttributeKey, default: int) -> int:
        ...

    def get_float(self, key: AttributeKey, default: float) -> float:
        ...

    def get_dimension(self, key: AttributeKey, default: float) -> float:
        """Return a dimension in density-independent units."""
        ...

    def get_color(self, key: AttributeKey, default: int) -> int:
        ...

    def get_drawable(self, key: AttributeKey, default: Any = None) -> Any:
        ...

    def get_string(self, key: AttributeKey) -> Optional[str]:
        ...

    def recycle(self) -> None:
        ...


@runtime_checkable
class DensityAware(Protocol):
    """A source that converts pixel dimensions itself and so needs the import density.

    ``bind_density`` is called by the importer before any dimension is read; a
    source already tied to a different density must refuse.
    """

    def bind_density(self, density: float) -> None:
        ...
