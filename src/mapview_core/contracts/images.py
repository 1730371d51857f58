from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageHandle:
    """Reference to an externally owned image; never loaded or freed here.

    Two handles are equal when they name the same image. Sources may also hand
    out arbitrary objects as handles, which then compare by their own ``==``
    (identity for plain objects).
    """
    name: str


MY_LOCATION_FOREGROUND = ImageHandle("ic_mylocationview_normal")
MY_LOCATION_FOREGROUND_BEARING = ImageHandle("ic_mylocationview_bearing")
MY_LOCATION_BACKGROUND = ImageHandle("ic_mylocationview_background")
