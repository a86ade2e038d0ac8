"""Bitmap resources shared by path while anything still holds them."""

from __future__ import annotations

import weakref
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class BitmapResource:
    """A loaded bitmap."""

    bitmap: Any = None


class BitmapResourceManager:
    """Creates bitmap resources, reusing one per path while it is alive."""

    def __init__(self, loader: Callable[[str], Any]) -> None:
        self._loader = loader
        self._bitmaps: weakref.WeakValueDictionary[str, BitmapResource] = (
            weakref.WeakValueDictionary()
        )

    def create_bitmap_resource(self, file_path: str) -> BitmapResource:
        """Return the live resource for this path, loading it if needed."""
        resource = self._bitmaps.get(file_path)
        if resource is None:
            resource = BitmapResource(self._loader(file_path))
            self._bitmaps[file_path] = resource
        return resource

    def __len__(self) -> int:
        return len(self._bitmaps)