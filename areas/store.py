from __future__ import annotations

import logging
from typing import Any

from areas.models import Area, AreaCollection
from core.exceptions import AlreadyRenderedError, NotFoundError

logger = logging.getLogger(__name__)


class AreaStore:
    """Holds the loaded areas and their render state.

    Iteration follows the order the areas were parsed in, which is also the
    order used when exporting every area.
    """

    def __init__(self, collection: AreaCollection | None = None) -> None:
        self._areas: AreaCollection = dict(collection or {})

    def __len__(self) -> int:
        return len(self._areas)

    def __contains__(self, name: object) -> bool:
        return name in self._areas

    def list(self) -> list[str]:
        return list(self._areas)

    def areas(self) -> list[Area]:
        return list(self._areas.values())

    def get(self, name: str) -> Area:
        try:
            return self._areas[name]
        except KeyError:
            msg = f"Area '{name}' is not loaded"
            raise NotFoundError(msg, {"name": name}) from None

    def mark_rendered(self, name: str, overlay_handle: Any) -> None:
        """Record the overlay drawn for an area.

        Callers check ``area.rendered`` first; a second call for the same
        area is a protocol error rather than an overwrite.
        """
        area = self.get(name)
        if area.rendered:
            msg = f"Area '{name}' is already rendered"
            raise AlreadyRenderedError(msg, {"name": name})
        area.rendered = True
        area.overlay_handle = overlay_handle

    def rendered_handles(self) -> list[Any]:
        return [area.overlay_handle for area in self._areas.values() if area.rendered]

    def clear(self) -> None:
        """Drop every area. Overlays must be disposed of by the caller first."""
        self._areas = {}

    def replace(self, collection: AreaCollection) -> None:
        self.clear()
        self._areas = dict(collection)
        logger.debug("Area store now holds %d area(s)", len(self._areas))
