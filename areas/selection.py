"""
Area selection and overlay lifecycle.

Selecting an area draws its overlay the first time only and then refocuses
the view on it. Loading a new boundary document disposes of every overlay
before the store is replaced.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from shapely.geometry import Polygon, mapping

from areas.models import Area, AreaCollection
from areas.store import AreaStore

logger = logging.getLogger(__name__)

Bounds = tuple[float, float, float, float]

OVERLAY_COLOR = "blue"


class MapView(Protocol):
    """Interface for the map that displays area overlays."""

    def draw(self, area: Area) -> Any:
        """Draw the area's polygon and return a handle to the overlay."""
        ...

    def remove(self, handle: Any) -> None:
        """Remove a previously drawn overlay."""
        ...

    def overlay_bounds(self, handle: Any) -> Bounds:
        """Return (west, south, east, north) of a drawn overlay."""
        ...

    def fit_bounds(self, bounds: Bounds) -> None:
        """Move the view so the bounds are visible."""
        ...


class GeoJSONMapView:
    """Headless map view keeping overlays as GeoJSON features.

    Handles are integer overlay ids. ``view_bounds`` is the extent the view
    was last focused on.
    """

    def __init__(self) -> None:
        self.overlays: dict[int, dict[str, Any]] = {}
        self.view_bounds: Bounds | None = None
        self._ids = itertools.count(1)

    def draw(self, area: Area) -> int:
        polygon = Polygon(area.ring_lon_lat)
        handle = next(self._ids)
        self.overlays[handle] = {
            "type": "Feature",
            "id": handle,
            "geometry": mapping(polygon),
            "bbox": list(polygon.bounds),
            "properties": {"popup": area.name, "color": OVERLAY_COLOR},
        }
        logger.debug("Drew overlay %s for area '%s'", handle, area.name)
        return handle

    def remove(self, handle: int) -> None:
        self.overlays.pop(handle, None)

    def overlay_bounds(self, handle: int) -> Bounds:
        west, south, east, north = self.overlays[handle]["bbox"]
        return west, south, east, north

    def fit_bounds(self, bounds: Bounds) -> None:
        self.view_bounds = bounds


@dataclass
class Selection:
    name: str
    overlay_handle: Any
    bounds: Bounds
    newly_rendered: bool


def select_area(store: AreaStore, map_view: MapView, name: str) -> Selection:
    """Render the area if it has not been drawn yet, then focus on it."""
    area = store.get(name)
    newly_rendered = False
    if not area.rendered:
        handle = map_view.draw(area)
        store.mark_rendered(name, handle)
        newly_rendered = True

    bounds = map_view.overlay_bounds(area.overlay_handle)
    map_view.fit_bounds(bounds)
    return Selection(
        name=name,
        overlay_handle=area.overlay_handle,
        bounds=bounds,
        newly_rendered=newly_rendered,
    )


def clear_overlays(store: AreaStore, map_view: MapView) -> int:
    handles = store.rendered_handles()
    for handle in handles:
        map_view.remove(handle)
    return len(handles)


def replace_areas(
    store: AreaStore,
    map_view: MapView,
    collection: AreaCollection,
) -> None:
    """Dispose of every drawn overlay, then load the new areas."""
    removed = clear_overlays(store, map_view)
    store.replace(collection)
    logger.info(
        "Loaded %d area(s), removed %d overlay(s)",
        len(collection),
        removed,
    )
