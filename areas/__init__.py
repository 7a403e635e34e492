"""Areas package - named boundary polygons loaded from KML.

Key modules:
    - models: Area dataclass and ring helpers
    - parser: KML placemark parsing
    - store: loaded areas and render state
    - selection: overlay drawing, refocus and replacement
"""

from areas.models import Area, AreaCollection, swap_ring
from areas.parser import BoundaryParser, parse_boundaries, parse_coordinates
from areas.selection import (
    GeoJSONMapView,
    MapView,
    Selection,
    clear_overlays,
    replace_areas,
    select_area,
)
from areas.store import AreaStore

__all__ = [
    "Area",
    "AreaCollection",
    "AreaStore",
    "BoundaryParser",
    "GeoJSONMapView",
    "MapView",
    "Selection",
    "clear_overlays",
    "parse_boundaries",
    "parse_coordinates",
    "replace_areas",
    "select_area",
    "swap_ring",
]
