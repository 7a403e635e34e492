from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Coordinate = tuple[float, float]
Ring = list[Coordinate]


def swap_ring(ring: Ring) -> Ring:
    """Return a new ring with each pair's components swapped."""
    return [(second, first) for first, second in ring]


@dataclass
class Area:
    """A named boundary polygon and its map render state."""

    name: str
    ring_lon_lat: Ring
    ring_lat_lon: Ring = field(default_factory=list)
    rendered: bool = False
    overlay_handle: Any | None = None

    @classmethod
    def from_lon_lat(cls, name: str, ring_lon_lat: Ring) -> Area:
        lon_lat = [(float(lon), float(lat)) for lon, lat in ring_lon_lat]
        return cls(name=name, ring_lon_lat=lon_lat, ring_lat_lon=swap_ring(lon_lat))


AreaCollection = dict[str, Area]
