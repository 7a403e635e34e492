"""Overpass QL query construction for named streets inside a polygon.

See https://wiki.openstreetmap.org/wiki/Overpass_API/Language_Guide for the
``poly`` filter. The filter takes "lat lon" pairs, not "lon lat".
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal
from urllib.parse import quote

logger = logging.getLogger(__name__)

# Named, surfaced ways that are not shops, leisure/tourism objects, tunnels or
# closed to motor vehicles, plus the relations containing them.
STREETS_QUERY_TEMPLATE = (
    '[out:json];(way(poly:"{poly}")["name"]["surface"]'
    '[!"brand"][!"leisure"][!"tourism"][!"motor_vehicle"][!"tunnel"];<;);out meta;'
)

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _coordinate_text(value: float) -> str:
    # Shortest round-trip digits, never in exponent notation.
    return format(Decimal(repr(float(value))), "f")


def poly_filter(ring_lat_lon: Sequence[Sequence[float]]) -> str:
    return " ".join(
        f"{_coordinate_text(lat)} {_coordinate_text(lon)}" for lat, lon in ring_lat_lon
    )


def build_streets_query(ring_lat_lon: Sequence[Sequence[float]]) -> str:
    """Return the raw Overpass QL query for the ring."""
    query = STREETS_QUERY_TEMPLATE.format(poly=poly_filter(ring_lat_lon))
    logger.debug("Generated streets query: %s", query)
    return query


def build_query(ring_lat_lon: Sequence[Sequence[float]]) -> str:
    """Return the query percent-encoded as a single query parameter value."""
    return quote(build_streets_query(ring_lat_lon), safe=_URI_COMPONENT_SAFE)


def build_query_url(endpoint: str, ring_lat_lon: Sequence[Sequence[float]]) -> str:
    return f"{endpoint}?data={build_query(ring_lat_lon)}"
