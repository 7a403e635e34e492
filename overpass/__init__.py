"""Overpass package - street queries and response handling."""

from overpass.client import OverpassClient
from overpass.extractor import extract_street_names
from overpass.query import (
    STREETS_QUERY_TEMPLATE,
    build_query,
    build_query_url,
    build_streets_query,
)

__all__ = [
    "STREETS_QUERY_TEMPLATE",
    "OverpassClient",
    "build_query",
    "build_query_url",
    "build_streets_query",
    "extract_street_names",
]
