from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.exceptions import MalformedResponseError

# Relations repeat names already carried by their member ways.
EXCLUDED_ELEMENT_TYPES = frozenset({"relation"})


def _elements(response: Any) -> list[Mapping[str, Any]]:
    if not isinstance(response, Mapping):
        msg = "Query response is not an object"
        raise MalformedResponseError(msg, {"type": type(response).__name__})

    elements = response.get("elements")
    if not isinstance(elements, list):
        msg = "Query response has no 'elements' list"
        raise MalformedResponseError(msg)

    for index, element in enumerate(elements):
        if not isinstance(element, Mapping) or not isinstance(element.get("type"), str):
            msg = f"Query response element {index} has no string 'type'"
            raise MalformedResponseError(msg, {"index": index})
    return elements


def _element_name(element: Mapping[str, Any]) -> str | None:
    tags = element.get("tags")
    if not isinstance(tags, Mapping):
        return None
    name = tags.get("name")
    if isinstance(name, str) and name:
        return name
    return None


def extract_street_names(response: Any, *, dedupe: bool) -> list[str]:
    """Pull street names out of an Overpass JSON response.

    Args:
        response: Decoded JSON body with an ``elements`` list.
        dedupe: True for a finished single-area list (unique and sorted);
            False for one step of a multi-area export, where duplicates are
            kept and ordering is left to the final merge.

    Returns:
        Street names, excluding relations and elements without a name.
    """
    names = []
    for element in _elements(response):
        if element["type"] in EXCLUDED_ELEMENT_TYPES:
            continue
        name = _element_name(element)
        if name is not None:
            names.append(name)

    if not dedupe:
        return names
    return sorted(dict.fromkeys(names))
