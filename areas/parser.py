"""
KML boundary parsing.

Turns a KML document into an ordered mapping of area name to coordinate
ring. Only named polygonal placemarks are understood: the placemark name and
its first ``<coordinates>`` block. A broken placemark is skipped and recorded
on the parser; a document that is not well-formed XML fails as a whole.
"""

from __future__ import annotations

import logging

from lxml import etree

from areas.models import Area, AreaCollection, Ring
from core.constants import MIN_RING_POINTS
from core.exceptions import (
    InvalidCoordinatesError,
    MissingNameError,
    ParseError,
    RecordError,
)

logger = logging.getLogger(__name__)


def _localname(element: etree._Element) -> str | None:
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def _descendants(element: etree._Element, localname: str):
    for child in element.iterdescendants():
        if _localname(child) == localname:
            yield child


def _placemark_name(placemark: etree._Element) -> str | None:
    for child in placemark:
        if _localname(child) == "name":
            return child.text
    for child in _descendants(placemark, "name"):
        return child.text
    return None


def parse_coordinates(block: str) -> Ring:
    """Parse a KML coordinate block into a list of (lon, lat) pairs.

    Tuples are separated by whitespace; a third elevation component is
    dropped. Blank entries left over from line breaks or trailing whitespace
    are ignored.
    """
    ring: Ring = []
    for raw_tuple in block.split():
        parts = raw_tuple.split(",")
        if len(parts) not in (2, 3):
            msg = f"Invalid coordinate tuple '{raw_tuple}'"
            raise InvalidCoordinatesError(msg, {"tuple": raw_tuple})
        try:
            lon = float(parts[0])
            lat = float(parts[1])
        except ValueError as exc:
            msg = f"Invalid coordinate tuple '{raw_tuple}'"
            raise InvalidCoordinatesError(msg, {"tuple": raw_tuple}) from exc
        ring.append((lon, lat))
    return ring


class BoundaryParser:
    """Parses KML boundary documents into areas.

    ``errors`` holds the record-level failures of the most recent parse, in
    document order.
    """

    def __init__(self) -> None:
        self.errors: list[RecordError] = []
        self._xml_parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            huge_tree=False,
        )

    def parse(self, raw: bytes | str) -> AreaCollection:
        self.errors = []
        root = self._parse_document(raw)

        collection: AreaCollection = {}
        index = 0
        for element in root.iter():
            if _localname(element) != "Placemark":
                continue
            index += 1
            try:
                area = self._parse_placemark(element)
            except RecordError as exc:
                exc.details.setdefault("placemark", index)
                self.errors.append(exc)
                logger.warning("Skipping placemark %s: %s", index, exc.message)
                continue
            if area.name in collection:
                logger.info("Duplicate area name '%s', keeping the later one", area.name)
            collection[area.name] = area

        logger.info(
            "Parsed %d area(s), skipped %d placemark(s)",
            len(collection),
            len(self.errors),
        )
        return collection

    def _parse_document(self, raw: bytes | str) -> etree._Element:
        data = raw.encode("utf-8") if isinstance(raw, str) else raw
        if not data or not data.strip():
            msg = "Boundary document is empty"
            raise ParseError(msg)
        try:
            return etree.fromstring(data, parser=self._xml_parser)
        except etree.XMLSyntaxError as exc:
            msg = f"Boundary document is not well-formed: {exc}"
            raise ParseError(msg, {"line": getattr(exc, "lineno", None)}) from exc

    @staticmethod
    def _parse_placemark(placemark: etree._Element) -> Area:
        name = _placemark_name(placemark)
        if name is None or not name.strip():
            msg = "Placemark has no name"
            raise MissingNameError(msg)

        block = next(_descendants(placemark, "coordinates"), None)
        if block is None or not (block.text or "").strip():
            msg = f"Placemark '{name}' has no coordinates"
            raise InvalidCoordinatesError(msg, {"name": name})

        try:
            ring = parse_coordinates(block.text)
        except InvalidCoordinatesError as exc:
            exc.details["name"] = name
            raise

        if len(ring) < MIN_RING_POINTS:
            msg = (
                f"Placemark '{name}' has {len(ring)} point(s), "
                f"at least {MIN_RING_POINTS} are required"
            )
            raise InvalidCoordinatesError(msg, {"name": name, "points": len(ring)})

        return Area.from_lon_lat(name, ring)


def parse_boundaries(raw: bytes | str) -> AreaCollection:
    """Parse a KML document, discarding the record-level error list."""
    return BoundaryParser().parse(raw)
