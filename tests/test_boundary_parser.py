import pytest

from areas.parser import BoundaryParser, parse_boundaries, parse_coordinates
from core.exceptions import InvalidCoordinatesError, MissingNameError, ParseError


def _kml(*placemarks: str, namespace: bool = True) -> str:
    xmlns = ' xmlns="http://www.opengis.net/kml/2.2"' if namespace else ""
    body = "\n".join(placemarks)
    return f"<kml{xmlns}><Document>{body}</Document></kml>"


def _placemark(name: str | None, coordinates: str | None) -> str:
    name_el = f"<name>{name}</name>" if name is not None else ""
    coords_el = (
        f"<Polygon><outerBoundaryIs><LinearRing><coordinates>{coordinates}"
        "</coordinates></LinearRing></outerBoundaryIs></Polygon>"
        if coordinates is not None
        else ""
    )
    return f"<Placemark>{name_el}{coords_el}</Placemark>"


TRIANGLE = "30.1,59.9,0 30.2,59.9,0 30.2,60.0,0"


def test_parse_areas_in_document_order(kml_two_areas) -> None:
    areas = parse_boundaries(kml_two_areas)

    assert list(areas) == ["Arbat", "Basmanny"]
    arbat = areas["Arbat"]
    assert arbat.ring_lon_lat[0] == (37.58, 55.75)
    assert len(arbat.ring_lon_lat) == 5
    assert arbat.rendered is False
    assert arbat.overlay_handle is None


def test_lat_lon_ring_is_reversed_pairwise(kml_two_areas) -> None:
    for area in parse_boundaries(kml_two_areas).values():
        assert len(area.ring_lat_lon) == len(area.ring_lon_lat)
        for lon_lat, lat_lon in zip(area.ring_lon_lat, area.ring_lat_lon):
            assert lat_lon == (lon_lat[1], lon_lat[0])


def test_rings_are_not_aliased(kml_two_areas) -> None:
    area = parse_boundaries(kml_two_areas)["Basmanny"]
    original_lat_lon = list(area.ring_lat_lon)

    area.ring_lon_lat[0] = (0.0, 0.0)
    area.ring_lon_lat.append((1.0, 1.0))

    assert area.ring_lat_lon == original_lat_lon
    assert area.ring_lat_lon is not area.ring_lon_lat


def test_elevation_is_stripped_and_blank_entries_dropped() -> None:
    ring = parse_coordinates("\n   30.1,59.9,12.5\n\t30.2,59.9\n\n  30.2,60.0,0   \n")

    assert ring == [(30.1, 59.9), (30.2, 59.9), (30.2, 60.0)]


def test_elevation_zero_does_not_corrupt_coordinates() -> None:
    ring = parse_coordinates("30.05,60.0,0 30.2,60.05,0 30.0,60.1,0")

    assert ring == [(30.05, 60.0), (30.2, 60.05), (30.0, 60.1)]


def test_document_without_namespace_is_accepted() -> None:
    areas = parse_boundaries(_kml(_placemark("Plain", TRIANGLE), namespace=False))

    assert list(areas) == ["Plain"]


def test_missing_name_skips_record_and_continues() -> None:
    parser = BoundaryParser()
    areas = parser.parse(
        _kml(
            _placemark(None, TRIANGLE),
            _placemark("Kept", TRIANGLE),
        ),
    )

    assert list(areas) == ["Kept"]
    assert len(parser.errors) == 1
    assert isinstance(parser.errors[0], MissingNameError)
    assert parser.errors[0].details["placemark"] == 1


def test_blank_name_is_treated_as_missing() -> None:
    parser = BoundaryParser()
    areas = parser.parse(_kml(_placemark("   ", TRIANGLE)))

    assert areas == {}
    assert isinstance(parser.errors[0], MissingNameError)


@pytest.mark.parametrize(
    "coordinates",
    [
        None,
        "",
        "30.1,59.9 30.2,59.9",
        "30.1,59.9 abc,59.9 30.2,60.0",
        "30.1 59.9 30.2",
        "30.1,59.9,0,7 30.2,59.9 30.2,60.0",
    ],
)
def test_bad_coordinates_skip_record(coordinates) -> None:
    parser = BoundaryParser()
    areas = parser.parse(
        _kml(
            _placemark("Broken", coordinates),
            _placemark("Good", TRIANGLE),
        ),
    )

    assert list(areas) == ["Good"]
    assert len(parser.errors) == 1
    assert isinstance(parser.errors[0], InvalidCoordinatesError)


def test_duplicate_names_last_wins() -> None:
    areas = parse_boundaries(
        _kml(
            _placemark("Same", TRIANGLE),
            _placemark("Other", TRIANGLE),
            _placemark("Same", "10,20 11,20 11,21"),
        ),
    )

    assert list(areas) == ["Same", "Other"]
    assert areas["Same"].ring_lon_lat[0] == (10.0, 20.0)


def test_names_keep_case_and_whitespace() -> None:
    areas = parse_boundaries(
        _kml(
            _placemark(" Old Town", TRIANGLE),
            _placemark("old town", TRIANGLE),
        ),
    )

    assert list(areas) == [" Old Town", "old town"]


def test_non_ascii_names_and_bytes_input() -> None:
    raw = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        + _kml(_placemark("Хамовники", TRIANGLE))
    ).encode("utf-8")

    areas = parse_boundaries(raw)

    assert list(areas) == ["Хамовники"]


def test_empty_document_has_no_areas() -> None:
    assert parse_boundaries(_kml()) == {}


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "<kml><Document><Placemark></kml>", "not xml at all"],
)
def test_malformed_document_raises_parse_error(raw) -> None:
    with pytest.raises(ParseError):
        parse_boundaries(raw)


def test_external_entities_are_not_resolved(tmp_path) -> None:
    secret = tmp_path / "secret.txt"
    secret.write_text("leaked")
    raw = (
        f'<?xml version="1.0"?><!DOCTYPE kml [<!ENTITY xxe SYSTEM "file://{secret}">]>'
        f"<kml><Placemark><name>&xxe;</name><coordinates>{TRIANGLE}</coordinates>"
        "</Placemark></kml>"
    )

    parser = BoundaryParser()
    areas = parser.parse(raw)

    assert "leaked" not in areas
