import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from http_fakes import TEST_OVERPASS_URL
from network_blocker import install_network_blocker

KML_TWO_AREAS = """<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
  <Document>
    <name>Districts</name>
    <Placemark>
      <name>Arbat</name>
      <Polygon>
        <outerBoundaryIs>
          <LinearRing>
            <coordinates>
              37.58,55.75,0
              37.60,55.75,0
              37.60,55.76,0
              37.58,55.76,0
              37.58,55.75,0
            </coordinates>
          </LinearRing>
        </outerBoundaryIs>
      </Polygon>
    </Placemark>
    <Placemark>
      <name>Basmanny</name>
      <Polygon>
        <outerBoundaryIs>
          <LinearRing>
            <coordinates>37.66,55.76 37.68,55.76 37.68,55.77</coordinates>
          </LinearRing>
        </outerBoundaryIs>
      </Polygon>
    </Placemark>
  </Document>
</kml>
"""


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OVERPASS_API_URL", TEST_OVERPASS_URL)
    monkeypatch.setenv("OVERPASS_USER_AGENT", "StreetLists-Tests/1.0")
    install_network_blocker(monkeypatch)


@pytest.fixture
def kml_two_areas() -> str:
    return KML_TWO_AREAS
