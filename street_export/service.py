"""Business logic for street list operations.

StreetListService binds one area store, map view and export pipeline
together and exposes the operations a UI calls: load a boundary document,
select an area, export one area, export every area.
"""

from __future__ import annotations

import logging

from areas.parser import BoundaryParser
from areas.selection import GeoJSONMapView, MapView, Selection, replace_areas, select_area
from areas.store import AreaStore
from core.exceptions import RecordError
from overpass.client import OverpassClient
from street_export.loading import LoadingState
from street_export.models import ExportResult
from street_export.pipeline import StreetExportPipeline, StreetQueryClient
from street_export.reporting import LoggingErrorReporter
from street_export.sinks import OutputSink

logger = logging.getLogger(__name__)


class StreetListService:
    def __init__(
        self,
        sink: OutputSink,
        *,
        client: StreetQueryClient | None = None,
        map_view: MapView | None = None,
        reporter: LoggingErrorReporter | None = None,
    ) -> None:
        self.store = AreaStore()
        self.map_view = map_view or GeoJSONMapView()
        self.reporter = reporter or LoggingErrorReporter()
        self.loading = LoadingState()
        self.skipped: list[RecordError] = []
        self.pipeline = StreetExportPipeline(
            client or OverpassClient(),
            sink,
            self.reporter,
            self.loading,
        )

    @property
    def errors(self) -> list[str]:
        return list(self.reporter.messages)

    def parse_boundaries(self, raw: bytes | str) -> list[str]:
        """Load a KML document, replacing every previously loaded area.

        A document-level ``ParseError`` leaves the current areas untouched.
        Errors reported for the previous document are dropped; skipped
        placemarks are reported and kept on ``skipped``.
        """
        parser = BoundaryParser()
        collection = parser.parse(raw)
        replace_areas(self.store, self.map_view, collection)
        self.reporter.clear()

        self.skipped = parser.errors
        for error in parser.errors:
            self.reporter.report(f"Skipped placemark: {error.message}")
        return self.store.list()

    def select_area(self, name: str) -> Selection:
        return select_area(self.store, self.map_view, name)

    async def export_one(self, name: str) -> ExportResult:
        area = self.store.get(name)
        return await self.pipeline.export_one(area)

    async def export_all(self) -> ExportResult:
        areas = self.store.areas()
        logger.info("Exporting streets for %d area(s)", len(areas))
        return await self.pipeline.export_all(areas)
