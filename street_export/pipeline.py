"""
Street list export pipeline.

Single-area export queries one polygon and delivers a sorted, unique list.
All-areas export walks the areas strictly one after another, keeps going
past failed areas, and delivers one merged list at the end.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Protocol

from areas.models import Area
from core.constants import ALL_AREAS_FILENAME, LINE_SEPARATOR, SINGLE_AREA_FILENAME
from core.exceptions import MalformedResponseError, QueryFailure
from overpass.extractor import extract_street_names
from street_export.loading import LoadingState
from street_export.models import AreaFailure, ExportResult
from street_export.reporting import ErrorReporter, describe_error
from street_export.sinks import OutputSink

logger = logging.getLogger(__name__)

RECOVERABLE_ERRORS = (QueryFailure, MalformedResponseError)


class StreetQueryClient(Protocol):
    async def fetch(self, ring_lat_lon: Sequence[Sequence[float]]) -> Any: ...


def compose_text(names: Iterable[str]) -> str:
    return LINE_SEPARATOR.join(names)


def merge_names(names: Iterable[str]) -> list[str]:
    return sorted(set(names))


class StreetExportPipeline:
    def __init__(
        self,
        client: StreetQueryClient,
        sink: OutputSink,
        reporter: ErrorReporter,
        loading: LoadingState | None = None,
    ) -> None:
        self.client = client
        self.sink = sink
        self.reporter = reporter
        self.loading = loading or LoadingState()

    async def _fetch_names(self, area: Area, *, dedupe: bool) -> list[str]:
        response = await self.client.fetch(area.ring_lat_lon)
        return extract_street_names(response, dedupe=dedupe)

    def _failure(self, area: Area, exc: Exception) -> AreaFailure:
        failure = AreaFailure(area_name=area.name, message=describe_error(exc))
        self.reporter.report(
            f"Could not get streets for '{failure.area_name}': {failure.message}",
        )
        return failure

    def _deliver(self, names: list[str], filename: str, **extra: Any) -> ExportResult:
        text = compose_text(names)
        self.sink.deliver(text, filename)
        logger.info("Delivered %s with %d street(s)", filename, len(names))
        return ExportResult(filename=filename, text=text, names=names, **extra)

    async def export_one(self, area: Area) -> ExportResult:
        """Export the streets of one area.

        On failure the error is reported and nothing is delivered.
        """
        with self.loading.hold():
            try:
                names = await self._fetch_names(area, dedupe=True)
            except RECOVERABLE_ERRORS as exc:
                return ExportResult(failures=[self._failure(area, exc)])

            filename = SINGLE_AREA_FILENAME.format(name=area.name)
            return self._deliver(names, filename)

    async def collect_names(
        self,
        areas: Iterable[Area],
    ) -> tuple[list[str], list[AreaFailure]]:
        """Query every area in order, one at a time.

        Returns all names found (with duplicates) and the per-area failures.
        A failed area never stops the remaining ones.
        """
        merged: list[str] = []
        failures: list[AreaFailure] = []
        for area in areas:
            try:
                names = await self._fetch_names(area, dedupe=False)
            except RECOVERABLE_ERRORS as exc:
                failures.append(self._failure(area, exc))
                continue
            logger.info("Area '%s': %d street name(s)", area.name, len(names))
            merged.extend(names)
        return merged, failures

    async def export_all(self, areas: Iterable[Area]) -> ExportResult:
        """Export the merged streets of every area as one file."""
        with self.loading.hold():
            merged, failures = await self.collect_names(areas)
            if failures:
                logger.warning("%d area(s) failed during export", len(failures))
            return self._deliver(
                merge_names(merged),
                ALL_AREAS_FILENAME,
                failures=failures,
            )
