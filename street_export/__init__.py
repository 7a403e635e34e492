"""Street export package - street list queries, aggregation and delivery.

Key modules:
    - pipeline: single-area and all-areas export
    - service: entry points bound to one set of loaded areas
    - loading: busy indicator held around each export
    - reporting: user-facing error messages
    - sinks: where finished lists are delivered
"""

from street_export.loading import LoadingState
from street_export.models import AreaFailure, ExportResult
from street_export.pipeline import StreetExportPipeline, compose_text, merge_names
from street_export.reporting import LoggingErrorReporter, describe_error
from street_export.service import StreetListService
from street_export.sinks import DirectorySink, MemorySink

__all__ = [
    "AreaFailure",
    "DirectorySink",
    "ExportResult",
    "LoadingState",
    "LoggingErrorReporter",
    "MemorySink",
    "StreetExportPipeline",
    "StreetListService",
    "compose_text",
    "describe_error",
    "merge_names",
]
