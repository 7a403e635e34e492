"""
Output sinks for finished street lists.

A sink receives the final text and a file name and makes the file available
to the user. Text is written as UTF-8 exactly as given; line endings are
already CRLF and must not be translated.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

MEDIA_TYPE = "text/plain; charset=utf-8"


class OutputSink(Protocol):
    def deliver(self, text: str, filename: str) -> None: ...


@dataclass
class Delivery:
    filename: str
    content: bytes
    media_type: str = MEDIA_TYPE


class MemorySink:
    """Keeps the most recent deliveries in memory, newest last."""

    def __init__(self, limit: int = 20) -> None:
        self.deliveries: deque[Delivery] = deque(maxlen=limit)

    def deliver(self, text: str, filename: str) -> None:
        self.deliveries.append(Delivery(filename=filename, content=text.encode("utf-8")))

    @property
    def last(self) -> Delivery | None:
        return self.deliveries[-1] if self.deliveries else None


class DirectorySink:
    """Writes each delivery as a file inside a directory."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def target(self, filename: str) -> Path:
        # Area names come from user files; keep the output inside the directory.
        safe_name = filename.replace("/", "_").replace("\\", "_")
        return self.directory / safe_name

    def deliver(self, text: str, filename: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.target(filename)
        path.write_bytes(text.encode("utf-8"))
        logger.info("Wrote %s (%d bytes)", path, path.stat().st_size)
