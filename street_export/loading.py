from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class LoadingState:
    """Busy indicator shared by export operations.

    ``hold()`` marks the start and guaranteed end of an operation. Holds are
    counted so overlapping operations keep the indicator on until the last
    one finishes; listeners only hear about actual on/off transitions.
    """

    def __init__(self) -> None:
        self._depth = 0
        self._listeners: list[Callable[[bool], None]] = []

    @property
    def active(self) -> bool:
        return self._depth > 0

    def subscribe(self, listener: Callable[[bool], None]) -> None:
        self._listeners.append(listener)

    def _notify(self, active: bool) -> None:
        logger.debug("Loading state -> %s", active)
        for listener in self._listeners:
            listener(active)

    @contextmanager
    def hold(self) -> Iterator[None]:
        self._depth += 1
        if self._depth == 1:
            self._notify(True)
        try:
            yield
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._notify(False)
