"""Global constants for the core package.

This module contains shared constants used across the application core.
"""

from typing import Final

# HTTP Client Constants
HTTP_CONNECTION_LIMIT: Final[int] = 10
HTTP_TIMEOUT_CONNECT: Final[float] = 10.0
HTTP_TIMEOUT_SOCK_READ: Final[float] = 180.0
HTTP_TIMEOUT_TOTAL: Final[float] = 300.0

# Street list output
LINE_SEPARATOR: Final[str] = "\r\n"
SINGLE_AREA_FILENAME: Final[str] = "Streets {name}.txt"
ALL_AREAS_FILENAME: Final[str] = "all streets.txt"

# Minimum number of distinct points in an area ring
MIN_RING_POINTS: Final[int] = 3
