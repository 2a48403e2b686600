"""AppDate units module.

This module provides the unit and timezone building blocks:
    - TimeUnit: Units accepted by arithmetic and comparisons
    - Timezone helpers: IANA resolution and UTC offset parsing
"""

from __future__ import annotations

from appdate.units.timeunit import TimeUnit
from appdate.units.timezone import (
    UTC,
    format_offset,
    is_valid_timezone,
    parse_offset,
    resolve_zone,
)

__all__: list[str] = [
    "TimeUnit",
    "UTC",
    "format_offset",
    "is_valid_timezone",
    "parse_offset",
    "resolve_zone",
]
