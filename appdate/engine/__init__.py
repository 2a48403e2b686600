"""Calendar engine.

The engine is the only part of AppDate that touches ``datetime``,
``zoneinfo`` and ``dateutil`` directly. It works on Instants (``Valid``
or ``Invalid``) and provides:

Instants (from appdate.engine.instant):
    - now, from_epoch_seconds, from_epoch_millis
    - to_epoch_seconds, to_epoch_millis
    - to_timezone, to_utc, weekday (Sunday = 0)

Arithmetic (from appdate.engine.ops):
    - add, subtract, start_of, end_of, diff

Comparisons (from appdate.engine.comparisons):
    - is_before, is_after, is_same, compare, is_between

Text (from appdate.engine.patterns and appdate.engine.tokens):
    - parse: pattern-based parsing, strict or loose
    - render: locale-aware pattern rendering
"""

from __future__ import annotations

from appdate.engine.comparisons import compare, is_after, is_before, is_between, is_same
from appdate.engine.instant import (
    INVALID,
    Instant,
    Invalid,
    Valid,
    from_epoch_millis,
    from_epoch_seconds,
    is_valid,
    now,
    to_epoch_millis,
    to_epoch_seconds,
    to_timezone,
    to_utc,
    weekday,
)
from appdate.engine.ops import add, diff, end_of, localize, start_of, subtract
from appdate.engine.patterns import parse
from appdate.engine.tokens import expand_localized, render
from appdate.units.timezone import is_valid_timezone

__all__: list[str] = [
    # Instants
    "INVALID",
    "Instant",
    "Invalid",
    "Valid",
    "from_epoch_millis",
    "from_epoch_seconds",
    "is_valid",
    "now",
    "to_epoch_millis",
    "to_epoch_seconds",
    "to_timezone",
    "to_utc",
    "weekday",
    "is_valid_timezone",
    # Arithmetic
    "add",
    "diff",
    "end_of",
    "localize",
    "start_of",
    "subtract",
    # Comparisons
    "compare",
    "is_after",
    "is_before",
    "is_between",
    "is_same",
    # Text
    "expand_localized",
    "parse",
    "render",
]
