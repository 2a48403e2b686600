"""Core value type.

This module provides the AppDate facade and the one-shot helpers:
    - AppDate: immutable, timezone-aware date value
    - get_localized_date_string: render a YYYY-MM-DD string for the locale
    - format_local_time: normalise an HH:mm time string
"""

from __future__ import annotations

from appdate.core.appdate import AppDate, format_local_time, get_localized_date_string

__all__: list[str] = [
    "AppDate",
    "format_local_time",
    "get_localized_date_string",
]
