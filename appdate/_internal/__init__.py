"""Internal utilities for AppDate.

This module contains private implementation details:
    - Constants and defaults
    - Non-raising validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from appdate._internal.validation import (
    as_whole_number,
    is_finite_number,
    is_valid_hms,
    is_valid_ymd,
)

__all__: list[str] = [
    "as_whole_number",
    "is_finite_number",
    "is_valid_hms",
    "is_valid_ymd",
]
