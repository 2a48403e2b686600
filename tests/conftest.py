"""Pytest configuration and fixtures for AppDate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so appdate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from appdate import context  # noqa: E402
from appdate._internal.constants import DEFAULT_LOCALE, DEFAULT_TIMEZONE  # noqa: E402


@pytest.fixture(autouse=True)
def default_context(monkeypatch: pytest.MonkeyPatch) -> context.DateContext:
    """Run every test against Europe/Zurich and English.

    The process-wide default is restored afterwards, so tests may call
    set_timezone() and set_language() freely.
    """
    fresh = context.DateContext(timezone=DEFAULT_TIMEZONE, locale=DEFAULT_LOCALE)
    monkeypatch.setattr(context, "_default_context", fresh)
    return fresh


@pytest.fixture
def zurich():
    """The Europe/Zurich tzinfo."""
    from appdate.units.timezone import resolve_zone

    return resolve_zone("Europe/Zurich")
