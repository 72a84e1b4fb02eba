"""Housekeeping domain errors."""

from __future__ import annotations


class HousekeepingError(Exception):
    """Raised when the top-level directory of a housekeeping operation cannot be read."""
