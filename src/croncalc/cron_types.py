"""Collection of generic types and type aliases for croncalc application."""

__all__ = ["FieldText", "Instant", "Weekday"]

from datetime import datetime
from typing import TypeAlias

FieldText: TypeAlias = str
Instant: TypeAlias = datetime
Weekday: TypeAlias = int
"""Weekday in the canonical encoding: 1 = Sunday ... 7 = Saturday."""
