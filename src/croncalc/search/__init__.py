"""Bounded search for the next occurrences of a cron expression."""

from .search import OccurrenceSearch, find_next, next_occurrences

__all__ = ["OccurrenceSearch", "find_next", "next_occurrences"]
