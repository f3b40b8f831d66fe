"""Parsing of raw cron strings: dialects, validation, field tokens and expressions."""
