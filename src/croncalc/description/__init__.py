"""Human readable descriptions of cron expressions."""

from .description import describe, describe_fields

__all__ = ["describe", "describe_fields"]
