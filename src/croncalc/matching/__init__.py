"""Evaluation of parsed fields against calendar values."""
