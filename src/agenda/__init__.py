"""Agenda: normalization and retrieval of hand-transcribed event records."""

__version__ = "0.1.0"
