"""Utility functions for the XML/JSON converter."""

from .numbers import NUMBER_RE, format_number, parse_number

__all__ = ["NUMBER_RE", "format_number", "parse_number"]
