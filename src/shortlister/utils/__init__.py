"""Utility functions for Shortlister."""

from shortlister.utils.duration import parse_duration_years, parse_leading_int

__all__ = ["parse_duration_years", "parse_leading_int"]
