"""Shortlister - weighted candidate scoring and auto-shortlisting."""

__version__ = "0.1.0"
