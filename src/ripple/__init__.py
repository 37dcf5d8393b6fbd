"""Ripple: share stories about the people who made a difference."""

__version__ = "0.1.0"
