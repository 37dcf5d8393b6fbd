"""Operational scripts for Ripple."""
