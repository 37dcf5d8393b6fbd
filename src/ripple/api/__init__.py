"""HTTP API for Ripple."""
