"""Pickup scheduling eligibility and points service."""
