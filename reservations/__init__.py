"""Booking domain: models, store, slot index and lifecycle rules."""
