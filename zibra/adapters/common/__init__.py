"""Helpers shared by inbound adapters."""
