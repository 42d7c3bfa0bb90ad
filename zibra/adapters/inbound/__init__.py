"""Inbound adapters: CLI and HTTP API."""
