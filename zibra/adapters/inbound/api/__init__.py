"""HTTP API for the ZIBA support engine."""
