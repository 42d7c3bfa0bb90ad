"""Core matching engine: domain models, ports and services."""
