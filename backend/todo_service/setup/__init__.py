"""Composition root: dependency wiring for the service."""
