"""Presentation layer: CLI and the assignment board."""
