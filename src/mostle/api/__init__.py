"""Mostle API package."""
