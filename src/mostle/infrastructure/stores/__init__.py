"""Persistence for daily puzzles."""
