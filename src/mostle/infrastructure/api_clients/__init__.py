"""HTTP clients."""

from .puzzle_api_client import PuzzleAPIClient

__all__ = ["PuzzleAPIClient"]
