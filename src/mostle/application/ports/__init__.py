"""Application ports (interfaces) used by the application layer."""

from .puzzle_client_port import PuzzleClientPort
from .puzzle_store_port import PuzzleStorePort

__all__ = [
    "PuzzleClientPort",
    "PuzzleStorePort",
]
