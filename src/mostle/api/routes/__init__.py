"""API Routes"""

from . import puzzle

__all__ = [
    "puzzle",
]
