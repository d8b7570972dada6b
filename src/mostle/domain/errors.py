"""Domain errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class MostleError(Exception):
    """Structured application error."""

    message: str
    code: str = "mostle_error"
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


@dataclass
class PuzzleNotFound(MostleError):
    message: str = "No daily game for today"
    code: str = "puzzle_not_found"


@dataclass
class InvalidAssignment(MostleError):
    code: str = "invalid_assignment"


@dataclass
class TransportFailure(MostleError):
    code: str = "transport_failure"
    status: int = 0
