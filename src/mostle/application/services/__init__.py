"""Application services."""

from .daily_puzzle_provider import DailyPuzzleProvider, start_of_today
from .puzzle_seeder import PuzzleSeeder, SAMPLE_PUZZLE
from .scoring_service import ScoringService, winner_for

__all__ = [
    "DailyPuzzleProvider",
    "start_of_today",
    "PuzzleSeeder",
    "SAMPLE_PUZZLE",
    "ScoringService",
    "winner_for",
]
