from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from mostle.application.services.daily_puzzle_provider import DailyPuzzleProvider
from mostle.application.services.scoring_service import ScoringService
from mostle.domain.errors import InvalidAssignment, PuzzleNotFound
from mostle.domain.puzzle import DailyPuzzle
from mostle.infrastructure.stores.puzzle_store import PuzzleStore
from mostle.utils.logging_config import LogFiles, Logger

router = APIRouter()

_puzzle_provider = DailyPuzzleProvider(PuzzleStore())
_scoring_service = ScoringService()


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PuzzleObjectResponse(_CamelModel):
    id: str
    name: str
    oldest: float
    largest: float
    value: float
    influence: float
    special_value: float = Field(..., alias="specialValue")


class DailyPuzzleResponse(_CamelModel):
    id: str
    date: str
    theme: str
    special_label: str = Field("", alias="specialLabel")
    special_hint: str = Field("", alias="specialHint")
    objects: List[PuzzleObjectResponse]


class CheckRequest(BaseModel):
    assignment: Dict[str, Optional[str]]


class KeyResultResponse(_CamelModel):
    key: str
    is_correct: bool = Field(..., alias="isCorrect")


class CheckResponse(_CamelModel):
    all_correct: bool = Field(..., alias="allCorrect")
    result: List[KeyResultResponse]


def _load_today() -> DailyPuzzle:
    try:
        return _puzzle_provider.get_today()
    except PuzzleNotFound as e:
        Logger.warning(f"No puzzle for {_puzzle_provider.today().isoformat()}", file=LogFiles.API)
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/daily", response_model=DailyPuzzleResponse)
def get_daily():
    puzzle = _load_today()
    Logger.info(f"Served daily puzzle {puzzle.id} ({puzzle.date.isoformat()})", file=LogFiles.API)
    return DailyPuzzleResponse.model_validate(puzzle.to_dict())


@router.post("/check", response_model=CheckResponse)
def check_assignment(req: CheckRequest):
    puzzle = _load_today()
    try:
        score = _scoring_service.score(puzzle, req.assignment)
    except InvalidAssignment as e:
        Logger.warning(f"Rejected assignment for {puzzle.id}: {e.message}", file=LogFiles.API)
        raise HTTPException(status_code=400, detail=e.message)

    Logger.info(
        f"Checked puzzle {puzzle.id}: all_correct={score.all_correct}", file=LogFiles.API
    )
    return CheckResponse.model_validate(score.to_dict())
