from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from chefs_challenge.ingredients import IngredientKind, IngredientShape


class Screen(StrEnum):
    MENU = "MENU"
    PLAYING = "PLAYING"
    LEVEL_END = "LEVEL_END"
    GAME_OVER = "GAME_OVER"


class FailureReason(StrEnum):
    wrong_order = "wrong order"
    time_expired = "time expired"


class SessionState(BaseModel):
    screen: Screen = Screen.MENU
    level: int = Field(1, ge=1)
    score: int = 0

    # One badge per completed level.
    badges: int = 0

    time_left: int = Field(20, ge=0)

    current_order: list[IngredientKind] = Field(default_factory=list)
    player_stack: list[IngredientKind] = Field(default_factory=list)

    # Undone layers, most-recently-undone first.
    redo_stack: list[IngredientKind] = Field(default_factory=list)

    feedback_message: str = ""

    # Top scores, descending.
    high_scores: list[int] = Field(default_factory=list)

    # True while a narrative request for the current screen is in flight.
    narrative_pending: bool = False

    # Outcome of the last finished level; handy for the result screens.
    last_bonus: int | None = None
    failure_reason: FailureReason | None = None

    # For reproducibility/debugging; None when the caller injected its own RNG.
    seed: int | None = None


class AppendIngredientRequest(BaseModel):
    kind: IngredientKind


class IngredientDefinitionModel(BaseModel):
    kind: IngredientKind
    name: str
    color: str
    height: float = Field(..., gt=0)
    radius: float | None = None
    shape: IngredientShape


class IngredientListResponse(BaseModel):
    ingredients: list[IngredientDefinitionModel]
