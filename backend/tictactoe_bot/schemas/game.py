# backend/tictactoe_bot/schemas/game.py
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Literal, Optional

from tictactoe_bot.core.config import settings
from tictactoe_bot.core.constants import (
    MIN_BOARD_SIZE,
    MIN_WIN_LENGTH,
    Difficulty,
)

CellSchema = Optional[Literal['X', 'O']]
BoardSchema = List[CellSchema]


class EngineConfig(BaseModel):
    size: int = Field(3, ge=MIN_BOARD_SIZE, description="Side length of the square board")
    win_length: Optional[int] = Field(
        None, ge=MIN_WIN_LENGTH, description="Marks in a row needed to win (defaults to size)"
    )
    difficulty: Difficulty = Field(Difficulty.UNBEATABLE, description="EASY, MEDIUM or UNBEATABLE")
    max_nodes: Optional[int] = Field(
        None, ge=1, description="Search budget in visited nodes (None means unlimited)"
    )

    @field_validator("difficulty", mode="before")
    @classmethod
    def parse_difficulty(cls, value):
        try:
            return Difficulty.parse(value)
        except ValueError as exc:
            raise ValueError(str(exc)) from None

    @model_validator(mode="after")
    def default_win_length(self):
        if self.win_length is None:
            self.win_length = self.size
        if self.win_length > self.size:
            raise ValueError(f"win_length ({self.win_length}) cannot exceed size ({self.size})")
        return self

    @classmethod
    def from_settings(cls) -> "EngineConfig":
        return cls(
            size=settings.BOARD_SIZE,
            win_length=settings.WIN_LENGTH,
            difficulty=settings.AI_DIFFICULTY,
            max_nodes=settings.MAX_SEARCH_NODES,
        )


class MoveRequest(BaseModel):
    board: BoardSchema = Field(..., description="Row-major cells: 'X', 'O' or null")
    player: Literal['X', 'O'] = Field(..., description="The player the AI moves for ('X' or 'O')")
    size: int = Field(3, ge=MIN_BOARD_SIZE)
    win_length: Optional[int] = Field(None, ge=MIN_WIN_LENGTH)
    difficulty: str = Field("UNBEATABLE", description="EASY, MEDIUM or UNBEATABLE")
    seed: Optional[int] = Field(None, description="Seed for the randomized difficulties")


class MoveResponse(BaseModel):
    move: int
    row: int
    col: int
    board: BoardSchema
    status: str = Field(description="Game status after the move (in_progress, win, draw)")
    winner: Optional[Literal['X', 'O']] = None
    winning_line: Optional[List[int]] = None


class RenderRequest(BaseModel):
    board: BoardSchema
    size: int = Field(3, ge=MIN_BOARD_SIZE)
    win_length: Optional[int] = Field(None, ge=MIN_WIN_LENGTH)
    player: Optional[str] = Field(None, description="Display name of the entity to move, or 'AI'")
    emojis: Optional[List[str]] = Field(None, min_length=2, max_length=3)
    disable_used: bool = False
    embed_color: Optional[int] = None
    locale: Optional[str] = None
