"""Game state management module."""

from .game_state import GameState, GameUiState, GamePhase, PhaseInfo, UnscrambleError, WordSelectionError, ScrambleError
from .static_config import GameConfig

__all__ = [
    "GameState",
    "GameUiState",
    "GamePhase",
    "PhaseInfo",
    "GameConfig",
    "UnscrambleError",
    "WordSelectionError",
    "ScrambleError",
]
