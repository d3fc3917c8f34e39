"""Dynamic game state that evolves during gameplay.

GameState owns the current word, the set of words already shown this
game, and the latest GameUiState snapshot. Every change replaces the
snapshot with a new immutable copy and notifies subscribers.
"""

import random
from enum import Enum
from typing import TYPE_CHECKING, Callable

from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_SHUFFLE_ATTEMPTS
from .static_config import GameConfig

if TYPE_CHECKING:
    from ..logging.session_logger import SessionLogger


class UnscrambleError(RuntimeError):
    """Base class for errors raised by the game core."""


class WordSelectionError(UnscrambleError):
    """Every distinct word has already been used this game."""


class ScrambleError(UnscrambleError):
    """No scramble differing from the word could be produced."""


class GameUiState(BaseModel):
    """What the player sees. Replaced as a whole on every change."""

    model_config = ConfigDict(frozen=True)

    current_scrambled_word: str = Field(default="", description="Scrambled letters of the current word")
    current_word_count: int = Field(default=1, description="1-based index of the active round")
    score: int = Field(default=0, description="Cumulative score for this game")
    is_guessed_word_wrong: bool = Field(default=False, description="Set after an incorrect guess")
    is_game_over: bool = Field(default=False, description="Set once the last round is done")


class GamePhase(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class PhaseInfo(BaseModel):
    """Tagged view of the snapshot: round details while playing, final score once over."""

    model_config = ConfigDict(frozen=True)

    phase: GamePhase
    round: int | None = None
    wrong_guess: bool = False
    final_score: int | None = None


def shuffle_word(word: str, rng: random.Random, max_attempts: int = MAX_SHUFFLE_ATTEMPTS) -> str:
    """Return a random permutation of word that is not equal to word."""
    if len(set(word)) < 2:
        raise ScrambleError(f"{word!r} has no scramble different from itself")

    letters = list(word)
    for _ in range(max_attempts):
        rng.shuffle(letters)
        scrambled = "".join(letters)
        if scrambled != word:
            return scrambled

    raise ScrambleError(f"Could not scramble {word!r} after {max_attempts} attempts")


Subscriber = Callable[[GameUiState], None]


class GameState:
    """State holder for one player's unscramble session."""

    def __init__(
        self,
        config: GameConfig,
        rng: random.Random | None = None,
        logger: "SessionLogger | None" = None,
    ):
        self.config = config
        self._rng = rng or random.Random()
        self._logger = logger

        self._current_word = ""
        self._used_words: set[str] = set()
        self._ui_state = GameUiState()
        self._subscribers: list[Subscriber] = []
        self._user_guess = ""

        self.reset_game()

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def ui_state(self) -> GameUiState:
        return self._ui_state

    @property
    def user_guess(self) -> str:
        return self._user_guess

    @property
    def used_words(self) -> frozenset[str]:
        return frozenset(self._used_words)

    @property
    def phase(self) -> PhaseInfo:
        state = self._ui_state
        if state.is_game_over:
            return PhaseInfo(phase=GamePhase.GAME_OVER, final_score=state.score)
        return PhaseInfo(
            phase=GamePhase.PLAYING,
            round=state.current_word_count,
            wrong_guess=state.is_guessed_word_wrong,
        )

    def get_current_word(self) -> str:
        """Get the unscrambled answer. Meant for tests and debugging."""
        return self._current_word

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register callback for snapshot changes.

        The callback is invoked right away with the current snapshot.
        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)
        callback(self._ui_state)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _set_ui_state(self, new_state: GameUiState) -> None:
        if new_state == self._ui_state:
            return
        self._ui_state = new_state
        for callback in list(self._subscribers):
            callback(new_state)

    def _draw_unused_word(self, used: set[str]) -> str:
        for _ in range(self.config.max_pick_attempts):
            word = self._rng.choice(self.config.words)
            if word not in used:
                return word

        # Random draws ran out; choose directly among the words left
        remaining = [w for w in self.config.get_distinct_words() if w not in used]
        if not remaining:
            raise WordSelectionError(
                f"No unused word left ({len(used)} of {len(self.config.get_distinct_words())} distinct words used)"
            )
        return self._rng.choice(remaining)

    def _pick_random_word_and_shuffle(self, used: set[str]) -> tuple[str, str]:
        """Choose an unused word and its scramble without touching game state."""
        word = self._draw_unused_word(used)
        return word, shuffle_word(word, self._rng, self.config.max_shuffle_attempts)

    def _start_round(self, word: str) -> None:
        self._current_word = word
        self._used_words.add(word)

    def _update_game_state(self, updated_score: int) -> None:
        current = self._ui_state
        if len(self._used_words) == self.config.max_rounds:
            # Last round: no new word
            self._set_ui_state(current.model_copy(update={
                "is_guessed_word_wrong": False,
                "score": updated_score,
                "is_game_over": True,
            }))
        else:
            word, scrambled = self._pick_random_word_and_shuffle(self._used_words)
            self._start_round(word)
            self._set_ui_state(current.model_copy(update={
                "is_guessed_word_wrong": False,
                "current_scrambled_word": scrambled,
                "score": updated_score,
                "current_word_count": current.current_word_count + 1,
            }))

    def _log_if_game_over(self) -> None:
        if self._logger and self._ui_state.is_game_over:
            self._logger.log_game_over(self._ui_state)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def update_user_guess(self, guess_word: str) -> None:
        self._user_guess = guess_word

    def check_user_guess(self) -> None:
        """Score the current guess, then clear it."""
        if self._ui_state.is_game_over:
            self.update_user_guess("")
            return

        guess = self._user_guess
        correct = guess.lower() == self._current_word.lower()
        if correct:
            self._update_game_state(self._ui_state.score + self.config.score_increment)
        else:
            self._set_ui_state(self._ui_state.model_copy(update={"is_guessed_word_wrong": True}))

        if self._logger:
            self._logger.log_guess(guess, correct, self._ui_state)
            self._log_if_game_over()

        self.update_user_guess("")

    def skip_word(self) -> None:
        """Move to the next word without changing the score."""
        if not self._ui_state.is_game_over:
            self._update_game_state(self._ui_state.score)
            if self._logger:
                self._logger.log_skip(self._ui_state)
                self._log_if_game_over()
        self.update_user_guess("")

    def reset_game(self) -> None:
        """Start a new game with a fresh first word."""
        word, scrambled = self._pick_random_word_and_shuffle(set())
        self._used_words.clear()
        self._start_round(word)
        self._set_ui_state(GameUiState(current_scrambled_word=scrambled))
        self.update_user_guess("")
        if self._logger:
            self._logger.log_game_started(self._ui_state)
