"""Static configuration for the word list and game rules."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from ..config import MAX_NO_OF_WORDS, SCORE_INCREASE, MAX_PICK_ATTEMPTS, MAX_SHUFFLE_ATTEMPTS
from ..data import ALL_WORDS, CLASSIC_TITLE, CLASSIC_DESCRIPTION

WORDS_FILE_NAME = "words.json"


class GameConfig(BaseModel):
    """Complete static game configuration.

    Validation is eager: a config that could make word selection or
    scrambling run out of options is rejected here, before any game starts.
    """

    title: str = Field(default=CLASSIC_TITLE, description="Display name of the word pack")
    description: str = Field(default="", description="Brief description of the word pack")
    words: list[str] = Field(description="Candidate words, in pack order")
    max_rounds: int = Field(default=MAX_NO_OF_WORDS, ge=1, description="Rounds per game")
    score_increment: int = Field(default=SCORE_INCREASE, ge=1, description="Points per correct guess")
    max_pick_attempts: int = Field(default=MAX_PICK_ATTEMPTS, ge=1, description="Redraws allowed when picking an unused word")
    max_shuffle_attempts: int = Field(default=MAX_SHUFFLE_ATTEMPTS, ge=1, description="Reshuffles allowed per scramble")

    @field_validator("words")
    @classmethod
    def check_words(cls, words: list[str]) -> list[str]:
        if not words:
            raise ValueError("word list must not be empty")
        for word in words:
            if len(word) < 2:
                raise ValueError(f"word {word!r} is too short to scramble")
            if len(set(word)) < 2:
                raise ValueError(f"word {word!r} has no distinct scramble")
        return words

    @model_validator(mode="after")
    def check_enough_words(self) -> "GameConfig":
        distinct = len(set(self.words))
        if self.max_rounds > distinct:
            raise ValueError(
                f"max_rounds ({self.max_rounds}) exceeds the number of distinct words ({distinct})"
            )
        return self

    @classmethod
    def default(cls) -> "GameConfig":
        """Build the configuration for the built-in classic pack."""
        return cls(
            title=CLASSIC_TITLE,
            description=CLASSIC_DESCRIPTION,
            words=list(ALL_WORDS),
        )

    @classmethod
    def load_from_file(cls, filepath: str | Path) -> "GameConfig":
        """Load a configuration from a single words JSON file."""
        filepath = Path(filepath)
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        data.setdefault("title", filepath.parent.name)
        return cls(**data)

    @classmethod
    def load_from_directory(cls, config_dir: str | Path) -> "GameConfig":
        """Load a word pack from its directory."""
        words_file = Path(config_dir) / WORDS_FILE_NAME
        if not words_file.exists():
            raise FileNotFoundError(f"No {WORDS_FILE_NAME} found in {config_dir}")
        return cls.load_from_file(words_file)

    def get_distinct_words(self) -> list[str]:
        """Get the words with duplicates removed, keeping pack order."""
        return list(dict.fromkeys(self.words))

    def get_rules_summary(self) -> str:
        """Get a one-line summary of the game rules."""
        return (
            f"{self.max_rounds} words per game, "
            f"{self.score_increment} points per correct guess"
        )
