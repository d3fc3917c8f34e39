#!/usr/bin/env python3
"""
UNSCRAMBLE - The Word Unscrambling Game

Guess the word hidden behind the scrambled letters.
"""

import os
import random
from pathlib import Path

from dotenv import load_dotenv

from unscramble.config import DEFAULT_PACK, LOGS_DIR, WORD_PACKS_DIR
from unscramble.logging.session_logger import SessionLogger
from unscramble.state.game_state import GameState, GameUiState
from unscramble.state.static_config import GameConfig
from unscramble.ui.terminal_ui import TerminalUI
from word_packs.pack_registry import WordPackRegistry

QUIT_COMMANDS = (":quit", ":q")
HELP_COMMANDS = (":help", ":?")
SKIP_COMMANDS = (":skip", ":s")
RESET_COMMANDS = (":reset", ":new")


def load_game_config(pack_id: str, packs_dir: str | Path = WORD_PACKS_DIR) -> GameConfig:
    """Resolve a pack id to its configuration.

    The classic pack is built in; every other id must name a directory
    under packs_dir.
    """
    registry = WordPackRegistry(packs_dir=packs_dir)
    for skipped_id, error in registry.load_errors.items():
        print(f"Warning: skipped word pack '{skipped_id}': {error}")
    config_dir = registry.get_pack_config_dir(pack_id)
    if config_dir:
        return GameConfig.load_from_directory(config_dir)
    if pack_id == DEFAULT_PACK:
        return GameConfig.default()
    raise ValueError(f"Word pack '{pack_id}' not found.\n{registry.list_packs()}")


class GameEngine:
    """Main game engine that wires the game state to the terminal."""

    def __init__(
        self,
        config: GameConfig,
        seed: int | None = None,
        log_dir: str | None = LOGS_DIR,
        ui: TerminalUI | None = None,
    ):
        self.config = config
        self.ui = ui or TerminalUI(config)

        self.logger: SessionLogger | None = None
        if log_dir:
            self.logger = SessionLogger(pack_title=config.title, log_dir=log_dir)

        self.game = GameState(config, rng=random.Random(seed), logger=self.logger)
        self._latest: GameUiState = self.game.ui_state
        self._unsubscribe = self.game.subscribe(self._on_state_changed)

    def _on_state_changed(self, ui_state: GameUiState) -> None:
        self._latest = ui_state

    def process_player_input(self, player_input: str) -> bool:
        """
        Process player input and update the game state.
        Returns False if the game should end, True otherwise.
        """
        command = player_input.strip().lower()

        if command in QUIT_COMMANDS:
            return False

        if command in HELP_COMMANDS:
            self.ui.show_help()
            return True

        if command in SKIP_COMMANDS:
            self.game.skip_word()
        elif command in RESET_COMMANDS:
            self.game.reset_game()
        else:
            self.game.update_user_guess(player_input)
            self.game.check_user_guess()

        if self._latest.is_game_over:
            if self.ui.show_game_over(self._latest):
                self.game.reset_game()
            else:
                return False

        return True

    def run(self) -> None:
        """Main game loop."""
        self.ui.show_title_screen()

        running = True
        while running:
            self.ui.show_round(self._latest)

            player_input = self.ui.get_player_input()
            if not player_input:
                continue

            running = self.process_player_input(player_input)

        self._unsubscribe()
        if self.logger:
            self.ui.show_message(f"Session log: {self.logger.get_log_path()}", "dim")
        self.ui.show_message("\nThanks for playing UNSCRAMBLE!", "cyan")


def main():
    """Entry point."""
    import argparse

    load_dotenv()

    parser = argparse.ArgumentParser(description="UNSCRAMBLE - Word Unscrambling Game")
    parser.add_argument(
        "--pack",
        default=os.getenv("UNSCRAMBLE_PACK", DEFAULT_PACK),
        help="Word pack to play"
    )
    parser.add_argument(
        "--packs-dir",
        default=WORD_PACKS_DIR,
        help="Directory containing word packs"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=os.getenv("UNSCRAMBLE_SEED") or None,
        help="Random seed for reproducible games"
    )
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="Disable the JSON session log"
    )

    args = parser.parse_args()

    try:
        config = load_game_config(args.pack, args.packs_dir)
        engine = GameEngine(
            config=config,
            seed=args.seed,
            log_dir=None if args.no_log else os.getenv("UNSCRAMBLE_LOG_DIR", LOGS_DIR),
        )
        engine.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted. Goodbye!")
    except Exception as e:
        print(f"\nFatal error: {e}")
        raise


if __name__ == "__main__":
    main()
