"""Session logger for tracking game events.

This module records every event of an unscramble session (game start,
guesses, skips, game over) together with the snapshot the player saw
afterwards. The logs are saved in JSON format for easy analysis and review.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any, List

from ..state.game_state import GameUiState


class SessionLogger:
    """Logs all game events during an unscramble session.

    Each session gets its own log file, rewritten after every event so the
    file is complete even if the game is interrupted.

    Attributes:
        session_id: Unique identifier for this session.
        log_dir: Directory where log files are saved.
        log_file: Path to the current session's log file.
        events: List of all logged events in this session.
    """

    def __init__(self, pack_title: str = "unscramble", log_dir: str | Path = "logs"):
        """Initialize the session logger.

        Args:
            pack_title: Title of the word pack being played (used in filename).
            log_dir: Directory to save log files (created if doesn't exist).
        """
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Sanitize title for filename
        safe_title = "".join(c if c.isalnum() or c in (' ', '-', '_') else '_'
                             for c in pack_title)
        safe_title = safe_title.replace(' ', '_')[:50]

        self.log_file = self.log_dir / f"{safe_title}_{self.session_id}.json"
        self.events: List[Dict[str, Any]] = []

        self._save_metadata(pack_title)

    def _save_metadata(self, pack_title: str) -> None:
        """Save session metadata to log file."""
        metadata = {
            "session_id": self.session_id,
            "pack_title": pack_title,
            "start_time": datetime.now().isoformat(),
            "events": []
        }

        with open(self.log_file, 'w', encoding='utf-8') as f:
            json.dump(metadata, f, indent=2, ensure_ascii=False)

    def log_game_started(self, ui_state: GameUiState) -> None:
        """Log the start of a new game."""
        self._append_event(self._event("game_started", ui_state))

    def log_guess(self, guess: str, correct: bool, ui_state: GameUiState) -> None:
        """Log a submitted guess.

        Args:
            guess: The text the player submitted.
            correct: Whether the guess matched the current word.
            ui_state: The snapshot after the guess was evaluated.
        """
        event = self._event("guess", ui_state)
        event["guess"] = guess
        event["correct"] = correct
        self._append_event(event)

    def log_skip(self, ui_state: GameUiState) -> None:
        """Log a skipped word."""
        self._append_event(self._event("skip", ui_state))

    def log_game_over(self, ui_state: GameUiState) -> None:
        """Log the end of a game with its final score."""
        event = self._event("game_over", ui_state)
        event["final_score"] = ui_state.score
        self._append_event(event)

    def _event(self, event_type: str, ui_state: Optional[GameUiState]) -> Dict[str, Any]:
        return {
            "type": event_type,
            "timestamp": datetime.now().isoformat(),
            "state": ui_state.model_dump() if ui_state else None,
        }

    def _append_event(self, event: Dict[str, Any]) -> None:
        """Append an event to the log file.

        Args:
            event: The event data to append.
        """
        self.events.append(event)

        try:
            with open(self.log_file, 'r', encoding='utf-8') as f:
                log_data = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError):
            log_data = {
                "session_id": self.session_id,
                "start_time": datetime.now().isoformat(),
                "events": []
            }

        log_data["events"].append(event)

        with open(self.log_file, 'w', encoding='utf-8') as f:
            json.dump(log_data, f, indent=2, ensure_ascii=False)

    def get_log_path(self) -> str:
        """Get the path to the current log file.

        Returns:
            Absolute path to the log file.
        """
        return str(self.log_file.resolve())

    def get_event_count(self) -> int:
        """Get the number of events logged."""
        return len(self.events)
