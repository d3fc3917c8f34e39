"""Tests for the unscramble game state machine.

A seeded random.Random keeps word order reproducible; answers are read
back with get_current_word().
"""

import random
from collections import Counter

import pytest
from pydantic import ValidationError

from unscramble.state.game_state import (
    GamePhase,
    GameState,
    GameUiState,
    ScrambleError,
    WordSelectionError,
    shuffle_word,
)
from unscramble.state.static_config import GameConfig


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def two_word_config():
    return GameConfig(title="Tiny", words=["bat", "cup"], max_rounds=2, score_increment=20)


@pytest.fixture
def game(two_word_config):
    return GameState(two_word_config, rng=random.Random(7))


@pytest.fixture
def classic_game():
    return GameState(GameConfig.default(), rng=random.Random(1234))


def assert_round_invariants(game: GameState) -> None:
    word = game.get_current_word()
    scrambled = game.ui_state.current_scrambled_word
    assert Counter(scrambled) == Counter(word)
    assert scrambled != word
    assert word in game.used_words


def guess(game: GameState, text: str) -> None:
    game.update_user_guess(text)
    game.check_user_guess()


# ---------------------------------------------------------------------------
# Scrambling
# ---------------------------------------------------------------------------

class TestShuffleWord:
    def test_result_is_anagram_and_differs(self):
        rng = random.Random(0)
        for word in ["ab", "aab", "yoyo", "kaleidoscope", "x-ray"]:
            for _ in range(20):
                scrambled = shuffle_word(word, rng)
                assert sorted(scrambled) == sorted(word)
                assert scrambled != word

    def test_single_letter_word_rejected(self):
        with pytest.raises(ScrambleError):
            shuffle_word("a", random.Random(0))

    def test_repeated_letter_word_rejected(self):
        with pytest.raises(ScrambleError):
            shuffle_word("zzz", random.Random(0))

    def test_attempt_limit_raises(self):
        class IdentityRandom(random.Random):
            def shuffle(self, x):
                pass

        with pytest.raises(ScrambleError):
            shuffle_word("ab", IdentityRandom(), max_attempts=5)


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------

class TestReset:
    def test_initial_state(self, game):
        state = game.ui_state
        assert state.current_word_count == 1
        assert state.score == 0
        assert state.is_game_over is False
        assert state.is_guessed_word_wrong is False
        assert game.user_guess == ""
        assert len(game.used_words) == 1
        assert_round_invariants(game)

    def test_reset_twice_from_any_state(self, game):
        guess(game, game.get_current_word())
        guess(game, "nope")
        game.update_user_guess("half typed")

        game.reset_game()
        game.reset_game()

        state = game.ui_state
        assert state.current_word_count == 1
        assert state.score == 0
        assert state.is_game_over is False
        assert state.is_guessed_word_wrong is False
        assert len(game.used_words) == 1
        assert game.user_guess == ""

    def test_reset_leaves_game_over(self, game):
        game.skip_word()
        game.skip_word()
        assert game.ui_state.is_game_over

        game.reset_game()
        assert game.phase.phase == GamePhase.PLAYING
        assert game.phase.round == 1


# ---------------------------------------------------------------------------
# Guessing
# ---------------------------------------------------------------------------

class TestCheckUserGuess:
    def test_two_correct_guesses_end_game(self, game):
        guess(game, game.get_current_word())
        assert game.ui_state.score == 20
        assert game.ui_state.current_word_count == 2
        assert game.ui_state.is_game_over is False
        assert_round_invariants(game)

        guess(game, game.get_current_word())
        assert game.ui_state.score == 40
        assert game.ui_state.is_game_over is True
        assert game.used_words == {"bat", "cup"}

    def test_wrong_then_correct(self, game):
        word = game.get_current_word()
        scrambled = game.ui_state.current_scrambled_word

        guess(game, "dog")
        assert game.ui_state.is_guessed_word_wrong is True
        assert game.ui_state.score == 0
        assert game.ui_state.current_word_count == 1
        assert game.ui_state.current_scrambled_word == scrambled
        assert game.get_current_word() == word
        assert game.user_guess == ""

        guess(game, word)
        assert game.ui_state.is_guessed_word_wrong is False
        assert game.ui_state.score == 20

    def test_guess_is_case_insensitive(self, game):
        guess(game, game.get_current_word().upper())
        assert game.ui_state.score == 20

    def test_guess_is_not_trimmed(self, game):
        guess(game, f" {game.get_current_word()} ")
        assert game.ui_state.is_guessed_word_wrong is True

    def test_update_user_guess_is_verbatim(self, game):
        game.update_user_guess("  MiXeD ")
        assert game.user_guess == "  MiXeD "

    def test_guess_after_game_over_changes_nothing(self, game):
        guess(game, game.get_current_word())
        guess(game, game.get_current_word())
        final = game.ui_state

        guess(game, game.get_current_word())
        guess(game, "wrong")
        game.skip_word()

        assert game.ui_state == final
        assert game.phase.phase == GamePhase.GAME_OVER
        assert game.phase.final_score == 40
        assert game.user_guess == ""


# ---------------------------------------------------------------------------
# Skipping
# ---------------------------------------------------------------------------

class TestSkipWord:
    def test_skip_first_round(self, game):
        game.update_user_guess("partial")
        game.skip_word()
        assert game.ui_state.current_word_count == 2
        assert game.ui_state.score == 0
        assert len(game.used_words) == 2
        assert game.user_guess == ""

    def test_skip_last_round_ends_game(self, game):
        guess(game, game.get_current_word())
        game.skip_word()
        assert game.ui_state.is_game_over is True
        assert game.ui_state.score == 20
        assert game.ui_state.current_word_count == 2

    def test_skip_clears_wrong_flag(self, game):
        guess(game, "wrong")
        game.skip_word()
        assert game.ui_state.is_guessed_word_wrong is False


# ---------------------------------------------------------------------------
# Invariants over a full classic game
# ---------------------------------------------------------------------------

class TestFullGame:
    def test_invariants_hold_through_random_play(self, classic_game):
        rng = random.Random(99)
        config = classic_game.config
        previous_score = 0

        while not classic_game.ui_state.is_game_over:
            state = classic_game.ui_state
            assert len(classic_game.used_words) == state.current_word_count
            assert_round_invariants(classic_game)

            action = rng.choice(["right", "wrong", "skip"])
            if action == "right":
                guess(classic_game, classic_game.get_current_word())
                assert classic_game.ui_state.score == previous_score + config.score_increment
            elif action == "wrong":
                guess(classic_game, "#")
                assert classic_game.ui_state.score == previous_score
                assert classic_game.ui_state.current_word_count == state.current_word_count
            else:
                classic_game.skip_word()
                assert classic_game.ui_state.score == previous_score

            assert classic_game.ui_state.score >= previous_score
            previous_score = classic_game.ui_state.score

        assert len(classic_game.used_words) == config.max_rounds
        assert classic_game.ui_state.current_word_count == config.max_rounds

    def test_words_are_not_repeated_within_a_game(self, classic_game):
        seen = [classic_game.get_current_word()]
        while not classic_game.ui_state.is_game_over:
            classic_game.skip_word()
            if not classic_game.ui_state.is_game_over:
                seen.append(classic_game.get_current_word())
        assert len(seen) == len(set(seen)) == classic_game.config.max_rounds


# ---------------------------------------------------------------------------
# Word selection bounds
# ---------------------------------------------------------------------------

class TestWordSelection:
    def test_duplicate_heavy_list_always_reaches_last_word(self):
        config = GameConfig(words=["bat"] * 5000 + ["cup"], max_rounds=2)
        for seed in range(20):
            game = GameState(config, rng=random.Random(seed))
            game.skip_word()
            assert game.used_words == {"bat", "cup"}
            assert game.ui_state.current_word_count == 2
            assert_round_invariants(game)

    def test_falls_back_to_remaining_words_after_attempt_limit(self):
        class FirstWordRandom(random.Random):
            def choice(self, seq):
                return seq[0]

        config = GameConfig(words=["bat", "cup"], max_rounds=2, max_pick_attempts=3)
        game = GameState(config, rng=FirstWordRandom(0))
        assert game.get_current_word() == "bat"

        game.skip_word()
        assert game.get_current_word() == "cup"
        assert game.ui_state.current_word_count == 2

    def test_raises_only_when_no_word_is_left(self):
        # model_construct skips validation, allowing more rounds than words
        config = GameConfig.model_construct(words=["bat", "cup"], max_rounds=3, max_pick_attempts=2)
        game = GameState(config, rng=random.Random(0))
        game.skip_word()
        before = game.ui_state

        with pytest.raises(WordSelectionError):
            game.skip_word()
        assert game.ui_state == before
        assert game.used_words == {"bat", "cup"}

    def test_failed_reset_keeps_previous_game(self):
        class StuckRandom(random.Random):
            stuck = False

            def shuffle(self, x):
                if not self.stuck:
                    super().shuffle(x)

        rng = StuckRandom(4)
        game = GameState(GameConfig(words=["bat", "cup"], max_rounds=2), rng=rng)
        game.skip_word()
        before_state = game.ui_state
        before_word = game.get_current_word()

        rng.stuck = True
        with pytest.raises(ScrambleError):
            game.reset_game()

        assert game.ui_state == before_state
        assert game.get_current_word() == before_word
        assert len(game.used_words) == 2



# ---------------------------------------------------------------------------
# Observation
# ---------------------------------------------------------------------------

class TestSubscribe:
    def test_subscriber_gets_current_snapshot(self, game):
        received: list[GameUiState] = []
        game.subscribe(received.append)
        assert received == [game.ui_state]

    def test_subscriber_sees_each_change(self, game):
        received: list[GameUiState] = []
        game.subscribe(received.append)

        guess(game, "wrong")
        game.skip_word()

        assert len(received) == 3
        assert received[1].is_guessed_word_wrong is True
        assert received[2].current_word_count == 2

    def test_repeated_wrong_guess_not_reemitted(self, game):
        received: list[GameUiState] = []
        game.subscribe(received.append)

        guess(game, "wrong")
        guess(game, "still wrong")

        assert len(received) == 2

    def test_unsubscribe(self, game):
        received: list[GameUiState] = []
        unsubscribe = game.subscribe(received.append)
        unsubscribe()

        game.skip_word()
        assert len(received) == 1

    def test_snapshot_is_immutable(self, game):
        with pytest.raises(ValidationError):
            game.ui_state.score = 100
