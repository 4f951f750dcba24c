"""
Test suite for the round coordinator.

Covers player registration, the waiting -> collecting -> scoring -> complete
phase machine, the submission barrier and the round timer.
"""

import json

import pytest

from wordgrid.engine import GameConfig, GameCoordinator, TILE_LABELS
from wordgrid.errors import PlayerError, PlayerNotFoundError, RoundStateError
from wordgrid.words import Dictionary


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary.from_words(["cat", "dog", "zebra", "bird", "owl", "ab"])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def game(dictionary, clock) -> GameCoordinator:
    config = GameConfig(seed=3, round_seconds=60, players=[{"name": "A"}, {"name": "B"}])
    coordinator = GameCoordinator.create(dictionary, config)
    coordinator.clock = clock
    return coordinator


class TestRegistration:
    """Test joining and leaving."""

    def test_create_joins_configured_players(self, game):
        """Players from the config are registered in order."""
        assert list(game.players) == ["A", "B"]
        assert game.phase == "waiting"

    def test_duplicate_name(self, game):
        """Names must be unique."""
        with pytest.raises(PlayerError):
            game.join("A")

    def test_blank_name(self, game):
        """Blank names are refused."""
        with pytest.raises(PlayerError):
            game.join("   ")

    def test_leave(self, game):
        """Players can leave between rounds."""
        game.leave("B")
        assert list(game.players) == ["A"]

    def test_leave_unknown(self, game):
        """Leaving with an unknown name raises PlayerNotFoundError."""
        with pytest.raises(PlayerNotFoundError):
            game.leave("Z")

    def test_no_joining_mid_round(self, game):
        """The roster is fixed while a round is collecting."""
        game.start_round()
        with pytest.raises(RoundStateError):
            game.join("C")


class TestRoundLifecycle:
    """Test a full round."""

    def test_start_round(self, game):
        """Starting a round deals a configured board and opens collecting."""
        board = game.start_round()
        assert board.size == 4
        assert all(label in TILE_LABELS for label in board.labels())
        assert game.phase == "collecting"
        assert game.round_number == 1

    def test_start_needs_players(self, dictionary):
        """A round cannot start with nobody in it."""
        coordinator = GameCoordinator(dictionary=dictionary)
        with pytest.raises(RoundStateError):
            coordinator.start_round()

    def test_no_double_start(self, game):
        """A collecting round cannot be restarted."""
        game.start_round()
        with pytest.raises(RoundStateError):
            game.start_round()

    def test_words_rejected_before_round(self, game):
        """Words are refused while waiting."""
        with pytest.raises(RoundStateError):
            game.add_word("A", "cat")

    def test_full_round(self, game):
        """Submitted words are scored for uniqueness."""
        game.start_round()
        for word in ["cat", "dog", "zebra"]:
            assert game.add_word("A", word)
        assert game.add_word("B", "dog")
        assert game.add_word("B", "bird")
        assert not game.add_word("B", "ab")

        assert game.submit("A") is False
        assert game.submit("B") is True

        results = game.end_round()
        assert game.phase == "complete"
        assert results.get("A").score == 3
        assert results.get("B").score == 1
        assert results.get("B").filtered_words.words == {"bird"}

    def test_words_rejected_after_round(self, game):
        """No words are accepted once the round is scored."""
        game.start_round()
        game.end_round(force=True)
        with pytest.raises(RoundStateError):
            game.add_word("A", "cat")

    def test_unknown_player_word(self, game):
        """Words from unknown players raise PlayerNotFoundError."""
        game.start_round()
        with pytest.raises(PlayerNotFoundError):
            game.add_word("Z", "cat")

    def test_submitted_player_locked(self, game):
        """A player who submitted cannot add more words."""
        game.start_round()
        game.submit("A")
        with pytest.raises(RoundStateError):
            game.add_word("A", "cat")

    def test_results_replaced_each_round(self, game):
        """A later round's results contain only its own players."""
        game.start_round()
        game.add_word("A", "cat")
        game.end_round(force=True)
        assert game.results.identities() == frozenset({"A", "B"})

        game.leave("B")
        game.join("C")
        game.start_round()
        game.add_word("C", "owl")
        game.end_round(force=True)
        assert game.results.identities() == frozenset({"A", "C"})
        assert game.results.get("A").score == 0
        assert game.results.get("C").score == 1

    def test_new_round_clears_words(self, game):
        """Found words do not carry over between rounds."""
        game.start_round()
        game.add_word("A", "cat")
        game.end_round(force=True)
        game.start_round()
        assert game.players["A"].found.size() == 0
        assert game.add_word("A", "cat")

    def test_abandon(self, game):
        """Abandoning a round discards words and returns to waiting."""
        game.start_round()
        game.add_word("A", "cat")
        game.abandon_round()
        assert game.phase == "waiting"
        assert game.board is None
        assert game.players["A"].found.size() == 0
        assert len(game.results) == 0


class TestBarrier:
    """Test that scoring waits for every submission or the timer."""

    def test_end_waits_for_submissions(self, game):
        """Ending early without force names the pending players."""
        game.start_round()
        game.submit("A")
        with pytest.raises(RoundStateError, match="B"):
            game.end_round()
        assert game.phase == "collecting"

    def test_force_ends_round(self, game):
        """A forced end locks every player and scores."""
        game.start_round()
        game.add_word("A", "cat")
        results = game.end_round(force=True)
        assert results.get("A").score == 1
        assert all(session.submitted for session in game.players.values())

    def test_timer(self, game, clock):
        """The round timer counts down from the configured length."""
        game.start_round()
        assert game.time_remaining() == 60
        clock.advance(45)
        assert game.time_remaining() == 15
        assert not game.is_expired()
        clock.advance(30)
        assert game.time_remaining() == 0
        assert game.is_expired()

    def test_expired_round_can_end(self, game, clock):
        """Once time is up the round ends without every submission."""
        game.start_round()
        clock.advance(61)
        game.end_round()
        assert game.phase == "complete"

    def test_no_timer_outside_round(self, game):
        """No time remains when no round is collecting."""
        assert game.time_remaining() == 0


class TestTileSelection:
    """Test building words from the board through the coordinator."""

    def test_select_and_claim(self, dictionary):
        """Selected tiles spell a candidate that goes through the gate."""
        coordinator = GameCoordinator.create(dictionary, players=[{"name": "A"}])
        board = coordinator.start_round()
        coordinator.select_tile("A", 0, 0)
        coordinator.select_tile("A", 0, 1)
        expected = (board.get(0, 0) + board.get(0, 1)).lower()
        assert coordinator.players["A"].selection.word == expected
        # No two-tile path spells a word in this dictionary
        assert coordinator.add_selected_word("A") is False
        assert coordinator.players["A"].selection.word == ""

    def test_clear_selection(self, dictionary):
        """Clearing drops the picked tiles."""
        coordinator = GameCoordinator.create(dictionary, players=[{"name": "A"}])
        coordinator.start_round()
        coordinator.select_tile("A", 1, 1)
        coordinator.clear_selection("A")
        assert coordinator.players["A"].selection.path == []


class TestExport:
    """Test state snapshots and JSON output."""

    def test_get_state(self, game):
        """State reports the phase and players."""
        game.start_round()
        state = game.get_state()
        assert state["phase"] == "collecting"
        assert len(state["board"]) == 4
        assert [p["name"] for p in state["players"]] == ["A", "B"]

    def test_save_result(self, game, tmp_path):
        """Results are written as JSON."""
        game.start_round()
        game.add_word("A", "zebra")
        game.add_word("B", "dog")
        game.end_round(force=True)

        path = tmp_path / "out" / "round.json"
        game.save_result(path)
        data = json.loads(path.read_text())
        assert data["round_number"] == 1
        assert data["leaderboard"] == [["A", 2], ["B", 1]]
        assert data["results"]["A"]["filtered_words"]["words"] == ["zebra"]
        assert data["results"]["B"]["score"] == 1
