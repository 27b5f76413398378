"""
Tests for the per-frame Session loop.
"""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

pytest.importorskip("pygame")

from games.events import InputEvents, NO_INPUT
from games.rng import RandomSource
from games.snake import SnakeGame
from host.inputs import InputSource
from host.render import Renderer
from host.session import Session

S = 31


class ScriptedInput(InputSource):
    """Plays back a list of InputEvents, then reports no input."""

    def __init__(self, frames=None, quit_after=None):
        self.frames = list(frames or [])
        self.polls = 0
        self.quit_after = quit_after

    def poll(self):
        self.polls += 1
        if self.frames:
            return self.frames.pop(0)
        return NO_INPUT

    @property
    def quit_requested(self):
        return self.quit_after is not None and self.polls >= self.quit_after


class ZeroRandom(RandomSource):
    def uniform_int(self, low, high):
        return low


class RecordingRenderer(Renderer):
    def __init__(self):
        self.drawn = []

    def draw(self, snapshot):
        self.drawn.append(snapshot)


def corridor_session(frames=None, renderer=None):
    """
    Two-cell window: the head moves into the right cell on frame 0 and
    hits the wall on frame 5.
    """
    game = SnakeGame(2 * S, S)
    return Session(game, ScriptedInput(frames), ZeroRandom(), renderer)


class TestSessionTick:
    """Tests for Session.tick."""

    def test_tick_updates_and_draws(self):
        """Test that each tick draws the snapshot it returns."""
        renderer = RecordingRenderer()
        session = corridor_session(renderer=renderer)
        snap = session.tick()
        assert renderer.drawn == [snap]
        assert snap.frame == 1
        assert session.input_source.polls == 1

    def test_headless_tick(self):
        """Test that no renderer is required."""
        session = corridor_session()
        assert session.tick().frame == 1

    def test_input_reaches_game(self):
        """Test that polled events are applied."""
        session = corridor_session(frames=[InputEvents(pause=True)])
        assert session.tick().paused
        assert session.get_state().paused

    def test_round_end_recorded_once(self):
        """Test that a game over is counted on the frame it happens."""
        session = corridor_session()
        for _ in range(6):
            snap = session.tick()
        assert snap.game_over
        assert snap.game_over_reason == 'wall'
        assert session.rounds == 1

        for _ in range(10):
            session.tick()
        assert session.rounds == 1
        assert session.metrics.get_summary()['avg_frames'] == 6

    def test_replay_starts_new_round(self):
        """Test that a second death after replay counts again."""
        frames = [NO_INPUT] * 6 + [InputEvents(confirm=True)]
        session = corridor_session(frames=frames)
        for _ in range(7):
            session.tick()
        assert not session.get_state().game_over

        for _ in range(6):
            session.tick()
        assert session.rounds == 2
        assert session.metrics.get_summary()['reasons'] == {'wall': 2}

    def test_reset(self):
        """Test that reset restarts the game without counting a round."""
        session = corridor_session()
        for _ in range(6):
            session.tick()
        snap = session.reset()
        assert not snap.game_over
        assert session.rounds == 1


class TestSessionHighscore:
    """Tests for high score tracking."""

    def test_highscore_follows_growth(self):
        """Test that eating raises the high score."""
        game = SnakeGame(10 * S, 3 * S)
        game.fruit_position[:] = (S, 0)
        game.fruit_active = True
        session = Session(game, ScriptedInput(), ZeroRandom())
        session.tick()
        assert session.highscore == 1

    def test_should_close_follows_input(self):
        """Test that the close request comes from the input source."""
        session = Session(SnakeGame(2 * S, S), ScriptedInput(quit_after=2), ZeroRandom())
        session.tick()
        assert not session.should_close
        session.tick()
        assert session.should_close


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
