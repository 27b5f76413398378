"""
Tests for static game configuration and random sources.
"""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from games.config import GameConfig
from games.rng import NumpyRandom


class TestGameConfig:
    """Tests for GameConfig."""

    def test_defaults(self):
        """Test the classic constants."""
        config = GameConfig()
        assert config.cell_size == 31
        assert config.max_length == 256
        assert config.move_interval == 5

    def test_from_dict_fills_defaults(self):
        """Test that missing keys fall back to defaults."""
        config = GameConfig.from_dict({'max_length': 8})
        assert config.max_length == 8
        assert config.cell_size == 31

    def test_round_trip(self):
        """Test that to_dict feeds back into from_dict."""
        config = GameConfig(cell_size=10, move_interval=2)
        assert GameConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize('field', ['cell_size', 'max_length', 'move_interval', 'max_spawn_attempts'])
    def test_non_positive_values_fail(self, field):
        """Test that zero is rejected for every constant."""
        with pytest.raises(ValueError):
            GameConfig(**{field: 0})


class TestNumpyRandom:
    """Tests for the numpy-backed random source."""

    def test_draws_stay_in_range(self):
        """Test that draws respect [low, high)."""
        rng = NumpyRandom(seed=1)
        draws = [rng.uniform_int(0, 5) for _ in range(200)]
        assert all(0 <= d < 5 for d in draws)
        assert set(draws) == {0, 1, 2, 3, 4}

    def test_seed_is_reproducible(self):
        """Test that equal seeds give equal sequences."""
        a = NumpyRandom(seed=42)
        b = NumpyRandom(seed=42)
        assert [a.uniform_int(0, 100) for _ in range(10)] == [b.uniform_int(0, 100) for _ in range(10)]

    def test_empty_range_fails(self):
        """Test that an empty range is rejected."""
        with pytest.raises(ValueError):
            NumpyRandom(seed=0).uniform_int(3, 3)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
