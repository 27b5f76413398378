"""
Round statistics collection.

Tracks how long each round lasted, how long the snake grew and why the
round ended, for logging at shutdown.
"""
from collections import Counter, deque
from typing import Dict


class MetricsCollector:
    """
    Collects per-round statistics.

    Maintains rolling windows of recent rounds to avoid
    unbounded memory growth during long sessions.
    """

    def __init__(self, max_rounds: int = 1000):
        """
        Args:
            max_rounds: Maximum number of rounds to retain
        """
        self.max_rounds = max_rounds

        self.round_lengths: deque = deque(maxlen=max_rounds)   # final snake length
        self.round_frames: deque = deque(maxlen=max_rounds)    # frames survived
        self.round_reasons: deque = deque(maxlen=max_rounds)

        self._round_count = 0

    def on_round_end(self, length: int, frames: int, reason: str):
        """
        Record end of a round.

        Args:
            length: Final number of live snake segments
            frames: Frames simulated during the round (pauses excluded)
            reason: Why the round ended ('wall', 'self', 'full')
        """
        self.round_lengths.append(length)
        self.round_frames.append(frames)
        self.round_reasons.append(reason)
        self._round_count += 1

    def get_summary(self, window: int = 100) -> Dict:
        """
        Get summary statistics for recent rounds.

        Args:
            window: Number of recent rounds to summarize

        Returns:
            Dict with summary statistics
        """
        lengths = list(self.round_lengths)[-window:]
        frames = list(self.round_frames)[-window:]
        reasons = list(self.round_reasons)[-window:]

        if not lengths:
            return {
                'avg_length': 0,
                'avg_frames': 0,
                'max_length': 0,
                'reasons': {},
                'rounds': 0
            }

        return {
            'avg_length': sum(lengths) / len(lengths),
            'avg_frames': sum(frames) / len(frames),
            'max_length': max(lengths),
            'reasons': dict(Counter(reasons)),
            'rounds': self._round_count
        }

    def reset(self):
        """Clear all metrics."""
        self.round_lengths.clear()
        self.round_frames.clear()
        self.round_reasons.clear()
        self._round_count = 0

    @property
    def rounds(self) -> int:
        return self._round_count
