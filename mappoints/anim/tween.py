"""Scalar interpolation over a millisecond duration."""
from __future__ import annotations

from dataclasses import dataclass

from mappoints.anim.easing import EASINGS


@dataclass
class Tween:
    start_val: float
    end_val: float
    duration_ms: int
    elapsed_ms: float = 0.0
    easing: str = "linear"

    @property
    def progress(self) -> float:
        """Linear progress fraction, clamped to [0, 1]. Zero durations are complete."""
        if self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(self.elapsed_ms / self.duration_ms, 1.0))

    @property
    def finished(self) -> bool:
        return self.progress >= 1.0

    @property
    def value(self) -> float:
        t = self.progress
        if t >= 1.0:
            # snap: no float drift at the terminal value
            return self.end_val
        eased_t = EASINGS[self.easing](t)
        return self.start_val + (self.end_val - self.start_val) * eased_t

    def advance(self, dt_ms: float) -> bool:
        """Move forward by dt_ms. Returns True once the tween has reached its end."""
        self.elapsed_ms += max(0.0, dt_ms)
        return self.finished

    def rewind(self) -> None:
        self.elapsed_ms = 0.0
