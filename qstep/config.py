"""Playback settings for drivers that step a circuit on a timer."""

from __future__ import annotations

from dataclasses import dataclass

MIN_SPEED = 0.5
MAX_SPEED = 3.0
SPEED_INCREMENT = 0.5


@dataclass(frozen=True)
class PlaybackConfig:
    """
    Pacing for timed playback.

    The simulator itself never waits; a driver reads `step_interval` and
    calls `CircuitExecutor.step()` that often.

    Attributes
    ----------
    speed:
        Playback multiplier in [0.5, 3.0], a multiple of 0.5.
    active_flash:
        Seconds a renderer keeps a touched qubit highlighted before
        clearing its `is_active` flag.
    """

    speed: float = 1.0
    active_flash: float = 0.5

    def __post_init__(self) -> None:
        """Validate PlaybackConfig invariants."""
        if not MIN_SPEED <= self.speed <= MAX_SPEED:
            raise ValueError(
                f"speed must be in [{MIN_SPEED}, {MAX_SPEED}], got {self.speed}."
            )
        ratio = self.speed / SPEED_INCREMENT
        if abs(ratio - round(ratio)) > 1e-9:
            raise ValueError(
                f"speed must be a multiple of {SPEED_INCREMENT}, got {self.speed}."
            )
        if self.active_flash <= 0:
            raise ValueError(f"active_flash must be positive, got {self.active_flash}.")

    @property
    def step_interval(self) -> float:
        """Seconds between steps: one second at speed 1.0."""
        return 1.0 / self.speed
