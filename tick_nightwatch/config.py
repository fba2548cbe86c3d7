"""Night configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field

FREDDY = "Freddy"
BONNIE = "Bonnie"
CHICA = "Chica"


def _default_difficulties() -> dict[str, int]:
    return {FREDDY: 5, BONNIE: 3, CHICA: 3}


@dataclass(frozen=True)
class NightConfig:
    """Immutable tuning for one campaign.

    Attributes:
        start_time: In-game minutes at dusk.
        end_time: In-game minutes at which the night is survived (06:00).
        tick_rate: Minutes advanced per tick.
        nights_to_win: Survived nights before the campaign is won.
        battery_capacity: Starting power each night.
        drain_roll: ``(start, stop)`` passed to ``randrange`` per active draw.
        difficulty_bump: ``(start, stop)`` passed to ``randrange`` per agent
            after a survived night.
        default_difficulties: Roster for a new game, in roster order.
    """

    start_time: int = 0
    end_time: int = 6 * 60
    tick_rate: int = 15
    nights_to_win: int = 5
    battery_capacity: int = 100
    drain_roll: tuple[int, int] = (1, 20)
    difficulty_bump: tuple[int, int] = (1, 3)
    default_difficulties: dict[str, int] = field(default_factory=_default_difficulties)

    def __post_init__(self) -> None:
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.end_time <= self.start_time:
            raise ValueError(
                f"end_time ({self.end_time}) must be after start_time ({self.start_time})"
            )
        if self.nights_to_win < 1:
            raise ValueError(f"nights_to_win must be >= 1, got {self.nights_to_win}")
        if self.battery_capacity <= 0:
            raise ValueError(
                f"battery_capacity must be positive, got {self.battery_capacity}"
            )

    @property
    def ticks_per_night(self) -> int:
        return -(-(self.end_time - self.start_time) // self.tick_rate)
