"""Construction parameters and spawn ranges."""
from __future__ import annotations

from dataclasses import dataclass

from ball_arena.types import InvalidConfigError

# --- Defaults ---
WIDTH, HEIGHT = 800, 600
REGULAR_COUNT = 10
MONSTER_COUNT = 2
REPELLENT_COUNT = 3
TICK_INTERVAL = 0.4  # seconds between redraws
MAX_EVENTS = 10_000  # event log keeps only the newest entries; 0 keeps all

# --- Spawn ranges (half-open, integers for radius and position) ---
REGULAR_RADIUS = (5, 15)
MONSTER_RADIUS = (10, 20)
REPELLENT_RADIUS = (5, 15)
SPEED_RANGE = (-1.0, 1.0)


@dataclass
class ArenaConfig:
    width: int = WIDTH
    height: int = HEIGHT
    regular_count: int = REGULAR_COUNT
    monster_count: int = MONSTER_COUNT
    repellent_count: int = REPELLENT_COUNT
    tick_interval: float = TICK_INTERVAL
    seed: int | None = None
    max_ticks: int | None = None
    max_events: int = MAX_EVENTS

    def validate(self) -> None:
        validate_dimensions(self.width, self.height)
        for name in ("regular_count", "monster_count", "repellent_count"):
            count = getattr(self, name)
            if not _is_int(count) or count < 0:
                raise InvalidConfigError(
                    f"{name} must be a non-negative integer, got {count!r}"
                )
        if not _is_number(self.tick_interval) or self.tick_interval <= 0:
            raise InvalidConfigError(
                f"tick_interval must be positive, got {self.tick_interval!r}"
            )
        if self.max_ticks is not None and (
            not _is_int(self.max_ticks) or self.max_ticks < 0
        ):
            raise InvalidConfigError(
                f"max_ticks must be a non-negative integer, got {self.max_ticks!r}"
            )
        if not _is_int(self.max_events) or self.max_events < 0:
            raise InvalidConfigError(
                f"max_events must be a non-negative integer, got {self.max_events!r}"
            )

    @property
    def total_count(self) -> int:
        return self.regular_count + self.monster_count + self.repellent_count


def validate_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if not _is_int(value) or value <= 0:
            raise InvalidConfigError(
                f"{name} must be a positive integer, got {value!r}"
            )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
