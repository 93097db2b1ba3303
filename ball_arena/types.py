"""Shared enums and errors for the ball arena."""
from __future__ import annotations

import enum


class BallKind(enum.Enum):
    """Behavioral category of a ball. Fixed at creation."""

    REGULAR = "Regular Ball"
    MONSTER = "Monster Ball"
    REPELLENT = "Repellent Ball"

    @property
    def display_name(self) -> str:
        return self.value


class Interaction(enum.Enum):
    """Outcome of resolving one colliding pair."""

    ABSORB = "absorb"
    DEVOUR = "devour"
    REPEL = "repel"
    SWAP = "swap"
    HALVE = "halve"
    NONE = "none"


class InvalidConfigError(ValueError):
    """Raised when arena dimensions, ball counts or pacing are out of range."""
