"""Randomized initial state for each ball kind."""
from __future__ import annotations

import random

from ball_arena.ball import Ball
from ball_arena.config import (
    MONSTER_RADIUS,
    REGULAR_RADIUS,
    REPELLENT_RADIUS,
    SPEED_RANGE,
    ArenaConfig,
)
from ball_arena.types import BallKind

_RADIUS_RANGES = {
    BallKind.REGULAR: REGULAR_RADIUS,
    BallKind.MONSTER: MONSTER_RADIUS,
    BallKind.REPELLENT: REPELLENT_RADIUS,
}


def random_velocity(rng: random.Random) -> tuple[float, float]:
    lo, hi = SPEED_RANGE
    return (rng.uniform(lo, hi), rng.uniform(lo, hi))


def spawn_ball(
    kind: BallKind,
    width: int,
    height: int,
    rng: random.Random,
    ball_id: int = 0,
) -> Ball:
    # Draw order: radius, x, y, then velocity for moving kinds.
    radius = float(rng.randrange(*_RADIUS_RANGES[kind]))
    position = (float(rng.randrange(0, width)), float(rng.randrange(0, height)))
    if kind is BallKind.MONSTER:
        velocity = (0.0, 0.0)
    else:
        velocity = random_velocity(rng)
    return Ball(
        kind=kind,
        radius=radius,
        position=position,
        velocity=velocity,
        ball_id=ball_id,
    )


def spawn_balls(config: ArenaConfig, rng: random.Random) -> list[Ball]:
    """All regular balls first, then monsters, then repellents."""
    balls: list[Ball] = []
    plan = (
        (BallKind.REGULAR, config.regular_count),
        (BallKind.MONSTER, config.monster_count),
        (BallKind.REPELLENT, config.repellent_count),
    )
    for kind, count in plan:
        for _ in range(count):
            balls.append(
                spawn_ball(kind, config.width, config.height, rng, ball_id=len(balls))
            )
    return balls
