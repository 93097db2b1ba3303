"""Pairwise overlap detection and kind-specific collision resolution."""
from __future__ import annotations

from dataclasses import dataclass

from ball_arena import vec
from ball_arena.ball import Ball
from ball_arena.types import BallKind, Interaction


@dataclass(frozen=True)
class Collision:
    """Collision info passed to callbacks. Not stored on balls."""

    tick: int
    ball_a: int
    ball_b: int
    interaction: Interaction


def is_collision(a: Ball, b: Ball) -> bool:
    """Strict overlap: touching circles do not collide."""
    r_sum = a.radius + b.radius
    return vec.distance_sq(a.position, b.position) < r_sum * r_sum


def _absorb(larger: Ball, smaller: Ball) -> None:
    larger.radius += smaller.radius
    smaller.radius = 0.0


def _pick(kind: BallKind, a: Ball, b: Ball) -> tuple[Ball, Ball]:
    """Return (ball of `kind`, the other ball)."""
    if a.kind is kind:
        return a, b
    return b, a


def resolve(a: Ball, b: Ball) -> Interaction:
    """Apply the interaction for the pair's kinds in place.

    `a` is the lower-index ball of the scan. On equal radii two regular
    balls resolve in favour of `b`.
    """
    kinds = {a.kind, b.kind}

    if kinds == {BallKind.REGULAR}:
        if a.radius > b.radius:
            _absorb(a, b)
        else:
            _absorb(b, a)
        return Interaction.ABSORB

    if kinds == {BallKind.REGULAR, BallKind.MONSTER}:
        monster, regular = _pick(BallKind.MONSTER, a, b)
        _absorb(monster, regular)
        return Interaction.DEVOUR

    if kinds == {BallKind.REGULAR, BallKind.REPELLENT}:
        regular, _ = _pick(BallKind.REGULAR, a, b)
        regular.velocity = vec.negate(regular.velocity)
        return Interaction.REPEL

    if kinds == {BallKind.REPELLENT}:
        a.position, b.position = b.position, a.position
        return Interaction.SWAP

    if kinds == {BallKind.REPELLENT, BallKind.MONSTER}:
        repellent, _ = _pick(BallKind.REPELLENT, a, b)
        repellent.radius /= 2
        return Interaction.HALVE

    # Monster pairs pass through each other.
    return Interaction.NONE
