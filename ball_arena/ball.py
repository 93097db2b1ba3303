"""Ball state and per-kind movement."""
from __future__ import annotations

from dataclasses import dataclass

from ball_arena import vec
from ball_arena.types import BallKind
from ball_arena.vec import Vec2


@dataclass
class Ball:
    """A circular entity. Dead once its radius drops to zero or below."""

    kind: BallKind
    radius: float
    position: Vec2
    velocity: Vec2 = (0.0, 0.0)
    ball_id: int = 0

    @property
    def alive(self) -> bool:
        return self.radius > 0

    def __str__(self) -> str:
        return format_ball(self)


def advance(ball: Ball, width: int, height: int) -> None:
    """Move by velocity, then reflect each axis whose edge crossed a wall.

    The post-move position is used for both axes and is never corrected,
    so a ball may sit past a wall for a tick after bouncing.
    """
    if ball.kind is BallKind.MONSTER:
        return

    ball.position = vec.add(ball.position, ball.velocity)
    x, y = ball.position
    dx, dy = ball.velocity
    r = ball.radius

    if x - r < 0 or x + r > width:
        dx = -dx
    if y - r < 0 or y + r > height:
        dy = -dy
    ball.velocity = (dx, dy)


def adjust_position(ball: Ball, width: int, height: int) -> None:
    """Clamp the centre so the ball sits inside the arena."""
    x, y = ball.position
    r = ball.radius
    ball.position = (
        vec.clamp_axis(x, r, width - r),
        vec.clamp_axis(y, r, height - r),
    )


def describe(ball: Ball) -> str:
    return ball.kind.display_name


def format_ball(ball: Ball) -> str:
    x, y = ball.position
    return f"{describe(ball)}: Position ({x}, {y}), Radius {ball.radius}"
