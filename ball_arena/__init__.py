"""ball-arena - a closed 2D arena of absorbing, bouncing and repelling balls."""
from __future__ import annotations

from ball_arena import vec
from ball_arena.arena import Arena
from ball_arena.ball import Ball, adjust_position, advance, describe, format_ball
from ball_arena.clock import Clock
from ball_arena.collision import Collision, is_collision, resolve
from ball_arena.config import ArenaConfig
from ball_arena.events import Event, EventLog
from ball_arena.render import TextRenderer, render_lines
from ball_arena.runner import run
from ball_arena.types import BallKind, Interaction, InvalidConfigError

__version__ = "0.1.0"

__all__ = [
    "Arena",
    "ArenaConfig",
    "Ball",
    "BallKind",
    "Clock",
    "Collision",
    "Event",
    "EventLog",
    "Interaction",
    "InvalidConfigError",
    "TextRenderer",
    "adjust_position",
    "advance",
    "describe",
    "format_ball",
    "is_collision",
    "render_lines",
    "resolve",
    "run",
    "vec",
]
