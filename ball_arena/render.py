"""Plain-text redraw of the arena state."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from ball_arena.ball import format_ball

if TYPE_CHECKING:
    from ball_arena.arena import Arena

CLEAR_SCREEN = "\x1b[2J\x1b[H"
FINISHED_MESSAGE = "Simulation finished."


def render_lines(arena: "Arena") -> list[str]:
    return [format_ball(ball) for ball in arena.balls]


class TextRenderer:
    def __init__(self, stream: TextIO | None = None, clear: bool = True) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._clear = clear

    def draw(self, arena: "Arena") -> None:
        if self._clear:
            self._stream.write(CLEAR_SCREEN)
        for line in render_lines(arena):
            self._stream.write(line + "\n")
        self._stream.flush()

    def finish(self) -> None:
        self._stream.write(FINISHED_MESSAGE + "\n")
        self._stream.flush()
