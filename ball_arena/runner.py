"""Driver loop - advance, redraw, then wait out the rest of the tick."""
from __future__ import annotations

import time
from typing import Callable

from loguru import logger

from ball_arena.arena import Arena
from ball_arena.render import TextRenderer


def run(
    arena: Arena,
    renderer: TextRenderer,
    *,
    max_ticks: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run until no regular ball is left or `max_ticks` ticks have passed.

    Returns the number of ticks run.
    """
    interval = arena.clock.interval
    ticks = 0
    while not arena.is_finished():
        if max_ticks is not None and ticks >= max_ticks:
            logger.info("stopped after {} ticks, {} balls remain", ticks, len(arena.balls))
            break
        start = time.monotonic()
        arena.advance()
        renderer.draw(arena)
        ticks += 1
        sleep_time = interval - (time.monotonic() - start)
        if sleep_time > 0:
            sleep(sleep_time)
    else:
        logger.info("finished after {} ticks", ticks)

    renderer.finish()
    return ticks
