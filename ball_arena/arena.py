"""Arena - owns the balls and advances the simulation one tick at a time."""
from __future__ import annotations

import os
import random
from collections import Counter
from typing import Callable, Iterable

from loguru import logger

from ball_arena.ball import Ball, adjust_position, advance
from ball_arena.clock import Clock
from ball_arena.collision import Collision, is_collision, resolve
from ball_arena.config import (
    MAX_EVENTS,
    TICK_INTERVAL,
    ArenaConfig,
    validate_dimensions,
)
from ball_arena.events import REMOVED, EventLog
from ball_arena.spawn import spawn_balls
from ball_arena.types import BallKind

CollisionCallback = Callable[["Arena", Collision], None]


class Arena:
    def __init__(
        self,
        width: int,
        height: int,
        balls: Iterable[Ball] = (),
        *,
        tick_interval: float = TICK_INTERVAL,
        seed: int | None = None,
        max_events: int = MAX_EVENTS,
        events: EventLog | None = None,
    ) -> None:
        validate_dimensions(width, height)
        self._width = width
        self._height = height
        self._balls: list[Ball] = list(balls)
        ids = [b.ball_id for b in self._balls]
        if len(set(ids)) != len(ids):
            # Ids left unset (or clashing): number balls by position.
            for i, ball in enumerate(self._balls):
                ball.ball_id = i
        self._clock = Clock(tick_interval)
        self._seed = seed
        self._events = events if events is not None else EventLog(max_events)
        self._collision_hooks: list[CollisionCallback] = []

    @classmethod
    def from_config(
        cls, config: ArenaConfig, rng: random.Random | None = None
    ) -> Arena:
        """Validate `config` and spawn its balls from `rng`.

        Without an explicit generator one is seeded from `config.seed`,
        or from the OS when that is None.
        """
        config.validate()
        seed = config.seed
        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            rng = random.Random(seed)
        arena = cls(
            config.width,
            config.height,
            spawn_balls(config, rng),
            tick_interval=config.tick_interval,
            seed=seed,
            max_events=config.max_events,
        )
        logger.info(
            "Arena {}x{} spawned {} regular, {} monster, {} repellent (seed={})",
            config.width,
            config.height,
            config.regular_count,
            config.monster_count,
            config.repellent_count,
            seed,
        )
        return arena

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def balls(self) -> tuple[Ball, ...]:
        return tuple(self._balls)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def events(self) -> EventLog:
        return self._events

    def on_collision(self, callback: CollisionCallback) -> None:
        self._collision_hooks.append(callback)

    def off_collision(self, callback: CollisionCallback) -> None:
        try:
            self._collision_hooks.remove(callback)
        except ValueError:
            pass

    def advance(self) -> None:
        """Run one tick: move, clamp monsters, collide, then prune the dead."""
        tick = self._clock.advance()

        for ball in self._balls:
            advance(ball, self._width, self._height)

        for ball in self._balls:
            if ball.kind is BallKind.MONSTER:
                adjust_position(ball, self._width, self._height)

        self._check_collisions(tick)
        self._remove_dead(tick)

        logger.debug("tick {}: {} balls remain", tick, len(self._balls))

    def _check_collisions(self, tick: int) -> None:
        # Index-based scan: later pairs observe mutations from earlier ones.
        balls = self._balls
        for i in range(len(balls)):
            for j in range(i + 1, len(balls)):
                a, b = balls[i], balls[j]
                if not is_collision(a, b):
                    continue
                interaction = resolve(a, b)
                collision = Collision(tick, a.ball_id, b.ball_id, interaction)
                self._events.emit(
                    tick, interaction.value, a=a.ball_id, b=b.ball_id
                )
                for cb in self._collision_hooks:
                    cb(self, collision)

    def _remove_dead(self, tick: int) -> None:
        survivors: list[Ball] = []
        for ball in self._balls:
            if ball.alive:
                survivors.append(ball)
            else:
                self._events.emit(
                    tick, REMOVED, ball=ball.ball_id, kind=ball.kind.name
                )
                logger.debug(
                    "tick {}: removed {} #{}", tick, ball.kind.display_name, ball.ball_id
                )
        self._balls = survivors

    def is_finished(self) -> bool:
        return not any(b.kind is BallKind.REGULAR for b in self._balls)

    def counts(self) -> dict[BallKind, int]:
        tally = Counter(b.kind for b in self._balls)
        return {kind: tally[kind] for kind in BallKind}
