"""Tests for construction parameters and seeded spawning."""
from __future__ import annotations

import random

import pytest

from ball_arena.config import ArenaConfig, validate_dimensions
from ball_arena.spawn import spawn_ball, spawn_balls
from ball_arena.types import BallKind, InvalidConfigError


# ── ArenaConfig ──────────────────────────────────────────────────


class TestArenaConfig:
    def test_defaults(self) -> None:
        cfg = ArenaConfig()
        assert (cfg.width, cfg.height) == (800, 600)
        assert (cfg.regular_count, cfg.monster_count, cfg.repellent_count) == (10, 2, 3)
        assert cfg.tick_interval == 0.4
        assert cfg.total_count == 15
        cfg.validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 0},
            {"height": -10},
            {"width": 12.5},
            {"height": True},
            {"regular_count": -1},
            {"monster_count": -3},
            {"repellent_count": 1.5},
            {"tick_interval": 0},
            {"tick_interval": "fast"},
            {"tick_interval": None},
            {"max_events": -1},
            {"max_events": 2.5},
            {"max_ticks": -1},
        ],
    )
    def test_invalid_rejected(self, overrides: dict) -> None:
        cfg = ArenaConfig(**overrides)
        with pytest.raises(InvalidConfigError):
            cfg.validate()

    def test_zero_counts_allowed(self) -> None:
        ArenaConfig(regular_count=0, monster_count=0, repellent_count=0).validate()

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="width must be a positive integer"):
            validate_dimensions(0, 10)


# ── spawning ─────────────────────────────────────────────────────


class TestSpawn:
    def test_order_and_ids(self) -> None:
        cfg = ArenaConfig(regular_count=3, monster_count=2, repellent_count=1)
        balls = spawn_balls(cfg, random.Random(1))
        assert [b.kind for b in balls] == [
            BallKind.REGULAR,
            BallKind.REGULAR,
            BallKind.REGULAR,
            BallKind.MONSTER,
            BallKind.MONSTER,
            BallKind.REPELLENT,
        ]
        assert [b.ball_id for b in balls] == list(range(6))

    def test_ranges(self) -> None:
        cfg = ArenaConfig(
            width=120, height=80, regular_count=50, monster_count=50, repellent_count=50
        )
        for ball in spawn_balls(cfg, random.Random(99)):
            x, y = ball.position
            assert 0 <= x < 120 and x == int(x)
            assert 0 <= y < 80 and y == int(y)
            assert ball.radius == int(ball.radius)
            if ball.kind is BallKind.MONSTER:
                assert 10 <= ball.radius < 20
                assert ball.velocity == (0.0, 0.0)
            else:
                assert 5 <= ball.radius < 15
                assert all(-1.0 <= v < 1.0 for v in ball.velocity)

    def test_draw_order(self) -> None:
        ball = spawn_ball(BallKind.REGULAR, 100, 50, random.Random(7))
        rng = random.Random(7)
        radius = rng.randrange(5, 15)
        x, y = rng.randrange(0, 100), rng.randrange(0, 50)
        dx, dy = rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)
        assert ball.radius == float(radius)
        assert ball.position == (float(x), float(y))
        assert ball.velocity == (dx, dy)

    def test_same_seed_same_balls(self) -> None:
        cfg = ArenaConfig()
        assert spawn_balls(cfg, random.Random(5)) == spawn_balls(cfg, random.Random(5))

    def test_different_seeds_differ(self) -> None:
        cfg = ArenaConfig()
        assert spawn_balls(cfg, random.Random(5)) != spawn_balls(cfg, random.Random(6))
