"""Headless run -- watch collisions through a callback and the event log.

Demonstrates:
- Building a seeded arena from an ArenaConfig
- Observing every resolved pair with on_collision
- Summarizing the run from the event log

Run: python -m examples.collision_log
"""

from ball_arena import Arena, ArenaConfig, Collision


def main() -> None:
    config = ArenaConfig(width=200, height=150, regular_count=8,
                         monster_count=1, repellent_count=2, seed=7)
    arena = Arena.from_config(config)

    def announce(arena: Arena, collision: Collision) -> None:
        print(f"  tick {collision.tick:>4}  #{collision.ball_a} x #{collision.ball_b}"
              f"  -> {collision.interaction.value}")

    arena.on_collision(announce)

    while not arena.is_finished() and arena.clock.tick_number < 20_000:
        arena.advance()

    tally = arena.events.tally()
    print(f"\nStopped at tick {arena.clock.tick_number}.")
    for kind, count in arena.counts().items():
        print(f"  {kind.display_name}: {count} left")
    for type_, count in sorted(tally.items()):
        print(f"  {type_}: {count} events")


if __name__ == "__main__":
    main()
