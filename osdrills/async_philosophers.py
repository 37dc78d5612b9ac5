"""Dining philosophers as asyncio tasks, with fork locks and a two-seat room."""

from __future__ import annotations

import asyncio
import re
import sys
from typing import Sequence

N = 5
ROOM_SIZE = 2
DEFAULT_LOOPS = 3

_UNSIGNED = re.compile(r"\+?[0-9]+")
_USIZE_LIMIT = 2**64


def parse_loops(argv: list[str]) -> int:
    """Number of loops from the first argument, or the default if absent or invalid."""
    if not argv:
        return DEFAULT_LOOPS
    text = argv[0]
    if not _UNSIGNED.fullmatch(text):
        return DEFAULT_LOOPS
    value = int(text)
    return value if value < _USIZE_LIMIT else DEFAULT_LOOPS


async def philosopher(
    id: int,
    loops: int,
    forks: Sequence[asyncio.Lock],
    room: asyncio.Semaphore,
    delay: float = 0.1,
) -> int:
    """Think and eat ``loops`` times; return the number of meals eaten."""
    seat_left, seat_right = id, (id + 1) % len(forks)
    first, second = sorted((seat_left, seat_right))
    meals = 0
    for iteration in range(loops):
        print(f"P#{id} THINKING.")
        await asyncio.sleep(delay)
        print(f"P#{id} HUNGRY.")
        async with room:
            async with forks[first]:
                async with forks[second]:
                    print(f"P#{id} EATING (iteration {iteration + 1}/{loops})")
                    await asyncio.sleep(delay)
                    meals += 1
        print(f"P#{id} finished eating and is thinking again.")
    return meals


async def dine(loops: int, delay: float = 0.1) -> list[int]:
    """Run all philosophers to completion and return each one's meal count."""
    forks = [asyncio.Lock() for _ in range(N)]
    room = asyncio.Semaphore(ROOM_SIZE)
    meals = await asyncio.gather(
        *(philosopher(id, loops, forks, room, delay) for id in range(N))
    )
    return list(meals)


def main(argv: list[str] | None = None) -> int:
    """Run the dinner for the number of loops given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    asyncio.run(dine(parse_loops(args)))
    print("✅ All philosophers have finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())