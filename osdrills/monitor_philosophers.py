"""Dining philosophers solved with a monitor: one lock, one condition per seat."""

from __future__ import annotations

import enum
import re
import sys
import threading
import time

NUM_PHILOSOPHERS = 5
DEFAULT_ROUNDS = 3

_UNSIGNED = re.compile(r"\+?[0-9]+")
_USIZE_LIMIT = 2**64


class State(enum.Enum):
    """What a philosopher is doing."""

    THINKING = "thinking"
    HUNGRY = "hungry"
    EATING = "eating"


def left(id: int) -> int:
    """Seat to the left of ``id``."""
    return (id + NUM_PHILOSOPHERS - 1) % NUM_PHILOSOPHERS


def right(id: int) -> int:
    """Seat to the right of ``id``."""
    return (id + 1) % NUM_PHILOSOPHERS


class Table:
    """Monitor guarding the philosophers' states."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._states = [State.THINKING] * NUM_PHILOSOPHERS
        self._conditions = [threading.Condition(self._lock) for _ in range(NUM_PHILOSOPHERS)]

    @property
    def states(self) -> tuple[State, ...]:
        """A snapshot of every philosopher's state."""
        with self._lock:
            return tuple(self._states)

    def _try_eat(self, id: int) -> None:
        if (
            self._states[id] is State.HUNGRY
            and self._states[left(id)] is not State.EATING
            and self._states[right(id)] is not State.EATING
        ):
            self._states[id] = State.EATING
            self._conditions[id].notify()

    def pickup_forks(self, id: int) -> None:
        """Become hungry and block until both neighbours are not eating."""
        with self._lock:
            self._states[id] = State.HUNGRY
            self._try_eat(id)
            while self._states[id] is not State.EATING:
                self._conditions[id].wait()

    def putdown_forks(self, id: int) -> None:
        """Go back to thinking and let hungry neighbours eat."""
        with self._lock:
            self._states[id] = State.THINKING
            self._try_eat(left(id))
            self._try_eat(right(id))


def parse_rounds(argv: list[str]) -> int:
    """Number of rounds from the first argument, or the default if absent or invalid."""
    if not argv:
        return DEFAULT_ROUNDS
    text = argv[0]
    if not _UNSIGNED.fullmatch(text):
        return DEFAULT_ROUNDS
    value = int(text)
    return value if value < _USIZE_LIMIT else DEFAULT_ROUNDS


def _think(id: int, delay: float) -> None:
    print(f"P#{id} THINKING.")
    time.sleep(delay)


def _eat(id: int, round: int, total: int, delay: float) -> None:
    print(f"P#{id} EATING ({round} / {total}).")
    time.sleep(delay)
    print(f"P#{id} finished eating and is thinking again.")


def dine(loops: int, delay: float = 0.1) -> Table:
    """Run every philosopher for ``loops`` rounds and return the table afterwards."""
    table = Table()

    def seat(id: int) -> None:
        for round in range(1, loops + 1):
            _think(id, delay)
            table.pickup_forks(id)
            _eat(id, round, loops, delay)
            table.putdown_forks(id)

    threads = [threading.Thread(target=seat, args=(id,)) for id in range(NUM_PHILOSOPHERS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return table


def main(argv: list[str] | None = None) -> int:
    """Run the dinner for the number of rounds given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    dine(parse_rounds(args))
    print("All philosophers have finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())