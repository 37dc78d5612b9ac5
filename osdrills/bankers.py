"""Banker's algorithm with one worker thread per process."""

from __future__ import annotations

import random
import sys
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path

MAX_DENIES = 3
DEFAULT_INPUT = "Bankers_rs.txt"


class UnsafeStateError(RuntimeError):
    """Raised when no safe ordering of the processes exists."""


@dataclass
class Process:
    pid: int
    maximum: list[int]
    allocation: list[int]
    need: list[int]


@dataclass
class Bank:
    available: list[int]
    processes: list[Process] = field(default_factory=list)

    @property
    def resources(self) -> int:
        return len(self.available)


@dataclass
class BankerStats:
    total_requests: int = 0
    granted: int = 0
    denied: int = 0


def _numbers(lines, what: str) -> list[int]:
    line = next(lines, None)
    if line is None:
        raise ValueError(f"missing {what}")
    try:
        return [int(token) for token in line.split()]
    except ValueError as exc:
        raise ValueError(f"invalid number in {what}: {line!r}") from exc


def parse_bank(text: str) -> Bank:
    """Parse the process count, resource count, availability and process rows."""
    lines = iter(text.splitlines())
    header = _numbers(lines, "header line")
    if len(header) < 2:
        raise ValueError("header line needs process and resource counts")
    count, resources = header[0], header[1]
    if count < 0 or resources < 0:
        raise ValueError("counts must not be negative")
    available = _numbers(lines, "available line")
    if len(available) != resources:
        raise ValueError(f"expected {resources} available values, got {len(available)}")
    processes = []
    for pid in range(count):
        row = _numbers(lines, f"row for process {pid}")
        if len(row) < 3 * resources:
            raise ValueError(f"row for process {pid} needs {3 * resources} values")
        processes.append(
            Process(
                pid=pid,
                maximum=row[:resources],
                allocation=row[resources : 2 * resources],
                need=row[2 * resources : 3 * resources],
            )
        )
    if any(value < 0 for value in available) or any(
        value < 0 for proc in processes for value in proc.maximum + proc.allocation + proc.need
    ):
        raise ValueError("resource amounts must not be negative")
    return Bank(available=available, processes=processes)


def read_input(filename: str | Path) -> Bank:
    """Read a bank description from a file."""
    return parse_bank(Path(filename).read_text())


def _fits(need: list[int], work: list[int]) -> bool:
    return all(n <= w for n, w in zip(need, work))


def _add(left: list[int], right: list[int]) -> list[int]:
    return [a + b for a, b in zip(left, right)]


def is_safe_state(bank: Bank) -> bool:
    """Sweep the processes once per process; every sweep must finish someone new."""
    work = list(bank.available)
    finished = [False] * len(bank.processes)
    for _ in bank.processes:
        progressed = False
        for i, proc in enumerate(bank.processes):
            if not finished[i] and _fits(proc.need, work):
                work = _add(work, proc.allocation)
                finished[i] = True
                progressed = True
        if not progressed:
            return False
    return True


def compute_safe_seq(bank: Bank) -> list[int]:
    """Return an order in which every process can finish, picking the first fit each step."""
    work = list(bank.available)
    done: set[int] = set()
    sequence = []
    for _ in bank.processes:
        pid = next(
            (
                i
                for i, proc in enumerate(bank.processes)
                if i not in done and _fits(proc.need, work)
            ),
            None,
        )
        if pid is None:
            raise UnsafeStateError("No safe sequence!")
        work = _add(work, bank.processes[pid].allocation)
        done.add(pid)
        sequence.append(pid)
    return sequence


def _transfer(bank: Bank, pid: int, request: list[int], sign: int) -> None:
    proc = bank.processes[pid]
    bank.available = [a - sign * r for a, r in zip(bank.available, request)]
    proc.allocation = [a + sign * r for a, r in zip(proc.allocation, request)]
    proc.need = [n - sign * r for n, r in zip(proc.need, request)]


def _release(bank: Bank, pid: int) -> None:
    proc = bank.processes[pid]
    print(f"P{pid} has finished. Releasing resources.")
    bank.available = _add(bank.available, proc.allocation)
    proc.allocation = [0] * len(proc.allocation)


def run_simulation(bank: Bank, seed: int | None = None, delay: float = 0.1) -> BankerStats:
    """Let every process request resources concurrently until all have finished.

    The bank is updated in place. A process denied ``MAX_DENIES`` times in a
    row waits for its turn in the safe sequence and takes its whole need.
    """
    sequence = compute_safe_seq(bank)
    print(f"Initial Available: {bank.available}")
    print(f"Safe sequence:   {sequence}")

    bank_lock = threading.Lock()
    turn = threading.Condition()
    finished: set[int] = set()
    stats = BankerStats()
    errors: list[BaseException] = []

    def next_in_line() -> int | None:
        return next((pid for pid in sequence if pid not in finished), None)

    def full_need(pid: int, request: list[int]) -> None:
        with turn:
            turn.wait_for(lambda: next_in_line() == pid)
            with bank_lock:
                print(f"P{pid} requesting full-need: {request}")
                stats.total_requests += 1
                if not _fits(request, bank.available):
                    raise UnsafeStateError(f"P{pid} cannot be granted its full need {request}")
                _transfer(bank, pid, request, 1)
                stats.granted += 1
                print(f"Request GRANTED to P{pid} (fallback)")
                _release(bank, pid)

    def worker(pid: int) -> None:
        rng = random.Random(None if seed is None else seed + pid)
        proc = bank.processes[pid]
        denies = 0
        while True:
            with bank_lock:
                if not any(proc.need):
                    _release(bank, pid)
                    return
                fallback = denies >= MAX_DENIES
                request = [
                    n if fallback or n == 0 else rng.randint(0, n) for n in proc.need
                ]
            if not any(request):
                time.sleep(delay)
                continue
            if fallback:
                full_need(pid, request)
                return
            with bank_lock:
                print(f"P{pid} requesting: {request}")
                stats.total_requests += 1
                if _fits(request, bank.available):
                    _transfer(bank, pid, request, 1)
                    if is_safe_state(bank):
                        print(f"Request GRANTED to P{pid}")
                        stats.granted += 1
                        denies = 0
                    else:
                        _transfer(bank, pid, request, -1)
                        print(f"Request DENIED to P{pid} (unsafe)")
                        stats.denied += 1
                        denies += 1
                else:
                    print(f"Request DENIED to P{pid} (not enough resources)")
                    stats.denied += 1
                    denies += 1
            time.sleep(delay)

    def run(pid: int) -> None:
        try:
            worker(pid)
        except Exception as exc:  # surfaced after all threads are joined
            errors.append(exc)
        finally:
            with turn:
                finished.add(pid)
                turn.notify_all()

    threads = [threading.Thread(target=run, args=(proc.pid,)) for proc in bank.processes]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]
    return stats


def main(argv: list[str] | None = None) -> int:
    """Run the simulation on the named input file."""
    args = sys.argv[1:] if argv is None else argv
    filename = args[0] if args else DEFAULT_INPUT
    try:
        bank = read_input(filename)
        stats = run_simulation(bank)
    except (OSError, ValueError, UnsafeStateError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("\nAll processes completed.")
    print(f"Total requests: {stats.total_requests}")
    print(f"Granted requests: {stats.granted}")
    print(f"Denied requests: {stats.denied}")
    return 0


if __name__ == "__main__":
    sys.exit(main())