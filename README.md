# osdrills

A handful of small programs from an operating-systems course, packaged as
Python commands you can run and modules you can import. The package uses only
the standard library.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `osdrills-hello` | Prints `Hello, world!`. Extra arguments are ignored. |
| `osdrills-hexb64 [HEX]` | Decodes `HEX` (or a built-in hex string when none is given) and prints it as padded Base64. Invalid hex prints `Failed to decode hex` to standard error and exits with status 1. |
| `osdrills-guess` | A number-guessing game read from standard input. The secret (1 to 100) is printed at the start; lines that are not unsigned numbers are ignored. Exits with status 1 if input ends before the number is guessed. |
| `osdrills-bankers [FILE]` | Runs the banker's algorithm with one thread per process, reading `FILE`, or `Bankers_rs.txt` if no file is given, and prints request totals at the end. |
| `osdrills-monitor-philosophers [ROUNDS]` | Dining philosophers (five of them) using a monitor: one lock and one condition per philosopher. `ROUNDS` defaults to 3, also when it is not a valid unsigned number. |
| `osdrills-async-philosophers [LOOPS]` | Dining philosophers as asyncio tasks. Forks are locks taken lower-numbered first, and a room semaphore lets two philosophers in at a time. `LOOPS` defaults to 3, also when it is not a valid unsigned number. |

## Banker's input format

The first line holds the number of processes `P` and the number of resource
types `R`. The second line holds the `R` available counts. Then comes one line
per process with `3*R` numbers: max, allocation and need.

    2 2
    3 3
    4 4 1 1 3 3
    2 2 1 1 1 1

Missing lines, non-numeric values, too few values or negative amounts raise
`ValueError`.

During the simulation each process makes random requests up to its remaining
need. A request is granted only if it fits the available resources and leaves
the system in a safe state. After `MAX_DENIES` (3) denials in a row, a process
waits for its turn in the safe sequence and takes its whole need at once.

## Library use

```python
from osdrills.bankers import read_input, compute_safe_seq, is_safe_state, run_simulation

bank = read_input("Bankers_rs.txt")
print(is_safe_state(bank), compute_safe_seq(bank))

stats = run_simulation(bank, seed=1, delay=0.0)
print(stats.total_requests, stats.granted, stats.denied)
```

- `osdrills.bankers`: `parse_bank(text)`, `read_input(filename)`,
  `is_safe_state(bank)`, `compute_safe_seq(bank)` (raises `UnsafeStateError`
  when no safe sequence exists) and `run_simulation(bank, seed=None, delay=0.1)`,
  which updates the `Bank` in place and returns a `BankerStats`.
- `osdrills.hexb64.hex_to_base64(hex_string)` returns the Base64 text or raises
  `ValueError`.
- `osdrills.guess`: `compare_guess(guess, secret)` returns a `Verdict`;
  `play(secret, lines, out)` runs the game over an iterable of lines and
  returns the number of valid guesses.
- `osdrills.monitor_philosophers`: the `Table` monitor with `pickup_forks(id)`
  and `putdown_forks(id)`, `left(id)`, `right(id)`, `parse_rounds(argv)` and
  `dine(loops, delay=0.1)`, which returns the table after every thread has
  finished.
- `osdrills.async_philosophers`: `parse_loops(argv)`,
  `philosopher(id, loops, forks, room, delay=0.1)` and the coroutine
  `dine(loops, delay=0.1)`, which returns each philosopher's meal count.