"""Guess-the-number game played on standard input."""

from __future__ import annotations

import enum
import random
import re
import sys
from typing import Iterable, TextIO

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_LIMIT = 2**32


class Verdict(enum.Enum):
    """Outcome of comparing a guess with the secret."""

    TOO_SMALL = "Too small!"
    TOO_BIG = "Too big!"
    WIN = "You Win!"

    @property
    def message(self) -> str:
        return self.value


def compare_guess(guess: int, secret: int) -> Verdict:
    """Say whether ``guess`` is below, above or equal to ``secret``."""
    if guess < secret:
        return Verdict.TOO_SMALL
    if guess > secret:
        return Verdict.TOO_BIG
    return Verdict.WIN


def _parse_guess(line: str) -> int | None:
    text = line.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value < _U32_LIMIT else None


def play(secret: int, lines: Iterable[str], out: TextIO) -> int:
    """Run the guessing loop over ``lines`` and return the number of valid guesses.

    Lines that are not unsigned 32-bit numbers are ignored. Raises
    ``EOFError`` if the input ends before the secret is guessed.
    """
    source = iter(lines)
    guesses = 0
    while True:
        print("Please input your guess.", file=out)
        line = next(source, None)
        if line is None:
            raise EOFError("input ended before the number was guessed")
        guess = _parse_guess(line)
        if guess is None:
            continue
        guesses += 1
        print(f"You guessed: {guess}", file=out)
        verdict = compare_guess(guess, secret)
        print(verdict.message, file=out)
        if verdict is Verdict.WIN:
            return guesses


def main(argv: list[str] | None = None) -> int:
    """Play one game against a random number from 1 to 100."""
    print("Guess the number!")
    secret = random.randint(1, 100)
    print(f"The secret numer is: {secret}")
    try:
        play(secret, sys.stdin, sys.stdout)
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())