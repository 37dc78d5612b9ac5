import threading

import pytest

from osdrills.monitor_philosophers import (
    DEFAULT_ROUNDS,
    NUM_PHILOSOPHERS,
    State,
    Table,
    dine,
    left,
    main,
    parse_rounds,
    right,
)


def test_neighbours_wrap_around():
    assert left(0) == NUM_PHILOSOPHERS - 1
    assert right(NUM_PHILOSOPHERS - 1) == 0


@pytest.mark.parametrize("seat", range(NUM_PHILOSOPHERS))
def test_left_and_right_are_inverse(seat):
    assert right(left(seat)) == seat
    assert left(right(seat)) == seat


def test_new_table_is_all_thinking():
    assert Table().states == (State.THINKING,) * NUM_PHILOSOPHERS


def test_non_neighbours_can_eat_together():
    table = Table()
    table.pickup_forks(0)
    table.pickup_forks(2)
    states = table.states
    assert states[0] is State.EATING
    assert states[2] is State.EATING


def test_neighbour_waits_until_forks_are_put_down():
    table = Table()
    table.pickup_forks(0)
    ate = threading.Event()

    def hungry():
        table.pickup_forks(1)
        ate.set()

    worker = threading.Thread(target=hungry)
    worker.start()
    assert not ate.wait(0.1)
    assert table.states[1] is State.HUNGRY
    table.putdown_forks(0)
    assert ate.wait(2)
    worker.join(2)
    assert table.states[0] is State.THINKING
    assert table.states[1] is State.EATING


@pytest.mark.parametrize(
    "argv, expected",
    [([], DEFAULT_ROUNDS), (["5"], 5), (["+7"], 7), (["abc"], DEFAULT_ROUNDS), (["-1"], DEFAULT_ROUNDS)],
)
def test_parse_rounds(argv, expected):
    assert parse_rounds(argv) == expected


def test_dine_ends_with_everyone_thinking(capsys):
    table = dine(2, 0)
    assert table.states == (State.THINKING,) * NUM_PHILOSOPHERS
    out = capsys.readouterr().out
    assert out.count("EATING (") == NUM_PHILOSOPHERS * 2
    for seat in range(NUM_PHILOSOPHERS):
        assert f"P#{seat} EATING (2 / 2)." in out


def test_main_announces_the_end(capsys):
    assert main(["1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "All philosophers have finished."
    assert sum("finished eating" in line for line in lines) == NUM_PHILOSOPHERS