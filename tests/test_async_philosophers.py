import asyncio

import pytest

from osdrills.async_philosophers import (
    DEFAULT_LOOPS,
    N,
    ROOM_SIZE,
    dine,
    main,
    parse_loops,
    philosopher,
)


@pytest.mark.parametrize(
    "argv, expected",
    [([], DEFAULT_LOOPS), (["4"], 4), (["x"], DEFAULT_LOOPS), (["-2"], DEFAULT_LOOPS), (["0"], 0)],
)
def test_parse_loops(argv, expected):
    assert parse_loops(argv) == expected


@pytest.mark.asyncio
async def test_single_philosopher_output_order(capsys):
    forks = [asyncio.Lock() for _ in range(N)]
    room = asyncio.Semaphore(ROOM_SIZE)
    meals = await philosopher(0, 1, forks, room, 0)
    assert meals == 1
    assert capsys.readouterr().out.splitlines() == [
        "P#0 THINKING.",
        "P#0 HUNGRY.",
        "P#0 EATING (iteration 1/1)",
        "P#0 finished eating and is thinking again.",
    ]
    assert not any(fork.locked() for fork in forks)
    assert not room.locked()


@pytest.mark.asyncio
async def test_held_fork_blocks_eating(capsys):
    forks = [asyncio.Lock() for _ in range(N)]
    room = asyncio.Semaphore(ROOM_SIZE)
    await forks[1].acquire()
    task = asyncio.create_task(philosopher(0, 1, forks, room, 0))
    for _ in range(10):
        await asyncio.sleep(0)
    assert "EATING" not in capsys.readouterr().out
    assert not task.done()
    forks[1].release()
    assert await asyncio.wait_for(task, 2) == 1
    assert "P#0 EATING (iteration 1/1)" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_dine_feeds_everyone(capsys):
    meals = await asyncio.wait_for(dine(3, 0), 5)
    assert meals == [3] * N
    out = capsys.readouterr().out
    for seat in range(N):
        assert f"P#{seat} EATING (iteration 3/3)" in out
    assert out.count("HUNGRY.") == N * 3


@pytest.mark.asyncio
async def test_zero_loops_eats_nothing(capsys):
    assert await dine(0, 0) == [0] * N
    assert capsys.readouterr().out == ""


def test_main_announces_the_end(capsys):
    assert main(["1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "✅ All philosophers have finished."
    assert sum("EATING" in line for line in lines) == N