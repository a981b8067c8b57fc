import random

import pytest

from algolab.rbt_cli import (
    InvalidCommandError,
    generate_commands,
    main,
    run_commands,
)


def test_run_commands_basic_sequence():
    lines = ["5", "1 5", "1 5", "2 5", "3 5", "0 5"]
    assert list(run_commands(lines)) == [
        "5",
        "1 5 1",
        "1 5 0",
        "2 5 1",
        "3 5 0",
        "0 5 1",
    ]


def test_run_commands_count_query():
    lines = ["4", "1 10", "1 20", "1 30", "3 25"]
    output = list(run_commands(lines))
    assert output[-1] == "3 25 2"


def test_run_commands_remove_missing():
    assert list(run_commands(["1", "0 9"])) == ["1", "0 9 0"]


def test_invalid_command_raises_with_line():
    with pytest.raises(InvalidCommandError) as info:
        list(run_commands(["2", "1 3", "7 3"]))
    assert info.value.line == "7 3 ERROR: Invalid Command"


def test_truncated_input_raises():
    with pytest.raises(ValueError):
        list(run_commands(["3", "1 1"]))


def test_generate_commands_shape():
    rng = random.Random(42)
    lines = list(generate_commands(50, rng))
    assert lines[0] == "50"
    assert len(lines) == 51
    for line in lines[1:]:
        code, value = map(int, line.split())
        assert 0 <= code <= 3
        assert 1 <= value <= 1000001


def test_generated_commands_run_cleanly():
    lines = list(generate_commands(200, random.Random(3)))
    output = list(run_commands(lines))
    assert len(output) == 201
    assert all(out.startswith(src + " ") for src, out in zip(lines[1:], output[1:]))


def test_main_round_trip(tmp_path):
    src = tmp_path / "input.in"
    dst = tmp_path / "output.in"
    assert main([str(src), str(dst), "--generate", "20", "--seed", "1"]) == 0
    assert main([str(src), str(dst)]) == 0
    written = dst.read_text().splitlines()
    assert written[0] == "20"
    assert len(written) == 21


def test_main_invalid_command(tmp_path):
    src = tmp_path / "input.in"
    dst = tmp_path / "output.in"
    src.write_text("2\n1 4\n9 4\n")
    assert main([str(src), str(dst)]) == 1
    assert dst.read_text().splitlines() == ["2", "1 4 1", "9 4 ERROR: Invalid Command"]