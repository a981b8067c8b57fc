import pytest

from algolab.band_bounds import band_width, lower_bound
from algolab.band_search import (
    BandSolution,
    format_solution,
    main,
    minimize_band,
    minimize_band_best_first,
    parse_matrix,
)

EXAMPLE = "4\nX O O X\nO O X O\nX O O X\nO X X X\n"

MATRICES = [
    ["X"],
    ["XO", "OX"],
    ["OX", "XO"],
    ["XOOX", "OOXO", "XOOX", "OXXX"],
    ["OOX", "XOO", "OXO"],
    ["XXO", "OXX", "XOX"],
    ["OOOO", "OOOO", "OOOO", "OOOO"],
    ["XOXOX", "OXOOO", "XOOXO", "OOXOX", "XOOXX"],
]

SEARCHES = [minimize_band, minimize_band_best_first]


def _matrix(rows):
    return [list(r) for r in rows]


def test_parse_matrix_spaced():
    assert parse_matrix("2\nX O\nO X\n") == [["X", "O"], ["O", "X"]]


def test_parse_matrix_compact_matches_spaced():
    assert parse_matrix("2\nXO\nOX") == parse_matrix("2\nX O\nO X")


def test_parse_matrix_example_shape():
    m = parse_matrix(EXAMPLE)
    assert len(m) == 4
    assert m[3] == ["O", "X", "X", "X"]


@pytest.mark.parametrize("text", ["", "abc", "0", "2\nX O O"])
def test_parse_matrix_errors(text):
    with pytest.raises(ValueError):
        parse_matrix(text)


@pytest.mark.parametrize("search", SEARCHES)
@pytest.mark.parametrize("rows", MATRICES)
def test_solution_is_consistent(search, rows):
    m = _matrix(rows)
    n = len(m)
    sol = search(m)
    assert sorted(sol.row_perm) == list(range(n))
    assert sorted(sol.col_perm) == list(range(n))
    assert band_width(m, sol.row_perm, sol.col_perm) == sol.band


@pytest.mark.parametrize("search", SEARCHES)
@pytest.mark.parametrize("rows", MATRICES)
def test_band_within_bounds(search, rows):
    m = _matrix(rows)
    ident = list(range(len(m)))
    sol = search(m)
    assert sol.band <= band_width(m, ident, ident)
    assert sol.band >= lower_bound(m, ident, ident, 0, 0)


def test_all_zero_matrix_has_band_zero():
    m = _matrix(["OOO", "OOO", "OOO"])
    assert minimize_band(m).band == 0
    assert minimize_band_best_first(m).band == 0


def test_full_matrix_has_full_band():
    m = _matrix(["XXX", "XXX", "XXX"])
    assert minimize_band(m).band == 3
    assert minimize_band_best_first(m).band == 3


@pytest.mark.parametrize("search", SEARCHES)
def test_boolean_cells(search):
    m = [[True, False], [False, True]]
    sol = search(m)
    assert band_width(m, sol.row_perm, sol.col_perm) == sol.band
    assert sol.band <= 1


def test_empty_matrix_rejected_depth_first():
    with pytest.raises(ValueError):
        minimize_band([])


def test_empty_matrix_rejected_best_first():
    with pytest.raises(ValueError):
        minimize_band_best_first([])


def test_non_square_rejected_depth_first():
    with pytest.raises(ValueError):
        minimize_band([["X", "O"], ["O"]])


def test_non_square_rejected_best_first():
    with pytest.raises(ValueError):
        minimize_band_best_first([["X", "O"], ["O"]])


def test_format_solution_original_cells():
    m = _matrix(["XO", "OX"])
    sol = BandSolution(1, (0, 1), (0, 1))
    assert format_solution(m, sol) == "1\nX O \nO X \n"


def test_format_solution_with_blank():
    m = _matrix(["XO", "OX"])
    sol = BandSolution(2, (1, 0), (0, 1))
    assert format_solution(m, sol, "0") == "2\n0 X \nX 0 \n"


def test_main_depth_first(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    m = parse_matrix(EXAMPLE)
    assert lines[0] == str(minimize_band(m).band)
    assert len(lines) == 5
    assert all(set(line.split()) <= {"X", "O"} for line in lines[1:])


def test_main_best_first(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path), "--best-first"]) == 0
    lines = capsys.readouterr().out.splitlines()
    m = parse_matrix(EXAMPLE)
    assert lines[0] == str(minimize_band_best_first(m).band)
    assert all(set(line.split()) <= {"X", "0"} for line in lines[1:])
    assert sum(line.split().count("X") for line in lines[1:]) == 8


def test_main_bad_input(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("3\nX O", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "error" in capsys.readouterr().err