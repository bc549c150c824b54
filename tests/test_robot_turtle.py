import pytest

from graphkit.robot_turtle import robot_turtle


def _board(**cells):
    rows = [["."] * 8 for _ in range(8)]
    rows[7][0] = "T"
    for key, ch in cells.items():
        r, c = int(key[1]), int(key[2])
        rows[r][c] = ch
    return ["".join(row) for row in rows]


def test_diamond_straight_ahead():
    assert robot_turtle(_board(p71="D")) == "F"


def test_diamond_above_needs_left_turn():
    assert robot_turtle(_board(p60="D")) == "LF"


def test_ice_is_melted():
    assert robot_turtle(_board(p71="I", p72="D", p60="C")) == "XFF"


def test_blocked_board_has_no_solution():
    assert robot_turtle(_board(p71="C", p60="C", p00="D")) is None


def test_open_board_path_length_matches_distance():
    program = robot_turtle(_board(p07="D"))
    assert program.count("F") == abs(0 - 7) + abs(7 - 0)
    assert set(program) <= set("FLR")


def test_commands_are_well_formed():
    program = robot_turtle(_board(p53="D", p62="I", p52="C", p43="C"))
    assert program is not None
    assert set(program) <= set("FLRX")
    assert program.endswith("F")
    for i, ch in enumerate(program):
        if ch in "LRX":
            assert program[i + 1] in "XF"


def test_missing_diamond_raises():
    with pytest.raises(ValueError):
        robot_turtle(_board())


def test_wrong_board_size_raises():
    with pytest.raises(ValueError):
        robot_turtle(["T.D"])