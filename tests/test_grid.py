import pytest

from sudokuseek.grid import (
    GridValue,
    apply,
    check_index,
    copy,
    copy_and_apply,
    copy_into,
    grid_indices,
    render,
    to_column_major,
    to_row_major,
)


class _DictGrid(dict):
    def __missing__(self, key):
        return None


def test_from_index_round_trip():
    for value in GridValue:
        assert GridValue.from_index(value.index()) is value


def test_from_digit_matches_str():
    for digit in range(1, 10):
        assert str(GridValue.from_digit(digit)) == str(digit)


def test_from_index_and_from_digit_agree():
    for digit in range(1, 10):
        value = GridValue.from_digit(digit)
        assert GridValue.from_index(value.index()) == value


@pytest.mark.parametrize("bad", [-1, 9, 10, True, "0"])
def test_from_index_rejects(bad):
    with pytest.raises(ValueError):
        GridValue.from_index(bad)


@pytest.mark.parametrize("bad", [0, 10, -3, "5"])
def test_from_digit_rejects(bad):
    with pytest.raises(ValueError):
        GridValue.from_digit(bad)


def test_values_are_ordered():
    values = [GridValue.from_digit(digit) for digit in range(1, 10)]
    assert sorted(reversed(values)) == values
    assert [value.index() for value in values] == list(range(9))
    assert GridValue.from_digit(1) < GridValue.from_digit(9)
    assert GridValue.from_index(4) >= GridValue.from_digit(5)


def test_grid_indices_row_major():
    indices = list(grid_indices())
    assert len(set(indices)) == len(indices)
    assert indices[0] == (0, 0)
    assert indices[-1] == (8, 8)
    assert [to_row_major(idx) for idx in indices] == list(range(len(indices)))


def test_column_major_is_transpose():
    for i, j in grid_indices():
        assert to_column_major((i, j)) == to_row_major((j, i))
    positions = sorted(to_column_major(idx) for idx in grid_indices())
    assert positions == sorted(to_row_major(idx) for idx in grid_indices())


def test_check_index_returns_tuple():
    assert check_index([3, 4]) == (3, 4)


@pytest.mark.parametrize("bad", [(9, 0), (0, 9), (-1, 0)])
def test_check_index_out_of_range(bad):
    with pytest.raises(IndexError):
        check_index(bad)


@pytest.mark.parametrize("bad", [(1,), (1, 2, 3), ("a", "b"), 5, (1.0, 2)])
def test_check_index_bad_shape(bad):
    with pytest.raises(TypeError):
        check_index(bad)


def test_render_empty_grid_layout():
    lines = render(_DictGrid()).split("\n")
    assert len(lines) == 17
    for number, line in enumerate(lines):
        if number % 2:
            assert line == "_" * 17
        else:
            cells = line.split("|")
            assert len(cells) == 9
            assert set(cells) == {" "}


def test_render_shows_values():
    grid = _DictGrid()
    grid[(0, 0)] = GridValue.V5
    grid[(8, 8)] = GridValue.V9
    lines = render(grid).split("\n")
    assert lines[0] == "5| | | | | | | | "
    assert lines[-1].split("|")[-1] == "9"


def test_copy_and_copy_into():
    src = _DictGrid()
    src[(2, 3)] = GridValue.V7
    dst = _DictGrid()
    dst[(0, 0)] = GridValue.V1
    copy(src, dst)
    assert dst[(2, 3)] is GridValue.V7
    assert dst[(0, 0)] is None
    made = copy_into(src, _DictGrid)
    assert all(made[idx] == src[idx] for idx in grid_indices())


def test_apply_and_copy_and_apply():
    src = _DictGrid()
    placement = [((1, 1), GridValue.V4), ((5, 6), GridValue.V2)]
    result = copy_and_apply(src, placement, _DictGrid)
    assert result[(1, 1)] is GridValue.V4
    assert result[(5, 6)] is GridValue.V2
    assert src[(1, 1)] is None
    apply(src, iter(placement))
    assert src[(5, 6)] is GridValue.V2