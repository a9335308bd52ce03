import pytest

from hcl_palette.grid import (
    append_column,
    drop_column,
    in_bounds,
    replace_at,
    replace_item,
    swap_columns,
    swap_items,
)


def _grid():
    return tuple(tuple(f"{i}{j}" for j in range(3)) for i in range(3))


def test_replace_at_shares_untouched_rows_and_cells():
    g = _grid()
    out = replace_at(g, (1, 2), lambda v: v.upper() + "!")
    assert out[1][2] == "12!"
    assert out is not g and out[1] is not g[1]
    assert out[0] is g[0] and out[2] is g[2]
    assert out[1][0] is g[1][0] and out[1][1] is g[1][1]
    # source untouched
    assert g[1][2] == "12"


def test_replace_at_passes_old_cell():
    seen = []
    replace_at(_grid(), (2, 0), lambda v: seen.append(v) or v)
    assert seen == ["20"]


def test_replace_at_rejects_bad_paths():
    g = _grid()
    with pytest.raises(IndexError):
        replace_at(g, (3, 0), str)
    with pytest.raises(IndexError):
        replace_at(g, (0, -1), str)
    with pytest.raises(IndexError):
        replace_at(g, (0,), str)


def test_in_bounds():
    g = _grid()
    assert in_bounds(g, (0, 0)) and in_bounds(g, (2, 2))
    assert not in_bounds(g, (-1, 0))
    assert not in_bounds(g, (0, 3))
    assert not in_bounds(g, (True, 0))
    assert not in_bounds(g, (0, 1, 2))
    assert not in_bounds((), (0, 0))


def test_replace_item():
    assert replace_item(("a", "b"), 1, str.upper) == ("a", "B")


def test_swap_rows_and_columns():
    g = _grid()
    rows = swap_items(g, 0, 2)
    assert rows[0] is g[2] and rows[2] is g[0] and rows[1] is g[1]
    cols = swap_columns(g, 0, 1)
    assert cols[0] == ("01", "00", "02")
    assert swap_columns(cols, 0, 1) == g


def test_drop_and_append_column():
    g = _grid()
    assert drop_column(g, 1) == (("00", "02"), ("10", "12"), ("20", "22"))
    assert append_column(g, ["x", "y", "z"])[2] == ("20", "21", "22", "z")
    assert append_column((), []) == ()
    with pytest.raises(ValueError):
        append_column(g, ["x"])
