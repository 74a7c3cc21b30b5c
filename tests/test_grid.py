from board.grid import Grid

def test_grid_filled_with_initial_value():
    g = Grid(3, 2, "0")
    assert g.to_lists() == [["0", "0", "0"], ["0", "0", "0"]]

def test_grid_addresses_column_then_row():
    g = Grid(3, 2, 0)
    g[2, 1] = 9
    assert g.to_lists() == [[0, 0, 0], [0, 0, 9]]
    assert g[2, 1] == 9

def test_rows_are_independent():
    g = Grid(2, 2, ".")
    g[0, 0] = "#"
    assert g[0, 1] == "."

def test_snapshot_is_a_copy():
    g = Grid(2, 1, "a")
    snap = g.to_lists()
    snap[0][0] = "z"
    assert g[0, 0] == "a"

def test_cell_text_uses_str():
    g = Grid(1, 1, 42)
    assert g.cell_text(0, 0) == "42"
