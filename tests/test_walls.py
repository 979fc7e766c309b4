import pytest

from pathfinder.envs import Grid, Point, WallEditor
from pathfinder.errors import GridBusy, NotAdjacent, OutOfBounds, ParseError, SearchCancelled
from pathfinder.planners import Algorithm, search


def test_editor_toggle_and_set():
    grid = Grid(3)
    editor = WallEditor(grid)
    assert editor.toggle(Point(1, 1), Point(2, 1)) is True
    assert grid.has_wall(Point(2, 1), Point(1, 1))
    editor.set(Point(1, 1), Point(2, 1), False)
    editor.set(Point(1, 1), Point(2, 1), False)
    assert grid.wall_count() == 0
    with pytest.raises(NotAdjacent):
        editor.toggle(Point(0, 0), Point(2, 2))


def test_toggle_many():
    grid = Grid(3)
    states = WallEditor(grid).toggle_many([(Point(0, 0), Point(1, 0)),
                                           (Point(0, 0), Point(1, 0))])
    assert states == [True, False]


def test_enclose_walls_every_side():
    grid = Grid(3)
    WallEditor(grid).enclose(Point(1, 1))
    assert grid.wall_count() == 4
    assert grid.open_neighbors(Point(1, 1)) == []
    WallEditor(grid).enclose(Point(0, 0))
    assert grid.wall_count() == 6


def test_clear_removes_all_walls():
    grid = Grid(4)
    grid.fill_walls()
    WallEditor(grid).clear()
    assert grid.wall_count() == 0


def test_cell_at_maps_pixels_to_cells():
    editor = WallEditor(Grid(5))
    assert editor.cell_at(0, 0, 20) == Point(0, 0)
    assert editor.cell_at(45.5, 99.9, 20) == Point(2, 4)
    with pytest.raises(OutOfBounds):
        editor.cell_at(100, 0, 20)
    with pytest.raises(OutOfBounds):
        editor.cell_at(-1, 0, 20)
    with pytest.raises(ParseError):
        editor.cell_at(1, 1, 0)


def test_wall_edit_during_running_search_is_refused():
    grid = Grid(4)
    editor = WallEditor(grid)
    run = search(grid, Point(0, 0), Point(3, 3), Algorithm.BFS)
    run.advance()
    with pytest.raises(GridBusy):
        editor.toggle(Point(0, 0), Point(1, 0))
    run.run()
    assert editor.toggle(Point(0, 0), Point(1, 0)) is True


def test_cancelled_search_releases_the_grid():
    grid = Grid(4)
    run = search(grid, Point(0, 0), Point(3, 3), Algorithm.DFS)
    run.advance()
    run.cancel()
    assert run.done and run.result is None
    WallEditor(grid).toggle(Point(0, 0), Point(1, 0))
    with pytest.raises(SearchCancelled):
        run.advance()


def test_new_search_supersedes_the_old_one():
    grid = Grid(4)
    old = search(grid, Point(0, 0), Point(3, 3), Algorithm.BFS)
    old.advance()
    new = search(grid, Point(3, 3), Point(0, 0), Algorithm.ASTAR)
    with pytest.raises(SearchCancelled):
        old.advance()
    assert new.run().found


def test_cell_at_uses_editor_cell_size_by_default():
    editor = WallEditor(Grid(5), cell_size=10)
    assert editor.cell_at(25, 5) == Point(2, 0)
    assert editor.cell_at(25, 5, 20) == Point(1, 0)
