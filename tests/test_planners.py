import numpy as np
import pytest

from pathfinder.envs import Grid, Point, WallEditor, braid, carve_maze, reset
from pathfinder.errors import OutOfBounds
from pathfinder.events import RecordingSink
from pathfinder.planners import (
    NOT_FOUND, PLANNERS, Algorithm, AStarPlanner, BFSPlanner, DFSPlanner,
    DijkstraPlanner, SearchResult, SearchStep, search,
)
from tests.helpers import assert_valid_path, same_walls

OPTIMAL = [Algorithm.BFS, Algorithm.DIJKSTRA, Algorithm.ASTAR]


def _braided_maze(n, seed, fraction=0.15):
    rng = np.random.default_rng(seed)
    grid = carve_maze(Grid(n), rng=rng)
    braid(grid, fraction, rng=rng)
    return grid


def test_every_algorithm_has_a_planner():
    assert set(PLANNERS) == set(Algorithm)
    assert isinstance(PLANNERS[Algorithm.ASTAR](), AStarPlanner)


def test_bfs_on_open_3x3():
    grid = Grid(3)
    run = search(grid, Point(0, 0), Point(2, 2), Algorithm.BFS)
    steps = list(run)
    assert len(run.result) == 5
    assert run.result.hops == 4
    assert len(steps) <= 9
    assert steps[0].point == Point(0, 0)
    assert steps[-1].point == Point(2, 2)
    assert_valid_path(grid, run.result.path, Point(0, 0), Point(2, 2))


def test_bfs_expands_in_fifo_order():
    grid = Grid(3)
    steps = list(BFSPlanner().search(grid, Point(1, 1), Point(0, 0)))
    # start, then its neighbors in up, right, down, left order
    assert [s.point for s in steps[:5]] == [
        Point(1, 1), Point(1, 0), Point(2, 1), Point(1, 2), Point(0, 1),
    ]
    assert [s.distance for s in steps[:5]] == [0.0, 1.0, 1.0, 1.0, 1.0]
    assert [s.index for s in steps] == list(range(len(steps)))


@pytest.mark.parametrize("seed", range(8))
def test_optimal_algorithms_agree_on_length(seed):
    grid = _braided_maze(12, seed)
    start, goal = Point(0, 0), Point(11, 11)
    lengths = {}
    for alg in OPTIMAL:
        result = search(grid, start, goal, alg).run()
        assert result.found
        assert_valid_path(grid, result.path, start, goal)
        lengths[alg] = len(result)
    assert len(set(lengths.values())) == 1


@pytest.mark.parametrize("seed", range(8))
def test_dfs_path_is_valid_and_never_shorter_than_bfs(seed):
    grid = _braided_maze(12, seed)
    start, goal = Point(0, 11), Point(11, 0)
    bfs = search(grid, start, goal, Algorithm.BFS).run()
    dfs = search(grid, start, goal, Algorithm.DFS).run()
    assert dfs.found
    assert_valid_path(grid, dfs.path, start, goal)
    assert len(dfs) >= len(bfs)


def test_dfs_wanders_on_an_open_grid():
    grid = Grid(5)
    start, goal = Point(0, 0), Point(0, 4)
    bfs = search(grid, start, goal, Algorithm.BFS).run()
    dfs = search(grid, start, goal, Algorithm.DFS).run()
    assert len(bfs) == 5
    # "right" is tried before "down", so the walk leaves along the top row
    assert dfs.path[1] == Point(1, 0)
    assert len(dfs) > len(bfs)
    assert_valid_path(grid, dfs.path, start, goal)


def test_astar_expands_no_more_than_dijkstra():
    grid = Grid(15)
    start, goal = Point(0, 0), Point(14, 9)
    a = AStarPlanner().search(grid, start, goal)
    a.run()
    d = DijkstraPlanner().search(grid, start, goal)
    d.run()
    assert len(a.result) == len(d.result) == 24
    assert a.steps_taken <= d.steps_taken


def test_dijkstra_exposes_distance_labels():
    grid = Grid(4)
    DijkstraPlanner().search(grid, Point(0, 0), Point(3, 3)).run()
    for p in grid.points():
        if grid.visited[p.y, p.x]:
            assert grid.cell(p).distance == float(p.manhattan(Point(0, 0)))


def test_dijkstra_routes_around_a_wall():
    grid = Grid(3, 2)
    grid.set_wall(Point(1, 0), Point(2, 0))
    DijkstraPlanner().search(grid, Point(0, 0), Point(2, 0)).run()
    assert grid.cell(Point(2, 0)).distance == 4.0
    assert grid.cell(Point(2, 0)).parent == Point(2, 1)


@pytest.mark.parametrize("alg", list(Algorithm))
def test_start_equals_goal(alg):
    grid = Grid(4)
    run = search(grid, Point(2, 1), Point(2, 1), alg)
    steps = list(run)
    assert [s.point for s in steps] == [Point(2, 1)]
    assert run.result == SearchResult.from_path([Point(2, 1)])
    assert int(grid.visited.sum()) == 1


@pytest.mark.parametrize("alg", list(Algorithm))
def test_walled_off_goal_is_not_found(alg):
    grid = Grid(5)
    editor = WallEditor(grid)
    # vertical wall between columns 2 and 3
    editor.wall_line([Point(2, y) for y in range(5)], (1, 0))
    result = search(grid, Point(0, 0), Point(4, 4), alg).run()
    assert result == NOT_FOUND
    assert not result.found
    right = slice(3, 5)
    assert not grid.visited[:, right].any()
    assert np.isinf(grid.dist[:, right]).all()
    assert (grid.par_x[:, right] == -1).all()
    assert (grid.par_x[:, :3] < 3).all()
    assert not grid.on_path.any()


@pytest.mark.parametrize("alg", list(Algorithm))
def test_enclosed_start_is_not_found(alg):
    grid = Grid(4)
    WallEditor(grid).enclose(Point(1, 1))
    run = search(grid, Point(1, 1), Point(3, 3), alg)
    assert run.run() == NOT_FOUND
    assert run.steps_taken == 1


@pytest.mark.parametrize("alg", list(Algorithm))
def test_clear_then_search_matches_fresh_grid(alg):
    grid = _braided_maze(9, seed=4)
    start, goal = Point(0, 8), Point(8, 0)

    first = search(grid, start, goal, alg)
    first_steps = list(first)
    reset(grid)
    assert not grid.visited.any() and not grid.on_path.any()
    again = search(grid, start, goal, alg)
    again_steps = list(again)

    fresh = same_walls(grid)
    fresh_run = search(fresh, start, goal, alg)
    fresh_steps = list(fresh_run)

    assert first_steps == again_steps == fresh_steps
    assert first.result == again.result == fresh_run.result
    for name in ("visited", "dist", "par_x", "par_y", "on_path"):
        assert np.array_equal(getattr(grid, name), getattr(fresh, name)), name


def test_search_marks_path_cells():
    grid = Grid(3)
    result = search(grid, Point(0, 0), Point(2, 0), Algorithm.BFS).run()
    assert [p for p in grid.points() if grid.on_path[p.y, p.x]] == list(result.path)
    assert grid.cell(Point(1, 0)).on_path


def test_out_of_bounds_fails_before_any_step():
    grid = Grid(3)
    grid.toggle_wall(Point(0, 0), Point(1, 0))
    snapshot = grid.walls.copy()
    with pytest.raises(OutOfBounds):
        search(grid, Point(0, 0), Point(3, 3), Algorithm.BFS)
    with pytest.raises(OutOfBounds):
        search(grid, Point(5, 0), Point(1, 1), Algorithm.DFS)
    assert np.array_equal(grid.walls, snapshot)


def test_search_never_changes_walls():
    grid = _braided_maze(8, seed=2)
    before = grid.walls.copy()
    for alg in Algorithm:
        search(grid, Point(0, 0), Point(7, 7), alg).run()
    assert np.array_equal(grid.walls, before)


def test_advance_returns_steps_then_the_result():
    grid = Grid(3)
    run = search(grid, Point(0, 0), Point(1, 0), Algorithm.BFS)
    outs = []
    while True:
        out = run.advance()
        outs.append(out)
        if isinstance(out, SearchResult):
            break
    assert all(isinstance(o, SearchStep) for o in outs[:-1])
    assert outs[-1].path == (Point(0, 0), Point(1, 0))
    assert run.done
    assert run.advance() is run.result


def test_plan_returns_success_and_path_dict():
    out = BFSPlanner().plan(Grid(2), Point(0, 0), Point(1, 1))
    assert out["success"] is True
    assert out["path"][0] == (0, 0) and out["path"][-1] == (1, 1)
    assert DFSPlanner().plan(Grid(1), (0, 0), (0, 0)) == {"success": True, "path": [(0, 0)]}


def test_sink_receives_events_in_order():
    grid = Grid(3)
    sink = RecordingSink()
    result = search(grid, Point(0, 0), Point(2, 0), Algorithm.ASTAR, sink=sink).run()
    kinds = [k for k, _ in sink.events]
    assert kinds[0] == "started"
    assert kinds[-1] == "finished"
    first_path = kinds.index("path")
    assert set(kinds[1:first_path]) == {"visited"}
    assert sink.path == list(result.path)
    assert sink.visited[0] == Point(0, 0)


def test_sink_reports_failure():
    grid = Grid(2)
    WallEditor(grid).enclose(Point(1, 1))
    sink = RecordingSink()
    search(grid, Point(0, 0), Point(1, 1), Algorithm.DIJKSTRA, sink=sink).run()
    assert sink.of_kind("failed") == [NOT_FOUND]
    assert sink.path == []
