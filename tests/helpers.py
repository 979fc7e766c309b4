from pathfinder.envs import Grid, Point


def assert_valid_path(grid: Grid, path, start: Point, goal: Point):
    """Consecutive cells are adjacent with no wall between them."""
    assert path[0] == start
    assert path[-1] == goal
    assert len(set(path)) == len(path)
    for a, b in zip(path[:-1], path[1:]):
        assert a.is_adjacent(b), f"{a} -> {b} is not a single move"
        assert not grid.has_wall(a, b), f"{a} -> {b} crosses a wall"


def same_walls(grid: Grid) -> Grid:
    fresh = Grid(grid.width, grid.height)
    fresh.walls[...] = grid.walls
    return fresh
