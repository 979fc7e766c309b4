import logging

from pathfinder.envs import Grid, Point, WallEditor
from pathfinder.events import LoggingSink, MultiSink, RecordingSink, VisualizationEventSink
from pathfinder.planners import Algorithm, search


def test_base_sink_ignores_everything():
    result = search(Grid(3), Point(0, 0), Point(2, 2), Algorithm.BFS,
                    sink=VisualizationEventSink()).run()
    assert result.found


def test_multi_sink_fans_out():
    a, b = RecordingSink(), RecordingSink()
    search(Grid(3), Point(0, 0), Point(2, 1), Algorithm.DFS, sink=MultiSink(a, b)).run()
    assert a.events == b.events
    assert a.of_kind("finished")


def test_logging_sink(caplog):
    log = logging.getLogger("tests.sink")
    grid = Grid(3)
    with caplog.at_level(logging.DEBUG, logger="tests.sink"):
        search(grid, Point(0, 0), Point(2, 2), Algorithm.ASTAR, sink=LoggingSink(log)).run()
        WallEditor(grid).enclose(Point(2, 2))
        search(grid, Point(0, 0), Point(2, 2), Algorithm.BFS, sink=LoggingSink(log)).run()
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0].startswith("Searching 0,0 -> 2,2 with A*")
    assert "Path found: 5 cells" in messages
    assert any(m.startswith("step 0: 0,0") for m in messages)
    assert messages[-1] == "No path found"
