from layout import CurvePath, assign_levels, plan_geometry, route_connections
from tasks import is_task_blocked


def _route(tasks):
    geo = plan_geometry(tasks, assign_levels(tasks))
    return route_connections(geo["nodes"], geo["order"], tasks)


def test_chain_connections(chain):
    conns = _route(chain)
    assert [c.id for c in conns] == ["A-B", "B-C"]
    ab = conns[0]
    assert (ab.source_id, ab.target_id) == ("A", "B")
    assert (ab.start_x, ab.start_y, ab.end_x, ab.end_y) == (380, 480, 480, 480)
    assert ab.curve.c1 == (430, 480)
    assert ab.curve.c2 == (430, 480)
    assert ab.path == "M 380 480 C 430 480, 430 480, 480 480"
    assert (ab.mid_x, ab.mid_y) == (430, 480)


def test_blocked_follows_each_parent(chain):
    # A is Done, B is not
    by_id = {c.id: c for c in _route(chain)}
    assert by_id["A-B"].is_blocked is False
    assert by_id["B-C"].is_blocked is True
    assert by_id["B-C"].style.dash == "5,5"
    assert by_id["B-C"].style.badge == "lock"
    assert by_id["A-B"].style.badge == "check"


def test_blocked_reads_current_status(chain):
    done_b = [t if t.id != "B" else t.model_copy(update={"status": "Done"}) for t in chain]
    by_id = {c.id: c for c in _route(done_b)}
    assert by_id["B-C"].is_blocked is False


def test_dangling_dependency_has_no_connection(make_task):
    assert _route([make_task("A", ["ghost"])]) == []


def test_repeated_dependency_routed_once(make_task):
    tasks = [make_task("A"), make_task("B", ["A", "A"])]
    assert [c.id for c in _route(tasks)] == ["A-B"]


def test_self_reference_loops_back(make_task):
    conns = _route([make_task("A", ["A"])])
    assert [c.id for c in conns] == ["A-A"]
    assert conns[0].start_x == conns[0].end_x + 300


def test_curve_between_rows(make_task):
    tasks = [make_task("a", title="a"), make_task("b", title="b"), make_task("c", ["b"])]
    conn = _route(tasks)[0]
    # b is the lower of two rows; c is alone in its column
    assert conn.start_y == 500 + 60
    assert conn.end_y == 420 + 60
    assert conn.curve.c1 == (conn.start_x + 50, conn.start_y)
    assert conn.curve.c2 == (conn.end_x - 50, conn.end_y)


def test_svg_keeps_fractions():
    curve = CurvePath(start=(0.5, 1), c1=(10, 1), c2=(20, 2.25), end=(30, 2.25))
    assert curve.to_svg() == "M 0.5 1 C 10 1, 20 2.25, 30 2.25"
    assert curve.midpoint == (15.25, 1.625)


def test_blocked_matches_evaluator(make_task):
    tasks = [
        make_task("A", status="Done"),
        make_task("B", status="In Progress"),
        make_task("C", ["A", "B", "ghost"]),
        make_task("D", ["C"], status="Done"),
        make_task("E", ["D", "A"], status="archived"),
        make_task("F", ["E"]),
    ]
    conns = _route(tasks)
    assert len(conns) == 6
    by_id = {t.id: t for t in tasks}
    for conn in conns:
        single = by_id[conn.target_id].model_copy(update={"dependencies": [conn.source_id]})
        assert is_task_blocked(single, tasks) == conn.is_blocked
