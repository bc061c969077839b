from layout import LayoutConfig, assign_levels, group_by_level, plan_geometry


def test_empty_canvas_keeps_one_box_of_room():
    geo = plan_geometry([], {})
    assert geo["nodes"] == {}
    assert geo["order"] == []
    assert geo["width"] == 300 + 80 * 2
    assert geo["height"] == 120 + 80 * 2


def test_chain_positions(chain):
    geo = plan_geometry(chain, assign_levels(chain))
    nodes = geo["nodes"]
    assert [nodes[i]["x"] for i in "ABC"] == [80, 480, 880]
    # one row per column: centered in the 800px minimum canvas
    assert {nodes[i]["y"] for i in "ABC"} == {420}
    assert geo["order"] == ["A", "B", "C"]
    assert geo["width"] == 880 + 300 + 160
    assert geo["height"] == 420 + 120 + 160


def test_layer_sorted_by_title(make_task):
    tasks = [make_task("1", title="zulu"), make_task("2", title="Alpha"), make_task("3", title="mike")]
    geo = plan_geometry(tasks, assign_levels(tasks))
    assert geo["order"] == ["2", "3", "1"]
    ys = [geo["nodes"][i]["y"] for i in geo["order"]]
    assert ys == sorted(ys)
    assert ys[1] - ys[0] == 120 + 40


def test_title_ties_broken_by_id(make_task):
    tasks = [make_task("b", title="Same"), make_task("a", title="Same")]
    geo = plan_geometry(tasks, assign_levels(tasks))
    assert geo["order"] == ["a", "b"]


def test_short_column_centered_against_tall_one(make_task):
    tall = [make_task(f"r{i}", title=f"root {i}") for i in range(6)]
    child = make_task("c", [t.id for t in tall])
    tasks = tall + [child]
    geo = plan_geometry(tasks, assign_levels(tasks))
    # 6 rows * 160 = 960 > 800 minimum
    first = geo["nodes"]["r0"]["y"]
    last = geo["nodes"]["r5"]["y"]
    assert first == (960 - 920) / 2 + 80
    assert geo["nodes"]["c"]["y"] + 60 == (first + last + 120) / 2


def test_custom_config():
    from tasks import Task

    tasks = [Task(id="a"), Task(id="b", dependencies=["a"])]
    config = LayoutConfig(nodeWidth=100, nodeHeight=50, xGap=20, yGap=10, padding=0, minCanvasHeight=0)
    geo = plan_geometry(tasks, assign_levels(tasks), config)
    # one 60px row (box + gap) holds a 50px column, so it sits 5px down
    assert geo["nodes"]["a"] == {"x": 0, "y": 5, "w": 100, "h": 50, "level": 0}
    assert geo["nodes"]["b"]["x"] == 120
    assert geo["width"] == 220
    assert geo["height"] == 55


def test_group_by_level_orders_buckets(make_task):
    tasks = [make_task("b", ["a"]), make_task("a")]
    buckets = group_by_level(tasks, assign_levels(tasks))
    assert list(buckets) == [0, 1]
    assert [t.id for t in buckets[1]] == ["b"]


def test_deterministic(chain):
    levels = assign_levels(chain)
    assert plan_geometry(chain, levels) == plan_geometry(list(chain), dict(levels))
