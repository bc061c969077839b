import pytest

from layout.styles import NODE_STYLES, NodeTone, connector_style, node_style, node_tone


@pytest.mark.parametrize(
    "status,blocked,priority,tone",
    [
        ("Done", True, "Low", NodeTone.BLOCKED),
        ("Done", False, "High", NodeTone.DONE),
        ("In Progress", False, "High", NodeTone.ACTIVE),
        ("To Do", False, "High", NodeTone.TODO_HIGH),
        ("To Do", False, "Medium", NodeTone.TODO),
        ("Review", False, "Low", NodeTone.TODO),
    ],
)
def test_node_tone(status, blocked, priority, tone):
    assert node_tone(status, blocked, priority) == tone
    assert node_style(status, blocked, priority) is NODE_STYLES[tone]


def test_every_tone_has_a_style():
    assert set(NODE_STYLES) == set(NodeTone)


def test_connector_styles():
    idle_blocked = connector_style(True)
    assert (idle_blocked.stroke, idle_blocked.stroke_width, idle_blocked.dash) == ("#94a3b8", 2, "5,5")
    assert not idle_blocked.pulse

    lit_clear = connector_style(False, highlighted=True)
    assert (lit_clear.stroke, lit_clear.stroke_width, lit_clear.dash) == ("#10b981", 3, None)
    assert lit_clear.pulse
    assert lit_clear.badge == "check"

    assert connector_style(True, highlighted=True).stroke == "#f87171"
    assert connector_style(False).stroke == "#cbd5e1"
