import pytest

from hcl_palette.actions import (
    AddLayer,
    RearrangeLayer,
    RemoveLayer,
    SelectColour,
    SetColour,
    SetValue,
    action_names,
    parse_action,
)
from hcl_palette.ids import IdAllocator
from hcl_palette.store import PaletteStore


def test_parse_each_action():
    assert parse_action({"action": "SetValue", "hue": 1, "shade": 0, "property": "l", "value": 40}) == SetValue(
        1, 0, "l", 40.0
    )
    assert parse_action({"action": "SetColour", "hue": 0, "shade": 2, "color": "#abc"}) == SetColour(0, 2, "#abc")
    assert parse_action(
        {"action": "SetColour", "hue": 0, "shade": 2, "color": {"h": 1, "c": 2, "l": 3}}
    ) == SetColour(0, 2, {"h": 1.0, "c": 2.0, "l": 3.0})
    assert parse_action({"action": "AddLayer", "type": "hue"}) == AddLayer("hue")
    assert parse_action({"action": "RemoveLayer", "type": "shade", "index": 1}) == RemoveLayer("shade", 1)
    assert parse_action({"action": "RearrangeLayer", "type": "hue", "from": 0, "to": 2}) == RearrangeLayer(
        "hue", 0, 2
    )
    assert parse_action({"action": "SelectColour", "hue": -1, "shade": -1}) == SelectColour()
    assert set(action_names()) == {
        "SetValue",
        "SetColour",
        "AddLayer",
        "RemoveLayer",
        "RearrangeLayer",
        "SelectColour",
    }


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {},
        {"action": "Explode"},
        {"action": "AddLayer"},
        {"action": "RemoveLayer", "type": "hue", "index": "1"},
        {"action": "RemoveLayer", "type": "hue", "index": True},
        {"action": "SetValue", "hue": 0, "shade": 0, "property": "l"},
        {"action": "SetColour", "hue": 0, "shade": 0, "color": 12},
        {"action": "SetColour", "hue": 0, "shade": 0, "color": {"h": 1, "c": 2}},
        {"action": "RearrangeLayer", "type": "hue", "from_": 0, "to": 1},
        {"action": "SetValue", "hue": 0, "shade": 0, "property": "c", "value": 10**400},
    ],
)
def test_parse_rejects(payload):
    with pytest.raises(ValueError):
        parse_action(payload)


def test_store_dispatch_in_order():
    store = PaletteStore(ids=IdAllocator())
    first = store.state
    store.dispatch(AddLayer("hue"))
    store.dispatch(SelectColour(3, 0))
    assert store.state.shape == (4, 3)
    assert store.selected_colour() is store.state.colours[3][0]
    # earlier snapshot is untouched
    assert first.shape == (3, 3) and first.selected.empty


def test_store_rejects_broken_state():
    from hcl_palette.state import Hue, State

    with pytest.raises(ValueError):
        PaletteStore(state=State(hues=(Hue("hue-1", "H", 0.0),)))
