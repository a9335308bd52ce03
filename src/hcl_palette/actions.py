from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Union

ColourInput = Union[str, Mapping[str, float]]


@dataclass(frozen=True)
class SetValue:
    hue: int
    shade: int
    property: str  # "h" | "c" | "l"
    value: float


@dataclass(frozen=True)
class SetColour:
    hue: int
    shade: int
    color: ColourInput


@dataclass(frozen=True)
class AddLayer:
    type: str  # "hue" | "shade"


@dataclass(frozen=True)
class RemoveLayer:
    type: str
    index: int


@dataclass(frozen=True)
class RearrangeLayer:
    type: str
    from_: int
    to: int


@dataclass(frozen=True)
class SelectColour:
    hue: int = -1
    shade: int = -1


Action = Union[SetValue, SetColour, AddLayer, RemoveLayer, RearrangeLayer, SelectColour]


# ---- JSON payloads ----------------------------------------------------------


def _int(payload: Mapping[str, Any], key: str) -> int:
    v = payload.get(key)
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"'{key}' must be an integer")
    return v


def _number(payload: Mapping[str, Any], key: str) -> float:
    v = payload.get(key)
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError(f"'{key}' must be a number")
    try:
        return float(v)
    except OverflowError as e:
        raise ValueError(f"'{key}' is too large") from e


def _str(payload: Mapping[str, Any], key: str) -> str:
    v = payload.get(key)
    if not isinstance(v, str):
        raise ValueError(f"'{key}' must be a string")
    return v


def _colour(payload: Mapping[str, Any], key: str) -> ColourInput:
    v = payload.get(key)
    if isinstance(v, str):
        return v
    if isinstance(v, Mapping):
        return {ch: _number(v, ch) for ch in ("h", "c", "l")}
    raise ValueError(f"'{key}' must be a colour string or an object with h, c, l")


_PARSERS: Dict[str, Callable[[Mapping[str, Any]], Action]] = {
    "SetValue": lambda p: SetValue(
        _int(p, "hue"), _int(p, "shade"), _str(p, "property"), _number(p, "value")
    ),
    "SetColour": lambda p: SetColour(_int(p, "hue"), _int(p, "shade"), _colour(p, "color")),
    "AddLayer": lambda p: AddLayer(_str(p, "type")),
    "RemoveLayer": lambda p: RemoveLayer(_str(p, "type"), _int(p, "index")),
    "RearrangeLayer": lambda p: RearrangeLayer(_str(p, "type"), _int(p, "from"), _int(p, "to")),
    "SelectColour": lambda p: SelectColour(_int(p, "hue"), _int(p, "shade")),
}


def action_names() -> tuple[str, ...]:
    return tuple(_PARSERS)


def parse_action(payload: Any) -> Action:
    """Turn a JSON action object into an action value.

    The object names its kind under ``"action"`` and carries the payload
    fields beside it, e.g. ``{"action": "RemoveLayer", "type": "hue",
    "index": 2}``.  Layer kinds, indices and channel names are not checked
    here; the reducer ignores values it cannot apply.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("action must be a JSON object")
    name = payload.get("action")
    parser = _PARSERS.get(name) if isinstance(name, str) else None
    if parser is None:
        raise ValueError(f"unknown action {name!r}")
    return parser(payload)


__all__ = [
    "Action",
    "AddLayer",
    "RearrangeLayer",
    "RemoveLayer",
    "SelectColour",
    "SetColour",
    "SetValue",
    "action_names",
    "parse_action",
]
