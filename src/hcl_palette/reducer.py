# reducer.py – the single State -> State entry point

from __future__ import annotations

import logging
import math
from dataclasses import replace

from . import layers
from .actions import (
    Action,
    AddLayer,
    RearrangeLayer,
    RemoveLayer,
    SelectColour,
    SetColour,
    SetValue,
)
from .colour import CHANNELS, Colour, from_colour_input, recompute
from .grid import in_bounds, in_range, replace_at
from .ids import IdAllocator
from .state import NO_SELECTION, Selection, State

log = logging.getLogger(__name__)


def _addressable(state: State, hue: int, shade: int) -> bool:
    if in_bounds(state.colours, (hue, shade)):
        return True
    log.warning("cell (%r, %r) outside %dx%d grid; ignored", hue, shade, *state.shape)
    return False


def handle_set_value(state: State, action: SetValue) -> State:
    if action.property not in CHANNELS:
        log.warning("unknown colour channel %r; ignored", action.property)
        return state
    if not _addressable(state, action.hue, action.shade):
        return state
    if isinstance(action.value, bool) or not isinstance(action.value, (int, float)):
        log.warning("value %r for %s is not a number; ignored", action.value, action.property)
        return state
    try:
        value = float(action.value)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        log.warning("value %r for %s is not finite; ignored", action.value, action.property)
        return state

    def update(cell: Colour) -> Colour:
        return recompute(cell, **{action.property: value})

    return replace(state, colours=replace_at(state.colours, (action.hue, action.shade), update))


def handle_set_colour(state: State, action: SetColour) -> State:
    if not _addressable(state, action.hue, action.shade):
        return state

    def update(cell: Colour) -> Colour:
        return from_colour_input(action.color, id=cell.id, fallback=cell)

    return replace(state, colours=replace_at(state.colours, (action.hue, action.shade), update))


def handle_select_colour(state: State, action: SelectColour) -> State:
    hue, shade = action.hue, action.shade
    if hue == NO_SELECTION and shade == NO_SELECTION:
        return replace(state, selected=Selection())
    n_hues, n_shades = state.shape
    if not (in_range(hue, n_hues) and in_range(shade, n_shades)):
        log.warning("selection (%r, %r) outside %dx%d grid; ignored", hue, shade, n_hues, n_shades)
        return state
    return replace(state, selected=Selection(hue, shade))


def reduce(state: State, action: Action, ids: IdAllocator) -> State:
    """Apply one action.  Never raises; anything it cannot apply returns ``state``."""
    log.debug("dispatch %r", action)
    if isinstance(action, SetValue):
        return handle_set_value(state, action)
    elif isinstance(action, SetColour):
        return handle_set_colour(state, action)
    elif isinstance(action, AddLayer):
        return layers.add_layer(state, action.type, ids)
    elif isinstance(action, RemoveLayer):
        return layers.remove_layer(state, action.type, action.index)
    elif isinstance(action, RearrangeLayer):
        return layers.rearrange_layer(state, action.type, action.from_, action.to)
    elif isinstance(action, SelectColour):
        return handle_select_colour(state, action)
    else:
        log.debug("unknown action %r; state unchanged", action)
        return state


__all__ = ["reduce"]
