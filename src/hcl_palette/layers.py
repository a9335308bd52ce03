# layers.py – hue/shade layer add, remove and swap, grid kept in lock-step

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Literal

import numpy as np

from .circstats import circular_mean, widest_gap
from .colour import from_requested
from .grid import (
    append_column,
    append_item,
    drop_column,
    drop_item,
    in_range,
    swap_columns,
    swap_items,
)
from .ids import IdAllocator
from .state import Hue, Selection, Shade, State

log = logging.getLogger(__name__)

LayerKind = Literal["hue", "shade"]
HUE: LayerKind = "hue"
SHADE: LayerKind = "shade"
LAYER_KINDS = (HUE, SHADE)

DEFAULT_CHROMA = 45.0  # chroma for cells with no column to average
DEFAULT_LIGHTNESS = 45.0  # avg_value of a freshly added shade


# ---- selection bookkeeping --------------------------------------------------


def _selection_after_remove(sel: Selection, kind: LayerKind, index: int) -> Selection:
    cur = getattr(sel, kind)
    if sel.empty or cur < index:
        return sel
    if cur == index:
        return Selection()
    return replace(sel, **{kind: cur - 1})


def _selection_after_swap(sel: Selection, kind: LayerKind, a: int, b: int) -> Selection:
    cur = getattr(sel, kind)
    if sel.empty or cur not in (a, b):
        return sel
    return replace(sel, **{kind: b if cur == a else a})


# ---- add --------------------------------------------------------------------


def hue_angles(state: State) -> List[float]:
    """Representative angle per hue row: circular mean of the row's hues."""
    return [
        circular_mean(cell.h for cell in row) if row else hue.avg_hue
        for hue, row in zip(state.hues, state.colours)
    ]


def column_chroma(state: State) -> List[float]:
    """Mean chroma of each shade column across all hue rows."""
    n_hues, n_shades = state.shape
    if n_hues == 0:
        return [DEFAULT_CHROMA] * n_shades
    chroma = np.array(
        [[cell.c for cell in row] for row in state.colours], dtype=np.float64
    ).reshape(n_hues, n_shades)
    return chroma.mean(axis=0).tolist()


def add_hue_layer(state: State, ids: IdAllocator) -> State:
    angle, half_gap = widest_gap(hue_angles(state))
    log.debug("new hue layer at %.2f deg (half gap %.2f)", angle, half_gap)

    hue = Hue(id=ids.next("hue-"), name=f"Hue {len(state.hues) + 1}", avg_hue=angle)
    row = tuple(
        from_requested(angle, c, shade.avg_value, id=ids.next("col-"))
        for shade, c in zip(state.shades, column_chroma(state))
    )
    return replace(
        state,
        hues=append_item(state.hues, hue),
        colours=append_item(state.colours, row),
    )


def add_shade_layer(state: State, ids: IdAllocator) -> State:
    shade = Shade(
        id=ids.next("shade-"),
        name=f"Shade {len(state.shades) + 1}",
        avg_value=DEFAULT_LIGHTNESS,
    )
    cells = [
        from_requested(hue.avg_hue, DEFAULT_CHROMA, DEFAULT_LIGHTNESS, id=ids.next("col-"))
        for hue in state.hues
    ]
    return replace(
        state,
        shades=append_item(state.shades, shade),
        colours=append_column(state.colours, cells),
    )


def add_layer(state: State, kind: str, ids: IdAllocator) -> State:
    if kind == HUE:
        return add_hue_layer(state, ids)
    if kind == SHADE:
        return add_shade_layer(state, ids)
    log.warning("add: unknown layer kind %r", kind)
    return state


# ---- remove -----------------------------------------------------------------


def remove_layer(state: State, kind: str, index: int) -> State:
    """Drop a hue row or shade column.  Out-of-range indices leave ``state`` as is."""
    if kind not in LAYER_KINDS:
        log.warning("remove: unknown layer kind %r", kind)
        return state
    layers = state.hues if kind == HUE else state.shades
    if not in_range(index, len(layers)):
        log.warning("remove: %s index %r out of range (%d layers)", kind, index, len(layers))
        return state

    selected = _selection_after_remove(state.selected, kind, index)
    if kind == HUE:
        return replace(
            state,
            hues=drop_item(state.hues, index),
            colours=drop_item(state.colours, index),
            selected=selected,
        )
    return replace(
        state,
        shades=drop_item(state.shades, index),
        colours=drop_column(state.colours, index),
        selected=selected,
    )


# ---- rearrange --------------------------------------------------------------


def rearrange_layer(state: State, kind: str, from_: int, to: int) -> State:
    """Swap two hue rows or two shade columns (a pairwise swap, not a move)."""
    if kind not in LAYER_KINDS:
        log.warning("rearrange: unknown layer kind %r", kind)
        return state
    layers = state.hues if kind == HUE else state.shades
    if not (in_range(from_, len(layers)) and in_range(to, len(layers))):
        log.warning("rearrange: %s swap %r<->%r out of range (%d layers)", kind, from_, to, len(layers))
        return state
    if from_ == to:
        return state

    selected = _selection_after_swap(state.selected, kind, from_, to)
    if kind == HUE:
        return replace(
            state,
            hues=swap_items(state.hues, from_, to),
            colours=swap_items(state.colours, from_, to),
            selected=selected,
        )
    return replace(
        state,
        shades=swap_items(state.shades, from_, to),
        colours=swap_columns(state.colours, from_, to),
        selected=selected,
    )


__all__ = [
    "DEFAULT_CHROMA",
    "DEFAULT_LIGHTNESS",
    "HUE",
    "LAYER_KINDS",
    "SHADE",
    "add_hue_layer",
    "add_layer",
    "add_shade_layer",
    "column_chroma",
    "hue_angles",
    "rearrange_layer",
    "remove_layer",
]
