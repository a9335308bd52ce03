from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .colour import Colour, from_requested
from .ids import IdAllocator

Grid = Tuple[Tuple[Colour, ...], ...]

NO_SELECTION = -1

# seed palette: three hue rows by three shade columns
SEED_HUES = (30.0, 150.0, 270.0)
SEED_SHADES = (25.0, 50.0, 75.0)
SEED_CHROMA = 40.0


@dataclass(frozen=True)
class Hue:
    id: str
    name: str
    avg_hue: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "avgHue": self.avg_hue}


@dataclass(frozen=True)
class Shade:
    id: str
    name: str
    avg_value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "avgValue": self.avg_value}


@dataclass(frozen=True)
class Selection:
    hue: int = NO_SELECTION
    shade: int = NO_SELECTION

    @property
    def empty(self) -> bool:
        return self.hue == NO_SELECTION and self.shade == NO_SELECTION

    def to_dict(self) -> Dict[str, int]:
        return {"hue": self.hue, "shade": self.shade}


@dataclass(frozen=True)
class State:
    hues: Tuple[Hue, ...] = ()
    shades: Tuple[Shade, ...] = ()
    colours: Grid = ()
    selected: Selection = field(default_factory=Selection)

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.hues), len(self.shades)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hues": [h.to_dict() for h in self.hues],
            "shades": [s.to_dict() for s in self.shades],
            "colours": [[c.to_dict() for c in row] for row in self.colours],
            "selected": self.selected.to_dict(),
        }


def default_state(ids: IdAllocator) -> State:
    hues = tuple(
        Hue(id=ids.next("hue-"), name=f"Hue {i + 1}", avg_hue=a)
        for i, a in enumerate(SEED_HUES)
    )
    shades = tuple(
        Shade(id=ids.next("shade-"), name=f"Shade {i + 1}", avg_value=v)
        for i, v in enumerate(SEED_SHADES)
    )
    colours = tuple(
        tuple(
            from_requested(hue.avg_hue, SEED_CHROMA, shade.avg_value, id=ids.next("col-"))
            for shade in shades
        )
        for hue in hues
    )
    return State(hues=hues, shades=shades, colours=colours)


def check_state(state: State) -> None:
    """Raise ``ValueError`` on the first broken structural invariant."""
    n_hues, n_shades = state.shape
    if len(state.colours) != n_hues:
        raise ValueError(f"{len(state.colours)} colour rows for {n_hues} hues")
    for i, row in enumerate(state.colours):
        if len(row) != n_shades:
            raise ValueError(f"row {i} has {len(row)} cells for {n_shades} shades")

    seen = set()
    for item in (*state.hues, *state.shades, *(c for row in state.colours for c in row)):
        if item.id in seen:
            raise ValueError(f"duplicate id {item.id!r}")
        seen.add(item.id)

    sel = state.selected
    if not sel.empty and not (0 <= sel.hue < n_hues and 0 <= sel.shade < n_shades):
        raise ValueError(f"selection ({sel.hue}, {sel.shade}) outside {n_hues}x{n_shades} grid")


def selected_colour(state: State) -> Colour | None:
    sel = state.selected
    if sel.empty:
        return None
    return state.colours[sel.hue][sel.shade]


__all__ = [
    "Hue",
    "NO_SELECTION",
    "Selection",
    "Shade",
    "State",
    "check_state",
    "default_state",
    "selected_colour",
]
