from __future__ import annotations

import logging
import threading

from .actions import Action
from .colour import Colour
from .ids import IdAllocator
from .reducer import reduce
from .state import State, check_state, default_state, selected_colour

log = logging.getLogger(__name__)


class PaletteStore:
    """Holds the current palette snapshot and applies actions one at a time.

    Readers get immutable snapshots; ``dispatch`` swaps in a complete new
    state, so a concurrent reader sees either the old or the new palette.
    """

    def __init__(self, state: State | None = None, ids: IdAllocator | None = None) -> None:
        self.ids = ids if ids is not None else IdAllocator()
        self._state = state if state is not None else default_state(self.ids)
        check_state(self._state)
        self._lock = threading.Lock()

    @property
    def state(self) -> State:
        return self._state

    def dispatch(self, action: Action) -> State:
        with self._lock:
            new = reduce(self._state, action, self.ids)
            if new is not self._state:
                log.info("%s applied; grid now %dx%d", type(action).__name__, *new.shape)
            self._state = new
            return new

    def selected_colour(self) -> Colour | None:
        return selected_colour(self._state)


__all__ = ["PaletteStore"]
