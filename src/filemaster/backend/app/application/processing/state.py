from __future__ import annotations

import logging
from typing import Callable, Optional
from uuid import uuid4

from filemaster.backend.app.domain.processing import DispatchState

logger = logging.getLogger(__name__)

StateListener = Callable[[DispatchState], None]

_TRANSITIONS: dict[DispatchState, frozenset[DispatchState]] = {
    DispatchState.RECEIVED: frozenset({DispatchState.VALIDATED, DispatchState.CLEANING_UP}),
    DispatchState.VALIDATED: frozenset({DispatchState.EXECUTING, DispatchState.CLEANING_UP}),
    DispatchState.EXECUTING: frozenset({DispatchState.RECORDING, DispatchState.CLEANING_UP}),
    DispatchState.RECORDING: frozenset({DispatchState.CLEANING_UP}),
    DispatchState.CLEANING_UP: frozenset({DispatchState.COMPLETED, DispatchState.ABORTED}),
    DispatchState.COMPLETED: frozenset(),
    DispatchState.ABORTED: frozenset(),
}


class DispatchRun:
    """
    State of a single dispatch. Lives for one request only.

    Every path goes through CLEANING_UP; the terminal state is ABORTED when
    ``fail()`` was called before ``finish()``, COMPLETED otherwise.
    """

    def __init__(self, listener: Optional[StateListener] = None) -> None:
        self.id = uuid4().hex[:12]
        self._listener = listener
        self._failed = False
        self._trail: list[DispatchState] = []
        self._enter(DispatchState.RECEIVED)

    @property
    def state(self) -> DispatchState:
        return self._trail[-1]

    @property
    def trail(self) -> tuple[DispatchState, ...]:
        return tuple(self._trail)

    @property
    def failed(self) -> bool:
        return self._failed

    def advance(self, target: DispatchState) -> None:
        if target not in _TRANSITIONS[self.state] or target in self._trail:
            raise RuntimeError(f"Illegal dispatch transition {self.state} -> {target}")
        self._enter(target)

    def fail(self) -> None:
        self._failed = True

    def finish(self) -> DispatchState:
        if self.state is not DispatchState.CLEANING_UP:
            self.advance(DispatchState.CLEANING_UP)
        self.advance(DispatchState.ABORTED if self._failed else DispatchState.COMPLETED)
        return self.state

    def _enter(self, state: DispatchState) -> None:
        self._trail.append(state)
        logger.debug("dispatch %s -> %s", self.id, state)
        if self._listener is not None:
            self._listener(state)
