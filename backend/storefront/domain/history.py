# storefront/domain/history.py
from __future__ import annotations

import copy
import json
from typing import Any, Callable, Dict, List, NamedTuple, Tuple, Union

MAX_HISTORY_LENGTH = 50

Snapshot = List[Dict[str, Any]]
SnapshotOrUpdater = Union[Snapshot, Callable[[Snapshot], Snapshot]]


class HistoryState(NamedTuple):
    """
    Linear undo/redo state for one editing session.

    past:    oldest -> newest
    present: the block list being edited
    future:  next redo first
    """
    past: Tuple[Snapshot, ...]
    present: Snapshot
    future: Tuple[Snapshot, ...]


def _freeze(snapshot: Snapshot) -> Snapshot:
    return copy.deepcopy(list(snapshot))


def _same(a: Snapshot, b: Snapshot) -> bool:
    # JSON form keeps true and 1 apart
    return json.dumps(a, sort_keys=True, default=str) == json.dumps(b, sort_keys=True, default=str)


def initial_state(snapshot: Snapshot | None = None) -> HistoryState:
    return HistoryState(past=(), present=_freeze(snapshot or []), future=())


def push_snapshot(
    state: HistoryState,
    snapshot: Snapshot,
    *,
    limit: int = MAX_HISTORY_LENGTH,
) -> HistoryState:
    """
    Record a new edit.

    - Deep-equal snapshots are a no-op (same state object returned)
    - Past is trimmed from the front to `limit`
    - Future is always cleared
    """
    if _same(snapshot, state.present):
        return state

    past = state.past + (state.present,)
    past = past[max(len(past) - limit, 0):]

    return HistoryState(past=past, present=_freeze(snapshot), future=())


def step_back(state: HistoryState) -> HistoryState:
    if not state.past:
        return state

    return HistoryState(
        past=state.past[:-1],
        present=state.past[-1],
        future=(state.present,) + state.future,
    )


def step_forward(state: HistoryState) -> HistoryState:
    if not state.future:
        return state

    return HistoryState(
        past=state.past + (state.present,),
        present=state.future[0],
        future=state.future[1:],
    )


class BuilderHistory:
    """
    Undo/redo stack for a page builder session.

    Each instance owns its state and skip flag, so independent editors
    never share history. Every mutation replaces `state` with a new
    HistoryState; nothing is updated in place.
    """

    def __init__(self, initial_blocks: Snapshot | None = None, limit: int = MAX_HISTORY_LENGTH):
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self.state = initial_state(initial_blocks)
        self._skip_next = False

    @property
    def blocks(self) -> Snapshot:
        return copy.deepcopy(self.state.present)

    @property
    def can_undo(self) -> bool:
        return len(self.state.past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self.state.future) > 0

    def set_blocks(self, blocks_or_updater: SnapshotOrUpdater) -> None:
        if callable(blocks_or_updater):
            new_present = blocks_or_updater(copy.deepcopy(self.state.present))
        else:
            new_present = blocks_or_updater

        # First write after a programmatic reset does not enter history
        if self._skip_next:
            self._skip_next = False
            self.state = self.state._replace(present=_freeze(new_present))
            return

        self.state = push_snapshot(self.state, new_present, limit=self.limit)

    def undo(self) -> None:
        self.state = step_back(self.state)

    def redo(self) -> None:
        self.state = step_forward(self.state)

    def reset_history(self, blocks: Snapshot) -> None:
        self._skip_next = True
        self.state = initial_state(blocks)
