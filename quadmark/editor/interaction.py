"""
Interaction state machine for the QuadMark editor.

All interaction state lives in one immutable InteractionState record. Pointer
events are folded into it by the pure reduce() function, which also reports
the history side effect (if any) the event calls for. QuadEditor owns the
current state and the HistoryStack, applies those effects, and notifies
listeners after every change; widgets only dispatch events to it.

Modes:
- IDLE: no quadrilateral
- DRAWING: initial rectangle gesture in progress
- DRAGGING: one existing corner is being moved
- SETTLED: a quadrilateral exists and no gesture is active
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from quadmark.editor.geometry import (
    CANCEL_DISTANCE,
    HANDLE_RADIUS,
    Corner,
    Point,
    distance,
    find_corner_near,
)
from quadmark.editor.history import HistoryStack
from quadmark.editor.quadrilateral import Quadrilateral
from quadmark.services.logging_service import get_logger


class Mode(Enum):
    """Interaction modes."""
    IDLE = auto()
    DRAWING = auto()
    DRAGGING = auto()
    SETTLED = auto()


class PointerAction(Enum):
    """Kinds of pointer events."""
    DOWN = auto()
    MOVE = auto()
    UP = auto()


class Effect(Enum):
    """History side effect requested by a transition."""
    NONE = auto()
    COMMIT = auto()
    CLEAR_REDO = auto()


@dataclass(frozen=True)
class PointerEvent:
    action: PointerAction
    point: Point


@dataclass(frozen=True)
class InteractionState:
    """
    The live shape plus transient gesture state.

    Only `quad` outlives a gesture; the other fields are reset on pointer-up
    and by every command.
    """
    quad: Optional[Quadrilateral] = None
    is_drawing: bool = False
    dragging_corner: Optional[Corner] = None
    gesture_start: Optional[Point] = None

    @property
    def mode(self) -> Mode:
        if self.is_drawing:
            return Mode.DRAWING
        if self.dragging_corner is not None:
            return Mode.DRAGGING
        if self.quad is not None:
            return Mode.SETTLED
        return Mode.IDLE


Transition = Tuple[InteractionState, Effect]


def reduce(state: InteractionState, event: PointerEvent) -> Transition:
    """
    Fold one pointer event into the interaction state.

    Args:
        state: The current state.
        event: The pointer event, in canvas coordinates.

    Returns:
        The next state and the history effect the caller must apply.
    """
    mode = state.mode
    point = event.point

    if event.action is PointerAction.DOWN:
        if mode is Mode.IDLE:
            return (
                InteractionState(
                    quad=Quadrilateral.degenerate(point),
                    is_drawing=True,
                    gesture_start=point,
                ),
                Effect.CLEAR_REDO,
            )
        if mode is Mode.SETTLED:
            corner = find_corner_near(state.quad, point, HANDLE_RADIUS)
            if corner is not None:
                return replace(state, dragging_corner=corner), Effect.NONE
        # Only one shape at a time; a miss is ignored
        return state, Effect.NONE

    if event.action is PointerAction.MOVE:
        if mode is Mode.DRAWING:
            quad = Quadrilateral.from_anchor(state.gesture_start, point)
            return replace(state, quad=quad), Effect.NONE
        if mode is Mode.DRAGGING:
            quad = state.quad.with_corner_moved(state.dragging_corner, point)
            return replace(state, quad=quad), Effect.NONE
        return state, Effect.NONE

    # Pointer up: the release point counts as the final move
    if mode is Mode.DRAWING:
        if distance(state.gesture_start, point) < CANCEL_DISTANCE:
            return InteractionState(), Effect.NONE
        quad = Quadrilateral.from_anchor(state.gesture_start, point)
        return InteractionState(quad=quad), Effect.COMMIT
    if mode is Mode.DRAGGING:
        # Drags commit no matter how short they are
        quad = state.quad.with_corner_moved(state.dragging_corner, point)
        return InteractionState(quad=quad), Effect.COMMIT
    return state, Effect.NONE


Listener = Callable[["QuadEditor"], None]


class QuadEditor:
    """
    Owner of the interaction state and the undo/redo history.

    Pointer handlers and commands are total: they never raise, and invalid
    situations (nothing to undo, a click that misses every corner) are
    silent no-ops.
    """

    def __init__(self, history: Optional[HistoryStack] = None) -> None:
        self._logger = get_logger(__name__)
        self._state = InteractionState()
        self._history = history if history is not None else HistoryStack()
        self._listeners: List[Listener] = []

    # ─── Inspection ───────────────────────────────────────────────────────

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def quad(self) -> Optional[Quadrilateral]:
        return self._state.quad

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def history(self) -> HistoryStack:
        return self._history

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    # ─── Listeners ────────────────────────────────────────────────────────

    def add_listener(self, listener: Listener) -> None:
        """Register a callback invoked with the editor after every change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ─── Pointer Events ───────────────────────────────────────────────────

    def pointer_down(self, point: Point) -> None:
        self._dispatch(PointerEvent(PointerAction.DOWN, point))

    def pointer_move(self, point: Point) -> None:
        self._dispatch(PointerEvent(PointerAction.MOVE, point))

    def pointer_up(self, point: Point) -> None:
        self._dispatch(PointerEvent(PointerAction.UP, point))

    def _dispatch(self, event: PointerEvent) -> None:
        previous = self._state
        self._state, effect = reduce(previous, event)

        if effect is Effect.COMMIT:
            self._history.commit(self._state.quad)
            self._logger.info(f"Committed quadrilateral: {self._state.quad}")
        elif effect is Effect.CLEAR_REDO:
            self._history.clear_redo()
        elif (
            event.action is PointerAction.UP
            and previous.mode is Mode.DRAWING
        ):
            self._logger.debug("Draw gesture below cancel distance; discarded")

        if self._state != previous or effect is not Effect.NONE:
            self._notify()

    # ─── Commands ─────────────────────────────────────────────────────────

    def undo(self) -> None:
        """Step back one commit; a no-op when the undo stack is empty."""
        if not self._history.can_undo:
            return
        self._state = InteractionState(quad=self._history.undo())
        self._logger.info("Undo")
        self._notify()

    def redo(self) -> None:
        """Re-apply the last undone commit; a no-op when nothing to redo."""
        if not self._history.can_redo:
            return
        self._state = InteractionState(quad=self._history.redo())
        self._logger.info("Redo")
        self._notify()

    def clear(self) -> None:
        """Remove the shape and forget all history."""
        self._history.clear()
        self._state = InteractionState()
        self._logger.info("Cleared quadrilateral and history")
        self._notify()
