"""Reversible action history.

Every user operation is recorded as a pair of named commands, one that
applies it and one that reverts it. Actions accumulate in a pending buffer
until they are grouped, either explicitly or by an auto-group timer, and a
group is undone and redone as a unit by replaying its commands through the
command map.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List, Optional

from action_history import settings_store
from action_history.settings_store import (
    REDO_TRIGGER,
    UNDO_TRIGGER,
    validate_autogroup_delay,
)
from .command_map import CommandRegistry
from .timers import QtTimerScheduler, Scheduler
from .types import ActionDescriptor, ActionGroup, HistoricAction

logger = logging.getLogger(__name__)


class History:
    """Records reversible actions and replays them on undo/redo.

    Args:
        command_map: Registry used to replay descriptors by name. The
            history registers its own ``undo`` and ``redo`` on it.
        scheduler: Timer primitive for auto-grouping. Defaults to a
            ``QtTimerScheduler``.
        undo_trigger: Command name bound to ``undo``. Defaults to the
            configured undo trigger.
        redo_trigger: Command name bound to ``redo``. Defaults to the
            configured redo trigger.
    """

    def __init__(
        self,
        command_map: CommandRegistry,
        scheduler: Optional[Scheduler] = None,
        undo_trigger: Optional[str] = None,
        redo_trigger: Optional[str] = None,
    ):
        undo_trigger = undo_trigger or settings_store.get_undo_trigger()
        redo_trigger = redo_trigger or settings_store.get_redo_trigger()
        self._command_map = command_map
        self._scheduler = scheduler if scheduler is not None else QtTimerScheduler()
        self._pending: ActionGroup = []
        self._groups: List[ActionGroup] = []
        self._undone: List[ActionGroup] = []
        self._autogroup_handle: Any = None
        self._replaying = False
        self._undo_trigger = undo_trigger
        self._redo_trigger = redo_trigger

        command_map.register(undo_trigger, self.undo)
        command_map.register(redo_trigger, self.redo)

    # ---------- state ----------
    @property
    def is_replaying(self) -> bool:
        return self._replaying

    @property
    def is_autogroup_armed(self) -> bool:
        return self._autogroup_handle is not None

    @property
    def pending_actions(self) -> List[HistoricAction]:
        return list(self._pending)

    @property
    def committed_groups(self) -> List[List[HistoricAction]]:
        return [list(group) for group in self._groups]

    @property
    def undone_groups(self) -> List[List[HistoricAction]]:
        return [list(group) for group in self._undone]

    @property
    def action_count(self) -> int:
        """Number of recorded actions across pending, committed and undone history."""
        return (
            len(self._pending)
            + sum(len(group) for group in self._groups)
            + sum(len(group) for group in self._undone)
        )

    def can_undo(self) -> bool:
        return bool(self._pending or self._groups)

    def can_redo(self) -> bool:
        return bool(self._undone)

    # ---------- recording ----------
    def push_action(
        self,
        forward_name: str,
        forward_params: Optional[Iterable[Any]],
        backward_name: str,
        backward_params: Optional[Iterable[Any]],
        autogroup_delay: Optional[float] = None,
    ) -> None:
        """Push a reversible action to the history.

        Args:
            forward_name: Command that applies the action.
            forward_params: Parameters for the forward command.
            backward_name: Command that reverts the action.
            backward_params: Parameters for the backward command.
            autogroup_delay: Milliseconds to wait before grouping pending
                actions automatically. Each push with a delay restarts the
                wait. If omitted, grouping is left to ``group_actions``.

        Raises:
            InvalidAutogroupDelayError: If ``autogroup_delay`` is negative.
        """
        if self._replaying:
            logger.debug("Ignoring '%s' recorded during replay", forward_name)
            return
        if autogroup_delay is not None:
            validate_autogroup_delay(autogroup_delay)

        self._pending.append(
            HistoricAction.create(forward_name, forward_params, backward_name, backward_params)
        )
        self._undone = []
        logger.debug("Recorded '%s' (%d pending)", forward_name, len(self._pending))

        if autogroup_delay is not None:
            self._disarm_autogroup()
            self._autogroup_handle = self._scheduler.schedule(
                self._on_autogroup_timeout, autogroup_delay
            )

    def group_actions(self) -> None:
        """Commit the pending actions as one undoable group."""
        self._disarm_autogroup()
        if self._replaying:
            return
        # Empty groups would make an undo that reverts nothing.
        if not self._pending:
            return

        self._groups.append(self._pending)
        self._pending = []
        self._undone = []
        logger.debug("Committed group of %d actions", len(self._groups[-1]))

    def clear(self) -> None:
        """Forget all recorded history."""
        self._disarm_autogroup()
        self._pending = []
        self._groups = []
        self._undone = []

    def close(self) -> None:
        """Release the auto-group timer and the undo/redo command bindings."""
        self._disarm_autogroup()
        unregister = getattr(self._command_map, "unregister", None)
        if unregister is not None:
            unregister(self._undo_trigger)
            unregister(self._redo_trigger)

    # ---------- undo/redo ----------
    def undo(self) -> bool:
        """Undo the pending actions, or else the most recent group."""
        if self._autogroup_handle is not None:
            self.group_actions()

        if self._pending:
            unit = self._pending
            self._pending = []
            replay_order = unit
        elif self._groups:
            unit = self._groups.pop()
            # Later actions may depend on earlier ones.
            replay_order = list(reversed(unit))
        else:
            logger.debug("Nothing to undo")
            return True

        error = self._replay([action.backward for action in replay_order])
        self._undone.append(unit)
        logger.debug("Undid %d actions", len(unit))
        if error is not None:
            raise error
        return True

    def redo(self) -> bool:
        """Redo the most recently undone group."""
        if not self._undone:
            logger.debug("Nothing to redo")
            return True

        unit = self._undone.pop()
        error = self._replay([action.forward for action in unit])
        self._groups.append(unit)
        logger.debug("Redid %d actions", len(unit))
        if error is not None:
            raise error
        return True

    @contextmanager
    def replaying(self) -> Iterator[None]:
        """Suppress recording and grouping for the duration of the block."""
        previous = self._replaying
        self._replaying = True
        try:
            yield
        finally:
            self._replaying = previous

    def _replay(self, descriptors: List[ActionDescriptor]) -> Optional[Exception]:
        """Invoke every descriptor and return the first failure, if any."""
        if self._replaying:
            logger.debug("Already replaying, skipping nested replay")
            return None

        first_error: Optional[Exception] = None
        with self.replaying():
            for descriptor in descriptors:
                try:
                    self._command_map.invoke(descriptor.name, descriptor.parameters)
                except Exception as e:
                    logger.warning(
                        "Replaying '%s' with %r failed",
                        descriptor.name,
                        descriptor.parameters,
                        exc_info=True,
                    )
                    if first_error is None:
                        first_error = e
        return first_error

    # ---------- auto-grouping ----------
    def _on_autogroup_timeout(self) -> None:
        self._autogroup_handle = None
        self.group_actions()

    def _disarm_autogroup(self) -> None:
        handle, self._autogroup_handle = self._autogroup_handle, None
        if handle is not None:
            self._scheduler.cancel(handle)
