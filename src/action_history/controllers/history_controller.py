"""
Class representing the controller to the action history.

The purpose of this controller is to give the frontend one entry point for
recording and replaying history, with service errors logged and made UI
friendly on the way out.
"""

from typing import Any, Iterable, Optional

from action_history import settings_store
from action_history.services.history import History
from .error_handler_middleware import error_handler

_USE_DEFAULT = object()


class HistoryController:
    def __init__(self, history: History):
        self.history = history

    @error_handler
    def record(
        self,
        forward_name: str,
        forward_params: Optional[Iterable[Any]],
        backward_name: str,
        backward_params: Optional[Iterable[Any]],
        autogroup_delay: Any = _USE_DEFAULT,
    ) -> None:
        """Record an action, auto-grouping with the configured delay unless one is given."""
        if autogroup_delay is _USE_DEFAULT:
            autogroup_delay = settings_store.get_default_autogroup_delay()
        self.history.push_action(
            forward_name,
            forward_params,
            backward_name,
            backward_params,
            autogroup_delay,
        )

    @error_handler
    def group(self) -> None:
        self.history.group_actions()

    @error_handler
    def undo(self) -> bool:
        return self.history.undo()

    @error_handler
    def redo(self) -> bool:
        return self.history.redo()

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    @error_handler
    def clear(self) -> None:
        self.history.clear()
