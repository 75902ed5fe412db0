# action_history/settings_store.py
from __future__ import annotations

from typing import Any, Optional

from action_history.services.exceptions import (
    InvalidAutogroupDelayError,
    InvalidTriggerNameError,
)

UNDO_TRIGGER = "history.undo"
REDO_TRIGGER = "history.redo"

_undo_trigger: str = UNDO_TRIGGER
_redo_trigger: str = REDO_TRIGGER
# None leaves grouping to explicit group_actions calls.
_default_autogroup_delay: Optional[float] = None


def get_undo_trigger() -> str:
    return _undo_trigger


def set_undo_trigger(name: str) -> None:
    global _undo_trigger
    _undo_trigger = _clean_trigger(name, "Undo")


def get_redo_trigger() -> str:
    return _redo_trigger


def set_redo_trigger(name: str) -> None:
    global _redo_trigger
    _redo_trigger = _clean_trigger(name, "Redo")


def get_default_autogroup_delay() -> Optional[float]:
    """Return the auto-group delay in milliseconds applied to recorded actions."""
    return _default_autogroup_delay


def set_default_autogroup_delay(value: Optional[float]) -> None:
    """
    Update the default auto-group delay.

    ``None`` disables auto-grouping.
    """
    global _default_autogroup_delay
    if value is None:
        _default_autogroup_delay = None
        return
    validate_autogroup_delay(value)
    _default_autogroup_delay = value


def validate_autogroup_delay(delay: Any) -> None:
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        raise InvalidAutogroupDelayError(
            f"Auto-group delay must be a number of milliseconds, got {delay!r}."
        )
    if delay < 0:
        raise InvalidAutogroupDelayError("Auto-group delay must be >= 0.")


def reset_settings() -> None:
    global _undo_trigger, _redo_trigger, _default_autogroup_delay
    _undo_trigger = UNDO_TRIGGER
    _redo_trigger = REDO_TRIGGER
    _default_autogroup_delay = None


def _clean_trigger(name: str, label: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidTriggerNameError(
            f"{label} trigger name must be a non-empty string, got {name!r}."
        )
    return name.strip()
