"""Reversible action history with grouped undo/redo."""

from .services.command_map import CommandMap, CommandRegistry
from .services.exceptions import (
    DomainException,
    InternalException,
    InvalidAutogroupDelayError,
    InvalidCommandNameError,
    InvalidTriggerNameError,
    UnknownCommandError,
)
from .services.history import REDO_TRIGGER, UNDO_TRIGGER, History
from .services.timers import QtTimerScheduler, Scheduler
from .services.types import ActionDescriptor, ActionGroup, HistoricAction
from .version import get_version

__version__ = get_version()

__all__ = [
    "History",
    "HistoricAction",
    "ActionDescriptor",
    "ActionGroup",
    "CommandMap",
    "CommandRegistry",
    "Scheduler",
    "QtTimerScheduler",
    "UNDO_TRIGGER",
    "REDO_TRIGGER",
    "DomainException",
    "InternalException",
    "UnknownCommandError",
    "InvalidCommandNameError",
    "InvalidAutogroupDelayError",
    "InvalidTriggerNameError",
    "get_version",
]
