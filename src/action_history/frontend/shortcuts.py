"""Keyboard bindings that fire the history's undo/redo commands."""

from __future__ import annotations

import logging
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import QWidget

from action_history import settings_store
from action_history.services.command_map import CommandRegistry

logger = logging.getLogger(__name__)


def bind_history_shortcuts(
    widget: QWidget,
    command_map: CommandRegistry,
    undo_trigger: Optional[str] = None,
    redo_trigger: Optional[str] = None,
) -> List[QShortcut]:
    """Create Undo, Redo and Ctrl+Y shortcuts on ``widget``.

    Each shortcut invokes its trigger through ``command_map`` so the binding
    follows whatever handler is registered under the name when the key is
    pressed. Trigger names default to the configured ones.
    """
    undo_name = undo_trigger or settings_store.get_undo_trigger()
    redo_name = redo_trigger or settings_store.get_redo_trigger()

    bindings = (
        (QKeySequence(QKeySequence.StandardKey.Undo), undo_name),
        (QKeySequence(QKeySequence.StandardKey.Redo), redo_name),
        (QKeySequence(Qt.KeyboardModifier.ControlModifier | Qt.Key.Key_Y), redo_name),
    )

    shortcuts = []
    for sequence, name in bindings:
        shortcut = QShortcut(sequence, widget)
        shortcut.activated.connect(
            lambda name=name: _invoke_trigger(command_map, name)
        )
        shortcuts.append(shortcut)
    return shortcuts


def _invoke_trigger(command_map: CommandRegistry, name: str) -> None:
    # An exception escaping a Qt slot aborts the process.
    try:
        command_map.invoke(name, ())
    except Exception:
        logger.error("Shortcut command '%s' failed", name, exc_info=True)
