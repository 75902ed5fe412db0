"""Named-command registry used to replay recorded actions."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, runtime_checkable

from .exceptions import InvalidCommandNameError, UnknownCommandError

logger = logging.getLogger(__name__)


@runtime_checkable
class CommandRegistry(Protocol):
    """Minimal API the history expects from the host's command registry."""

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        ...

    def invoke(self, name: str, parameters: Iterable[Any] = ()) -> Any:
        ...


class CommandMap:
    """Maps command names to handlers and invokes them by name."""

    def __init__(self):
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        """Bind a handler to a name, replacing any previous binding."""
        if not isinstance(name, str) or not name.strip():
            raise InvalidCommandNameError(
                "Command name must be a non-empty string.",
                log_message=f"Rejected command name {name!r}",
            )
        if not callable(handler):
            raise TypeError(f"Handler for '{name}' is not callable.")
        if name in self._handlers:
            logger.debug("Rebinding command '%s'", name)
        self._handlers[name] = handler

    def unregister(self, name: str) -> None:
        self._handlers.pop(name, None)

    def is_registered(self, name: str) -> bool:
        return name in self._handlers

    def names(self) -> List[str]:
        return sorted(self._handlers.keys())

    def get_handler(self, name: str) -> Optional[Callable[..., Any]]:
        return self._handlers.get(name)

    def invoke(self, name: str, parameters: Iterable[Any] = ()) -> Any:
        """Call the handler bound to ``name`` with ``parameters`` unpacked.

        Raises:
            UnknownCommandError: If nothing is registered under ``name``.

        Exceptions raised by the handler itself propagate unchanged.
        """
        handler = self.get_handler(name)
        if handler is None:
            raise UnknownCommandError(
                f"No command registered as '{name}'.",
                log_message=f"Known commands: {', '.join(self.names())}",
            )
        return handler(*tuple(parameters or ()))
