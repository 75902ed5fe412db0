"""Module for defining data types used by the action history services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class ActionDescriptor:
    """A command name and the ordered parameters to invoke it with.

    The name is resolved against the command map at replay time, so the
    handler bound to it may change between recording and replay.
    """

    name: str
    parameters: tuple = ()

    @classmethod
    def of(cls, name: str, parameters: Optional[Iterable[Any]] = None) -> "ActionDescriptor":
        return cls(name=name, parameters=tuple(parameters or ()))


@dataclass(frozen=True)
class HistoricAction:
    """One reversible unit of work."""

    forward: ActionDescriptor
    backward: ActionDescriptor

    @classmethod
    def create(
        cls,
        forward_name: str,
        forward_params: Optional[Iterable[Any]],
        backward_name: str,
        backward_params: Optional[Iterable[Any]],
    ) -> "HistoricAction":
        return cls(
            forward=ActionDescriptor.of(forward_name, forward_params),
            backward=ActionDescriptor.of(backward_name, backward_params),
        )


ActionGroup = list[HistoricAction]
