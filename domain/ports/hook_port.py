# domain/ports/hook_port.py
"""Interface for the host's named actions and filters."""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class HookPort(Protocol):
    """
    Named extension points fired by the host.

    Actions are lifecycle signals; filters are value transforms that may
    replace their input. Both accept a priority, and callbacks with a higher
    priority value run first.
    """

    def add_action(self, name: str, callback: Callable[..., Any], priority: int = 10) -> None:
        ...

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = 10) -> None:
        ...

    def do_action(self, name: str, *args: Any) -> None:
        ...

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        ...

    def did_action(self, name: str) -> int:
        """Number of times the action has fired."""
        ...

    def doing_action(self, name: str) -> bool:
        """True while the action is being dispatched."""
        ...
