# infrastructure/hooks/memory_hook_registry.py
from __future__ import annotations

import itertools
import logging
import time
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Tuple

from domain.ports.hook_port import HookPort

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


@dataclass(slots=True)
class _RecordedAction:
    ts: float
    name: str
    args: Tuple[Any, ...]


@dataclass(order=True, slots=True)
class _Handler:
    sort_key: Tuple[int, int]
    callback: Callable[..., Any] = field(compare=False)
    priority: int = field(compare=False)


class MemoryHookRegistry(HookPort):
    """
    In-process registry of named actions and filters.

    Handlers with a higher priority value run first; handlers sharing a
    priority run in registration order. Handler exceptions are not caught:
    they propagate to whoever fired the action.
    """

    def __init__(self, component_id: str = "hooks_memory", max_history: int = 1000) -> None:
        self.component_id = component_id
        self._handlers: Dict[str, List[_Handler]] = defaultdict(list)
        self._fired: Dict[str, int] = defaultdict(int)
        self._current: List[str] = []
        self._max_history = max_history
        self._history: List[_RecordedAction] = []
        self._sequence = itertools.count()
        logger.debug("[%s] constructed (max_history=%s)", self.component_id, self._max_history)

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        handler = _Handler(sort_key=(-priority, next(self._sequence)), callback=callback, priority=priority)
        self._handlers[name].append(handler)
        self._handlers[name].sort()
        logger.debug(
            '[%s] added "%s" at priority %d. Total handlers for this hook: %d.',
            self.component_id,
            name,
            priority,
            len(self._handlers[name]),
        )

    def add_action(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        self.add_filter(name, callback, priority)

    def add_filters(self, names: Iterable[str], callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        for name in names:
            self.add_filter(name, callback, priority)

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        handlers = self._handlers.get(name, [])
        for handler in handlers:
            if handler.callback == callback:
                handlers.remove(handler)
                logger.debug("[%s] removed handler from %s", self.component_id, name)
                return True
        return False

    def has_filter(self, name: str) -> bool:
        return bool(self._handlers.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for handler in tuple(self._handlers.get(name, ())):
            value = handler.callback(value, *args)
        return value

    def do_action(self, name: str, *args: Any) -> None:
        self._fired[name] += 1
        self._record(name, args)
        handlers = tuple(self._handlers.get(name, ()))
        logger.debug('[%s] firing "%s". Found %d handler(s).', self.component_id, name, len(handlers))

        self._current.append(name)
        try:
            for handler in handlers:
                handler.callback(*args)
        finally:
            self._current.pop()

    def did_action(self, name: str) -> int:
        return self._fired.get(name, 0)

    def doing_action(self, name: str) -> bool:
        return name in self._current

    def current_action(self) -> str | None:
        return self._current[-1] if self._current else None

    def _record(self, name: str, args: Tuple[Any, ...]) -> None:
        self._history.append(_RecordedAction(time.time(), name, args))
        if len(self._history) > self._max_history:
            self._history.pop(0)

    def history(self) -> List[_RecordedAction]:
        return list(self._history)

    def get_stats(self) -> Dict[str, Any]:
        return {
            'handlers': {k: len(v) for k, v in self._handlers.items()},
            'fired': dict(self._fired),
            'history_size': len(self._history),
        }
