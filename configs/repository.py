from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional

_MISSING = object()


class ConfigRepository(Mapping[str, Any]):
    """Read/write access to nested configuration with ``dotted.keys``."""

    def __init__(self, items: Optional[Dict[str, Any]] = None) -> None:
        self._items: Dict[str, Any] = items or {}

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self._items
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def has(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def set(self, key: str, value: Any) -> None:
        parts = key.split('.')
        node = self._items
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[parts[-1]] = value

    def all(self) -> Dict[str, Any]:
        return self._items

    def __getitem__(self, key: str) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
