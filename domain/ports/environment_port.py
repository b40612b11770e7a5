# domain/ports/environment_port.py
"""Interface for host constants and environment variables."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentPort(Protocol):

    def defined(self, name: str) -> bool:
        ...

    def constant(self, name: str) -> Any:
        ...

    def env(self, key: str, default: Optional[Any] = None) -> Any:
        ...
