# domain/ports/application_port.py
"""
Contract every application class handed to the Bootloader must satisfy.

The Bootloader only constructs the application, runs the bootstrap phases
through it, and forwards deferred calls. Everything else (container
mechanics, provider lifecycles, facades) stays behind this contract.
"""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Type, Union, runtime_checkable

PathLike = Union[str, Path]


@runtime_checkable
class ApplicationContract(Protocol):

    def __init__(self, base_path: Optional[PathLike] = None, paths: Optional[Dict[str, Optional[PathLike]]] = None) -> None:
        ...

    def bootstrap_with(self, phases: Sequence[type]) -> None:
        """Run the given bootstrap phases, in order, against this application."""
        ...

    def has_been_bootstrapped(self) -> bool:
        ...

    def call(self, callback: Callable[..., Any]) -> Any:
        """Invoke ``callback`` with this application as its argument."""
        ...

    def register(self, provider: Any, force: bool = False) -> Any:
        """Register a service provider class, instance or dotted path."""
        ...


REQUIRED_MEMBERS = ('bootstrap_with', 'has_been_bootstrapped', 'call', 'register')


def missing_contract_members(application_class: Any) -> List[str]:
    """
    Return the contract members ``application_class`` lacks.

    Protocols cannot be checked with ``issubclass`` when they declare
    ``__init__``, so the check is done member by member on the class.
    """
    if not inspect.isclass(application_class):
        return ['<class>']

    missing = [name for name in REQUIRED_MEMBERS if not callable(getattr(application_class, name, None))]

    try:
        params = inspect.signature(application_class).parameters
    except (TypeError, ValueError):
        params = {}
    positional = [
        p for p in params.values()
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    accepts_varargs = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params.values())
    if len(positional) < 2 and not accepts_varargs:
        missing.append('__init__(base_path, paths)')
    return missing


def implements_application_contract(application_class: Type[Any]) -> bool:
    return not missing_contract_members(application_class)
