import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, Union

from bootstrap.exceptions import BindingResolutionError

logger = logging.getLogger(__name__)

Abstract = Union[str, Type[Any]]


@dataclass
class Binding:
    concrete: Callable[..., Any]
    shared: bool


class ServiceRegistry:
    """
    Service container backing the application.

    Abstracts are strings or types. A binding is a factory called with the
    container; shared bindings are built once and cached as instances.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._instances: Dict[str, Any] = {}
        self._aliases: Dict[str, str] = {}
        self._registration_order: List[str] = []
        self._lock = threading.RLock()

    def normalize_key(self, key: Any) -> str:
        """
        Normalize a key for consistent lookups.
        String keys are kept as-is; types use their full module.class name.
        """
        if isinstance(key, type):
            return f"{key.__module__}.{key.__name__}"
        elif isinstance(key, str):
            return key
        else:
            return str(key)

    def get_alias(self, key: Abstract) -> str:
        key = self.normalize_key(key)
        seen = set()
        while key in self._aliases:
            if key in seen:
                raise BindingResolutionError(f"Alias loop detected for '{key}'")
            seen.add(key)
            key = self._aliases[key]
        return key

    def alias(self, abstract: Abstract, alias: Abstract) -> None:
        abstract_key, alias_key = self.normalize_key(abstract), self.normalize_key(alias)
        if abstract_key == alias_key:
            raise BindingResolutionError(f"[{abstract_key}] is aliased to itself.")
        self._aliases[alias_key] = abstract_key
        logger.debug(f"Aliased '{alias_key}' -> '{abstract_key}'")

    def bind(self, abstract: Abstract, concrete: Optional[Callable[..., Any]] = None, shared: bool = False) -> None:
        key = self.normalize_key(abstract)
        if concrete is None:
            if not isinstance(abstract, type):
                raise BindingResolutionError(f"Cannot bind '{key}' without a concrete factory")
            cls = abstract
            concrete = lambda container: cls()  # noqa: E731

        with self._lock:
            self._instances.pop(key, None)
            self._aliases.pop(key, None)
            self._bindings[key] = Binding(concrete, shared)
            if key not in self._registration_order:
                self._registration_order.append(key)
        logger.debug(f"Bound '{key}' (shared={shared})")

    def singleton(self, abstract: Abstract, concrete: Optional[Callable[..., Any]] = None) -> None:
        self.bind(abstract, concrete, shared=True)

    def instance(self, abstract: Abstract, instance: Any) -> Any:
        key = self.normalize_key(abstract)
        with self._lock:
            self._aliases.pop(key, None)
            self._instances[key] = instance
            if key not in self._registration_order:
                self._registration_order.append(key)
        logger.debug(f"Registered instance for '{key}' ({type(instance).__name__})")
        return instance

    def bound(self, abstract: Abstract) -> bool:
        key = self.get_alias(abstract)
        return key in self._bindings or key in self._instances

    def make(self, abstract: Abstract) -> Any:
        key = self.get_alias(abstract)

        if key in self._instances:
            return self._instances[key]

        binding = self._bindings.get(key)
        if binding is None:
            if isinstance(abstract, type):
                logger.debug(f"Auto-building unbound type {key}")
                return abstract()
            available = sorted(self.list_services())
            if len(available) > 20:
                available = available[:20] + [f"... and {len(available) - 20} more"]
            raise BindingResolutionError(f"Target [{key}] is not bound. Available: {', '.join(available)}")

        if not binding.shared:
            return binding.concrete(self)

        with self._lock:
            if key not in self._instances:
                self._instances[key] = binding.concrete(self)
            return self._instances[key]

    def list_services(self) -> List[str]:
        return list(self._registration_order) + list(self._aliases)
