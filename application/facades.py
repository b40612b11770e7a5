# application/facades.py
"""
Static proxies to services in the application container.

    from application.facades import Config
    Config.get('app.name')
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from core.utils import import_string

if TYPE_CHECKING:
    from application.application import Application

logger = logging.getLogger(__name__)


class FacadeMeta(type):

    def __getattr__(cls, name: str) -> Any:
        if name.startswith('__'):
            raise AttributeError(name)
        return getattr(cls.get_facade_root(), name)


class Facade(metaclass=FacadeMeta):

    _app: Optional[Application] = None
    _resolved_instances: Dict[str, Any] = {}

    @classmethod
    def get_facade_accessor(cls) -> str:
        raise NotImplementedError(f'{cls.__name__} does not implement get_facade_accessor')

    @classmethod
    def get_facade_root(cls) -> Any:
        accessor = cls.get_facade_accessor()
        if accessor in Facade._resolved_instances:
            return Facade._resolved_instances[accessor]
        if Facade._app is None:
            raise RuntimeError(f'A facade root has not been set (resolving {cls.__name__}).')
        instance = Facade._app.make(accessor)
        Facade._resolved_instances[accessor] = instance
        return instance

    @staticmethod
    def set_facade_application(app: Optional[Application]) -> None:
        Facade._app = app

    @staticmethod
    def get_facade_application() -> Optional[Application]:
        return Facade._app

    @staticmethod
    def clear_resolved_instances() -> None:
        Facade._resolved_instances.clear()


class App(Facade):
    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'app'


class Config(Facade):
    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'config'


class AliasLoader:
    """Short names for facade classes, imported on first use."""

    def __init__(self, aliases: Optional[Mapping[str, Any]] = None) -> None:
        self._aliases: Dict[str, Any] = dict(aliases or {})

    def alias(self, name: str, target: Any) -> None:
        self._aliases[name] = target

    def aliases(self) -> Dict[str, Any]:
        return dict(self._aliases)

    def load(self, name: str) -> Any:
        target = self._aliases.get(name)
        if target is None:
            raise KeyError(f"No alias registered for '{name}'")
        if isinstance(target, str):
            target = import_string(target)
            self._aliases[name] = target
            logger.debug("Loaded alias '%s' -> %s", name, target)
        return target

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self.load(name)
        except KeyError as exc:
            raise AttributeError(str(exc)) from None
