# application/application.py
"""
The default application constructed by the Bootloader.

A service container with path helpers, service-provider lifecycle, and a
one-shot ``bootstrap_with`` that runs the bootstrap phases.
"""
from __future__ import annotations

import copy
import inspect
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, Union

from bootstrap.exceptions import ProviderRegistrationError
from configs.config_loader import DEFAULT_CONFIG
from configs.repository import ConfigRepository
from core.registry import ServiceRegistry
from core.utils import import_string
from infrastructure.env import env

from application.service_provider import ServiceProvider

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
ProviderLike = Union[str, Type[ServiceProvider], ServiceProvider]


class Application(ServiceRegistry):

    VERSION = '1.0.0'

    def __init__(self, base_path: Optional[PathLike] = None, paths: Optional[Dict[str, Optional[PathLike]]] = None) -> None:
        super().__init__()
        self._base_path = Path(base_path) if base_path else Path.cwd()
        self._paths: Dict[str, Optional[Path]] = {
            role: Path(path) if path else None for role, path in (paths or {}).items()
        }
        self.environment: str = 'production'
        self.phase_summary = None
        self._has_been_bootstrapped = False
        self._booted = False
        self._running_in_console: Optional[bool] = None
        self._service_providers: List[ServiceProvider] = []
        self._booting_callbacks: List[Callable[['Application'], Any]] = []
        self._booted_callbacks: List[Callable[['Application'], Any]] = []
        self._register_base_bindings()

    def _register_base_bindings(self) -> None:
        self.instance('app', self)
        self.alias('app', type(self))
        self.instance('path.base', self._base_path)
        for role in self._paths:
            self.instance(f'path.{role}', self.path(role))
        # Defaults until LoadConfiguration replaces them
        self.instance('config', ConfigRepository(copy.deepcopy(DEFAULT_CONFIG)))
        self.alias('config', ConfigRepository)

    # Paths

    def base_path(self, *parts: str) -> Path:
        return self._base_path.joinpath(*parts)

    def path(self, role: str = 'app', *parts: str) -> Path:
        """Resolved directory for ``role``, or ``{base}/{role}`` when none was found."""
        root = self._paths.get(role) or self._base_path / role
        return root.joinpath(*parts)

    def app_path(self, *parts: str) -> Path:
        return self.path('app', *parts)

    def config_path(self, *parts: str) -> Path:
        return self.path('config', *parts)

    def storage_path(self, *parts: str) -> Path:
        return self.path('storage', *parts)

    def resource_path(self, *parts: str) -> Path:
        return self.path('resources', *parts)

    # Bootstrapping

    def bootstrap_with(self, phases: Sequence[type]) -> None:
        if self._has_been_bootstrapped:
            logger.warning('Application already bootstrapped; ignoring %d phase(s)', len(phases))
            return

        from bootstrap.core.phase_executor import BootstrapPhaseExecutor

        self.phase_summary = BootstrapPhaseExecutor(self).execute_phases(phases)
        self._has_been_bootstrapped = True

    def has_been_bootstrapped(self) -> bool:
        return self._has_been_bootstrapped

    def running_in_console(self) -> bool:
        if self._running_in_console is None:
            self._running_in_console = bool(env('APP_RUNNING_IN_CONSOLE', False))
        return self._running_in_console

    # Deferred work

    def call(self, callback: Callable[..., Any]) -> Any:
        """Invoke ``callback`` with the application; zero-argument callables are called bare."""
        if _accepts_no_arguments(callback):
            return callback()
        return callback(self)

    # Service providers

    def register(self, provider: ProviderLike, force: bool = False) -> ServiceProvider:
        registered = self.get_provider(provider)
        if registered is not None and not force:
            return registered

        instance = self._resolve_provider(provider)
        instance.register()

        for abstract, concrete in type(instance).bindings.items():
            self.bind(abstract, concrete)
        for abstract, concrete in type(instance).singletons.items():
            self.singleton(abstract, concrete)

        self._service_providers.append(instance)
        logger.info(f"Registered provider {type(instance).__name__}{' (forced)' if registered else ''}")

        if self._booted:
            instance.call_boot()
        return instance

    def get_provider(self, provider: ProviderLike) -> Optional[ServiceProvider]:
        name = self._provider_name(provider)
        for registered in self._service_providers:
            if self._provider_name(type(registered)) == name:
                return registered
        return None

    def get_providers(self, provider: Optional[ProviderLike] = None) -> List[ServiceProvider]:
        if provider is None:
            return list(self._service_providers)
        name = self._provider_name(provider)
        return [p for p in self._service_providers if self._provider_name(type(p)) == name]

    def loaded_providers(self) -> List[str]:
        return [self._provider_name(type(p)) for p in self._service_providers]

    def _resolve_provider(self, provider: ProviderLike) -> ServiceProvider:
        if isinstance(provider, ServiceProvider):
            return provider
        if isinstance(provider, str):
            try:
                provider = import_string(provider)
            except ImportError as exc:
                raise ProviderRegistrationError(f'Cannot import provider: {exc}', component_id=provider) from exc
        if not (inspect.isclass(provider) and issubclass(provider, ServiceProvider)):
            raise ProviderRegistrationError(
                f'{provider!r} is not a ServiceProvider subclass', component_id=self._provider_name(provider)
            )
        return provider(self)

    @staticmethod
    def _provider_name(provider: Any) -> str:
        if isinstance(provider, str):
            return provider
        if not inspect.isclass(provider):
            provider = type(provider)
        return f'{provider.__module__}.{provider.__qualname__}'

    # Booting

    def booting(self, callback: Callable[['Application'], Any]) -> None:
        self._booting_callbacks.append(callback)

    def booted(self, callback: Callable[['Application'], Any]) -> None:
        self._booted_callbacks.append(callback)
        if self._booted:
            callback(self)

    def is_booted(self) -> bool:
        return self._booted

    def boot(self) -> None:
        if self._booted:
            return

        for callback in self._booting_callbacks:
            callback(self)

        # Providers registered while booting are booted too.
        index = 0
        while index < len(self._service_providers):
            self._service_providers[index].call_boot()
            index += 1

        self._booted = True
        logger.info(f'✓ Booted {len(self._service_providers)} provider(s)')

        for callback in self._booted_callbacks:
            callback(self)


def _accepts_no_arguments(callback: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(callback).parameters.values()
    except (TypeError, ValueError):
        return False
    return not any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
        for p in params
    )
