"""
Bootloader - Boots the application when the host says it is safe to.

The host fires lifecycle signals at points the application cannot control.
The Bootloader subscribes itself to those signals; the first time one of
them has fired it builds the application, runs the bootstrap pipeline and
drains every call queued before the application existed.

    loader = Bootloader(hooks=hooks)
    loader.register('app.providers.ThemeServiceProvider')
    loader.call(lambda app: app.make('config').get('app.name'))
    hooks.do_action('after_setup_theme')   # boots and drains the queue
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Type, Union

from bootstrap.config.bootstrap_config import BootloaderConfig
from bootstrap.core.deferred_queue import CallbackCall, DeferredCall, DeferredCallQueue, ProviderRegistration
from bootstrap.core.pipeline import BootstrapPipeline
from bootstrap.core.readiness_gate import ReadinessGate
from bootstrap.exceptions import InvalidApplicationError
from bootstrap.paths.path_resolver import PathResolver
from bootstrap.signals.bootstrap_signals import APPLICATION_BOOTSTRAPPED
from domain.ports.application_port import ApplicationContract, missing_contract_members
from domain.ports.environment_port import EnvironmentPort
from domain.ports.hook_port import HookPort
from domain.ports.theme_port import ThemePort
from infrastructure.env import HostEnvironment
from infrastructure.hooks.memory_hook_registry import MemoryHookRegistry
from infrastructure.theme.filesystem_theme import FilesystemTheme

logger = logging.getLogger(__name__)


class BootloaderState(Enum):
    UNINITIALIZED = 'UNINITIALIZED'
    WAITING = 'WAITING'
    BOOTSTRAPPING = 'BOOTSTRAPPING'
    READY = 'READY'


class Bootloader:

    def __init__(
        self,
        signals: Union[str, Sequence[str], None] = None,
        application_class: Union[str, Type[Any], None] = None,
        *,
        hooks: Optional[HookPort] = None,
        theme: Optional[ThemePort] = None,
        environment: Optional[EnvironmentPort] = None,
        config: Optional[BootloaderConfig] = None,
    ) -> None:
        self.state = BootloaderState.UNINITIALIZED
        self.config = config or BootloaderConfig.from_params(signals, application_class=application_class)

        app_class = self.config.resolve_application_class()
        missing = missing_contract_members(app_class)
        if missing:
            raise InvalidApplicationError(
                f'Application class must implement [{ApplicationContract.__name__}], got {app_class!r}',
                application_class=app_class,
                missing=missing,
            )

        self.application_class: Type[Any] = app_class
        self.signals = tuple(self.config.signals)
        self.hooks: HookPort = hooks if hooks is not None else MemoryHookRegistry()
        self.theme: ThemePort = theme if theme is not None else FilesystemTheme()
        self.environment: EnvironmentPort = environment if environment is not None else HostEnvironment()

        self.gate = ReadinessGate(self.hooks, self.signals)
        self.queue = DeferredCallQueue()
        self.paths = PathResolver(self.hooks, self.theme, self.environment, override_name=self.config.base_path_override)
        self.pipeline = BootstrapPipeline(self.hooks)

        self._application: Optional[ApplicationContract] = None
        self._running_pipeline = False
        self._lock = threading.RLock()

        for signal in self.signals:
            self.hooks.add_action(signal, self, self.config.priority)

        self.state = BootloaderState.WAITING
        logger.info(
            'Bootloader waiting for %s (application=%s)',
            ', '.join(self.signals) or '<no signals>',
            self.application_class.__name__,
        )

    def register(self, provider: Any, force: bool = False) -> 'Bootloader':
        """Register a service provider with the application."""
        return self._defer(ProviderRegistration(provider, force))

    def call(self, callback: Callable[[Any], Any]) -> 'Bootloader':
        """Run ``callback`` with the application, now or once it boots."""
        return self._defer(CallbackCall(callback))

    def ready(self) -> bool:
        return self.gate.is_ready()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        if not self.ready():
            return

        self.queue.flush(self.application())

    def application(self) -> ApplicationContract:
        """
        The application, built and bootstrapped on first use.

        Only call once the gate is open.
        """
        if self._application is not None:
            return self._application

        with self._lock:
            if self._application is not None:
                return self._application

            self.state = BootloaderState.BOOTSTRAPPING
            base_path = self.paths.resolve_base()
            paths = self.paths.resolve_paths()
            logger.info('Constructing %s at %s', self.application_class.__name__, base_path)

            app = self.application_class(base_path, paths)
            # Published before bootstrapping so phases that call back in reuse it.
            # A failing phase leaves the instance in place and the state at BOOTSTRAPPING.
            self._application = app
            self._running_pipeline = True
            try:
                self.pipeline.run(app)
            finally:
                self._running_pipeline = False

            self.state = BootloaderState.READY
            logger.info('✓ Application bootstrapped')
            self.hooks.do_action(APPLICATION_BOOTSTRAPPED, app)
            return app

    def _defer(self, call: DeferredCall) -> 'Bootloader':
        with self._lock:
            if self._running_pipeline:
                # Submitted from inside a phase; drains with the rest once the pipeline is done.
                self.queue.push(call)
                return self
        self.queue.enqueue_or_run(call, self.gate, self._booted_application)
        return self

    def _booted_application(self) -> ApplicationContract:
        app = self.application()
        # Calls queued before the gate opened run before anything dispatched after it.
        self.queue.flush(app)
        return app
