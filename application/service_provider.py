# application/service_provider.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Sequence

if TYPE_CHECKING:
    from application.application import Application
    from application.console.kernel import Command

logger = logging.getLogger(__name__)


class ServiceProvider:
    """
    Groups the bindings and boot logic of one feature.

    ``register`` only binds things into the container; ``boot`` runs once
    every provider has been registered and may resolve other services.
    """

    bindings: Dict[Any, Callable[..., Any]] = {}
    singletons: Dict[Any, Callable[..., Any]] = {}

    def __init__(self, app: Application) -> None:
        self.app = app
        self.booted = False

    def register(self) -> None:
        pass

    def boot(self) -> None:
        pass

    def commands(self, commands: Sequence[Command]) -> None:
        """Make console commands available to the console kernel."""
        registered = self.app.make('console.commands') if self.app.bound('console.commands') else []
        registered.extend(commands)
        self.app.instance('console.commands', registered)

    def call_boot(self) -> None:
        if self.booted:
            return
        self.boot()
        self.booted = True
        logger.debug(f'Booted provider {type(self).__name__}')
