"""
Bootstrap Pipeline - The ordered, filterable list of bootstrap phases.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from bootstrap.phases import (
    BootProviders,
    CaptureRequest,
    HandleExceptions,
    LoadConfiguration,
    RegisterConsole,
    RegisterFacades,
    RegisterProviders,
    ThemeFeatures,
)
from bootstrap.signals.bootstrap_signals import BOOTSTRAP_FILTER
from domain.ports.hook_port import HookPort

if TYPE_CHECKING:
    from domain.ports.application_port import ApplicationContract

logger = logging.getLogger(__name__)

DEFAULT_PHASES: tuple = (
    CaptureRequest,
    ThemeFeatures,
    LoadConfiguration,
    HandleExceptions,
    RegisterProviders,
    RegisterFacades,
    BootProviders,
    RegisterConsole,
)


class BootstrapPipeline:

    def __init__(self, hooks: HookPort) -> None:
        self.hooks = hooks

    def phases(self) -> List[type]:
        """Built-in phases after the ``acorn/bootstrap`` filter has had its say."""
        phases = self.hooks.apply_filters(BOOTSTRAP_FILTER, list(DEFAULT_PHASES))
        return list(phases)

    def run(self, application: ApplicationContract) -> List[type]:
        phases = self.phases()
        logger.debug('Bootstrapping with: %s', [getattr(p, '__name__', str(p)) for p in phases])
        application.bootstrap_with(phases)
        return phases
