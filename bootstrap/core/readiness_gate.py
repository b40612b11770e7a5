"""
Readiness Gate - One-way latch marking the moment the application may be built.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from bootstrap.signals.bootstrap_signals import READY_FILTER
from domain.ports.hook_port import HookPort

logger = logging.getLogger(__name__)


class ReadinessGate:
    """
    Opens when any configured signal has fired or is firing, or when the
    ``acorn/ready`` filter forces it. Once open it never closes and stops
    consulting the hooks.
    """

    def __init__(self, hooks: HookPort, signals: Sequence[str]) -> None:
        self.hooks = hooks
        self.signals: Tuple[str, ...] = tuple(signals)
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def is_ready(self) -> bool:
        if self._open:
            return True

        for signal in self.signals:
            if self.hooks.did_action(signal) or self.hooks.doing_action(signal):
                logger.info("Readiness gate opened by signal '%s'", signal)
                self._open = True
                return True

        if self.hooks.apply_filters(READY_FILTER, False):
            logger.info("Readiness gate opened by '%s' filter", READY_FILTER)
            self._open = True

        return self._open
