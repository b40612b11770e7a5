"""
Base Phase - Shared shape of the steps an application runs through
``bootstrap_with``.

A phase is identified by its class. The executor instantiates it with no
arguments and hands it the application being bootstrapped.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from application.application import Application

SKIP_CONFIG_KEY = 'bootstrap.skip'


@dataclass
class PhaseResult:
    """Outcome reported by ``BootstrapPhase.execute``."""
    success: bool
    message: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success_result(cls, message: str, warnings: Optional[List[str]] = None,
                       metadata: Optional[Dict[str, Any]] = None) -> 'PhaseResult':
        return cls(True, message, warnings=list(warnings or ()), metadata=dict(metadata or {}))

    @classmethod
    def failure_result(cls, message: str, errors: List[str],
                       metadata: Optional[Dict[str, Any]] = None) -> 'PhaseResult':
        return cls(False, message, errors=list(errors), metadata=dict(metadata or {}))


class BootstrapPhase(ABC):

    def __init__(self) -> None:
        self.phase_name = type(self).__name__
        self.logger = logging.getLogger(f'bootstrap.{self.phase_name.lower()}')

    @abstractmethod
    def execute(self, app: Application) -> PhaseResult:
        """
        Do this phase's work against ``app``.

        Return a failed result, or raise, to abort the boot.
        """

    def pre_execute(self, app: Application) -> None:
        self.logger.debug('Entering %s', self.phase_name)

    def post_execute(self, app: Application, result: PhaseResult) -> None:
        for warning in result.warnings:
            self.logger.warning('%s: %s', self.phase_name, warning)
        if not result.success:
            self.logger.error('✗ %s: %s (%s)', self.phase_name, result.message, '; '.join(result.errors))
            return
        self.logger.debug('✓ %s: %s', self.phase_name, result.message)

    def should_skip_phase(self, app: Application) -> Tuple[bool, str]:
        """Skip phases named in the ``bootstrap.skip`` config list, once config is bound."""
        if not app.bound('config'):
            return False, ''
        if self.phase_name in (app.make('config').get(SKIP_CONFIG_KEY) or ()):
            return True, f'listed in {SKIP_CONFIG_KEY}'
        return False, ''
