# bootstrap/__init__.py
from __future__ import annotations

from .exceptions import *
from .config.bootstrap_config import BootloaderConfig
from .core.bootloader import Bootloader, BootloaderState
from .core.deferred_queue import CallbackCall, DeferredCall, DeferredCallQueue, ProviderRegistration
from .core.phase_executor import BootstrapPhaseExecutor, PhaseExecutionResult, PhaseExecutionSummary
from .core.pipeline import DEFAULT_PHASES, BootstrapPipeline
from .core.readiness_gate import ReadinessGate
from .paths.path_resolver import PathResolver
from .phases.base_phase import BootstrapPhase, PhaseResult

__version__ = '1.0.0'
__description__ = 'Deferred application bootloader for hosts with their own lifecycle'

__all__ = [
    'Bootloader', 'BootloaderState', 'BootloaderConfig',
    'CallbackCall', 'DeferredCall', 'DeferredCallQueue', 'ProviderRegistration',
    'BootstrapPhaseExecutor', 'PhaseExecutionResult', 'PhaseExecutionSummary',
    'DEFAULT_PHASES', 'BootstrapPipeline',
    'ReadinessGate',
    'PathResolver',
    'BootstrapPhase', 'PhaseResult',
    'BootstrapError', 'ConfigurationError', 'InvalidApplicationError', 'PhaseExecutionError',
    'ProviderRegistrationError', 'BindingResolutionError',
    '__version__', '__description__',
]
