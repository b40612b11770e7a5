from .bootloader import Bootloader, BootloaderState
from .deferred_queue import CallbackCall, DeferredCall, DeferredCallQueue, ProviderRegistration
from .phase_executor import BootstrapPhaseExecutor, PhaseExecutionResult, PhaseExecutionSummary
from .pipeline import DEFAULT_PHASES, BootstrapPipeline
from .readiness_gate import ReadinessGate

__all__ = [
    'Bootloader', 'BootloaderState',
    'CallbackCall', 'DeferredCall', 'DeferredCallQueue', 'ProviderRegistration',
    'BootstrapPhaseExecutor', 'PhaseExecutionResult', 'PhaseExecutionSummary',
    'DEFAULT_PHASES', 'BootstrapPipeline',
    'ReadinessGate',
]
