"""
Bootstrap Phase Executor - Runs phase classes against an application.

Phases run strictly in the order given. The first failing phase aborts the
run: its exception is wrapped in PhaseExecutionError and propagates.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Sequence

from bootstrap.exceptions import PhaseExecutionError
from bootstrap.phases.base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application

logger = logging.getLogger(__name__)


@dataclass
class PhaseExecutionResult:
    phase_name: str
    duration_seconds: float
    skipped: bool = False
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PhaseExecutionSummary:
    """What a completed ``bootstrap_with`` run did, phase by phase."""
    results: List[PhaseExecutionResult] = field(default_factory=list)
    total_duration: float = 0.0

    @property
    def executed(self) -> List[str]:
        return [r.phase_name for r in self.results]

    @property
    def skipped_phases(self) -> List[str]:
        return [r.phase_name for r in self.results if r.skipped]

    @property
    def warnings(self) -> List[str]:
        return [f'{r.phase_name}: {w}' for r in self.results for w in r.warnings]


class BootstrapPhaseExecutor:

    def __init__(self, app: Application) -> None:
        self.app = app

    def execute_phases(self, phases: Sequence[type]) -> PhaseExecutionSummary:
        """
        Instantiate and execute each phase class in order.

        Raises:
            PhaseExecutionError: for the first phase that raises or reports failure
        """
        logger.info('Executing %d bootstrap phase(s)', len(phases))
        summary = PhaseExecutionSummary()
        started = time.perf_counter()

        for index, phase_class in enumerate(phases, 1):
            name = getattr(phase_class, '__name__', repr(phase_class))
            logger.debug('Phase %d/%d: %s', index, len(phases), name)
            summary.results.append(self._run(phase_class, name))

        summary.total_duration = time.perf_counter() - started
        logger.info(
            '✓ Bootstrap phases complete: %d in %.3fs%s',
            len(summary.results),
            summary.total_duration,
            f' (skipped: {", ".join(summary.skipped_phases)})' if summary.skipped_phases else '',
        )
        return summary

    def _run(self, phase_class: type, name: str) -> PhaseExecutionResult:
        started = time.perf_counter()
        try:
            phase = phase_class()
            if not isinstance(phase, BootstrapPhase):
                raise TypeError(f'{name} is not a BootstrapPhase')

            skip, reason = phase.should_skip_phase(self.app)
            if skip:
                logger.info('Skipping phase %s: %s', name, reason)
                return PhaseExecutionResult(name, 0.0, skipped=True, metadata={'skip_reason': reason})

            phase.pre_execute(self.app)
            result: PhaseResult = phase.execute(self.app)
            phase.post_execute(self.app, result)
        except Exception as exc:
            logger.error('✗ Phase %s raised %s: %s', name, type(exc).__name__, exc)
            raise PhaseExecutionError(f'Bootstrap phase {name} failed: {exc}', phase=name) from exc

        if not result.success:
            reason = '; '.join(result.errors) or result.message or 'no reason given'
            raise PhaseExecutionError(f'Bootstrap phase {name} failed: {reason}', phase=name)

        return PhaseExecutionResult(
            name,
            time.perf_counter() - started,
            warnings=list(result.warnings),
            metadata=dict(result.metadata),
        )
