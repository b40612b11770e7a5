"""
Deferred Call Queue - Work submitted before the application exists.

Calls are buffered while the readiness gate is closed and drained, in
submission order, exactly once when it opens.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List

if TYPE_CHECKING:
    from bootstrap.core.readiness_gate import ReadinessGate
    from domain.ports.application_port import ApplicationContract

logger = logging.getLogger(__name__)


class DeferredCall(ABC):
    """A unit of work dispatched against the application."""

    @abstractmethod
    def dispatch(self, application: ApplicationContract) -> Any:
        ...


@dataclass(frozen=True)
class CallbackCall(DeferredCall):
    """Arbitrary callback invoked with the application."""
    callback: Callable[[Any], Any]

    def dispatch(self, application: ApplicationContract) -> Any:
        return application.call(self.callback)

    def __str__(self) -> str:
        return f'call({getattr(self.callback, "__qualname__", repr(self.callback))})'


@dataclass(frozen=True)
class ProviderRegistration(DeferredCall):
    """Registration of a service provider, ``force`` forwarded verbatim."""
    provider: Any
    force: bool = False

    def dispatch(self, application: ApplicationContract) -> Any:
        return application.register(self.provider, self.force)

    def __str__(self) -> str:
        name = self.provider if isinstance(self.provider, str) else getattr(self.provider, '__name__', type(self.provider).__name__)
        return f'register({name}, force={self.force})'


class DeferredCallQueue:

    def __init__(self) -> None:
        self._pending: List[DeferredCall] = []

    def __len__(self) -> int:
        return len(self._pending)

    def pending(self) -> List[DeferredCall]:
        return list(self._pending)

    def push(self, call: DeferredCall) -> 'DeferredCallQueue':
        """Buffer ``call`` for the next flush regardless of the gate."""
        self._pending.append(call)
        logger.debug('Deferred %s (%d pending)', call, len(self._pending))
        return self

    def enqueue_or_run(
        self,
        call: DeferredCall,
        gate: ReadinessGate,
        application: Callable[[], ApplicationContract],
    ) -> 'DeferredCallQueue':
        """
        Buffer ``call`` while the gate is closed, otherwise dispatch it now.

        ``application`` is only invoked on the open path; it returns the live
        (memoized) application.
        """
        if not gate.is_ready():
            return self.push(call)

        call.dispatch(application())
        return self

    def flush(self, application: ApplicationContract) -> int:
        """
        Dispatch every buffered call in FIFO order, then empty the buffer.

        The buffer is emptied even when a call raises; the exception
        propagates and the calls after it are dropped.
        """
        pending, self._pending = self._pending, []
        if not pending:
            return 0

        logger.debug('Flushing %d deferred call(s)', len(pending))
        dispatched = 0
        try:
            for call in pending:
                call.dispatch(application)
                dispatched += 1
        finally:
            if dispatched < len(pending):
                logger.warning(
                    'Deferred call %s failed; %d queued call(s) after it were dropped',
                    pending[dispatched], len(pending) - dispatched - 1,
                )
        return dispatched
