# application/exception_handler.py
from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import Any, Callable, List, Mapping, Optional, Type

logger = logging.getLogger(__name__)

ExceptHook = Callable[[Type[BaseException], BaseException, Optional[TracebackType]], Any]


class ExceptionHandler:
    """
    Reports uncaught exceptions through logging.

    ``install`` swaps in ``sys.excepthook`` and remembers the previous hook;
    ``uninstall`` puts it back.
    """

    def __init__(self, debug: bool = False, dont_report: Optional[List[Type[BaseException]]] = None) -> None:
        self.debug = debug
        self.dont_report = tuple(dont_report or (KeyboardInterrupt,))
        self._previous_hook: Optional[ExceptHook] = None

    def install(self) -> None:
        if self._previous_hook is not None:
            return
        self._previous_hook = sys.excepthook
        sys.excepthook = self.handle_uncaught
        logger.debug('Exception handler installed (debug=%s)', self.debug)

    def uninstall(self) -> None:
        if self._previous_hook is None:
            return
        if sys.excepthook == self.handle_uncaught:
            sys.excepthook = self._previous_hook
        self._previous_hook = None

    @property
    def installed(self) -> bool:
        return self._previous_hook is not None

    def should_report(self, exc: BaseException) -> bool:
        return not isinstance(exc, self.dont_report)

    def report(self, exc: BaseException) -> None:
        if not self.should_report(exc):
            return
        if self.debug:
            logger.critical('Unhandled %s: %s', type(exc).__name__, exc, exc_info=exc)
        else:
            logger.critical('Unhandled %s: %s', type(exc).__name__, exc)

    def handle_uncaught(self, exc_type: Type[BaseException], exc: BaseException, tb: Optional[TracebackType]) -> None:
        self.report(exc)
        if self._previous_hook is not None and not self.should_report(exc):
            self._previous_hook(exc_type, exc, tb)


def configure_logging(settings: Mapping[str, Any]) -> None:
    """Give the root logger a handler when the host has not configured one."""
    root = logging.getLogger()
    level = str(settings.get('level', 'INFO')).upper()
    if root.handlers:
        logger.debug('Root logger already configured; leaving handlers alone')
        return
    kwargs = {'level': getattr(logging, level, logging.INFO)}
    if settings.get('format'):
        kwargs['format'] = settings['format']
    logging.basicConfig(**kwargs)
