from __future__ import annotations

from typing import TYPE_CHECKING

from application.exception_handler import ExceptionHandler, configure_logging

from .base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application


class HandleExceptions(BootstrapPhase):
    """Configures logging and installs the uncaught-exception handler."""

    def execute(self, app: Application) -> PhaseResult:
        config = app.make('config')
        configure_logging(config.get('logging', {}) or {})

        handler = ExceptionHandler(debug=bool(config.get('app.debug', False)))
        handler.install()
        app.instance('exception.handler', handler)
        app.alias('exception.handler', ExceptionHandler)

        return PhaseResult.success_result(
            message=f'Exception handler installed (debug={handler.debug})',
        )
