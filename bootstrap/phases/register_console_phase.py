from __future__ import annotations

from typing import TYPE_CHECKING

from application.console.commands import BUILTIN_COMMANDS
from application.console.kernel import ConsoleKernel

from .base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application


class RegisterConsole(BootstrapPhase):
    """Builds the console kernel from built-in and provider commands when running in a console."""

    def execute(self, app: Application) -> PhaseResult:
        if not app.running_in_console():
            return PhaseResult.success_result(message='Not running in console', metadata={'skipped': True})

        kernel = ConsoleKernel(app, [command() for command in BUILTIN_COMMANDS])
        if app.bound('console.commands'):
            for command in app.make('console.commands'):
                kernel.add(command)

        app.instance('console.kernel', kernel)
        app.alias('console.kernel', ConsoleKernel)
        return PhaseResult.success_result(
            message=f'Console kernel ready with {len(kernel.commands())} command(s)',
            metadata={'commands': kernel.commands()}
        )
