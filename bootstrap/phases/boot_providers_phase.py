from __future__ import annotations

from typing import TYPE_CHECKING

from .base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application


class BootProviders(BootstrapPhase):

    def execute(self, app: Application) -> PhaseResult:
        app.boot()
        return PhaseResult.success_result(message=f'Booted {len(app.get_providers())} provider(s)')
