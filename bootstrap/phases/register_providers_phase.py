from __future__ import annotations

from typing import TYPE_CHECKING

from .base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application


class RegisterProviders(BootstrapPhase):
    """Registers every provider listed under ``app.providers``."""

    def execute(self, app: Application) -> PhaseResult:
        providers = app.make('config').get('app.providers', []) or []
        for provider in providers:
            app.register(provider)
        return PhaseResult.success_result(
            message=f'Registered {len(providers)} configured provider(s)',
            metadata={'providers': list(providers)}
        )
