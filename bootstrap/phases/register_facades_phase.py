from __future__ import annotations

from typing import TYPE_CHECKING

from application.facades import AliasLoader, Facade

from .base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application


class RegisterFacades(BootstrapPhase):
    """Points facades at the application and loads ``app.aliases``."""

    def execute(self, app: Application) -> PhaseResult:
        Facade.clear_resolved_instances()
        Facade.set_facade_application(app)

        loader = AliasLoader(app.make('config').get('app.aliases', {}) or {})
        app.instance('aliases', loader)
        app.alias('aliases', AliasLoader)

        return PhaseResult.success_result(
            message=f'Facades bound; {len(loader.aliases())} alias(es) registered',
        )
