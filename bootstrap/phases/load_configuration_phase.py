from __future__ import annotations

from typing import TYPE_CHECKING

from .base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application


class LoadConfiguration(BootstrapPhase):
    """Loads the config directory into a ``ConfigRepository`` bound as ``config``."""

    def execute(self, app: Application) -> PhaseResult:
        # configs imports bootstrap.exceptions, which imports this package
        from configs.config_loader import ConfigLoader
        from configs.repository import ConfigRepository

        config_path = app.config_path()
        items = ConfigLoader(config_path).load()

        config = ConfigRepository(items)
        app.instance('config', config)
        app.alias('config', ConfigRepository)
        app.environment = config.get('app.env', app.environment)

        return PhaseResult.success_result(
            message=f"Loaded {len(config)} configuration section(s) for '{app.environment}'",
            metadata={'config_path': str(config_path), 'sections': sorted(config)}
        )
