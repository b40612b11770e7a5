from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet

import yaml

from .base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application

THEME_MANIFEST = 'theme.yaml'


class ThemeFeatures(BootstrapPhase):
    """
    Reads the optional ``features`` list from ``theme.yaml`` in the base
    path and binds it as ``theme.features``.
    """

    def execute(self, app: Application) -> PhaseResult:
        manifest = app.base_path(THEME_MANIFEST)
        features: FrozenSet[str] = frozenset()
        warnings = []

        if manifest.is_file():
            try:
                data = yaml.safe_load(manifest.read_text(encoding='utf-8')) or {}
            except (OSError, yaml.YAMLError) as exc:
                data = {}
                warnings.append(f'Could not read {manifest}: {exc}')
            if not isinstance(data, dict):
                warnings.append(f'{manifest} does not contain a top-level mapping - ignored')
                data = {}
            features = frozenset(str(f) for f in data.get('features', None) or [])

        app.instance('theme.features', features)
        return PhaseResult.success_result(
            message=f'{len(features)} theme feature(s) enabled',
            warnings=warnings,
            metadata={'features': sorted(features)}
        )
