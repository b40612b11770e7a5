from unittest.mock import MagicMock

from bootstrap.core.pipeline import DEFAULT_PHASES, BootstrapPipeline
from bootstrap.phases import (
    BootProviders,
    CaptureRequest,
    HandleExceptions,
    LoadConfiguration,
    RegisterConsole,
    RegisterFacades,
    RegisterProviders,
    ThemeFeatures,
)
from bootstrap.signals.bootstrap_signals import BOOTSTRAP_FILTER


def test_builtin_phase_order(hooks):
    assert BootstrapPipeline(hooks).phases() == [
        CaptureRequest,
        ThemeFeatures,
        LoadConfiguration,
        HandleExceptions,
        RegisterProviders,
        RegisterFacades,
        BootProviders,
        RegisterConsole,
    ]


def test_filter_can_remove_a_phase(hooks, recording_app_class):
    hooks.add_filter(BOOTSTRAP_FILTER, lambda phases: [p for p in phases if p is not RegisterFacades])
    app = recording_app_class()

    BootstrapPipeline(hooks).run(app)

    assert RegisterFacades not in app.phases
    assert app.phases == [p for p in DEFAULT_PHASES if p is not RegisterFacades]


def test_filter_can_reorder_and_extend(hooks):
    extra = type('WarmCaches', (), {})
    hooks.add_filter(BOOTSTRAP_FILTER, lambda phases: list(reversed(phases)) + [extra])

    phases = BootstrapPipeline(hooks).phases()

    assert phases[0] is RegisterConsole
    assert phases[-1] is extra


def test_filter_does_not_mutate_defaults(hooks):
    hooks.add_filter(BOOTSTRAP_FILTER, lambda phases: phases.clear() or phases)
    BootstrapPipeline(hooks).phases()
    assert len(DEFAULT_PHASES) == 8


def test_run_hands_phases_to_application(hooks):
    app = MagicMock()
    phases = BootstrapPipeline(hooks).run(app)
    app.bootstrap_with.assert_called_once_with(phases)
