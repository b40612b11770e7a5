import pytest

from application.application import Application
from application.service_provider import ServiceProvider
from bootstrap.core.bootloader import Bootloader, BootloaderState
from bootstrap.core.pipeline import DEFAULT_PHASES
from bootstrap.phases import LoadConfiguration
from bootstrap.signals.bootstrap_signals import BOOTSTRAP_FILTER
from configs.config_loader import DEFAULT_CONFIG
from infrastructure.env import HostEnvironment

seen = []


class CallbackDuringRegisterProvider(ServiceProvider):
    loader = None

    def register(self):
        type(self).loader.call(lambda app: seen.append(('during-register', app.is_booted())))


@pytest.fixture
def real_loader(hooks, app_tree):
    seen.clear()
    (app_tree / 'config' / 'app.yaml').write_text(
        'name: Test App\n'
        'providers:\n'
        f'  - {__name__}.CallbackDuringRegisterProvider\n',
        encoding='utf-8',
    )
    loader = Bootloader(
        hooks=hooks,
        environment=HostEnvironment(environ={'ACORN_BASEPATH': str(app_tree)}),
    )
    CallbackDuringRegisterProvider.loader = loader
    yield loader
    CallbackDuringRegisterProvider.loader = None


def test_calls_made_while_bootstrapping_wait_for_the_pipeline(real_loader, hooks):
    real_loader.call(lambda app: seen.append(('queued', app.is_booted())))

    hooks.do_action('after_setup_theme')

    assert seen == [('queued', True), ('during-register', True)]
    assert real_loader.state is BootloaderState.READY
    assert len(real_loader.queue) == 0


def test_calls_after_boot_still_run_immediately(real_loader, hooks):
    hooks.do_action('after_setup_theme')
    seen.clear()

    real_loader.call(lambda app: seen.append(('late', app.is_booted())))

    assert seen == [('late', True)]


def test_filtering_out_load_configuration_keeps_the_other_phases(hooks, app_tree):
    hooks.add_filter(BOOTSTRAP_FILTER, lambda phases: [p for p in phases if p is not LoadConfiguration])
    loader = Bootloader(
        hooks=hooks,
        environment=HostEnvironment(environ={'ACORN_BASEPATH': str(app_tree)}),
    )

    hooks.do_action('after_setup_theme')

    app = loader.application()
    assert isinstance(app, Application)
    assert app.phase_summary.executed == [p.__name__ for p in DEFAULT_PHASES if p is not LoadConfiguration]
    assert app.make('config').get('app.name') == DEFAULT_CONFIG['app']['name']
    assert app.is_booted()
    assert loader.state is BootloaderState.READY
