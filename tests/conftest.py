import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

# --- BOILERPLATE TO MAKE THE TESTS RUNNABLE WITHOUT INSTALLING ---
def setup_path():
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

setup_path()
# -----------------------------------------------------------------

from application.facades import Facade
from infrastructure.env import HostEnvironment
from infrastructure.hooks.memory_hook_registry import MemoryHookRegistry
from infrastructure.theme.filesystem_theme import FilesystemTheme


class RecordingApplication:
    """Minimal ApplicationContract implementation that records what happens to it."""

    instances: List['RecordingApplication'] = []

    def __init__(self, base_path=None, paths=None):
        self.base_path = base_path
        self.paths = paths or {}
        self.phases: List[type] = []
        self.events: List[Any] = []
        self._bootstrapped = False
        RecordingApplication.instances.append(self)

    def bootstrap_with(self, phases):
        self.phases = list(phases)
        for phase in self.phases:
            self.events.append(('phase', phase.__name__))
        self._bootstrapped = True

    def has_been_bootstrapped(self):
        return self._bootstrapped

    def call(self, callback: Callable[[Any], Any]):
        return callback(self)

    def register(self, provider, force=False):
        self.events.append(('register', provider, force))
        return provider


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch):
    """Undo the global side effects of booting an application."""
    monkeypatch.delenv('ACORN_BASEPATH', raising=False)
    monkeypatch.delenv('APP_RUNNING_IN_CONSOLE', raising=False)
    monkeypatch.setattr(sys, 'excepthook', sys.excepthook)
    RecordingApplication.instances.clear()
    Facade.clear_resolved_instances()
    Facade.set_facade_application(None)
    root_handlers = list(logging.getLogger().handlers)
    yield
    logging.getLogger().handlers[:] = root_handlers
    Facade.clear_resolved_instances()
    Facade.set_facade_application(None)


@pytest.fixture
def hooks() -> MemoryHookRegistry:
    return MemoryHookRegistry()


@pytest.fixture
def environment() -> HostEnvironment:
    return HostEnvironment(environ={})


@pytest.fixture
def theme() -> FilesystemTheme:
    return FilesystemTheme()


@pytest.fixture
def app_tree(tmp_path) -> Path:
    """A base path with config/, storage/ and resources/ (no app/)."""
    base = tmp_path / 'site'
    (base / 'config').mkdir(parents=True)
    (base / 'storage').mkdir()
    (base / 'resources').mkdir()
    (base / 'config' / 'app.yaml').write_text(
        'name: Test App\n'
        'env: testing\n'
        'providers: []\n',
        encoding='utf-8',
    )
    return base


def write_yaml(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return path


@pytest.fixture
def recording_app_class():
    return RecordingApplication
