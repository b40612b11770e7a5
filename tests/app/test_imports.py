import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.mark.parametrize('module', [
    'application.facades',
    'application.application',
    'application.console',
    'bootstrap',
    'bootstrap.__main__',
    'configs',
    'core.registry',
    'infrastructure.env',
])
def test_module_imports_first_in_a_fresh_interpreter(module):
    result = subprocess.run(
        [sys.executable, '-c', f'import {module}'],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
