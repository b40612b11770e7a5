# bootstrap/signals/bootstrap_signals.py
"""Names of the host signals and extension points the Bootloader uses."""
from typing import Tuple

# Host lifecycle signals
AFTER_SETUP_THEME = 'after_setup_theme'
REST_API_INIT = 'rest_api_init'
DEFAULT_BOOT_SIGNALS: Tuple[str, ...] = (AFTER_SETUP_THEME, REST_API_INIT)

# Extension points (filters)
READY_FILTER = 'acorn/ready'
BASE_PATH_FILTER = 'acorn/paths.base'
BOOTSTRAP_FILTER = 'acorn/bootstrap'
PATH_ROLES: Tuple[str, ...] = ('app', 'config', 'storage', 'resources')


def role_path_filter(role: str) -> str:
    return f'acorn/paths.{role}'


# Actions fired by the Bootloader itself
APPLICATION_BOOTSTRAPPED = 'acorn/booted'

# Override for the base path, as a host constant or environment variable
BASE_PATH_OVERRIDE = 'ACORN_BASEPATH'

# Runs after handlers at the default priority (10)
BOOTLOADER_PRIORITY = 5
