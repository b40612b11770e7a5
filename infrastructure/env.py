# infrastructure/env.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Final, Mapping, Optional

from dotenv import dotenv_values

from domain.ports.environment_port import EnvironmentPort

logger = logging.getLogger(__name__)

_CASTS: Final[Dict[str, Any]] = {
    'true': True,
    '(true)': True,
    'false': False,
    '(false)': False,
    'empty': '',
    '(empty)': '',
    'null': None,
    '(null)': None,
}



def _cast(value: str) -> Any:
    lowered = value.lower()
    if lowered in _CASTS:
        return _CASTS[lowered]
    if len(value) > 1 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def env(key: str, default: Optional[Any] = None, environ: Optional[Mapping[str, str]] = None) -> Any:
    """
    Read an environment variable, casting the usual literal spellings.

    ``true``/``false``/``null``/``empty`` (optionally parenthesised) become
    their Python values and surrounding quotes are stripped.
    """
    environ = os.environ if environ is None else environ
    if key not in environ:
        return default() if callable(default) else default
    return _cast(environ[key])


def load_dotenv(path: Path, override: bool = False, environ: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Load ``KEY=value`` lines from ``path`` into the environment."""
    environ = os.environ if environ is None else environ
    loaded: Dict[str, str] = {}
    if not Path(path).is_file():
        logger.debug('.env file not found: %s', path)
        return loaded

    for key, value in dotenv_values(path).items():
        if value is None:
            logger.warning('Ignoring %s in %s: no value', key, path)
            continue
        if override or key not in environ:
            environ[key] = value
            loaded[key] = value
    logger.debug('Loaded %d variable(s) from %s', len(loaded), path)
    return loaded


class HostEnvironment(EnvironmentPort):
    """Host-defined constants layered over process environment variables."""

    def __init__(self, constants: Optional[Mapping[str, Any]] = None, environ: Optional[Mapping[str, str]] = None) -> None:
        self._constants: Dict[str, Any] = dict(constants or {})
        self._environ = environ

    def define(self, name: str, value: Any) -> None:
        if name in self._constants:
            logger.warning('Constant %s already defined - ignored', name)
            return
        self._constants[name] = value

    def defined(self, name: str) -> bool:
        return name in self._constants

    def constant(self, name: str) -> Any:
        try:
            return self._constants[name]
        except KeyError:
            raise KeyError(f"Undefined constant '{name}'") from None

    def env(self, key: str, default: Optional[Any] = None) -> Any:
        return env(key, default, environ=self._environ)
