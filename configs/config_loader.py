from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Final, List, Optional, Sequence

import yaml

from bootstrap.exceptions import ConfigurationError
from configs.config_utils import ConfigMerger

__all__: Sequence[str] = ('ConfigLoader', 'DEFAULT_CONFIG')
logger = logging.getLogger(__name__)

_ENV_DEFAULT: Final[str] = 'production'
_SUFFIXES: Final[tuple] = ('.yaml', '.yml', '.json')

DEFAULT_CONFIG: Dict[str, Any] = {
    'app': {
        'name': 'Acorn',
        'env': _ENV_DEFAULT,
        'debug': False,
        'providers': [],
        'aliases': {},
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
    'bootstrap': {
        'skip': [],
    },
}

_RE_ENV_DEFAULT: Final[re.Pattern[str]] = re.compile('\\$\\{([A-Za-z_][A-Za-z0-9_]*)[:-](.*?)\\}')


def _interpolate_env(value: str) -> str:
    def _repl(match: re.Match[str]) -> str:
        var, default = (match.group(1), match.group(2).lstrip('-'))
        return os.getenv(var, default)

    before = value
    value = _RE_ENV_DEFAULT.sub(_repl, value)
    value = os.path.expandvars(value)

    if before != value:
        logger.debug("Env expand: '%s' → '%s'", before, value)
    elif '${' in before:
        logger.warning("Unresolved env var in '%s'", before)

    return value


def _expand_tree(node: Any) -> Any:
    if isinstance(node, dict):
        return {k: _expand_tree(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_expand_tree(v) for v in node]
    if isinstance(node, str):
        if _RE_ENV_DEFAULT.fullmatch(node.strip()):
            return _typed_scalar(_interpolate_env(node))
        return _interpolate_env(node)
    return node


def _typed_scalar(value: str) -> Any:
    # A value that is a single ${VAR:-default} takes the YAML type of what it expands to.
    try:
        loaded = yaml.safe_load(value)
    except yaml.YAMLError:
        return value
    return loaded if isinstance(loaded, (bool, int, float)) or loaded is None else value


def _load_file(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding='utf-8')
        if path.suffix.lower() == '.json':
            data = json.loads(text) or {}
        else:
            data = yaml.safe_load(text) or {}
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigurationError(f'Failed to read {path}: {exc}', phase='LoadConfiguration') from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f'{path} does not contain a top-level mapping', phase='LoadConfiguration')
    return data


class ConfigLoader:
    """
    Loads every ``*.yaml``/``*.yml``/``*.json`` file of a config directory.

    Each file becomes the top-level key named after its stem
    (``config/app.yaml`` -> ``app``). Files in a ``{env}/`` subdirectory
    are merged on top once the environment is known.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._config_path: Optional[Path] = Path(config_path) if config_path else None

    def load(self, env: Optional[str] = None) -> Dict[str, Any]:
        cfg: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_path is None or not self._config_path.is_dir():
            logger.info('No config directory (%s); using defaults', self._config_path)
            return _expand_tree(cfg)

        cfg = ConfigMerger.merge(cfg, self._load_directory(self._config_path), 'config')

        env = env or _expand_tree(cfg['app'].get('env')) or _ENV_DEFAULT
        env_dir = self._config_path / env
        if env_dir.is_dir():
            cfg = ConfigMerger.merge(cfg, self._load_directory(env_dir), f'config_{env}')
        cfg['app']['env'] = env

        cfg = _expand_tree(cfg)
        logger.info("✓ Configuration loaded from %s for env='%s'", self._config_path, env)
        logger.debug('Resolved config keys: %s', list(cfg))
        return cfg

    def _load_directory(self, directory: Path) -> Dict[str, Any]:
        loaded: Dict[str, Any] = {}
        for path in self._config_files(directory):
            if path.stem in loaded:
                logger.warning('Duplicate config key %s from %s - merged', path.stem, path.name)
                loaded[path.stem] = ConfigMerger.merge(loaded[path.stem], _load_file(path), path.stem)
            else:
                loaded[path.stem] = _load_file(path)
        return loaded

    @staticmethod
    def _config_files(directory: Path) -> List[Path]:
        return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in _SUFFIXES)
