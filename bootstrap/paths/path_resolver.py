"""
Path Resolver - Locates the application's base path and role directories.

The resolver must work whether the package is vendored inside a theme,
installed standalone, or explicitly configured, and it runs before any
configuration file has been loaded.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from bootstrap.signals.bootstrap_signals import BASE_PATH_FILTER, BASE_PATH_OVERRIDE, PATH_ROLES, role_path_filter
from domain.ports.environment_port import EnvironmentPort
from domain.ports.hook_port import HookPort
from domain.ports.theme_port import ThemePort

logger = logging.getLogger(__name__)

PACKAGE_ROOT: Path = Path(__file__).resolve().parents[2]


class PathResolver:
    """
    Resolves the base path and the ``app``/``config``/``storage``/``resources``
    role paths once, then serves the memoized values.
    """

    def __init__(
        self,
        hooks: HookPort,
        theme: ThemePort,
        environment: EnvironmentPort,
        *,
        override_name: str = BASE_PATH_OVERRIDE,
        package_root: Optional[Path] = None,
    ) -> None:
        self.hooks = hooks
        self.theme = theme
        self.environment = environment
        self.override_name = override_name
        self.package_root = package_root if package_root is not None else PACKAGE_ROOT
        self._base_path: Optional[Path] = None
        self._paths: Optional[Dict[str, Optional[Path]]] = None
        self._lock = threading.RLock()

    def resolve_base(self) -> Path:
        if self._base_path is not None:
            return self._base_path

        with self._lock:
            if self._base_path is not None:
                return self._base_path

            located = self.theme.locate_template('config')
            base_path: Union[str, Path] = Path(located).parent if located else self.package_root

            if self.environment.defined(self.override_name):
                base_path = self.environment.constant(self.override_name)
                logger.debug('Base path fixed by constant %s: %s', self.override_name, base_path)
            else:
                base_path = self.environment.env(self.override_name, base_path)

            base_path = self.hooks.apply_filters(BASE_PATH_FILTER, base_path)

            self._base_path = Path(base_path)
            logger.info('Resolved base path: %s', self._base_path)
            return self._base_path

    def resolve_role(self, role: str) -> Optional[Path]:
        if role not in PATH_ROLES:
            raise ValueError(f"Unknown path role '{role}'. Expected one of {list(PATH_ROLES)}")
        return self.resolve_paths()[role]

    def resolve_paths(self) -> Dict[str, Optional[Path]]:
        if self._paths is not None:
            return dict(self._paths)

        with self._lock:
            if self._paths is None:
                paths: Dict[str, Optional[Path]] = {}
                for role in PATH_ROLES:
                    found = self.find_path(role)
                    filtered = self.hooks.apply_filters(role_path_filter(role), found)
                    paths[role] = Path(filtered) if filtered else None
                    logger.debug("Role '%s' -> %s", role, paths[role])
                self._paths = paths
            return dict(self._paths)

    def candidates(self, role: str) -> List[Optional[str]]:
        """Candidate directories for ``role`` in priority order, unfiltered."""
        role = role.strip('/\\')
        stylesheet = self.theme.stylesheet_directory()
        template = self.theme.template_directory()
        return [
            os.path.join(str(self.resolve_base()), role),
            self.theme.locate_template(role) or None,
            os.path.join(stylesheet, role) if stylesheet else None,
            os.path.join(template, role) if template else None,
            os.path.join(str(self.package_root), role),
        ]

    def find_path(self, role: str) -> Optional[Path]:
        seen = set()
        existing: List[str] = []
        for candidate in self.candidates(role):
            if not isinstance(candidate, str) or not os.path.isdir(candidate):
                continue
            key = os.path.normpath(candidate)
            if key in seen:
                continue
            seen.add(key)
            existing.append(candidate)

        if not existing:
            logger.debug("No directory found for role '%s'", role)
            return None
        return Path(existing[0])

