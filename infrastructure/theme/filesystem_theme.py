# infrastructure/theme/filesystem_theme.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from domain.ports.theme_port import ThemePort

logger = logging.getLogger(__name__)


class FilesystemTheme(ThemePort):
    """
    Theme layout backed by plain directories.

    ``stylesheet_dir`` is the active theme; ``template_dir`` is its parent
    theme and defaults to the active theme when there is no parent.
    """

    def __init__(self, stylesheet_dir: Optional[Union[str, Path]] = None, template_dir: Optional[Union[str, Path]] = None) -> None:
        self._stylesheet_dir = str(stylesheet_dir) if stylesheet_dir else None
        self._template_dir = str(template_dir) if template_dir else self._stylesheet_dir

    def stylesheet_directory(self) -> Optional[str]:
        return self._stylesheet_dir

    def template_directory(self) -> Optional[str]:
        return self._template_dir

    def locate_template(self, names: Union[str, Sequence[str]]) -> str:
        if isinstance(names, str):
            names = [names]
        for name in names:
            name = name.strip('/\\')
            if not name:
                continue
            for root in (self._stylesheet_dir, self._template_dir):
                if not root:
                    continue
                candidate = os.path.join(root, name)
                if os.path.exists(candidate):
                    logger.debug("Located template '%s' at %s", name, candidate)
                    return candidate
        return ''

