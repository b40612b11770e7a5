# domain/ports/theme_port.py
"""Interface for the host's template/theme layout."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union, runtime_checkable


@runtime_checkable
class ThemePort(Protocol):

    def stylesheet_directory(self) -> Optional[str]:
        """Directory of the active (child) theme."""
        ...

    def template_directory(self) -> Optional[str]:
        """Directory of the parent theme; equals the stylesheet directory without a child theme."""
        ...

    def locate_template(self, names: Union[str, Sequence[str]]) -> str:
        """First existing path for ``names`` in the theme directories, or ``''``."""
        ...
