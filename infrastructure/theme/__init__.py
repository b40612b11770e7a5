from .filesystem_theme import FilesystemTheme

__all__ = ['FilesystemTheme']
