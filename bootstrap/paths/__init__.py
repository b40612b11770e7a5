from .path_resolver import PACKAGE_ROOT, PathResolver

__all__ = ['PACKAGE_ROOT', 'PathResolver']
