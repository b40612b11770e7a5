# bootstrap/config/__init__.py
"""
Bootstrap Configuration Module

Construction parameters for the Bootloader.
"""

from .bootstrap_config import BootloaderConfig, import_string

__all__ = ['BootloaderConfig', 'import_string']
