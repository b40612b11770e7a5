from .config_loader import DEFAULT_CONFIG, ConfigLoader
from .config_utils import ConfigMerger, merge_configs
from .repository import ConfigRepository

__all__ = ['DEFAULT_CONFIG', 'ConfigLoader', 'ConfigMerger', 'merge_configs', 'ConfigRepository']
