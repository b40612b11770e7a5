import copy
import logging
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)


class ConfigMerger:
    """Deep merge for configuration trees loaded from several files."""

    @staticmethod
    def merge(
        base: Mapping[str, Any],
        override: Mapping[str, Any],
        context_description: str = 'config',
        strict_keys: bool = False,
    ) -> Dict[str, Any]:
        """
        Return ``base`` with ``override`` layered on top.

        Nested mappings merge key by key; any other value in ``override``
        (lists included) replaces the one in ``base``. With ``strict_keys``
        an override key missing from ``base`` raises ValueError. The inputs
        are left untouched.
        """
        result: Dict[str, Any] = copy.deepcopy(dict(base))

        for key, value in override.items():
            path = f'{context_description}.{key}'
            current = result.get(key)

            if key not in result and strict_keys:
                raise ValueError(f"Strict mode: unknown key '{path}'")

            if isinstance(current, Mapping) and isinstance(value, Mapping):
                result[key] = ConfigMerger.merge(current, value, path, strict_keys)
                continue

            if key in result and current != value:
                logger.debug("Override '%s'", path)
            result[key] = copy.deepcopy(value)

        return result


def merge_configs(base: Mapping[str, Any], *overrides: Mapping[str, Any], context: str = 'config') -> Dict[str, Any]:
    """Merge each of ``overrides`` onto ``base`` in turn."""
    merged = dict(base)
    for override in overrides:
        merged = ConfigMerger.merge(merged, override, context)
    return merged
