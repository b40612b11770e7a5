import importlib
from typing import Any


def import_string(dotted_path: str) -> Any:
    """Import ``package.module.Attr`` and return ``Attr``."""
    module_path, _, attr = dotted_path.rpartition('.')
    if not module_path:
        raise ImportError(f"'{dotted_path}' is not a dotted path")
    module = importlib.import_module(module_path)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ImportError(f"Module '{module_path}' has no attribute '{attr}'") from exc
