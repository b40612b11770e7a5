from .memory_hook_registry import DEFAULT_PRIORITY, MemoryHookRegistry

__all__ = ['DEFAULT_PRIORITY', 'MemoryHookRegistry']
