from .commands import BUILTIN_COMMANDS, AboutCommand, ConfigShowCommand
from .kernel import Command, ConsoleKernel

__all__ = ['BUILTIN_COMMANDS', 'AboutCommand', 'ConfigShowCommand', 'Command', 'ConsoleKernel']
