# application/console/kernel.py
from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

if TYPE_CHECKING:
    from application.application import Application

logger = logging.getLogger(__name__)


class Command:
    """A console command. Subclasses set ``name``/``help`` and implement ``handle``."""

    name: str = ''
    help: str = ''

    def configure(self, parser: argparse.ArgumentParser) -> None:
        pass

    def handle(self, app: Application, args: argparse.Namespace) -> int:
        raise NotImplementedError


class ConsoleKernel:

    def __init__(self, app: Application, commands: Iterable[Command] = ()) -> None:
        self.app = app
        self._commands: Dict[str, Command] = {}
        for command in commands:
            self.add(command)

    def add(self, command: Command) -> None:
        if not command.name:
            raise ValueError(f'{type(command).__name__} has no name')
        if command.name in self._commands:
            logger.warning("Console command '%s' replaced by %s", command.name, type(command).__name__)
        self._commands[command.name] = command

    def commands(self) -> List[str]:
        return sorted(self._commands)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='acorn', description=f'Application console (v{self.app.VERSION})')
        subparsers = parser.add_subparsers(dest='command', metavar='command')
        for name in self.commands():
            command = self._commands[name]
            command.configure(subparsers.add_parser(name, help=command.help))
        return parser

    def handle(self, argv: Optional[Sequence[str]] = None) -> int:
        parser = self.build_parser()
        args = parser.parse_args(argv)
        if not args.command:
            parser.print_help()
            return 1
        logger.debug("Running console command '%s'", args.command)
        return self._commands[args.command].handle(self.app, args) or 0
