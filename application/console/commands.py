# application/console/commands.py
from __future__ import annotations

import argparse
import json
from typing import TYPE_CHECKING

from application.console.kernel import Command

if TYPE_CHECKING:
    from application.application import Application


class AboutCommand(Command):
    name = 'about'
    help = 'Display basic information about the application'

    def configure(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument('--json', action='store_true', help='Output as JSON')

    def handle(self, app: Application, args: argparse.Namespace) -> int:
        info = {
            'name': app.make('config').get('app.name'),
            'version': app.VERSION,
            'environment': app.environment,
            'base_path': str(app.base_path()),
            'paths': {role: str(app.path(role)) for role in ('app', 'config', 'storage', 'resources')},
            'providers': app.loaded_providers(),
        }
        if args.json:
            print(json.dumps(info, indent=2))
            return 0

        print(f"{info['name']} {info['version']} ({info['environment']})")
        print(f"  base: {info['base_path']}")
        for role, path in info['paths'].items():
            print(f"  {role}: {path}")
        print(f"  providers: {len(info['providers'])}")
        for provider in info['providers']:
            print(f"    - {provider}")
        return 0


class ConfigShowCommand(Command):
    name = 'config:show'
    help = 'Display a configuration value'

    def configure(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument('key', nargs='?', default=None, help='Dotted configuration key')

    def handle(self, app: Application, args: argparse.Namespace) -> int:
        config = app.make('config')
        if args.key and not config.has(args.key):
            print(f"Configuration '{args.key}' does not exist.")
            return 1
        value = config.get(args.key) if args.key else config.all()
        print(json.dumps(value, indent=2, default=str))
        return 0


BUILTIN_COMMANDS = (AboutCommand, ConfigShowCommand)
