# bootstrap/__main__.py
"""
Boot the application the way a host would and run a console command.

    python -m bootstrap --base-path /srv/app about
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

from bootstrap.core.bootloader import Bootloader
from bootstrap.signals.bootstrap_signals import AFTER_SETUP_THEME, BASE_PATH_OVERRIDE
from infrastructure.env import HostEnvironment, load_dotenv
from infrastructure.hooks.memory_hook_registry import MemoryHookRegistry
from infrastructure.theme.filesystem_theme import FilesystemTheme

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='python -m bootstrap', add_help=False)
    parser.add_argument('--base-path', help='Fix the application base path')
    parser.add_argument('--theme', help='Active theme directory')
    parser.add_argument('--parent-theme', help='Parent theme directory')
    parser.add_argument('--env-file', type=Path, help='Load environment variables from this file')
    parser.add_argument('-v', '--verbose', action='store_true')
    options, command_argv = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    if options.env_file:
        load_dotenv(options.env_file)
    os.environ.setdefault('APP_RUNNING_IN_CONSOLE', 'true')

    constants = {BASE_PATH_OVERRIDE: options.base_path} if options.base_path else {}
    hooks = MemoryHookRegistry()
    loader = Bootloader(
        hooks=hooks,
        theme=FilesystemTheme(options.theme, options.parent_theme),
        environment=HostEnvironment(constants),
    )

    result: Dict[str, int] = {}
    loader.call(lambda app: result.setdefault('exit_code', app.make('console.kernel').handle(command_argv)))
    hooks.do_action(AFTER_SETUP_THEME)
    return result.get('exit_code', 1)


if __name__ == '__main__':
    sys.exit(main())
