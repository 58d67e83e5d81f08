#!/usr/bin/env python3
"""
minish - main entry point

Startup sequence:
1. Parse the command line
2. Load configuration (optional JSON file)
3. Initialize logging
4. Build the session state from the environment
5. Run the interactive loop, or a single command with -c

Author: YSNRFD
Version: 1.0.0
"""

import argparse
import sys
from typing import Optional, List

from minish import __version__
from minish.core.config_loader import ConfigLoader
from minish.core.state import ShellState
from minish.exceptions import ConfigError
from minish.logger import Logger, LogLevel, get_logger
from minish.shell.shell import Shell


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='minish',
        description='A small interactive command-line shell.',
    )
    parser.add_argument(
        '--config',
        metavar='FILE',
        help='JSON configuration file',
    )
    parser.add_argument(
        '-c',
        dest='command',
        metavar='COMMAND',
        help='run COMMAND and exit instead of reading from stdin',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for minish.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_arg_parser().parse_args(argv)

    loader = ConfigLoader()
    if args.config:
        try:
            loader.load(args.config)
        except ConfigError as e:
            print(f"minish: {e.message}", file=sys.stderr)
            return 2
    config = loader.config

    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file,
        console_output=config.logging.console_output,
        use_colors=config.logging.use_colors,
    )
    logger = get_logger('main')

    state = ShellState.from_environment(default_home=config.shell.default_home)
    logger.info("Starting shell", context={'cwd': state.cwd})

    shell = Shell(state, config=config)

    if args.command is not None:
        return shell.run_script(args.command)

    try:
        return shell.run()
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
