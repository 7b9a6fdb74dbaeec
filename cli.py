#!/usr/bin/env python3
"""
================================================================================
CLI - Command Line Interface
================================================================================

Command-line access to the employee directory:
    - Interactive role-based console (login, menus, CRUD)
    - Seeded login credentials
    - Role / permission overview

Features:
    - ANSI colors (disable with --no-color or display.color=false)
    - Argument parsing for all commands
    - Error handling with user-friendly messages

Usage:
    python cli.py [command] [options]
    python cli.py --help

Author: robertbiv
Last Modified: October 2026
================================================================================
"""

import sys
import argparse
from pathlib import Path

from employee_directory.core.access import describe_access, get_role_permissions, menu_for
from employee_directory.core.models import Role
from employee_directory.tools.console import Colors, EmployeeConsole, credential_lines
from employee_directory.utils.config import load_config
from employee_directory.utils.logger import logger, setup_logging

USE_COLOR = True


def _paint(text, *codes):
    if not USE_COLOR:
        return text
    return f"{''.join(codes)}{text}{Colors.ENDC}"


def print_header(text):
    """Print formatted header"""
    print(f"\n{_paint('=' * 70, Colors.BOLD, Colors.BLUE)}")
    print(_paint(f"{text:^70}", Colors.BOLD, Colors.CYAN))
    print(f"{_paint('=' * 70, Colors.BOLD, Colors.BLUE)}\n")


def print_error(text):
    """Print error message"""
    print(f"{_paint('✗', Colors.RED)} {text}")


def print_info(text):
    """Print info message"""
    print(f"{_paint('ℹ', Colors.CYAN)} {text}")


def _section(config, name):
    section = config.get(name)
    if not isinstance(section, dict):
        section = config[name] = {}
    return section


def _load_config(args):
    config_path = getattr(args, 'config', None)
    config = load_config(Path(config_path) if config_path else None)
    if getattr(args, 'no_color', False):
        _section(config, 'display')['color'] = False
    if getattr(args, 'log_level', None):
        _section(config, 'logging')['level'] = args.log_level
    return config


def cmd_run(args):
    """Start the interactive console"""
    config = _load_config(args)
    setup_logging('cli', config)
    console = EmployeeConsole.with_seed_data(config)
    return console.run() == 0


def cmd_info(args):
    """Show seeded login credentials"""
    print_header("EMPLOYEE DIRECTORY")
    print_info("Records are held in memory and reset on every run.")
    print("\nDefault Login Credentials for Testing:")
    for line in credential_lines():
        print(f"  {line}")
    return True


def cmd_roles(args):
    """Show what each role may do"""
    print_header("ROLES & PERMISSIONS")
    for role in Role:
        granted = sorted(p.value for p in get_role_permissions(role))
        print(_paint(role.value, Colors.BOLD))
        print(f"  {describe_access(role)}")
        print(f"  Permissions: {', '.join(granted)}")
        print(f"  Menu: {' | '.join(entry.label for entry in menu_for(role))}")
    return True


def build_parser():
    parser = argparse.ArgumentParser(
        description='Employee Directory - Role-based employee records console',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  %(prog)s                    # Start the interactive console
  %(prog)s --no-color run     # Console without ANSI colors
  %(prog)s info               # Show seeded login credentials
  %(prog)s roles              # Show role permissions
        '''
    )
    parser.add_argument('--config', help='Path to config.json (default: configs/config.json)')
    parser.add_argument('--no-color', action='store_true', dest='no_color', help='Disable ANSI colors')
    parser.add_argument('--log-level', dest='log_level',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Console log level (default from config)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    parser_run = subparsers.add_parser('run', help='Start the interactive console')
    parser_run.set_defaults(func=cmd_run)

    parser_info = subparsers.add_parser('info', help='Show seeded login credentials')
    parser_info.set_defaults(func=cmd_info)

    parser_roles = subparsers.add_parser('roles', help='Show role permissions and menus')
    parser_roles.set_defaults(func=cmd_roles)

    return parser


def main(argv=None):
    """Main CLI entry point"""
    global USE_COLOR
    parser = build_parser()
    args = parser.parse_args(argv)
    USE_COLOR = not args.no_color

    # No command means the interactive console
    func = getattr(args, 'func', cmd_run)

    try:
        success = func(args)
        return 0 if success else 1
    except (KeyboardInterrupt, EOFError):
        print_info("\nOperation cancelled by user")
        return 130
    except Exception as e:
        logger.exception("Unexpected failure")
        print_error(f"An error occurred: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
