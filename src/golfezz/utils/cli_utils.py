"""
Command registry and parser builder for the golfezz CLI.

Commands are plain functions registered with CommandRegistry.register
under a parent group ('auth', 'courses', ...). CLIBuilder turns the
registry into an argparse tree of `golfezz <group> <command>`.
"""

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from golfezz.config.types import AppConfig

if TYPE_CHECKING:
    from golfezz.client import GolfEzzClient

@dataclass
class CLIContext:
    """Everything a command handler needs."""
    args: argparse.Namespace
    logger: logging.Logger
    config: AppConfig
    parser: argparse.ArgumentParser
    client: 'GolfEzzClient'

class CommandCategory(Enum):
    """Command groups, in the order shown in help."""
    AUTH = 'Account'
    DASHBOARD = 'Dashboards'
    COURSES = 'Courses'
    BOOKINGS = 'Bookings'
    RANGE = 'Driving range'
    ADMIN = 'Administration'

Handler = Callable[[CLIContext], int]

@dataclass
class CommandMetadata:
    name: str
    help_text: str
    category: CommandCategory
    handler: Handler
    options: list[dict[str, Any]]
    parent_command: str | None = None

    @property
    def key(self) -> str:
        """Registry key, qualified by parent command."""
        return f"{self.parent_command}.{self.name}" if self.parent_command else self.name

def _is_date(value: str) -> bool:
    datetime.strptime(value, '%Y-%m-%d')
    return True

def _is_time(value: str) -> bool:
    datetime.strptime(value, '%H:%M')
    return True

class CLIOptionFactory:
    """Option specs shared by several commands.

    An option is a dict of the keyword arguments for add_argument plus 'name', and
    optionally a 'validator' callable checked after parsing.
    """

    @staticmethod
    def create_format_option() -> dict[str, Any]:
        return {
            'name': '--format',
            'choices': ['text', 'json'],
            'default': 'text',
            'help': 'Output as a table or as JSON (default: text)'
        }

    @staticmethod
    def create_date_option(required: bool = False) -> dict[str, Any]:
        return {
            'name': '--date',
            'required': required,
            'help': 'Date in YYYY-MM-DD format',
            'validator': _is_date
        }

    @staticmethod
    def create_time_option(required: bool = False) -> dict[str, Any]:
        return {
            'name': '--time',
            'required': required,
            'help': 'Time in HH:MM format',
            'validator': _is_time
        }

    @staticmethod
    def create_id_argument(name: str, help_text: str) -> dict[str, Any]:
        return {'name': name, 'help': help_text}

    @staticmethod
    def create_pagination_options() -> list[dict[str, Any]]:
        return [
            {
                'name': '--page',
                'type': int,
                'default': 1,
                'help': 'Page number (default: 1)',
                'validator': lambda x: x >= 1
            },
            {
                'name': '--limit',
                'type': int,
                'default': 20,
                'help': 'Page size, 1-100 (default: 20)',
                'validator': lambda x: 1 <= x <= 100
            }
        ]

class CommandRegistry:
    """Process-wide table of registered commands, keyed by 'group.name'."""

    _commands: dict[str, CommandMetadata] = {}

    @classmethod
    def register(cls,
                name: str,
                help_text: str,
                category: CommandCategory,
                options: list[dict[str, Any]] | None = None,
                parent_command: str | None = None) -> Callable[[Handler], Handler]:
        """Decorator registering a handler; the handler is returned unchanged."""
        def decorator(handler: Handler) -> Handler:
            metadata = CommandMetadata(
                name=name,
                help_text=help_text,
                category=category,
                handler=handler,
                options=options or [],
                parent_command=parent_command
            )
            cls._commands[metadata.key] = metadata
            return handler
        return decorator

    @classmethod
    def all_commands(cls) -> list[CommandMetadata]:
        return list(cls._commands.values())

    @classmethod
    def get_command(cls, name: str, parent_command: str | None = None) -> CommandMetadata | None:
        key = f"{parent_command}.{name}" if parent_command else name
        return cls._commands.get(key)

    @classmethod
    def by_category(cls) -> dict[CommandCategory, list[CommandMetadata]]:
        """Registered commands grouped by category, in category order."""
        grouped: dict[CommandCategory, list[CommandMetadata]] = {c: [] for c in CommandCategory}
        for command in cls._commands.values():
            grouped[command.category].append(command)
        return {c: commands for c, commands in grouped.items() if commands}

class ArgumentValidator:
    """Post-parse checks that argparse types cannot express."""

    @staticmethod
    def _dest(option: dict[str, Any]) -> str:
        return option.get('dest') or option['name'].lstrip('-').replace('-', '_')

    @staticmethod
    def validate_option(option: dict[str, Any], value: Any) -> bool:
        """Run the option's validator; a validator that raises counts as a failure."""
        validator = option.get('validator')
        if validator is None:
            return True
        try:
            return bool(validator(value))
        except (TypeError, ValueError):
            return False

    @staticmethod
    def validate_args(args: argparse.Namespace, command: CommandMetadata) -> list[str]:
        """Return one message per invalid option value."""
        errors = []
        for option in command.options:
            value = getattr(args, ArgumentValidator._dest(option), None)
            if value is not None and not ArgumentValidator.validate_option(option, value):
                errors.append(f"Invalid value for {option['name']}: {value}")
        return errors

def add_common_options(parser: argparse.ArgumentParser) -> None:
    """Add the global options accepted before any command group."""
    parser.add_argument(
        '--config-dir',
        help='Directory holding config.yaml and the saved session (default: ~/.config/golfezz)'
    )
    parser.add_argument(
        '--api-url',
        help='Override the backend API base URL'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging output'
    )
    parser.add_argument(
        '--log-file',
        help='Also write JSON logs to this file'
    )

class CLIBuilder:
    """Builds the argparse tree from registered commands."""

    # Option keys consumed here rather than by add_argument
    _CUSTOM_FIELDS = {'name', 'validator'}

    def __init__(self, description: str):
        self.parser = argparse.ArgumentParser(
            prog='golfezz',
            description=description,
            formatter_class=argparse.RawDescriptionHelpFormatter
        )
        self.subparsers = self.parser.add_subparsers(dest='command', metavar='<group>')
        self._groups: 'dict[str, argparse._SubParsersAction[Any]]' = {}
        add_common_options(self.parser)

    def _group(self, parent_command: str) -> 'argparse._SubParsersAction[Any]':
        if parent_command not in self._groups:
            group_parser = self.subparsers.add_parser(
                parent_command,
                help=f"{parent_command.capitalize()} commands"
            )
            self._groups[parent_command] = group_parser.add_subparsers(
                dest=f"{parent_command}_subcommand",
                metavar='<command>',
                required=True
            )
        return self._groups[parent_command]

    def add_command(self, command: CommandMetadata) -> None:
        """Add one command and its options to the tree."""
        target = self._group(command.parent_command) if command.parent_command else self.subparsers
        parser = target.add_parser(command.name, help=command.help_text)

        for option in command.options:
            kwargs = {k: v for k, v in option.items() if k not in self._CUSTOM_FIELDS}
            if not option['name'].startswith('-'):
                # Positionals are always required
                kwargs.pop('required', None)
            parser.add_argument(option['name'], **kwargs)

        parser.set_defaults(command_key=command.key)

    def build(self) -> argparse.ArgumentParser:
        """Return the parser, with commands listed by category in the help epilog."""
        lines = []
        for category, commands in CommandRegistry.by_category().items():
            lines.append(f"{category.value}:")
            for command in commands:
                lines.append(f"  {command.key.replace('.', ' '):<28}{command.help_text}")
        self.parser.epilog = "\n".join(lines)
        return self.parser
