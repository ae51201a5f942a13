"""
Common Click decorators and utilities for CLI commands.

Provides reusable option decorators shared by ``wtask`` and ``wsearch``.
"""
import click
from pathlib import Path
from typing import Callable, NoReturn

from wtask.core.models import TaskTable
from wtask.executor import StreamPolicy

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def config_option(f: Callable) -> Callable:
    """
    Add --config/-c option to command.

    Loads exactly the given file instead of the local/global locations.
    """
    return click.option(
        '-c', '--config', 'config_path',
        type=click.Path(path_type=Path, dir_okay=False),
        help='Path to config file (default: local, then global location)'
    )(f)


def stream_option(f: Callable) -> Callable:
    """Add --stream option selecting the child's stdout/stderr policy."""
    return click.option(
        '--stream',
        type=click.Choice([policy.value for policy in StreamPolicy]),
        default=StreamPolicy.INHERIT.value,
        show_default=True,
        help='inherit: child writes to the terminal; pipe: output is captured and forwarded'
    )(f)


def verbose_option(f: Callable) -> Callable:
    """Add --verbose/-v flag to command."""
    return click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)


def interactive_option(f: Callable) -> Callable:
    """Add --interactive/-i flag to command."""
    return click.option(
        '-i', '--interactive',
        is_flag=True,
        help='Pick from an interactive menu'
    )(f)


def list_option(f: Callable) -> Callable:
    """Add --list/-l flag to command."""
    return click.option(
        '-l', '--list', 'list_entries',
        is_flag=True,
        help='Show all configured aliases and exit'
    )(f)


def init_option(f: Callable) -> Callable:
    """Add --init flag to command."""
    return click.option(
        '--init', 'init_config',
        is_flag=True,
        help='Create a starter config in your home directory and exit'
    )(f)


def echo_table(tasks: TaskTable) -> None:
    """Print every alias with its name and description, in file order."""
    width = max(len(alias) for alias in tasks)
    for alias, task in tasks.items():
        line = f"{click.style(alias.ljust(width), fg='cyan', bold=True)}  {task.name}"
        if task.description:
            line += click.style(f"  {task.description}", dim=True)
        click.echo(line)


def fail(ctx: click.Context, message: str) -> NoReturn:
    """Print ``message`` in red to stderr and exit with status 1."""
    click.secho(message, fg='red', err=True)
    ctx.exit(1)
