"""
Click-based CLI for wtask.

``wtask <alias>`` runs a task directly; ``wtask`` or ``wtask -i`` picks one
from a menu first.
"""
import click
import logging

from wtask.cli.common import (
    CONTEXT_SETTINGS,
    config_option,
    echo_table,
    fail,
    init_option,
    interactive_option,
    list_option,
    stream_option,
    verbose_option,
)
from wtask.cli.context import CLIContext
from wtask.cli.interactive import select_alias
from wtask.cli.terminal import install_shutdown_hook, shutdown
from wtask.core.config import TASKS_CONFIG_NAME, get_global_config_path
from wtask.core.errors import WtaskError
from wtask.core.scaffold import DEFAULT_TASKS_CONFIG, write_default_config
from wtask.executor import StreamPolicy, execute

# Configure logging format
logging.basicConfig(
    level=logging.INFO,
    format='%(message)s'
)

EXAMPLES = """\b
Examples:
  wtask gg              Run the task under [gg]
  wtask -i              Interactive mode
  wtask --list          Show all tasks
  wtask --stream pipe gg
"""


@click.command(context_settings=CONTEXT_SETTINGS, epilog=EXAMPLES)
@click.argument('alias', required=False)
@interactive_option
@list_option
@init_option
@config_option
@stream_option
@verbose_option
@click.pass_context
def cli(ctx, alias, interactive, list_entries, init_config, config_path, stream, verbose):
    """
    Task Manager CLI - run shell commands by alias.

    Tasks are read from wtask.toml next to the installation, or from
    ~/.wtask.toml. With no ALIAS, pick a task interactively.
    """
    ctx.obj = CLIContext(
        verbose=verbose,
        config_path=config_path,
        config_name=TASKS_CONFIG_NAME,
        stream_policy=StreamPolicy(stream),
    )

    # Configure logging level based on verbosity
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if init_config:
        path = config_path or get_global_config_path(TASKS_CONFIG_NAME)
        if write_default_config(path, DEFAULT_TASKS_CONFIG):
            click.echo(f"Created config file at: {path}")
        else:
            click.echo(f"Config file already exists at: {path}")
        return

    try:
        tasks = ctx.obj.get_tasks()
    except WtaskError as e:
        fail(ctx, str(e))

    if list_entries:
        echo_table(tasks)
        return

    if interactive or not alias:
        alias = select_alias(tasks)
        if alias is None:
            shutdown(0)

    execute(alias, tasks, ctx.obj.stream_policy)


def main():
    """
    Main entry point for the CLI.

    Installs the shutdown hook, then runs the click command.
    """
    install_shutdown_hook()
    try:
        cli()
    except Exception as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        shutdown(1)


if __name__ == '__main__':
    main()
