"""
Click-based CLI for the search variant, ``wsearch``.

``wsearch <engine> <terms...>`` opens a search in the default browser. Missing
pieces (engine, terms) are asked for interactively.
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
    verbose_option,
)
from wtask.cli.context import CLIContext
from wtask.cli.interactive import prompt_query, select_alias
from wtask.cli.terminal import install_shutdown_hook, shutdown
from wtask.core.config import SEARCH_CONFIG_NAME, get_global_config_path
from wtask.core.errors import TaskNotFoundError, WtaskError
from wtask.core.scaffold import DEFAULT_SEARCH_CONFIG, write_default_config
from wtask.search import build_search_url, open_url

EXAMPLES = """\b
Examples:
  wsearch wt python click     Google for "python click"
  wsearch yt                  Ask for terms, then search YouTube
  wsearch -i                  Pick the engine interactively
"""


@click.command(context_settings=CONTEXT_SETTINGS, epilog=EXAMPLES)
@click.argument('engine', required=False)
@click.argument('terms', nargs=-1)
@interactive_option
@list_option
@init_option
@config_option
@verbose_option
@click.pass_context
def search(ctx, engine, terms, interactive, list_entries, init_config, config_path, verbose):
    """
    Web search launcher - open search-engine URLs by alias.

    Engines are read from wsearch.toml next to the installation, or from
    ~/.wsearch.toml.
    """
    ctx.obj = CLIContext(verbose=verbose, config_path=config_path, config_name=SEARCH_CONFIG_NAME)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if init_config:
        path = config_path or get_global_config_path(SEARCH_CONFIG_NAME)
        if write_default_config(path, DEFAULT_SEARCH_CONFIG):
            click.echo(f"Created config file at: {path}")
        else:
            click.echo(f"Config file already exists at: {path}")
        return

    try:
        engines = ctx.obj.get_tasks()
    except WtaskError as e:
        fail(ctx, str(e))

    if list_entries:
        echo_table(engines)
        return

    if interactive and engine:
        # with -i every positional is a search term
        terms = (engine,) + terms
        engine = None

    if interactive or not engine:
        engine = select_alias(engines, message="Select a search engine:", title="wsearch")
        if engine is None:
            shutdown(0)

    if engine not in engines:
        fail(ctx, str(TaskNotFoundError(engine, kind="Search engine")))

    query = " ".join(terms).strip() or prompt_query()
    if query is None:
        shutdown(0)

    url = build_search_url(engines[engine].run, query)
    click.echo(f"Opening {url}")
    try:
        code = open_url(url)
    except WtaskError as e:
        fail(ctx, str(e))
    ctx.exit(code)


def main():
    """Entry point for the ``wsearch`` console script."""
    install_shutdown_hook()
    try:
        search()
    except Exception as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        shutdown(1)


if __name__ == '__main__':
    main()
