"""Main CLI entry point for Clasp."""

import logging

import click
from colorama import init

from clasp import __version__
from clasp.core.config import get_config
from clasp.core.repository import Repository
from clasp.cli.output import BANNER
from clasp.cli.commands import (init_cmd, add_cmd, commit_cmd, log_cmd, show_cmd, tree_cmd,
                                cat_file_cmd, count_objects_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class ClaspGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


def configure_logging(verbose: bool, path: str) -> None:
    """
    Set the log level for this invocation.

    --verbose wins; otherwise core.loglevel from config, then WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        repo = Repository.find_repository(path)
        name = get_config(repo).get('core', 'loglevel', 'WARNING')
        level = getattr(logging, name.upper(), logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('clasp').setLevel(level)


@click.group(cls=ClaspGroup)
@click.version_option(version=__version__)
@click.option('-C', '--repo', 'repo_path', default='.', show_default=True,
              help='Repository root (searched upward for .clasp)')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, repo_path, verbose):
    ctx.ensure_object(dict)
    ctx.obj['repo_path'] = repo_path
    configure_logging(verbose, repo_path)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(show_cmd)
cli.add_command(tree_cmd)
cli.add_command(cat_file_cmd)
cli.add_command(count_objects_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
