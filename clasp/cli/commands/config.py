"""Config command - manage repository configuration."""

import click
from clasp.core.config import Config, split_key
from clasp.core.repository import Repository
from clasp.cli.context import repo_path
from clasp.cli.output import success, error, info


def load_config(ctx, is_global):
    """Config bound to the current repository, if any."""
    repo = Repository.find_repository(repo_path(ctx))
    if not is_global and not repo:
        click.echo(error("Not a clasp repository (use --global for global config)"))
        raise click.Abort()
    return Config(repo.config_file if repo else None)


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
@click.pass_context
def config_set(ctx, key, value, is_global):
    """
    Set a config value.

    Examples:
        clasp config set color.ui false
        clasp config set --global core.loglevel INFO
    """
    config = load_config(ctx, is_global)
    section, option = split_key(key)
    config.set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
@click.pass_context
def config_get(ctx, key, is_global):
    """
    Get a config value.

    Examples:
        clasp config get color.ui
    """
    repo = None if is_global else Repository.find_repository(repo_path(ctx))
    config = Config(repo.config_file if repo else None)
    section, option = split_key(key)

    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
@click.pass_context
def config_unset(ctx, key, is_global):
    """Remove a config value."""
    config = load_config(ctx, is_global)
    section, option = split_key(key)

    if not config.unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Removed {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
@click.pass_context
def config_list(ctx, is_global):
    """
    List all config values.

    Examples:
        clasp config list
        clasp config list --global
    """
    repo = None if is_global else Repository.find_repository(repo_path(ctx))
    config = Config(repo.config_file if repo else None)

    values = config.list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return

    for section, items in values.items():
        for key, value in items.items():
            click.echo(f"{section}.{key}={value}")
