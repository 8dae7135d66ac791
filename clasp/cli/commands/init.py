"""Initialize a new Clasp repository."""

import click
from clasp.core.errors import AlreadyInitializedError, ClaspError
from clasp.core.repository import Repository
from clasp.cli.context import repo_path
from clasp.cli.output import success, error, info, warning


@click.command('init')
@click.pass_context
def init_cmd(ctx):
    """
    Initialize a new Clasp repository.

    Creates a .clasp directory with an object database, an empty HEAD
    and an empty staging index. Running it again leaves existing
    objects, HEAD and index untouched.

    Examples:
        clasp init                  # Initialize in current directory
        clasp -C my-project init    # Initialize in my-project directory
    """
    repo = Repository(repo_path(ctx))

    try:
        repo.init()
    except AlreadyInitializedError:
        click.echo(warning(f"Already initialized the .clasp folder in {repo.work_tree}"))
        return
    except ClaspError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()

    click.echo(success(f"Initialized empty Clasp repository in {repo.clasp_dir}"))
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  clasp add <file>"))
    click.echo(info("  clasp commit \"message\""))
