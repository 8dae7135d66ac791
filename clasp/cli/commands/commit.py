"""Commit command - create a commit from staged changes."""

import click
from clasp.core.errors import ClaspError
from clasp.cli.context import require_repository
from clasp.cli.output import success, error, info


@click.command('commit')
@click.argument('message')
@click.pass_context
def commit_cmd(ctx, message):
    """
    Record the staged files as a new commit.

    The commit lists every entry in the staging area, points to the
    previous commit as its parent, and becomes the new HEAD. The
    staging area is emptied afterwards.

    Examples:
        clasp commit "Initial commit"
    """
    repo = require_repository(ctx)

    try:
        staged = len(repo.index.current())
        parent = repo.graph.head()
        commit_hash = repo.graph.commit(message)
    except ClaspError as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()

    click.echo(success(f"Commit created successfully: {commit_hash}"))
    if parent:
        click.echo(info(f"Parent: {parent[:7]}"))
    else:
        click.echo(info("(root commit)"))
    click.echo(info(f"Files: {staged}"))
