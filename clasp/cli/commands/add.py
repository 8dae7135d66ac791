"""Add command - stage files for commit."""

import click
from clasp.core.errors import ClaspError
from clasp.cli.context import require_repository
from clasp.cli.output import success, error


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
@click.pass_context
def add_cmd(ctx, paths):
    """
    Add file contents to the staging area.

    Stores each file's content under its hash, prints the hash, and
    stages the file for the next commit. Adding a file again stages
    it again; earlier entries are kept.

    Examples:
        clasp add file.txt
        clasp add a.txt b.txt
    """
    repo = require_repository(ctx)

    failed_files = []

    for path in paths:
        try:
            digest = repo.graph.add(path)
        except ClaspError as e:
            failed_files.append((path, str(e)))
            continue

        click.echo(digest)
        click.echo(success(f"Added {path} to the index."))

    if failed_files:
        click.echo(error(f"Failed to add {len(failed_files)} file(s):"))
        for file, reason in failed_files:
            click.echo(error(f"  {file}: {reason}"))
        raise click.Abort()
