"""Object inspection commands."""

import click
from colorama import Fore, Style
from clasp.core.errors import AmbiguousObjectError, ClaspError, CorruptObjectError, ObjectNotFoundError
from clasp.cli.context import require_repository
from clasp.cli.output import error


@click.command('cat-file')
@click.option('-p', '--pretty', is_flag=True, help='Pretty-print commit records')
@click.argument('object_hash')
@click.pass_context
def cat_file_cmd(ctx, pretty, object_hash):
    """
    Print the content of a stored object.

    Blobs are printed as text. With -p, commit records are printed
    field by field instead of as raw JSON.

    Examples:
        clasp cat-file 3f2a9c1       # Raw content
        clasp cat-file -p 3f2a9c1    # Pretty-print a commit
    """
    repo = require_repository(ctx)

    try:
        digest = repo.objects.resolve_prefix(object_hash)
        data = repo.objects.get(digest)
    except ObjectNotFoundError:
        click.echo(error(f"Object not found: {object_hash}"))
        raise click.Abort()
    except AmbiguousObjectError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    except ClaspError as e:
        click.echo(error(f"cat-file failed: {e}"))
        raise click.Abort()

    if pretty:
        try:
            commit = repo.objects.read_commit(digest)
        except CorruptObjectError:
            commit = None

        if commit is not None:
            click.echo(f"{Fore.YELLOW}parent {commit.parent or '(none)'}{Style.RESET_ALL}")
            click.echo(f"date {commit.timestamp}")
            for entry in commit.files:
                click.echo(f"file {Fore.YELLOW}{entry.hash}{Style.RESET_ALL}    {entry.path}")
            click.echo()
            click.echo(commit.message)
            return

    try:
        click.echo(data.decode('utf-8'), nl=False)
    except UnicodeDecodeError:
        click.echo(f"<binary data: {len(data)} bytes>")


@click.command('count-objects')
@click.pass_context
def count_objects_cmd(ctx):
    """
    Count objects in the repository.

    Examples:
        clasp count-objects
    """
    repo = require_repository(ctx)

    total_objects = 0
    total_size = 0
    for digest in repo.objects.iter_digests():
        total_objects += 1
        total_size += repo.objects.object_path(digest).stat().st_size

    size_kb = total_size / 1024
    click.echo(f"{total_objects} objects, {size_kb:.2f} KB")
