"""Show command - display a commit with its diff against the parent."""

import click
from clasp.core.errors import AmbiguousObjectError, ClaspError, CorruptObjectError, ObjectNotFoundError
from clasp.cli.context import require_repository, color_enabled
from clasp.cli.output import error, info


@click.command('show')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.option('--stat', is_flag=True, help='Show a summary of changes per file')
@click.argument('commit')
@click.pass_context
def show_cmd(ctx, no_color, stat, commit):
    """
    Show a commit and what it changed.

    Each file staged in the commit is printed and compared with the
    same path in the parent commit. Files the parent does not have are
    reported as new; in the first commit every file is new.

    Examples:
        clasp show 3f2a9c1           # Abbreviated hash
        clasp show --stat 3f2a9c1    # Per-file summary
    """
    repo = require_repository(ctx)
    color = color_enabled(repo, no_color)

    try:
        commit_hash = repo.objects.resolve_prefix(commit)
        repo.graph.get_commit(commit_hash)
    except ObjectNotFoundError:
        click.echo(error(f"Commit not found: {commit}"))
        raise click.Abort()
    except AmbiguousObjectError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    except CorruptObjectError as e:
        click.echo(error(f"Not a valid commit: {commit} ({e})"))
        raise click.Abort()
    except ClaspError as e:
        click.echo(error(f"Show failed: {e}"))
        raise click.Abort()

    # Missing objects from here on are the parent commit or a blob
    try:
        diff = repo.diff.diff_commit(commit_hash)
    except ObjectNotFoundError as e:
        click.echo(error(f"Object {e.digest} referenced by {commit_hash} not found"))
        raise click.Abort()
    except ClaspError as e:
        click.echo(error(f"Cannot diff {commit_hash}: {e}"))
        raise click.Abort()

    if not stat:
        click.echo(repo.diff.format_diff(diff, color=color))
        return

    click.echo(f"commit {commit_hash}")
    if not diff.files:
        click.echo(info("(no files in this commit)"))
        return

    for file_diff in diff.files:
        if file_diff.is_new:
            click.echo(f"  {file_diff.path:<40} new")
        else:
            click.echo(f"  {file_diff.path:<40} +{file_diff.additions} -{file_diff.deletions}")
