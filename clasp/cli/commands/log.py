"""Log command - show commit history."""

import click
from colorama import Fore, Style
from clasp.core.errors import ClaspError
from clasp.cli.context import require_repository, color_enabled
from clasp.cli.output import error, warning


def paint(text, style, color=True):
    """Wrap text in a colorama style when color is on."""
    return f"{style}{text}{Style.RESET_ALL}" if color else text


def display_commit_oneline(commit_hash, commit, color=True):
    """Display commit in one-line format."""
    message = commit.message.split('\n')[0]
    if len(message) > 60:
        message = message[:57] + "..."

    short_hash = paint(commit_hash[:7], Fore.YELLOW, color)
    date = paint(f"({commit.timestamp[:10]})", Fore.CYAN, color)
    click.echo(f"{short_hash} {message} {date}")


def display_commit_full(commit_hash, commit, color=True):
    """Display commit in full format."""
    click.echo(paint(f"commit {commit_hash}", Fore.YELLOW, color))
    if commit.parent:
        click.echo(f"Parent:  {commit.parent}")
    click.echo(f"Date:    {commit.timestamp}")
    click.echo(f"Files:   {len(commit.files)}")

    click.echo()
    for line in commit.message.split('\n'):
        click.echo(f"    {line}")
    click.echo()


@click.command('log')
@click.option('-n', '--max-count', type=click.IntRange(min=1), help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show commits in one-line format')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.pass_context
def log_cmd(ctx, max_count, oneline, no_color):
    """
    Show commit logs.

    Walks from HEAD through each parent to the first commit, newest
    first.

    Examples:
        clasp log                  # Show all commits from HEAD
        clasp log -n 10            # Show last 10 commits
        clasp log --oneline        # Show compact one-line format
    """
    repo = require_repository(ctx)
    color = color_enabled(repo, no_color)

    shown = 0
    try:
        for commit_hash, commit in repo.history.walk_from_head(max_count=max_count):
            if oneline:
                display_commit_oneline(commit_hash, commit, color)
            else:
                display_commit_full(commit_hash, commit, color)
            shown += 1
    except ClaspError as e:
        click.echo(error(f"Cannot read history: {e}"))
        raise click.Abort()

    if not shown:
        click.echo(warning("No commits yet"))
