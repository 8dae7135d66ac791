"""Helpers shared by CLI commands."""

import click

from clasp.core.config import get_config
from clasp.core.repository import Repository
from clasp.cli.output import error


def repo_path(ctx) -> str:
    """Repository root given to the top-level --repo option."""
    root = ctx.find_root()
    if root.obj and root.obj.get('repo_path'):
        return root.obj['repo_path']
    return '.'


def require_repository(ctx) -> Repository:
    """Find the repository for this invocation or abort."""
    repo = Repository.find_repository(repo_path(ctx))
    if not repo:
        click.echo(error("Not a clasp repository (run 'clasp init' first)"))
        raise click.Abort()
    return repo


def color_enabled(repo, no_color: bool = False) -> bool:
    """Whether output should be colored (color.ui, on by default)."""
    if no_color:
        return False
    return get_config(repo).get_bool('color', 'ui', fallback=True)
