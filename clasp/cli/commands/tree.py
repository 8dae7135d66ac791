"""Tree command - draw the ancestry of HEAD."""

import click
from clasp.core.errors import ClaspError
from clasp.operations.history import to_indented_text
from clasp.cli.context import require_repository
from clasp.cli.output import error, warning, render_tree


@click.command('tree')
@click.pass_context
def tree_cmd(ctx):
    """
    Show the commit ancestry as an ASCII tree.

    HEAD is at the top; each parent is nested one level below its
    child.

    Examples:
        clasp tree
    """
    repo = require_repository(ctx)

    head = repo.graph.head()
    if not head:
        click.echo(warning("No commits found"))
        return

    try:
        nodes = repo.history.build_ancestry_tree(head)
    except ClaspError as e:
        click.echo(error(f"Cannot read history: {e}"))
        raise click.Abort()

    click.echo(render_tree(to_indented_text(nodes)))
