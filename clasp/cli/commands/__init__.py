"""CLI commands for Clasp."""

from clasp.cli.commands.init import init_cmd
from clasp.cli.commands.add import add_cmd
from clasp.cli.commands.commit import commit_cmd
from clasp.cli.commands.log import log_cmd
from clasp.cli.commands.show import show_cmd
from clasp.cli.commands.tree import tree_cmd
from clasp.cli.commands.objects import cat_file_cmd, count_objects_cmd
from clasp.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'show_cmd', 'tree_cmd',
           'cat_file_cmd', 'count_objects_cmd', 'config_cmd']
