"""History walking over the commit parent chain."""

import logging
from typing import Iterator, List, Optional, Tuple

from clasp.core.errors import CorruptObjectError
from clasp.core.objects import Commit

logger = logging.getLogger(__name__)


class HistoryWalker:
    """
    Enumerates commits by following parent links.

    History is a single chain: every commit has at most one parent, so
    walking from HEAD visits each ancestor exactly once and stops at
    the root commit.
    """

    def __init__(self, repo):
        """
        Initialize history walker.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.graph = repo.graph

    def walk(self, start_hash: Optional[str],
             max_count: Optional[int] = None) -> Iterator[Tuple[str, Commit]]:
        """
        Yield (commit_hash, commit) from start_hash back to the root.

        Args:
            start_hash: Commit to start from; None yields nothing
            max_count: Stop after this many commits

        Raises:
            ObjectNotFoundError: If a commit in the chain is missing
            CorruptObjectError: If a commit cannot be decoded or the chain loops
        """
        visited = set()
        commit_hash = start_hash

        while commit_hash and (max_count is None or len(visited) < max_count):
            if commit_hash in visited:
                raise CorruptObjectError(f"History loops back to commit {commit_hash}")
            visited.add(commit_hash)

            commit = self.graph.get_commit(commit_hash)
            yield commit_hash, commit
            commit_hash = commit.parent

        logger.debug("Walked %d commit(s) from %s", len(visited), start_hash)

    def walk_from_head(self, max_count: Optional[int] = None) -> Iterator[Tuple[str, Commit]]:
        """
        Yield (commit_hash, commit) from HEAD back to the root, newest first.

        Yields nothing when there are no commits yet. Each call starts
        a fresh walk.
        """
        return self.walk(self.graph.head(), max_count=max_count)

    def build_ancestry_tree(self, commit_hash: str) -> List[Tuple[int, str]]:
        """
        Nesting data for the ancestry of commit_hash.

        Returns one (depth, label) pair per commit, the given commit at
        depth 0 and each parent one level deeper than its child.
        """
        return [(depth, digest) for depth, (digest, _) in enumerate(self.walk(commit_hash))]


def to_indented_text(nodes: List[Tuple[int, str]], indent: str = '  ') -> str:
    """
    Render (depth, label) pairs as indented text, one node per line.

    Example:
        >>> to_indented_text([(0, 'c3'), (1, 'c2'), (2, 'c1')])
        'c3\\n  c2\\n    c1'
    """
    return '\n'.join(f"{indent * depth}{label}" for depth, label in nodes)
