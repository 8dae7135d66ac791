"""HEAD reference management for Clasp."""

import logging
from typing import Optional

from .errors import RepositoryIOError

logger = logging.getLogger(__name__)


class RefManager:
    """
    Manages the HEAD reference.

    HEAD is a single file holding either nothing (no commits yet) or
    the hash of the most recent commit. It is overwritten on every
    commit; older values survive only through commit parent links.
    """

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.head_file = repo.head_file

    def resolve_head(self) -> Optional[str]:
        """
        Return the commit hash HEAD points to.

        A missing, unreadable or empty HEAD means there are no commits
        yet and yields None rather than an error.
        """
        try:
            content = self.head_file.read_text(encoding='utf-8').strip()
        except OSError:
            return None
        return content or None

    def update_head(self, commit_hash: str) -> None:
        """
        Point HEAD at commit_hash.

        Raises:
            RepositoryIOError: If HEAD cannot be written
        """
        try:
            self.head_file.write_text(commit_hash, encoding='utf-8')
        except OSError as e:
            raise RepositoryIOError(f"Cannot update HEAD: {e}") from e
        logger.debug("HEAD -> %s", commit_hash[:7])

    def __repr__(self) -> str:
        return f"RefManager(head={self.resolve_head()})"
