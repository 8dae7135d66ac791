"""Commit graph: staging files and building the parent-linked history."""

import logging
from typing import Optional

from .errors import RepositoryIOError
from .hash import hash_file
from .objects import Blob, Commit

logger = logging.getLogger(__name__)


class CommitGraph:
    """
    Builds, stores and links commit records.

    Each commit stores the files staged since the previous commit and
    the hash of that previous commit as its parent, so the history is a
    single chain from HEAD back to the root commit.
    """

    def __init__(self, repo):
        """
        Initialize commit graph.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.objects = repo.objects
        self.index = repo.index
        self.refs = repo.refs

    def add(self, filepath) -> str:
        """
        Store a file's content and stage it.

        Args:
            filepath: Path to the file (absolute or relative to cwd)

        Returns:
            str: Hash of the stored content

        Content already in the store is not read into memory again.

        Raises:
            RepositoryIOError: If the file cannot be read
        """
        try:
            digest = hash_file(filepath)
            if not self.objects.exists(digest):
                # The file may change between hashing and reading
                digest = self.objects.write(Blob.from_file(filepath))
        except OSError as e:
            raise RepositoryIOError(f"Cannot read {filepath}: {e}") from e

        self.index.append(self.repo.relative_path(filepath), digest)
        return digest

    def commit(self, message: str) -> str:
        """
        Record the staged files as a new commit and advance HEAD.

        An empty index still produces a commit, with no files.

        Args:
            message: Commit message

        Returns:
            str: Hash of the new commit
        """
        parent = self.head()
        files = self.index.snapshot_and_clear()

        commit = Commit.create(message=message, files=files, parent=parent)
        digest = self.objects.write(commit)
        self.set_head(digest)

        logger.debug(
            "Committed %s with %d file(s), parent %s",
            digest[:7], len(files), parent[:7] if parent else None
        )
        return digest

    def head(self) -> Optional[str]:
        """Hash of the latest commit, or None before the first commit."""
        return self.refs.resolve_head()

    def set_head(self, digest: str) -> None:
        self.refs.update_head(digest)

    def get_commit(self, digest: str) -> Commit:
        """
        Load a commit record.

        Raises:
            ObjectNotFoundError: If no object exists under digest
            CorruptObjectError: If the object is not a commit record
        """
        return self.objects.read_commit(digest)

    def read_blob_text(self, digest: str) -> str:
        """Content of a stored blob decoded as UTF-8."""
        return self.objects.read_blob(digest).text()

    def __repr__(self) -> str:
        return f"CommitGraph(head={self.head()})"
