"""Index (staging area) implementation."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .errors import CorruptObjectError, RepositoryIOError

logger = logging.getLogger(__name__)


@dataclass
class IndexEntry:
    """A staged file: its path and the hash of its content."""
    path: str
    hash: str

    def to_dict(self) -> dict:
        return {'path': self.path, 'hash': self.hash}

    @classmethod
    def from_dict(cls, item) -> 'IndexEntry':
        """
        Build an entry from a decoded {"path", "hash"} mapping.

        Raises:
            CorruptObjectError: If item does not have that shape
        """
        if not isinstance(item, dict) or 'path' not in item or 'hash' not in item:
            raise CorruptObjectError(f"Invalid index entry: {item!r}")
        return cls(path=str(item['path']), hash=str(item['hash']))

    def __repr__(self) -> str:
        return f"IndexEntry({self.hash[:7]} {self.path})"


class Index:
    """
    Clasp index (staging area) implementation.

    The index is an ordered list of entries to be included in the next
    commit. Entries are kept in insertion order and the same path may
    appear more than once; nothing is deduplicated.

    Every mutating call reads the file, modifies the list and writes the
    whole list back. There is no locking, so two processes staging at the
    same time can lose one of the updates.
    """

    def __init__(self, index_path):
        """
        Initialize index.

        Args:
            index_path: Path to the index file
        """
        self.index_path = Path(index_path)
        self.entries: List[IndexEntry] = []

    def read(self) -> List[IndexEntry]:
        """
        Load entries from disk.

        A missing index file reads as empty.

        Returns:
            list: The loaded entries

        Raises:
            CorruptObjectError: If the file is not a JSON list of entries
            RepositoryIOError: If the file exists but cannot be read
        """
        if not self.index_path.exists():
            self.entries = []
            return self.entries

        try:
            raw = self.index_path.read_text(encoding='utf-8')
        except OSError as e:
            raise RepositoryIOError(f"Cannot read index {self.index_path}: {e}") from e

        if not raw.strip():
            self.entries = []
            return self.entries

        try:
            items = json.loads(raw)
        except ValueError as e:
            raise CorruptObjectError(f"Index is not valid JSON: {e}") from e

        if not isinstance(items, list):
            raise CorruptObjectError("Index must contain a JSON list")

        self.entries = [IndexEntry.from_dict(item) for item in items]
        return self.entries

    def write(self) -> None:
        """
        Persist entries to disk as a JSON list.

        Raises:
            RepositoryIOError: If the file cannot be written
        """
        data = json.dumps(
            [entry.to_dict() for entry in self.entries],
            separators=(',', ':'),
            ensure_ascii=False
        )
        try:
            self.index_path.write_text(data, encoding='utf-8')
        except OSError as e:
            raise RepositoryIOError(f"Cannot write index {self.index_path}: {e}") from e

    def append(self, path: str, digest: str) -> IndexEntry:
        """
        Stage path at digest.

        Args:
            path: File path as staged
            digest: Hash of the file content

        Returns:
            IndexEntry: The new entry
        """
        self.read()
        entry = IndexEntry(path=path, hash=digest)
        self.entries.append(entry)
        self.write()
        logger.debug("Staged %s at %s (%d entries)", path, digest[:7], len(self.entries))
        return entry

    def current(self) -> List[IndexEntry]:
        """Return a copy of the staged entries."""
        return list(self.read())

    def snapshot_and_clear(self) -> List[IndexEntry]:
        """
        Return the staged entries and persist an empty index.

        Returns:
            list: Entries that were staged, in insertion order
        """
        snapshot = list(self.read())
        self.entries = []
        self.write()
        logger.debug("Cleared index after snapshot of %d entries", len(snapshot))
        return snapshot

    def get_entry(self, path: str):
        """Return the first entry staged for path, or None."""
        for entry in self.read():
            if entry.path == path:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.read())

    def __iter__(self):
        return iter(self.current())

    def __repr__(self) -> str:
        return f"Index(entries={len(self.entries)})"
