"""Clasp objects: blobs and commit records."""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from .errors import CorruptObjectError
from .hash import hash_object
from .index import IndexEntry


class ClaspObject(ABC):
    """Base class for all Clasp objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @property
    def type(self) -> str:
        """Object type name (blob, commit)."""
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        Objects are hashed over their serialized bytes with no header,
        so a blob's digest is the digest of the file content itself.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """40-character SHA-1 hash of the serialized object."""
        return self.compute_hash()


class Blob(ClaspObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def text(self) -> str:
        """Decode content as UTF-8, replacing undecodable bytes."""
        return self.data.decode('utf-8', errors='replace')

    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as an ISO-8601 UTC string with millisecond precision.

    Example: 2024-01-02T03:04:05.678Z
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class Commit(ClaspObject):
    """
    Represents a commit record.

    A commit captures:
    - Timestamp (ISO-8601, UTC)
    - Commit message
    - The staged files at commit time, in staging order
    - The parent commit hash (None for the root commit)

    Commits are stored as compact JSON:
    {"timeStamp": ..., "message": ..., "files": [{"path": ..., "hash": ...}], "parent": ...}
    """

    def __init__(self):
        super().__init__()
        self.timestamp: str = ''
        self.message: str = ''
        self.files: List[IndexEntry] = []
        self.parent: Optional[str] = None

    def to_dict(self) -> dict:
        """Return the record as a plain dict in serialization order."""
        return {
            'timeStamp': self.timestamp,
            'message': self.message,
            'files': [entry.to_dict() for entry in self.files],
            'parent': self.parent,
        }

    def serialize(self) -> bytes:
        """
        Serialize commit to compact JSON.

        Returns:
            bytes: UTF-8 encoded JSON record
        """
        return json.dumps(
            self.to_dict(), separators=(',', ':'), ensure_ascii=False
        ).encode('utf-8')

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from JSON.

        Args:
            data: Serialized commit data

        Raises:
            CorruptObjectError: If data is not a commit record
        """
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise CorruptObjectError(f"Not a commit record: {e}") from e

        if not isinstance(record, dict):
            raise CorruptObjectError("Not a commit record: expected a JSON object")

        missing = [key for key in ('timeStamp', 'message', 'files') if key not in record]
        if missing:
            raise CorruptObjectError(f"Commit record missing fields: {', '.join(missing)}")

        files = record['files']
        if not isinstance(files, list):
            raise CorruptObjectError("Commit record 'files' must be a list")

        parent = record.get('parent')
        if parent is not None and not isinstance(parent, str):
            raise CorruptObjectError("Commit record 'parent' must be a string or null")

        self.timestamp = str(record['timeStamp'])
        self.message = str(record['message'])
        self.files = [IndexEntry.from_dict(item) for item in files]
        # An empty parent is treated like a missing one
        self.parent = parent or None
        self._hash = None

    @classmethod
    def create(
        cls,
        message: str,
        files: List[IndexEntry],
        parent: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message
            files: Staged entries, copied by value
            parent: Hash of parent commit (None for the root commit)
            timestamp: ISO-8601 timestamp (defaults to now)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.files = [IndexEntry(entry.path, entry.hash) for entry in files]
        commit.parent = parent
        commit.timestamp = timestamp or utc_timestamp()
        return commit

    def find_file(self, path: str) -> Optional[IndexEntry]:
        """Return the first entry for path, or None."""
        for entry in self.files:
            if entry.path == path:
                return entry
        return None

    def __repr__(self) -> str:
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
