"""Content-addressed object store for Clasp."""

import logging
import re
from pathlib import Path
from typing import Iterator

from .errors import AmbiguousObjectError, ObjectNotFoundError, RepositoryIOError
from .hash import is_digest
from .objects import Blob, ClaspObject, Commit

logger = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 4


class ObjectStore:
    """
    Stores raw bytes under their digest.

    Objects live in a flat directory, one file per object, named by
    the hex digest:

        .clasp/objects/<digest>

    The store is append-only. Writing an existing digest is skipped
    because the content is identical.
    """

    def __init__(self, objects_dir):
        """
        Initialize object store.

        Args:
            objects_dir: Path to the objects directory
        """
        self.objects_dir = Path(objects_dir)

    def object_path(self, digest: str) -> Path:
        """Filesystem path for an object."""
        return self.objects_dir / digest

    def exists(self, digest: str) -> bool:
        return bool(digest) and self.object_path(digest).is_file()

    def put(self, digest: str, data: bytes) -> None:
        """
        Write bytes under digest.

        Args:
            digest: Hex digest of data
            data: Object content

        Raises:
            RepositoryIOError: If the object cannot be written
        """
        path = self.object_path(digest)

        if path.exists():
            logger.debug("Object %s already stored, skipped", digest[:7])
            return

        try:
            path.write_bytes(data)
        except OSError as e:
            raise RepositoryIOError(f"Cannot write object {digest}: {e}") from e

        logger.debug("Stored object %s (%d bytes)", digest[:7], len(data))

    def get(self, digest: str) -> bytes:
        """
        Read the bytes stored under digest.

        Raises:
            ObjectNotFoundError: If no object exists under digest
            RepositoryIOError: If the object exists but cannot be read
        """
        if not self.exists(digest):
            raise ObjectNotFoundError(digest)

        try:
            return self.object_path(digest).read_bytes()
        except OSError as e:
            raise RepositoryIOError(f"Cannot read object {digest}: {e}") from e

    def write(self, obj: ClaspObject) -> str:
        """
        Serialize and store an object.

        Returns:
            str: Hash of the object
        """
        digest = obj.hash
        self.put(digest, obj.serialize())
        return digest

    def read_blob(self, digest: str) -> Blob:
        return Blob(self.get(digest))

    def read_commit(self, digest: str) -> Commit:
        """
        Read and decode a commit record.

        Raises:
            ObjectNotFoundError: If no object exists under digest
            CorruptObjectError: If the object is not a commit record
        """
        commit = Commit()
        commit.deserialize(self.get(digest))
        return commit

    def iter_digests(self) -> Iterator[str]:
        """Yield the digest of every stored object."""
        if not self.objects_dir.is_dir():
            return
        for path in sorted(self.objects_dir.iterdir()):
            if path.is_file() and is_digest(path.name):
                yield path.name

    def resolve_prefix(self, prefix: str) -> str:
        """
        Resolve an abbreviated digest to a stored full digest.

        Args:
            prefix: Full digest, or at least 4 leading hex characters

        Returns:
            str: The unique matching digest

        Raises:
            ObjectNotFoundError: If nothing matches
            AmbiguousObjectError: If more than one object matches
        """
        prefix = prefix.strip().lower()

        if is_digest(prefix):
            if not self.exists(prefix):
                raise ObjectNotFoundError(prefix)
            return prefix

        if len(prefix) < MIN_PREFIX_LENGTH or not re.match(r'^[0-9a-f]+$', prefix):
            raise ObjectNotFoundError(prefix)

        matches = [digest for digest in self.iter_digests() if digest.startswith(prefix)]

        if not matches:
            raise ObjectNotFoundError(prefix)
        if len(matches) > 1:
            raise AmbiguousObjectError(prefix, matches)
        return matches[0]

    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
