"""Core functionality for Clasp.

This module contains the core data structures:
- Clasp objects (Blob, Commit)
- Content-addressed object store
- Index/staging area
- HEAD management
- Commit graph
- Configuration management
- Hashing utilities

For history walking and diffs, see clasp.operations
"""

from clasp.core.errors import (ClaspError, AlreadyInitializedError, ObjectNotFoundError,
                               AmbiguousObjectError, CorruptObjectError, RepositoryIOError)
from clasp.core.hash import hash_object, hash_file, is_digest
from clasp.core.index import Index, IndexEntry
from clasp.core.objects import ClaspObject, Blob, Commit
from clasp.core.store import ObjectStore
from clasp.core.refs import RefManager
from clasp.core.graph import CommitGraph
from clasp.core.repository import Repository
from clasp.core.config import Config, get_config

__all__ = [
    'ClaspError',
    'AlreadyInitializedError',
    'ObjectNotFoundError',
    'AmbiguousObjectError',
    'CorruptObjectError',
    'RepositoryIOError',
    'hash_object',
    'hash_file',
    'is_digest',
    'Index',
    'IndexEntry',
    'ClaspObject',
    'Blob',
    'Commit',
    'ObjectStore',
    'RefManager',
    'CommitGraph',
    'Repository',
    'Config',
    'get_config',
]
