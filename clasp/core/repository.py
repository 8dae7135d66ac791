"""Repository management for Clasp."""

import logging
from pathlib import Path
from typing import Optional

from .errors import AlreadyInitializedError, RepositoryIOError

logger = logging.getLogger(__name__)

CLASP_DIR = '.clasp'


class Repository:
    """
    Represents a Clasp repository.

    A repository manages the .clasp directory structure and hands out
    the object store, staging index, HEAD manager and the higher level
    engines built on them.
    """

    def __init__(self, path='.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.clasp_dir = self.work_tree / CLASP_DIR
        self.objects_dir = self.clasp_dir / 'objects'
        self.head_file = self.clasp_dir / 'HEAD'
        self.index_file = self.clasp_dir / 'index'
        self.config_file = self.clasp_dir / 'config'

        # Lazy to avoid circular imports
        self._object_store = None
        self._index = None
        self._ref_manager = None
        self._commit_graph = None
        self._history = None
        self._diff_engine = None

    @property
    def objects(self):
        """Get ObjectStore instance."""
        if self._object_store is None:
            from .store import ObjectStore
            self._object_store = ObjectStore(self.objects_dir)
        return self._object_store

    @property
    def index(self):
        """Get Index instance."""
        if self._index is None:
            from .index import Index
            self._index = Index(self.index_file)
        return self._index

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @property
    def graph(self):
        """Get CommitGraph instance."""
        if self._commit_graph is None:
            from .graph import CommitGraph
            self._commit_graph = CommitGraph(self)
        return self._commit_graph

    @property
    def history(self):
        """Get HistoryWalker instance."""
        if self._history is None:
            from clasp.operations.history import HistoryWalker
            self._history = HistoryWalker(self)
        return self._history

    @property
    def diff(self):
        """Get DiffEngine instance."""
        if self._diff_engine is None:
            from clasp.operations.diff import DiffEngine
            self._diff_engine = DiffEngine(self)
        return self._diff_engine

    def init(self) -> 'Repository':
        """
        Initialize the repository.

        Creates whatever is missing of:
        .clasp/
        ├── objects/       # Object database (flat, one file per digest)
        ├── HEAD           # Latest commit hash, empty before the first commit
        └── index          # Staging area (JSON list)

        Existing objects, HEAD and index are never overwritten.

        Returns:
            Repository: self for method chaining

        Raises:
            AlreadyInitializedError: If .clasp already existed
            RepositoryIOError: If the structure cannot be created
        """
        existed = self.clasp_dir.exists()

        try:
            self.objects_dir.mkdir(parents=True, exist_ok=True)
            if not self.head_file.exists():
                self.head_file.write_text('', encoding='utf-8')
            if not self.index_file.exists():
                self.index_file.write_text('[]', encoding='utf-8')
        except OSError as e:
            raise RepositoryIOError(f"Cannot initialize repository at {self.clasp_dir}: {e}") from e

        if existed:
            raise AlreadyInitializedError(self.clasp_dir)

        logger.debug("Initialized repository at %s", self.clasp_dir)
        return self

    @classmethod
    def find_repository(cls, path='.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .clasp
        directory or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / CLASP_DIR).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def relative_path(self, filepath) -> str:
        """
        Path to record in the index for filepath.

        Files inside the working tree are recorded relative to it with
        forward slashes; anything else is recorded as given.
        """
        path = Path(filepath)
        absolute = path if path.is_absolute() else Path.cwd() / path
        try:
            return absolute.resolve().relative_to(self.work_tree).as_posix()
        except ValueError:
            return str(filepath)

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
