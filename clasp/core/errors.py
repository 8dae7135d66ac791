"""Exception types raised by Clasp."""


class ClaspError(Exception):
    """Base class for all Clasp errors."""
    pass


class AlreadyInitializedError(ClaspError):
    """Raised when init runs against an existing repository root."""
    
    def __init__(self, path):
        super().__init__(f"Already initialized the repository at {path}")
        self.path = path


class ObjectNotFoundError(ClaspError):
    """Raised when no object is stored under a digest."""
    
    def __init__(self, digest: str):
        super().__init__(f"Object {digest} not found")
        self.digest = digest


class AmbiguousObjectError(ClaspError):
    """Raised when an abbreviated digest matches more than one object."""
    
    def __init__(self, prefix: str, matches):
        super().__init__(f"Short digest {prefix} is ambiguous ({len(matches)} matches)")
        self.prefix = prefix
        self.matches = matches


class CorruptObjectError(ClaspError):
    """Raised when stored bytes do not decode into the expected shape."""
    pass


class RepositoryIOError(ClaspError):
    """
    Raised when a filesystem operation fails.
    
    The originating OSError is chained as ``__cause__``.
    """
    pass
