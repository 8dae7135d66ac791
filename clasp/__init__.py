"""Clasp - a minimal content-addressable version control system."""

__version__ = '0.1.0'

from clasp.core.repository import Repository
from clasp.core.objects import ClaspObject, Blob, Commit

__all__ = [
    'Repository',
    'ClaspObject',
    'Blob',
    'Commit',
]
