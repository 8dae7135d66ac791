"""Operations module for high-level Clasp operations.

This module contains the logic built on the core store:
- History walking (log, ancestry tree)
- Diff computation against the parent commit
"""

from clasp.operations.history import HistoryWalker, to_indented_text
from clasp.operations.diff import DiffEngine, CommitDiff, FileDiff, DiffRun, line_diff

__all__ = [
    'HistoryWalker', 'to_indented_text',
    'DiffEngine', 'CommitDiff', 'FileDiff', 'DiffRun', 'line_diff',
]
