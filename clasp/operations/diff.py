"""Diff engine comparing a commit's files against its parent."""

import logging
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import List, Optional

from clasp.core.objects import Commit

logger = logging.getLogger(__name__)

UNCHANGED = 'unchanged'
ADDED = 'added'
REMOVED = 'removed'

# FileDiff.status values
MODIFIED = 'modified'
NEW_FILE = 'new-file'
FIRST_COMMIT = 'first-commit'

NO_NEWLINE_MARKER = '\\ No newline at end of file'


@dataclass
class DiffRun:
    """A run of consecutive lines sharing one kind."""
    kind: str
    text: str

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines(keepends=True)


def line_diff(before: str, after: str) -> List[DiffRun]:
    """
    Compare two texts line by line.

    Lines keep their line endings. Replaced blocks are reported as a
    removed run followed by an added run.

    Args:
        before: Old text
        after: New text

    Returns:
        Ordered runs tagged unchanged, added or removed
    """
    old_lines = before.splitlines(keepends=True)
    new_lines = after.splitlines(keepends=True)
    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    runs: List[DiffRun] = []

    def emit(kind, lines):
        if not lines:
            return
        text = ''.join(lines)
        if runs and runs[-1].kind == kind:
            runs[-1].text += text
        else:
            runs.append(DiffRun(kind, text))

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            emit(UNCHANGED, old_lines[i1:i2])
        else:
            # 'replace' yields both; 'delete' and 'insert' one side each
            emit(REMOVED, old_lines[i1:i2])
            emit(ADDED, new_lines[j1:j2])

    return runs


@dataclass
class FileDiff:
    """The diff for one file listed in a commit."""
    path: str
    hash: str
    content: str
    status: str
    parent_hash: Optional[str] = None
    runs: List[DiffRun] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return self.status in (NEW_FILE, FIRST_COMMIT)

    @property
    def additions(self) -> int:
        return sum(len(run.lines) for run in self.runs if run.kind == ADDED)

    @property
    def deletions(self) -> int:
        return sum(len(run.lines) for run in self.runs if run.kind == REMOVED)


@dataclass
class CommitDiff:
    """All file diffs introduced by one commit."""
    commit_hash: str
    commit: Commit
    files: List[FileDiff] = field(default_factory=list)


class DiffEngine:
    """
    Computes what a commit changed relative to its parent.

    Only the files listed in the commit itself are compared, each
    against the first entry with the same path in the parent commit.
    Files committed earlier and not staged again are not part of the
    comparison.
    """

    def __init__(self, repo):
        """
        Initialize diff engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.graph = repo.graph

    def diff_commit(self, commit_hash: str) -> CommitDiff:
        """
        Compute the diff of a commit against its parent.

        Raises:
            ObjectNotFoundError: If the commit or a referenced blob is missing
            CorruptObjectError: If the commit cannot be decoded
        """
        commit = self.graph.get_commit(commit_hash)
        parent = self.graph.get_commit(commit.parent) if commit.parent else None

        result = CommitDiff(commit_hash=commit_hash, commit=commit)
        for entry in commit.files:
            result.files.append(self._diff_entry(entry, parent))

        logger.debug("Diffed %s: %d file(s)", commit_hash[:7], len(result.files))
        return result

    def _diff_entry(self, entry, parent: Optional[Commit]) -> FileDiff:
        content = self.graph.read_blob_text(entry.hash)

        if parent is None:
            return FileDiff(entry.path, entry.hash, content, FIRST_COMMIT)

        parent_entry = parent.find_file(entry.path)
        if parent_entry is None:
            return FileDiff(entry.path, entry.hash, content, NEW_FILE)

        before = self.graph.read_blob_text(parent_entry.hash)
        return FileDiff(
            entry.path, entry.hash, content, MODIFIED,
            parent_hash=parent_entry.hash,
            runs=line_diff(before, content)
        )

    def format_diff(self, diff: CommitDiff, color: bool = True) -> str:
        """
        Format a commit diff for the terminal.

        Args:
            diff: Result of diff_commit
            color: Whether to use color output

        Returns:
            Formatted diff string
        """
        from colorama import Fore, Style

        def paint(text, style):
            return f"{style}{text}{Style.RESET_ALL}" if color else text

        output = []
        commit = diff.commit

        output.append(paint(f"commit {diff.commit_hash}", Fore.YELLOW))
        if commit.parent:
            output.append(f"Parent: {commit.parent}")
        output.append(f"Date:   {commit.timestamp}")
        output.append('')
        for line in commit.message.split('\n'):
            output.append(f"    {line}")
        output.append('')

        if not diff.files:
            output.append("(no files in this commit)")
            return '\n'.join(output)

        output.append("Changes in this commit:")
        for file_diff in diff.files:
            output.append('')
            output.append(paint(f"File: {file_diff.path}", Style.BRIGHT))
            output.append(file_diff.content.rstrip('\n'))

            if file_diff.status == FIRST_COMMIT:
                output.append(paint("First commit, no parent", Fore.CYAN))
                continue
            if file_diff.status == NEW_FILE:
                output.append(paint("New file in this commit", Fore.CYAN))
                continue

            output.append('')
            output.append("Diff:")
            for run in file_diff.runs:
                for raw in run.lines:
                    line = raw.rstrip('\r\n')
                    if run.kind == ADDED:
                        output.append(paint(f"++{line}", Fore.GREEN))
                    elif run.kind == REMOVED:
                        output.append(paint(f"--{line}", Fore.RED))
                    else:
                        output.append(paint(f"  {line}", Style.DIM))
                    # Only the last line of a file can lack an ending
                    if raw.splitlines()[0] == raw:
                        output.append(NO_NEWLINE_MARKER)

        return '\n'.join(output)
