"""Unit tests for diff engine."""

import pytest
from clasp.core.errors import ObjectNotFoundError
from clasp.operations.diff import (line_diff, DiffRun, FileDiff, ADDED, REMOVED, UNCHANGED,
                                   MODIFIED, NEW_FILE, FIRST_COMMIT, NO_NEWLINE_MARKER)


def test_line_diff_replaced_line():
    """A changed line is a removed run followed by an added run."""
    runs = line_diff("line1\nline2\n", "line1\nline3\n")
    assert runs == [
        DiffRun(UNCHANGED, "line1\n"),
        DiffRun(REMOVED, "line2\n"),
        DiffRun(ADDED, "line3\n"),
    ]


def test_line_diff_identical():
    """Identical texts are one unchanged run."""
    assert line_diff("a\nb\n", "a\nb\n") == [DiffRun(UNCHANGED, "a\nb\n")]


def test_line_diff_insert_and_delete():
    """Pure insertions and deletions produce single-kind runs."""
    assert line_diff("a\n", "a\nb\nc\n") == [DiffRun(UNCHANGED, "a\n"), DiffRun(ADDED, "b\nc\n")]
    assert line_diff("a\nb\n", "b\n") == [DiffRun(REMOVED, "a\n"), DiffRun(UNCHANGED, "b\n")]


def test_line_diff_empty_sides():
    """Diffing against empty text adds or removes everything."""
    assert line_diff("", "x\n") == [DiffRun(ADDED, "x\n")]
    assert line_diff("x\n", "") == [DiffRun(REMOVED, "x\n")]
    assert line_diff("", "") == []


def test_line_diff_reconstructs_both_sides():
    """Unchanged plus removed runs rebuild the old text; unchanged plus added the new."""
    before = "keep\ndrop\nkeep2\nold\n"
    after = "new0\nkeep\nkeep2\nnew\n"
    runs = line_diff(before, after)

    assert ''.join(r.text for r in runs if r.kind != ADDED) == before
    assert ''.join(r.text for r in runs if r.kind != REMOVED) == after


def test_file_diff_counts():
    """Additions and deletions count lines."""
    file_diff = FileDiff('a.txt', 'a' * 40, 'x', MODIFIED, runs=[
        DiffRun(REMOVED, "1\n2\n"), DiffRun(ADDED, "3\n"),
    ])
    assert file_diff.additions == 1
    assert file_diff.deletions == 2
    assert not file_diff.is_new


def test_diff_commit_against_parent(repo_with_commits):
    """The second commit's a.txt is compared with the first commit's a.txt."""
    repo = repo_with_commits
    diff = repo.diff.diff_commit(repo.commit_hashes[1])

    assert [f.path for f in diff.files] == ['a.txt']
    file_diff = diff.files[0]
    assert file_diff.status == MODIFIED
    assert file_diff.content == "line1\nline3\n"
    assert file_diff.runs == [
        DiffRun(UNCHANGED, "line1\n"),
        DiffRun(REMOVED, "line2\n"),
        DiffRun(ADDED, "line3\n"),
    ]


def test_diff_root_commit(repo_with_commits):
    """Every file in the root commit is a first-commit file with no diff."""
    repo = repo_with_commits
    diff = repo.diff.diff_commit(repo.commit_hashes[0])

    assert [(f.path, f.status) for f in diff.files] == [
        ('a.txt', FIRST_COMMIT), ('b.txt', FIRST_COMMIT)
    ]
    assert all(f.runs == [] for f in diff.files)


def test_diff_new_path(repo_with_commits, commit_files):
    """A path absent from the parent is a new file."""
    repo = repo_with_commits
    third = commit_files(repo, [('c.txt', 'sea\n')], 'Third commit')

    diff = repo.diff.diff_commit(third)
    assert [(f.path, f.status) for f in diff.files] == [('c.txt', NEW_FILE)]


def test_diff_only_compares_immediate_parent(repo_with_commits, commit_files):
    """b.txt is only in the root commit, so re-staging it later counts as new."""
    repo = repo_with_commits
    third = commit_files(repo, [('b.txt', 'bee\nbuzz\n')], 'Third commit')

    diff = repo.diff.diff_commit(third)
    assert diff.files[0].status == NEW_FILE


def test_diff_parent_duplicate_path_uses_first(repo, commit_files):
    """When the parent staged a path twice, the first entry is the baseline."""
    commit_files(repo, [('a.txt', 'first\n'), ('a.txt', 'second\n')], 'dupes')
    child = commit_files(repo, [('a.txt', 'second\n')], 'child')

    runs = repo.diff.diff_commit(child).files[0].runs
    assert runs == [DiffRun(REMOVED, "first\n"), DiffRun(ADDED, "second\n")]


def test_diff_missing_commit(repo):
    """Unknown commits are not found."""
    with pytest.raises(ObjectNotFoundError):
        repo.diff.diff_commit('2' * 40)


def test_format_diff_plain(repo_with_commits):
    """Plain output lists files, markers and prefixed lines."""
    repo = repo_with_commits
    second = repo.diff.format_diff(repo.diff.diff_commit(repo.commit_hashes[1]), color=False)
    first = repo.diff.format_diff(repo.diff.diff_commit(repo.commit_hashes[0]), color=False)

    assert f"commit {repo.commit_hashes[1]}" in second
    assert "File: a.txt" in second
    assert "--line2" in second
    assert "++line3" in second
    assert "  line1" in second
    assert '\x1b[' not in second
    assert NO_NEWLINE_MARKER not in second

    assert first.count("First commit, no parent") == 2


def test_format_diff_color(repo_with_commits):
    """Colored output wraps lines in ANSI codes."""
    repo = repo_with_commits
    output = repo.diff.format_diff(repo.diff.diff_commit(repo.commit_hashes[1]), color=True)
    assert '\x1b[' in output


def test_format_diff_marks_missing_final_newline(repo, commit_files):
    """Adding only a trailing newline shows which side lacked it."""
    commit_files(repo, [('a.txt', 'a')], 'no newline')
    child = commit_files(repo, [('a.txt', 'a\n')], 'newline')

    lines = repo.diff.format_diff(repo.diff.diff_commit(child), color=False).splitlines()
    start = lines.index('Diff:')

    assert lines[start + 1:] == ['--a', NO_NEWLINE_MARKER, '++a']
