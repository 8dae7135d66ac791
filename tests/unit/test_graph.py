"""Commit graph tests."""

import json
import pytest
from clasp.core.errors import CorruptObjectError, ObjectNotFoundError, RepositoryIOError
from clasp.core.hash import hash_object


def test_add_stores_and_stages(repo, write):
    """Adding a file stores its content and stages it."""
    digest = repo.graph.add(write(repo, 'a.txt', 'hello\n'))

    assert digest == hash_object(b'hello\n')
    assert repo.objects.get(digest) == b'hello\n'
    assert [(e.path, e.hash) for e in repo.index.current()] == [('a.txt', digest)]


def test_add_same_content_twice_dedups(repo, write):
    """Same content under two paths is one object and two entries."""
    first = repo.graph.add(write(repo, 'a.txt', 'same'))
    second = repo.graph.add(write(repo, 'b.txt', 'same'))

    assert first == second
    assert list(repo.objects.iter_digests()) == [first]
    assert [e.path for e in repo.index.current()] == ['a.txt', 'b.txt']


def test_add_stored_content_skips_read(repo, write, monkeypatch):
    """Content already in the store is only hashed, not loaded again."""
    repo.graph.add(write(repo, 'a.txt', 'same'))

    def fail(cls, filepath):
        raise AssertionError(f"content of {filepath} was read again")

    monkeypatch.setattr('clasp.core.graph.Blob.from_file', classmethod(fail))
    digest = repo.graph.add(write(repo, 'b.txt', 'same'))

    assert digest == hash_object(b'same')
    assert [e.hash for e in repo.index.current()] == [digest, digest]


def test_add_relative_path_from_cwd(in_repo, write):
    """Relative paths are read from the working directory."""
    write(in_repo, 'dir/c.txt', 'nested')
    in_repo.graph.add('dir/c.txt')

    assert in_repo.index.current()[0].path == 'dir/c.txt'


def test_add_missing_file(repo):
    """Unreadable paths raise RepositoryIOError carrying the OSError."""
    with pytest.raises(RepositoryIOError) as exc_info:
        repo.graph.add(repo.work_tree / 'missing.txt')

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    assert repo.index.current() == []


def test_add_directory_fails(repo):
    """Directories cannot be added."""
    (repo.work_tree / 'folder').mkdir()
    with pytest.raises(RepositoryIOError):
        repo.graph.add(repo.work_tree / 'folder')


def test_head_none_before_first_commit(repo):
    """No commits yet is a valid state, not an error."""
    assert repo.graph.head() is None


def test_head_none_when_head_file_missing(repo):
    """A missing HEAD file reads as no commits."""
    repo.head_file.unlink()
    assert repo.graph.head() is None


def test_commit_snapshots_index(repo, write):
    """Commit records exactly the staged entries, in order, and clears the index."""
    a = repo.graph.add(write(repo, 'a.txt', 'A'))
    b = repo.graph.add(write(repo, 'b.txt', 'B'))
    a2 = repo.graph.add(write(repo, 'a.txt', 'A2'))

    commit_hash = repo.graph.commit('three entries')
    commit = repo.graph.get_commit(commit_hash)

    assert [(e.path, e.hash) for e in commit.files] == [('a.txt', a), ('b.txt', b), ('a.txt', a2)]
    assert commit.message == 'three entries'
    assert commit.parent is None
    assert repo.index.current() == []


def test_commit_advances_head_and_links_parent(repo, write):
    """Each commit points at the previous HEAD."""
    repo.graph.add(write(repo, 'a.txt', '1'))
    first = repo.graph.commit('first')
    assert repo.graph.head() == first
    assert repo.head_file.read_text() == first

    repo.graph.add(write(repo, 'a.txt', '2'))
    second = repo.graph.commit('second')

    assert repo.graph.head() == second
    assert repo.graph.get_commit(second).parent == first


def test_commit_hash_is_digest_of_record(repo, write):
    """The commit is stored under the digest of its serialized bytes."""
    repo.graph.add(write(repo, 'a.txt', 'x'))
    commit_hash = repo.graph.commit('digest')

    data = repo.objects.get(commit_hash)
    assert hash_object(data) == commit_hash
    assert list(json.loads(data)) == ['timeStamp', 'message', 'files', 'parent']


def test_commit_with_empty_index(repo):
    """An empty staging area still produces a commit."""
    commit_hash = repo.graph.commit('nothing staged')
    assert repo.graph.get_commit(commit_hash).files == []


def test_add_after_commit_starts_fresh(repo, write):
    """Entries staged after a commit do not include the committed ones."""
    repo.graph.add(write(repo, 'a.txt', 'a'))
    repo.graph.commit('first')
    repo.graph.add(write(repo, 'b.txt', 'b'))

    assert [e.path for e in repo.index.current()] == ['b.txt']


def test_get_commit_missing(repo):
    """Unknown digests are not found."""
    with pytest.raises(ObjectNotFoundError):
        repo.graph.get_commit('1' * 40)


def test_get_commit_on_blob(repo, write):
    """A blob is not a commit."""
    digest = repo.graph.add(write(repo, 'a.txt', 'plain'))
    with pytest.raises(CorruptObjectError):
        repo.graph.get_commit(digest)
