"""Index tests."""

import pytest
from minivcs.core.errors import FileNotFound
from minivcs.core.hash import hash_framed
from minivcs.core.index import Index, IndexEntry


def test_index_empty_after_init(repo):
    """A fresh repository has nothing staged."""
    assert repo.index.read_all() == []
    assert len(repo.index) == 0


def test_index_missing_file_reads_empty(repo):
    """An absent index file means an empty index."""
    repo.index_file.unlink()
    assert repo.index.read_all() == []


def test_stage_returns_blob_digest(repo):
    """stage stores a blob and returns its digest."""
    digest = repo.index.stage('a.txt', b'hello')

    assert digest == hash_framed('blob', b'hello')
    assert repo.object_exists(digest)
    assert repo.index.read_all() == [IndexEntry('a.txt', digest)]


def test_stage_persists_as_text_lines(repo):
    """Index file holds one '<path>\\t<digest>' line per entry."""
    digest = repo.index.stage('dir/a.txt', b'content')
    assert repo.index_file.read_text() == f"dir/a.txt\t{digest}\n"


def test_stage_preserves_order(repo):
    """Entries come back in staging order."""
    repo.index.stage('b.txt', b'b')
    repo.index.stage('a.txt', b'a')
    repo.index.stage('c.txt', b'c')

    assert [entry.path for entry in repo.index.read_all()] == ['b.txt', 'a.txt', 'c.txt']


def test_restage_replaces_entry(repo):
    """Re-staging a path keeps one entry with the new digest, moved to the end."""
    repo.index.stage('a.txt', b'old')
    repo.index.stage('b.txt', b'b')
    new_digest = repo.index.stage('a.txt', b'new')

    entries = repo.index.read_all()
    assert [tuple(entry) for entry in entries] == [
        ('b.txt', hash_framed('blob', b'b')),
        ('a.txt', new_digest),
    ]


def test_index_visible_to_new_instances(repo):
    """Staged entries survive across Index instances."""
    digest = repo.index.stage('a.txt', b'hello')
    assert Index(repo).get('a.txt') == digest


def test_add_file(repo, write_file):
    """add_file stages a working file by relative path."""
    write_file('src/main.py', 'print("hi")\n')

    digest = repo.index.add_file('src/main.py')

    assert repo.index.get('src/main.py') == digest
    assert repo.read_object(digest).data == b'print("hi")\n'


def test_add_file_absolute_path(repo, write_file):
    """Absolute paths are stored relative to the work tree."""
    file_path = write_file('a.txt', 'x')
    repo.index.add_file(file_path)
    assert repo.index.get('a.txt') is not None


def test_add_missing_file_leaves_index_unchanged(repo):
    """Staging a nonexistent file fails and changes nothing."""
    repo.index.stage('keep.txt', b'keep')
    before = repo.index_file.read_text()

    with pytest.raises(FileNotFound):
        repo.index.add_file('missing.txt')

    assert repo.index_file.read_text() == before


def test_add_file_outside_repository(repo, tmp_path):
    """Files outside the work tree cannot be staged."""
    outside = tmp_path / 'outside.txt'
    outside.write_text('x')

    with pytest.raises(FileNotFound):
        repo.index.add_file(outside)


def test_read_all_skips_blank_and_malformed_lines(repo):
    """Hand-edited index files are read leniently."""
    repo.index_file.write_text(f"\nbroken line\na.txt\t{'a' * 40}\n\n")
    assert [tuple(e) for e in repo.index.read_all()] == [('a.txt', 'a' * 40)]


def test_clear(repo):
    """clear empties the index."""
    repo.index.stage('a.txt', b'a')
    repo.index.clear()

    assert repo.index.read_all() == []
    assert repo.index_file.read_text() == ''


@pytest.mark.parametrize("path", ['tab\tname.txt', 'line\nbreak.txt', 'carriage\rreturn.txt'])
def test_stage_rejects_unstorable_paths(repo, path):
    """Paths containing index separators are refused."""
    with pytest.raises(FileNotFound, match="Unsupported path"):
        repo.index.stage(path, b'content')

    assert repo.index.read_all() == []
