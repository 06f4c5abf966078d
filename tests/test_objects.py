"""Object model tests."""

import pytest
import tempfile
from pathlib import Path
from minivcs.core.objects import Blob, Commit, Tree, TreeEntry


def test_blob_creation():
    """Test blob creation with data."""
    blob = Blob(b'hello world')
    assert blob.data == b'hello world'
    assert blob.type == 'blob'


def test_blob_serialize():
    """Test blob serialization is the raw content."""
    assert Blob(b'test data').serialize() == b'test data'


def test_blob_hash_deterministic():
    """Test blob hash determinism."""
    assert Blob(b'same data').hash == Blob(b'same data').hash


def test_blob_from_file():
    """Test blob creation from file."""
    with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        f.write('file content')
        temp_path = f.name

    try:
        blob = Blob.from_file(temp_path)
        assert blob.data == b'file content'
    finally:
        Path(temp_path).unlink()


def test_tree_serialize_keeps_insertion_order():
    """Tree lines follow staging order, not name order."""
    tree = Tree()
    tree.add_entry('z.txt', 'a' * 40)
    tree.add_entry('a.txt', 'b' * 40)

    assert tree.serialize() == (
        f"z.txt\t{'a' * 40}\n"
        f"a.txt\t{'b' * 40}\n"
    ).encode()


def test_tree_deserialize():
    """Test parsing tree lines into entries."""
    tree = Tree()
    tree.deserialize(f"dir/b.txt\t{'c' * 40}\na.txt\t{'d' * 40}\n".encode())

    assert tree.entries == [TreeEntry('dir/b.txt', 'c' * 40), TreeEntry('a.txt', 'd' * 40)]
    assert list(tree.to_map()) == ['dir/b.txt', 'a.txt']


def test_tree_deserialize_skips_malformed_lines():
    """Blank lines and lines without a tab are ignored."""
    tree = Tree()
    tree.deserialize(f"\nno-tab-here\nok.txt\t{'e' * 40}\n".encode())
    assert tree.to_map() == {'ok.txt': 'e' * 40}


def test_tree_hash_determined_by_mapping():
    """Identical staged mappings give identical tree digests."""
    entries = [('a.txt', 'a' * 40), ('b.txt', 'b' * 40)]
    assert Tree.from_entries(entries).hash == Tree.from_entries(entries).hash


def test_commit_serialize_root():
    """A root commit has no parent line."""
    commit = Commit.create('t' * 40, None, 'Jane', 'first', timestamp='2026-01-01T00:00:00Z')

    assert commit.serialize() == (
        f"tree {'t' * 40}\n"
        "author Jane 2026-01-01T00:00:00Z\n"
        "\n"
        "first\n"
    ).encode()


def test_commit_serialize_with_parent():
    """A child commit carries its parent line after the tree line."""
    commit = Commit.create('t' * 40, 'p' * 40, 'Jane', 'second', timestamp='2026-01-01T00:00:00Z')
    lines = commit.serialize().decode().split('\n')

    assert lines[0] == f"tree {'t' * 40}"
    assert lines[1] == f"parent {'p' * 40}"
    assert lines[2] == "author Jane 2026-01-01T00:00:00Z"


def test_commit_deserialize_multiline_message():
    """Author names with spaces and multi-line messages survive a reload."""
    original = Commit.create(
        'a' * 40, 'b' * 40, 'Jane Doe <jane@example.com>',
        'Subject\n\nBody line one\nBody line two',
        timestamp='2026-03-04T05:06:07Z'
    )

    loaded = Commit()
    loaded.deserialize(original.serialize())

    assert loaded.tree == 'a' * 40
    assert loaded.parent == 'b' * 40
    assert loaded.author == 'Jane Doe <jane@example.com>'
    assert loaded.timestamp == '2026-03-04T05:06:07Z'
    assert loaded.message == 'Subject\n\nBody line one\nBody line two'
    assert loaded.hash == original.hash


def test_commit_deserialize_without_parent():
    """Parent is None when the payload has no parent line."""
    commit = Commit()
    commit.deserialize(b"tree " + b'a' * 40 + b"\nauthor x 2026-01-01T00:00:00Z\n\nmsg\n")
    assert commit.parent is None


def test_commit_deserialize_requires_tree():
    """A payload without a tree line is rejected."""
    with pytest.raises(ValueError):
        Commit().deserialize(b"author x 2026-01-01T00:00:00Z\n\nmsg\n")


def test_commit_default_timestamp_is_iso8601():
    """Commits default to an ISO-8601 UTC timestamp."""
    commit = Commit.create('a' * 40, None, 'Jane', 'msg')
    assert commit.timestamp.endswith('Z')
    assert 'T' in commit.timestamp
