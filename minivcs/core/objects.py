"""Objects stored by minivcs."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional
from .hash import Digest, hash_framed


class VCSObject(ABC):
    """Base class for all stored objects."""

    def __init__(self):
        self._hash: Optional[Digest] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Object payload
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Object payload
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, tree, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> Digest:
        """
        Compute and cache object hash.

        Objects are hashed with a header containing the type and size.
        Format: <type> <size>\\0<content>

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_framed(self.type, self.serialize())
        return self._hash

    @property
    def hash(self) -> Digest:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(VCSObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        """String representation of blob."""
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class TreeEntry:
    """A single (path, blob digest) line of a tree."""

    def __init__(self, path: str, obj_hash: Digest):
        self.path = path
        self.hash = obj_hash

    def __eq__(self, other) -> bool:
        if not isinstance(other, TreeEntry):
            return NotImplemented
        return self.path == other.path and self.hash == other.hash

    def __repr__(self) -> str:
        return f"TreeEntry({self.hash[:7]} {self.path})"


class Tree(VCSObject):
    """
    Snapshot of the staged files of one commit.

    A tree is a flat list of (path, blob digest) entries kept in the order
    they were staged. Paths may contain '/'; there are no nested trees.
    """

    def __init__(self):
        super().__init__()
        self.entries: List[TreeEntry] = []

    def add_entry(self, path: str, obj_hash: Digest) -> None:
        """
        Append entry to tree.

        Args:
            path: Working path relative to the repository root
            obj_hash: Blob digest
        """
        self.entries.append(TreeEntry(path, obj_hash))
        self._hash = None

    def serialize(self) -> bytes:
        """
        Serialize tree.

        Format: one '<path>\\t<digest>\\n' line per entry, in insertion order.
        """
        return ''.join(f"{entry.path}\t{entry.hash}\n" for entry in self.entries).encode()

    def deserialize(self, data: bytes) -> None:
        self.entries = []
        for line in data.decode().split('\n'):
            if not line.strip():
                continue
            path, sep, obj_hash = line.partition('\t')
            if not sep:
                continue
            self.entries.append(TreeEntry(path, Digest(obj_hash.strip())))
        self._hash = None

    def to_map(self) -> Dict[str, Digest]:
        """Return the path -> digest mapping of this tree."""
        return {entry.path: entry.hash for entry in self.entries}

    @classmethod
    def from_entries(cls, entries) -> 'Tree':
        """
        Build a tree from (path, digest) pairs.

        Args:
            entries: Iterable of (path, digest) tuples

        Returns:
            Tree: New tree with entries in the given order
        """
        tree = cls()
        for path, obj_hash in entries:
            tree.add_entry(path, obj_hash)
        return tree

    def __repr__(self) -> str:
        return f"Tree(entries={len(self.entries)})"


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string (e.g. 2026-10-16T09:30:00Z)."""
    return datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')


class Commit(VCSObject):
    """
    Represents a commit with metadata.

    A commit captures:
    - Snapshot of project (tree hash)
    - Optional parent commit for history
    - Author
    - ISO-8601 timestamp
    - Commit message
    """

    def __init__(self):
        super().__init__()
        self.tree: Digest = Digest('')
        self.parent: Optional[Digest] = None
        self.author: str = ''
        self.timestamp: str = ''
        self.message: str = ''

    def serialize(self) -> bytes:
        """
        Serialize commit.

        Format:
        tree <tree-hash>
        parent <parent-hash>  (only when the commit has a parent)
        author <author> <timestamp>

        <commit message>

        Returns:
            bytes: Serialized commit data
        """
        lines = [f'tree {self.tree}']

        if self.parent:
            lines.append(f'parent {self.parent}')

        lines.append(f'author {self.author} {self.timestamp}')
        lines.append('')
        lines.append(self.message)

        return ('\n'.join(lines) + '\n').encode()

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit.

        Header lines run up to the first blank line; everything after it
        is the message (the trailing newline written by serialize is dropped).

        Raises:
            ValueError: If the payload has no tree line
        """
        content = data.decode()
        header, _, message = content.partition('\n\n')

        self.tree = Digest('')
        self.parent = None
        self.author = ''
        self.timestamp = ''

        for line in header.split('\n'):
            if line.startswith('tree '):
                self.tree = Digest(line[5:].strip())
            elif line.startswith('parent '):
                self.parent = Digest(line[7:].strip())
            elif line.startswith('author '):
                parts = line[7:].rsplit(' ', 1)
                self.author = parts[0]
                self.timestamp = parts[1] if len(parts) > 1 else ''

        if not self.tree:
            raise ValueError("Commit has no tree")

        if message.endswith('\n'):
            message = message[:-1]
        self.message = message
        self._hash = None

    @property
    def author_line(self) -> str:
        """The 'author ...' header line as stored."""
        return f'author {self.author} {self.timestamp}'

    @classmethod
    def create(
        cls,
        tree_hash: Digest,
        parent_hash: Optional[Digest],
        author: str,
        message: str,
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            tree_hash: Hash of tree object
            parent_hash: Parent commit hash, or None for a root commit
            author: Author name (e.g., "Name <email>")
            message: Commit message
            timestamp: ISO-8601 timestamp (defaults to current UTC time)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.tree = tree_hash
        commit.parent = parent_hash or None
        commit.author = author
        commit.message = message
        commit.timestamp = timestamp or utc_timestamp()
        return commit

    def __repr__(self) -> str:
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"


OBJECT_TYPES = {
    'blob': Blob,
    'tree': Tree,
    'commit': Commit,
}
