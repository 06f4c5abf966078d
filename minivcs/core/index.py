"""Index (staging area) implementation."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union
from .errors import FileNotFound
from .hash import Digest
from .objects import Blob
from minivcs.utils.fs import atomic_write_text

# Separators of the index and tree line formats
UNSTORABLE_PATH_CHARS = "\t\r\n"


@dataclass(frozen=True)
class IndexEntry:
    """A staged file: working path and the digest of its blob."""
    path: str
    digest: Digest

    def __iter__(self):
        # Allows `path, digest = entry`
        yield self.path
        yield self.digest

    def __repr__(self) -> str:
        return f"IndexEntry({self.digest[:7]} {self.path})"


class Index:
    """
    minivcs index (staging area).

    The index is a text file with one '<path>\\t<digest>' line per staged
    file, in staging order. It is read from disk on every access and
    written back after every change, so separate invocations see each
    other's staged files.
    """

    def __init__(self, repo):
        """
        Initialize index.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.index_file = repo.index_file

    def read_all(self) -> List[IndexEntry]:
        """
        Read all staged entries in order.

        Returns:
            Empty list if the index file is absent or empty
        """
        if not self.index_file.exists():
            return []

        entries = []
        for line in self.index_file.read_text(encoding='utf-8').split('\n'):
            if not line.strip():
                continue
            path, sep, digest = line.partition('\t')
            if not sep or not path:
                continue
            entries.append(IndexEntry(path, Digest(digest.strip())))

        return entries

    def _write(self, entries: List[IndexEntry]) -> None:
        content = ''.join(f"{entry.path}\t{entry.digest}\n" for entry in entries)
        atomic_write_text(self.index_file, content)

    def stage(self, path: str, content: bytes) -> Digest:
        """
        Stage content under a working path.

        Any previous entry for the same path is dropped and the new entry
        is appended, leaving the other entries in their relative order.

        Args:
            path: Working path relative to the repository root
            content: File content

        Returns:
            str: Blob digest of the staged content

        Raises:
            FileNotFound: If path cannot be stored in the index format
        """
        if any(c in path for c in UNSTORABLE_PATH_CHARS):
            raise FileNotFound(repr(path), "Unsupported path")

        digest = self.repo.write_object(Blob(content))

        entries = [entry for entry in self.read_all() if entry.path != path]
        entries.append(IndexEntry(path, digest))
        self._write(entries)

        return digest

    def add_file(self, filepath: Union[str, Path]) -> Digest:
        """
        Stage a file for commit.

        Args:
            filepath: Path to file (absolute, or relative to the work tree)

        Returns:
            str: Blob digest of staged content

        Raises:
            FileNotFound: If the file does not exist or lies outside the work tree
        """
        file_path = Path(filepath)

        if not file_path.is_absolute():
            file_path = self.repo.work_tree / file_path

        if not file_path.is_file():
            raise FileNotFound(str(filepath))

        try:
            rel_path = file_path.resolve().relative_to(self.repo.work_tree)
        except ValueError:
            raise FileNotFound(str(filepath), "Outside repository")

        return self.stage(rel_path.as_posix(), file_path.read_bytes())

    def get(self, path: str) -> Optional[Digest]:
        """Get the staged digest for path."""
        for entry in self.read_all():
            if entry.path == path:
                return entry.digest
        return None

    def clear(self) -> None:
        """Remove all entries from index."""
        self._write([])

    def __len__(self) -> int:
        """Number of entries in index."""
        return len(self.read_all())

    def __repr__(self) -> str:
        return f"Index(entries={len(self)})"
