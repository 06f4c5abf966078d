"""Repository management for minivcs."""

from pathlib import Path
from typing import List, Optional, Tuple
from .errors import AlreadyExists, CorruptedState, ObjectNotFound, RepositoryNotFound
from .hash import Digest, frame, hash_framed, is_hex
from .objects import OBJECT_TYPES, VCSObject
from minivcs.utils.fs import atomic_write, atomic_write_text

VCS_DIR = '.myvcs'
DEFAULT_BRANCH = 'main'


class Repository:
    """
    Represents a minivcs repository.

    A repository is an explicit handle on the .myvcs directory. Every
    component (object store, index, refs, commit graph) is reached
    through it, so nothing depends on the process working directory.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.vcs_dir = self.work_tree / VCS_DIR
        self.objects_dir = self.vcs_dir / 'objects'
        self.refs_dir = self.vcs_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.head_file = self.vcs_dir / 'HEAD'
        self.index_file = self.vcs_dir / 'index'
        self.config_file = self.vcs_dir / 'config'

        # Lazily created to avoid circular imports
        self._ref_manager = None
        self._index = None
        self._graph = None
        self._config = None

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @property
    def index(self):
        """Get Index instance."""
        if self._index is None:
            from .index import Index
            self._index = Index(self)
        return self._index

    @property
    def graph(self):
        """Get CommitGraph instance."""
        if self._graph is None:
            from .graph import CommitGraph
            self._graph = CommitGraph(self)
        return self._graph

    @property
    def config(self):
        """Get Config instance."""
        if self._config is None:
            from .config import get_config
            self._config = get_config(self)
        return self._config

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .myvcs directory structure:
        .myvcs/
        ├── objects/       # Object database (flat, one file per digest)
        ├── refs/
        │   └── heads/
        │       └── main   # Empty: no commits yet
        ├── HEAD           # refs/heads/main
        ├── index          # Empty staging area
        └── config         # Repository configuration

        Returns:
            Repository: self for method chaining

        Raises:
            AlreadyExists: If repository already exists
        """
        if self.vcs_dir.exists():
            raise AlreadyExists(f"Repository already exists at {self.vcs_dir}")

        self.vcs_dir.mkdir(parents=True)
        self.objects_dir.mkdir()
        self.heads_dir.mkdir(parents=True)

        atomic_write_text(self.heads_dir / DEFAULT_BRANCH, '')
        atomic_write_text(self.head_file, f'refs/heads/{DEFAULT_BRANCH}\n')
        atomic_write_text(self.index_file, '')
        atomic_write_text(self.config_file, '[core]\n\trepositoryformatversion = 0\n')

        return self

    def exists(self) -> bool:
        """Check whether the repository directory is present."""
        return self.vcs_dir.is_dir()

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / VCS_DIR).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def open(cls, path: str = '.') -> 'Repository':
        """
        Find the repository enclosing path.

        Raises:
            RepositoryNotFound: If no repository is in scope
        """
        repo = cls.find_repository(path)
        if repo is None:
            raise RepositoryNotFound(Path(path).resolve())
        return repo

    def object_path(self, digest: str) -> Path:
        """
        Get filesystem path for an object.

        The namespace is flat: the digest is the filename.
        """
        return self.objects_dir / digest

    def put(self, kind: str, payload: bytes) -> Digest:
        """
        Store a payload under the digest of its framed encoding.

        Writing content that is already stored is a no-op.

        Args:
            kind: Object kind (blob, tree, commit)
            payload: Raw object payload

        Returns:
            str: Digest of the object
        """
        if kind not in OBJECT_TYPES:
            raise ValueError(f"Unknown object type: {kind}")

        digest = hash_framed(kind, payload)
        path = self.object_path(digest)

        if not path.exists():
            atomic_write(path, frame(kind, payload))

        return digest

    def get(self, digest: str) -> Tuple[str, bytes]:
        """
        Load an object's kind and payload.

        Raises:
            ObjectNotFound: If no object is stored under digest
            CorruptedState: If the stored frame is malformed
        """
        path = self.object_path(digest) if is_hex(digest) else None

        if path is None or not path.is_file():
            raise ObjectNotFound(digest)

        content = path.read_bytes()

        # Parse header: <type> <size>\0
        null_idx = content.find(b'\0')
        if null_idx == -1:
            raise CorruptedState(f"Object {digest} has no header")

        header = content[:null_idx].decode(errors='replace')
        payload = content[null_idx + 1:]

        try:
            kind, size_str = header.split(' ', 1)
            size = int(size_str)
        except ValueError:
            raise CorruptedState(f"Invalid object header in {digest}: {header}")

        if len(payload) != size:
            raise CorruptedState(
                f"Object {digest} size mismatch: expected {size}, got {len(payload)}"
            )

        return kind, payload

    def write_object(self, obj: VCSObject) -> Digest:
        """Store a Blob, Tree or Commit and return its digest."""
        return self.put(obj.type, obj.serialize())

    def read_object(self, digest: str) -> VCSObject:
        """
        Read object from repository.

        Returns:
            Blob, Tree or Commit

        Raises:
            ObjectNotFound: If object not found
            CorruptedState: If the object kind is unknown
        """
        kind, payload = self.get(digest)

        obj_class = OBJECT_TYPES.get(kind)
        if obj_class is None:
            raise CorruptedState(f"Unknown object type in {digest}: {kind}")

        obj = obj_class()
        obj.deserialize(payload)
        return obj

    def object_exists(self, digest: str) -> bool:
        """Check if object exists in repository."""
        return is_hex(digest) and self.object_path(digest).is_file()

    def find_objects_by_prefix(self, prefix: str) -> List[Digest]:
        """Return digests of all stored objects starting with prefix."""
        if not is_hex(prefix) or not self.objects_dir.exists():
            return []

        return sorted(
            Digest(obj_file.name)
            for obj_file in self.objects_dir.iterdir()
            if obj_file.is_file() and obj_file.name.startswith(prefix)
        )

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
