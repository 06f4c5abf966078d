"""Reference management for minivcs."""

from dataclasses import dataclass
from typing import List, Optional, Union
from .errors import AlreadyExists, CorruptedState, InvalidRefName, NoCommitsYet, RefNotFound
from .hash import Digest, is_digest, is_hex
from minivcs.utils.fs import atomic_write_text

HEADS_PREFIX = 'refs/heads/'
MIN_PREFIX_LENGTH = 4


@dataclass(frozen=True)
class SymbolicHead:
    """HEAD pointing at a branch."""
    branch: str

    @property
    def ref(self) -> str:
        return f'{HEADS_PREFIX}{self.branch}'


@dataclass(frozen=True)
class DetachedHead:
    """HEAD pointing directly at a commit."""
    digest: Digest


Head = Union[SymbolicHead, DetachedHead]


@dataclass(frozen=True)
class BranchInfo:
    """A branch as listed by RefManager.list_branches."""
    name: str
    digest: Optional[Digest]
    is_current: bool


class RefManager:
    """
    Manages references (branches and HEAD).

    Handles:
    - Symbolic HEAD (refs/heads/<branch>)
    - Detached HEAD (a commit digest)
    - Branch references (refs/heads/*), empty until the first commit
    - Resolution of names and digests to commits
    """

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.vcs_dir = repo.vcs_dir
        self.heads_dir = repo.heads_dir
        self.head_file = repo.head_file

    # HEAD

    def read_head(self) -> Head:
        """
        Read HEAD.

        Raises:
            CorruptedState: If the HEAD file is missing or empty
        """
        if not self.head_file.exists():
            raise CorruptedState("HEAD missing; repository corrupted")

        content = self.head_file.read_text(encoding='utf-8').strip()
        if not content:
            raise CorruptedState("HEAD is empty; repository corrupted")

        if content.startswith(HEADS_PREFIX):
            return SymbolicHead(content[len(HEADS_PREFIX):])

        return DetachedHead(Digest(content))

    def current_commit(self) -> Optional[Digest]:
        """
        Resolve HEAD to a commit digest.

        Returns:
            Commit digest, or None when the current branch has no commits
        """
        head = self.read_head()

        if isinstance(head, SymbolicHead):
            return self.read_branch(head.branch)

        return head.digest

    def current_branch(self) -> Optional[str]:
        """
        Get the current branch name.

        Returns:
            Branch name or None if in detached HEAD state
        """
        head = self.read_head()
        return head.branch if isinstance(head, SymbolicHead) else None

    def is_detached_head(self) -> bool:
        """Check if HEAD is in detached state."""
        return isinstance(self.read_head(), DetachedHead)

    def point_head_to_branch(self, name: str) -> None:
        """
        Make HEAD symbolic, pointing at an existing branch.

        Raises:
            RefNotFound: If the branch does not exist
        """
        if not self.branch_exists(name):
            raise RefNotFound(name)

        atomic_write_text(self.head_file, f'{HEADS_PREFIX}{name}\n')

    def detach_head_to(self, digest: Digest) -> None:
        """Point HEAD directly at a commit."""
        atomic_write_text(self.head_file, f'{digest}\n')

    # Branches

    def branch_path(self, name: str):
        return self.heads_dir / name

    def branch_exists(self, name: str) -> bool:
        try:
            self.validate_branch_name(name)
        except InvalidRefName:
            return False
        return self.branch_path(name).is_file()

    def conflicting_branch(self, name: str) -> Optional[str]:
        """
        Find a branch whose file would clash with creating name.

        'a/b' cannot be created while branch 'a' exists, and 'a' cannot be
        created while any 'a/...' branch exists.
        """
        parts = name.split('/')
        for i in range(1, len(parts)):
            prefix = '/'.join(parts[:i])
            if self.branch_path(prefix).is_file():
                return prefix

        nested = self.branch_path(name)
        if nested.is_dir():
            for branch_file in sorted(nested.rglob('*')):
                if branch_file.is_file():
                    return branch_file.relative_to(self.heads_dir).as_posix()
            return name

        return None

    def read_branch(self, name: str) -> Optional[Digest]:
        """
        Read a branch tip.

        Returns:
            Commit digest, or None if the branch is absent or has no commits
        """
        if not self.branch_exists(name):
            return None

        content = self.branch_path(name).read_text(encoding='utf-8').strip()
        return Digest(content) if content else None

    def set_branch_tip(self, name: str, digest: Digest) -> None:
        """Point a branch at a commit, creating the branch file if needed."""
        self.validate_branch_name(name)
        atomic_write_text(self.branch_path(name), f'{digest}\n')

    def create_branch(self, name: str, start: Optional[Digest] = None) -> Digest:
        """
        Create a new branch.

        Args:
            name: Branch name
            start: Commit to start from (defaults to the current commit)

        Returns:
            Digest the new branch points at

        Raises:
            InvalidRefName: If name cannot be used as a branch
            AlreadyExists: If the branch already exists
            NoCommitsYet: If there is no commit to branch from
        """
        self.validate_branch_name(name)

        if self.branch_exists(name):
            raise AlreadyExists(f"Branch already exists: {name}")

        conflict = self.conflicting_branch(name)
        if conflict:
            raise AlreadyExists(f"Branch {name} conflicts with existing branch {conflict}")

        if start is None:
            start = self.current_commit()
        if not start:
            raise NoCommitsYet()

        self.set_branch_tip(name, start)
        return start

    def list_branches(self) -> List[BranchInfo]:
        """
        List all branches.

        Returns:
            BranchInfo entries sorted by name
        """
        if not self.heads_dir.exists():
            return []

        current = self.current_branch()
        branches = []
        for branch_file in self.heads_dir.rglob('*'):
            if not branch_file.is_file() or branch_file.name.startswith('.'):
                continue
            name = branch_file.relative_to(self.heads_dir).as_posix()
            branches.append(BranchInfo(name, self.read_branch(name), name == current))

        return sorted(branches, key=lambda b: b.name)

    @staticmethod
    def validate_branch_name(name: str) -> None:
        """
        Reject names that cannot be stored under refs/heads.

        Raises:
            InvalidRefName: If the name is empty, contains whitespace or '..',
                or starts with '/', '-' or '.'
        """
        if (not name
                or name == 'HEAD'
                or name[0] in '/-.'
                or name.endswith('/')
                or '..' in name
                or '\\' in name
                or any(c.isspace() for c in name)):
            raise InvalidRefName(name)

    # Resolution

    def resolve(self, ref: str) -> Digest:
        """
        Resolve a reference to a digest.

        Tried in order: HEAD, refs/heads/<name>, branch name, full digest of
        a stored object, unique abbreviated digest.

        Raises:
            RefNotFound: If nothing matches or the ref has no commits
        """
        digest = self._resolve(ref)
        if not digest:
            raise RefNotFound(ref)
        return digest

    def _resolve(self, ref: str) -> Optional[Digest]:
        if ref == 'HEAD':
            return self.current_commit()

        if ref.startswith(HEADS_PREFIX):
            return self.read_branch(ref[len(HEADS_PREFIX):])

        if self.branch_exists(ref):
            return self.read_branch(ref)

        if is_digest(ref):
            return Digest(ref) if self.repo.object_exists(ref) else None

        if len(ref) >= MIN_PREFIX_LENGTH and is_hex(ref):
            matches = self.repo.find_objects_by_prefix(ref)
            if len(matches) == 1:
                return matches[0]

        return None

