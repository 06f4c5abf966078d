"""Commit graph: building commits and walking history."""

from typing import Dict, Iterator, List, Optional, Tuple
from .errors import CorruptedState, NothingStaged, ObjectNotFound
from .hash import Digest
from .objects import Commit, Tree
from .refs import SymbolicHead


class CommitGraph:
    """
    Linear commit history of a repository.

    Commits have at most one parent. Each commit references exactly one
    tree, which is a flat (path, digest) snapshot built from the index.
    """

    def __init__(self, repo):
        """
        Initialize commit graph.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def commit(
        self,
        staged_entries,
        message: str,
        author: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> Digest:
        """
        Record staged entries as a new commit.

        Steps, in order:
        1. Store the tree built from the entries (index order)
        2. Store the commit, parented on the current commit if any
        3. Advance the current branch, unless HEAD is detached
        4. Clear the index

        Object writes are idempotent, so an interrupted commit can be
        re-run. The branch update and index clear are not transactional.

        Args:
            staged_entries: Sequence of (path, digest) pairs
            message: Commit message
            author: Author string (defaults to configured author)
            timestamp: ISO-8601 timestamp (defaults to now)

        Returns:
            str: Commit digest

        Raises:
            NothingStaged: If staged_entries is empty
        """
        entries = [tuple(entry) for entry in staged_entries]
        if not entries:
            raise NothingStaged()

        tree_hash = self.repo.write_object(Tree.from_entries(entries))

        head = self.repo.refs.read_head()
        parent = self.repo.refs.current_commit()

        if author is None:
            author = self.repo.config.get_author()

        commit = Commit.create(
            tree_hash=tree_hash,
            parent_hash=parent,
            author=author,
            message=message,
            timestamp=timestamp
        )
        commit_hash = self.repo.write_object(commit)

        # A detached commit is stored but no branch moves
        if isinstance(head, SymbolicHead):
            self.repo.refs.set_branch_tip(head.branch, commit_hash)

        self.repo.index.clear()

        return commit_hash

    def commit_index(self, message: str, author: Optional[str] = None) -> Digest:
        """Commit whatever is currently staged."""
        return self.commit(self.repo.index.read_all(), message, author=author)

    def read_commit(self, digest: Optional[str]) -> Optional[Commit]:
        """
        Load a commit.

        Returns:
            Commit, or None if digest is empty, unknown, unreadable, or not
            a commit
        """
        if not digest:
            return None

        try:
            obj = self.repo.read_object(digest)
        except (ObjectNotFound, CorruptedState, ValueError):
            return None

        return obj if isinstance(obj, Commit) else None

    def resolve_tree_map(self, commit_digest: Optional[str]) -> Dict[str, Digest]:
        """
        Get the path -> blob digest snapshot of a commit.

        Returns:
            Mapping in tree order; empty when the commit or its tree
            cannot be resolved
        """
        commit = self.read_commit(commit_digest)
        if commit is None:
            return {}

        try:
            tree = self.repo.read_object(commit.tree)
        except (ObjectNotFound, CorruptedState, ValueError):
            return {}

        if not isinstance(tree, Tree):
            return {}

        return tree.to_map()

    def walk_ancestry(self, start: Optional[str]) -> Iterator[Tuple[Digest, Commit]]:
        """
        Walk the parent chain from a commit.

        Yields (digest, commit) pairs from child to parent. The walk ends at
        a commit without a parent, or when a parent cannot be loaded.
        Each call starts a fresh walk.
        """
        seen = set()
        current = start

        while current and current not in seen:
            commit = self.read_commit(current)
            if commit is None:
                return

            seen.add(current)
            yield Digest(current), commit
            current = commit.parent

    def history(self, start: Optional[str], max_count: Optional[int] = None) -> List[Tuple[Digest, Commit]]:
        """Collect walk_ancestry into a list, optionally limited."""
        history = []
        for item in self.walk_ancestry(start):
            if max_count is not None and len(history) >= max_count:
                break
            history.append(item)
        return history
