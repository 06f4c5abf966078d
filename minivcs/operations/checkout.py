"""Checkout engine: materialize a commit's tree into the working directory."""

from dataclasses import dataclass, field
from typing import List, Optional
from minivcs.core.errors import RefNotFound
from minivcs.core.hash import Digest
from minivcs.core.objects import Blob


@dataclass
class CheckoutResult:
    """Outcome of a checkout or branch switch."""
    digest: Optional[Digest]
    restored: List[str] = field(default_factory=list)
    detached: bool = False

    @property
    def empty(self) -> bool:
        """True when there was nothing to write."""
        return not self.restored


def checkout(repo, target: str, detach: bool = True) -> CheckoutResult:
    """
    Check out a commit into the working directory.

    Every file of the target tree overwrites its working copy. Files that
    are not part of the target tree are left untouched: a checkout never
    deletes anything.

    Args:
        repo: Repository instance
        target: Digest (full or abbreviated), 'HEAD', branch name or refs/heads/<name>
        detach: Point HEAD directly at the commit afterwards. When False the
            caller manages HEAD.

    Returns:
        CheckoutResult; an empty result means the commit had nothing to
        check out and HEAD was left alone

    Raises:
        RefNotFound: If target cannot be resolved
    """
    digest = repo.refs.resolve(target)
    tree_map = repo.graph.resolve_tree_map(digest)

    if not tree_map:
        return CheckoutResult(digest)

    restored = []
    for path, blob_hash in tree_map.items():
        blob = repo.read_object(blob_hash)
        if not isinstance(blob, Blob):
            continue

        file_path = repo.work_tree / path
        try:
            file_path.resolve().relative_to(repo.work_tree)
        except ValueError:
            # Tree entries may only write inside the work tree
            continue

        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(blob.data)
        restored.append(path)

    if detach:
        repo.refs.detach_head_to(digest)

    return CheckoutResult(digest, restored, detached=detach)


def switch_branch(repo, name: str) -> CheckoutResult:
    """
    Switch HEAD to a branch, restoring its tip into the working directory.

    A branch without commits only moves HEAD.

    Raises:
        RefNotFound: If the branch does not exist
    """
    if not repo.refs.branch_exists(name):
        raise RefNotFound(name)

    tip = repo.refs.read_branch(name)
    result = checkout(repo, tip, detach=False) if tip else CheckoutResult(None)

    repo.refs.point_head_to_branch(name)
    return result
