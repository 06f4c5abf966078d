"""Status computation: compare working files with staged and committed state."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from minivcs.core.hash import Digest, hash_framed
from minivcs.utils.fs import list_working_files


@dataclass
class StatusReport:
    """
    Working tree status.

    - staged: (path, digest) entries in index order
    - modified: working files whose content differs from what is staged,
      or from HEAD when the file is not staged
    - untracked: working files neither staged nor in HEAD
    """
    branch: Optional[str] = None
    head: Optional[Digest] = None
    staged: List[Tuple[str, Digest]] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)

    @property
    def detached(self) -> bool:
        return self.branch is None

    @property
    def clean(self) -> bool:
        return not (self.staged or self.modified)


def working_digest(path) -> Digest:
    """Blob digest of a working file's current content."""
    return hash_framed('blob', path.read_bytes())


def compute_status(repo, working_files: Optional[List[str]] = None) -> StatusReport:
    """
    Compute the status of the working tree.

    A single pass over the working files: a file is modified when its
    digest differs from its staged digest, or, if it is not staged, from
    its entry in the HEAD tree. Files missing from the working tree are
    not reported.

    Hidden paths are left out of the directory walk but are still checked
    once they are staged or committed.

    Args:
        repo: Repository instance
        working_files: Paths to inspect (defaults to every working file
            plus every staged or committed path)

    Returns:
        StatusReport
    """
    head = repo.refs.current_commit()
    report = StatusReport(branch=repo.refs.current_branch(), head=head)

    staged = repo.index.read_all()
    report.staged = [tuple(entry) for entry in staged]
    staged_map = dict(report.staged)
    head_map = repo.graph.resolve_tree_map(head)

    if working_files is None:
        working_files = sorted(
            set(list_working_files(repo.work_tree)) | set(staged_map) | set(head_map)
        )

    for path in working_files:
        file_path = repo.work_tree / path
        if not file_path.is_file():
            continue

        expected = staged_map.get(path) or head_map.get(path)
        if expected is None:
            report.untracked.append(path)
        elif working_digest(file_path) != expected:
            report.modified.append(path)

    return report
