"""Core functionality for minivcs.

This module contains the core data structures:
- Stored objects (Blob, Tree, Commit)
- Repository and object store
- Index/staging area
- Reference management
- Commit graph
- Configuration management
- Hashing utilities

For checkout and status, see minivcs.operations
"""

from minivcs.core.objects import VCSObject, Blob, Tree, TreeEntry, Commit
from minivcs.core.repository import Repository
from minivcs.core.hash import Digest, hash_object, hash_framed
from minivcs.core.index import Index, IndexEntry
from minivcs.core.refs import RefManager, SymbolicHead, DetachedHead, BranchInfo
from minivcs.core.graph import CommitGraph
from minivcs.core.config import Config, get_config

__all__ = [
    'VCSObject',
    'Blob',
    'Tree',
    'TreeEntry',
    'Commit',
    'Repository',
    'Digest',
    'hash_object',
    'hash_framed',
    'Index',
    'IndexEntry',
    'RefManager',
    'SymbolicHead',
    'DetachedHead',
    'BranchInfo',
    'CommitGraph',
    'Config',
    'get_config',
]
