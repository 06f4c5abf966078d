"""minivcs - a minimal content-addressed version control system."""

__version__ = '0.1.0'

from minivcs.core.repository import Repository
from minivcs.core.objects import VCSObject, Blob, Tree, Commit

__all__ = [
    'Repository',
    'VCSObject',
    'Blob',
    'Tree',
    'Commit',
]
