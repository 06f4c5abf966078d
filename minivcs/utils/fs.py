"""Filesystem helpers for minivcs."""

import os
import tempfile
from pathlib import Path
from typing import List, Union


def atomic_write(path: Union[str, Path], data: bytes) -> None:
    """
    Write bytes to a file atomically.
    
    Data is written to a temporary file in the same directory and then
    renamed over the target, so readers see either the old or the new
    content, never a partial write.
    
    Args:
        path: Destination file
        data: Content to write
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f'.{path.name}.', suffix='.tmp')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


def atomic_write_text(path: Union[str, Path], text: str) -> None:
    """Write UTF-8 text to a file atomically."""
    atomic_write(path, text.encode('utf-8'))


def list_working_files(work_tree: Union[str, Path]) -> List[str]:
    """
    List files in the working tree.
    
    Any path with a component starting with '.' is skipped, which also
    keeps the repository directory out of the listing.
    
    Args:
        work_tree: Repository root
        
    Returns:
        Sorted POSIX paths relative to the work tree
    """
    work_tree = Path(work_tree)
    files = []
    
    for path in work_tree.rglob('*'):
        if not path.is_file():
            continue
        
        rel_path = path.relative_to(work_tree)
        if any(part.startswith('.') for part in rel_path.parts):
            continue
        
        files.append(rel_path.as_posix())
    
    return sorted(files)
