"""Add command - stage files for commit."""

import click
from pathlib import Path
from minivcs.core.errors import RecoverableError
from minivcs.core.repository import Repository
from minivcs.cli.output import success, error, info


def expand_paths(path_pattern):
    """
    Expand a command-line path into files to stage.

    Directories are walked recursively; entries with a component
    starting with '.' are skipped.
    """
    path = Path(path_pattern)
    resolved_path = path if path.is_absolute() else Path.cwd() / path

    if not resolved_path.is_dir():
        return [resolved_path]

    files = []
    for file_path in sorted(resolved_path.rglob('*')):
        if not file_path.is_file():
            continue
        rel_path = file_path.relative_to(resolved_path)
        if any(part.startswith('.') for part in rel_path.parts):
            continue
        files.append(file_path)
    return files


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Stage files for the next commit. Modified files must be added
    again to stage the new changes.

    Examples:
        minivcs add file.txt
        minivcs add src/
    """
    repo = Repository.open()

    added_files = []
    failed_files = []

    for path_pattern in paths:
        for file_path in expand_paths(path_pattern):
            try:
                digest = repo.index.add_file(file_path)
            except RecoverableError as e:
                failed_files.append(str(e))
                continue
            rel_path = file_path.resolve().relative_to(repo.work_tree).as_posix()
            added_files.append((rel_path, digest))

    for rel_path, digest in added_files:
        click.echo(info(f"Added to index: {rel_path} ({digest[:7]})"))

    if added_files:
        click.echo(success(f"Staged {len(added_files)} file(s)"))

    for reason in failed_files:
        click.echo(error(reason), err=True)
