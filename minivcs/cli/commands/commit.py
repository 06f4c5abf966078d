"""Commit command - create a commit from staged changes."""

import click
from minivcs.core.errors import RecoverableError
from minivcs.core.repository import Repository
from minivcs.cli.output import success, info, warning, report_error


@click.command('commit')
@click.option('-m', '--message', help='Commit message')
@click.option('--author', help='Author (format: "Name <email>")')
def commit_cmd(message, author):
    """
    Record changes to the repository.

    Creates a commit from the staged files in the index and clears the
    index afterwards. On a branch the branch moves to the new commit;
    with a detached HEAD no branch moves.

    Examples:
        minivcs commit -m "Initial commit"
        minivcs commit -m "Add feature" --author "Jane <jane@example.com>"
    """
    repo = Repository.open()

    if not message:
        click.echo(warning('Commit message required. Use -m "message"'), err=True)
        return

    branch = repo.refs.current_branch()

    try:
        commit_hash = repo.graph.commit_index(message, author=author)
    except RecoverableError as e:
        report_error(e)
        click.echo(info("Use 'minivcs add <file>' to stage changes"))
        return

    click.echo(success(f"Created commit {commit_hash}"))
    if branch:
        click.echo(info(f"Updated branch {branch} -> {commit_hash}"))
    else:
        click.echo(warning("HEAD is detached; not updating a branch ref."))
