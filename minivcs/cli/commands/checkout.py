"""Checkout command - restore a commit or branch into the working tree."""

import click
from minivcs.core.errors import RecoverableError
from minivcs.core.refs import HEADS_PREFIX
from minivcs.core.repository import Repository
from minivcs.operations.checkout import checkout, switch_branch
from minivcs.cli.output import success, info, warning, report_error


def echo_restored(result):
    """Print the files a checkout wrote."""
    for path in result.restored:
        click.echo(info(f"Restored: {path}"))


@click.command('checkout')
@click.argument('target')
def checkout_cmd(target):
    """
    Restore files from a commit or branch.

    A branch name (or refs/heads/<name>) switches to that branch. Anything
    else (a digest, an abbreviated digest, HEAD) is checked out with a
    detached HEAD.

    Files that are not part of the checked-out snapshot are left in place.

    Examples:
        minivcs checkout 3f2a9c1        # Detached HEAD at a commit
        minivcs checkout main           # Back to the 'main' branch
    """
    repo = Repository.open()

    branch = target[len(HEADS_PREFIX):] if target.startswith(HEADS_PREFIX) else target

    try:
        if repo.refs.branch_exists(branch):
            result = switch_branch(repo, branch)
            echo_restored(result)
            click.echo(success(f"Switched to branch {branch}"))
            return

        result = checkout(repo, target, detach=True)
    except RecoverableError as e:
        report_error(e)
        return

    if result.empty:
        click.echo(info("Nothing to checkout (commit empty)."))
        return

    echo_restored(result)
    click.echo(warning(f"HEAD now at {result.digest} (detached)"))
