"""Switch command - move HEAD to a branch."""

import click
from minivcs.core.errors import RecoverableError
from minivcs.core.repository import Repository
from minivcs.operations.checkout import switch_branch
from minivcs.cli.output import success, info, report_error


@click.command('switch')
@click.argument('branch_name')
def switch_cmd(branch_name):
    """
    Switch to a branch.

    Restores the branch tip into the working tree and points HEAD at
    the branch.

    Examples:
        minivcs switch main          # Switch to 'main' branch
        minivcs switch feature       # Switch to 'feature' branch
    """
    repo = Repository.open()

    try:
        result = switch_branch(repo, branch_name)
    except RecoverableError as e:
        report_error(e)
        return

    for path in result.restored:
        click.echo(info(f"Restored: {path}"))

    if result.digest is None:
        click.echo(success(f"Switched to branch {branch_name} (no commits yet)"))
    else:
        click.echo(success(f"Switched to branch {branch_name}"))
