"""Branch commands - create and list branches."""

import click
from colorama import Fore, Style
from minivcs.core.errors import RecoverableError
from minivcs.core.repository import Repository
from minivcs.cli.output import success, info, report_error


@click.command('branch')
@click.argument('name')
def branch_cmd(name):
    """
    Create a new branch at the current commit.

    Examples:
        minivcs branch feature
    """
    repo = Repository.open()

    try:
        commit_hash = repo.refs.create_branch(name)
    except RecoverableError as e:
        report_error(e)
        return

    click.echo(success(f"Created branch {name} at {commit_hash}"))


@click.command('branches')
def branches_cmd():
    """
    List branches.

    The current branch is marked with '*'.

    Examples:
        minivcs branches
    """
    repo = Repository.open()
    branches = repo.refs.list_branches()

    if not branches:
        click.echo(info("No branches."))
        return

    for branch in branches:
        target = branch.digest or '(no commits)'
        if branch.is_current:
            click.echo(f"* {Fore.GREEN}{branch.name}{Style.RESET_ALL} -> {target}")
        else:
            click.echo(f"  {branch.name} -> {target}")
