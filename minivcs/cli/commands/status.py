"""Status command - show working tree status."""

import click
from colorama import Fore, Style
from minivcs.core.repository import Repository
from minivcs.operations.status import compute_status
from minivcs.cli.output import success, info, short


@click.command('status')
def status_cmd():
    """
    Show the working tree status.

    Displays:
    - Files staged for commit, with their blob digest
    - Tracked files modified but not staged
    - Untracked files

    Examples:
        minivcs status
    """
    repo = Repository.open()
    report = compute_status(repo)

    if report.detached:
        click.echo(f"{Fore.YELLOW}HEAD detached at {short(report.head)}{Style.RESET_ALL}")
    else:
        click.echo(f"On branch {Fore.CYAN}{report.branch}{Style.RESET_ALL}")
    click.echo()

    if report.staged:
        click.echo(Fore.GREEN + "Staged files:" + Style.RESET_ALL)
        for path, digest in report.staged:
            click.echo(f"  {Fore.GREEN}{path}{Style.RESET_ALL} ({digest})")
    else:
        click.echo("No files staged.")

    if report.modified:
        click.echo()
        click.echo(Fore.YELLOW + "Modified but not staged:" + Style.RESET_ALL)
        for path in report.modified:
            click.echo(f"  {Fore.YELLOW}{path}{Style.RESET_ALL}")

    if report.untracked:
        click.echo()
        click.echo(Fore.RED + "Untracked files:" + Style.RESET_ALL)
        for path in report.untracked:
            click.echo(f"  {Fore.RED}{path}{Style.RESET_ALL}")

    if report.clean and not report.untracked:
        click.echo()
        click.echo(success("Nothing to commit, working tree clean"))
    elif not report.staged:
        click.echo()
        click.echo(info("No changes added to commit (use \"minivcs add\")"))
