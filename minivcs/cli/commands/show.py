"""Show command - print a stored object."""

import click
from colorama import Fore, Style
from minivcs.core.errors import RecoverableError
from minivcs.core.repository import Repository
from minivcs.cli.output import report_error


@click.command('show')
@click.argument('target', required=False, default='HEAD')
def show_cmd(target):
    """
    Show a stored object.

    Prints the object header ('<kind> <size>'), a separator, then the raw
    payload. Works for commits, trees and blobs.

    Examples:
        minivcs show                # Show HEAD commit
        minivcs show 3f2a9c1        # Show any object by (abbreviated) digest
        minivcs show main           # Show latest commit on main branch
    """
    repo = Repository.open()

    try:
        digest = repo.refs.resolve(target)
        kind, payload = repo.get(digest)
    except RecoverableError as e:
        report_error(e)
        return

    click.echo(f"{Fore.YELLOW}{kind} {len(payload)}{Style.RESET_ALL}")
    click.echo("----")
    click.echo(payload.decode('utf-8', errors='replace'), nl=False)
    if payload and not payload.endswith(b'\n'):
        click.echo()
