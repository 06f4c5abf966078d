"""Log command - show commit history."""

import click
from colorama import Fore, Style
from minivcs.core.repository import Repository
from minivcs.cli.output import info


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits')
@click.option('--oneline', is_flag=True, help='Show each commit on one line')
def log_cmd(max_count, oneline):
    """
    Show commit history.

    Walks from the current commit to the root, following parents.

    Examples:
        minivcs log
        minivcs log -n 5
        minivcs log --oneline
    """
    repo = Repository.open()
    start = repo.refs.current_commit()

    if not start:
        click.echo(info("No commits yet."))
        return

    for commit_hash, commit in repo.graph.history(start, max_count=max_count):
        if oneline:
            summary = commit.message.split('\n')[0]
            click.echo(f"{Fore.YELLOW}{commit_hash[:7]}{Style.RESET_ALL} {summary}")
            continue

        click.echo(f"{Fore.YELLOW}commit {commit_hash}{Style.RESET_ALL}")
        click.echo(commit.author_line)
        click.echo()
        for line in commit.message.strip().split('\n'):
            click.echo(f"    {line}")
        click.echo()
