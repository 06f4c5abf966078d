"""Initialize a new minivcs repository."""

import click
from pathlib import Path
from minivcs.core.errors import AlreadyExists
from minivcs.core.repository import Repository
from minivcs.cli.output import success, info, warning


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new minivcs repository.

    Creates a .myvcs directory with an empty 'main' branch and HEAD
    pointing at it.

    Examples:
        minivcs init                # Initialize in current directory
        minivcs init my-project     # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()

    if not repo_path.exists():
        repo_path.mkdir(parents=True)
        click.echo(info(f"Created directory {repo_path}"))

    repo = Repository(str(repo_path))
    try:
        repo.init()
    except AlreadyExists as e:
        click.echo(warning(str(e)))
        return

    click.echo(success(f"Initialized empty minivcs repository in {repo.vcs_dir}"))
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  minivcs add <file>"))
    click.echo(info("  minivcs commit -m 'message'"))
