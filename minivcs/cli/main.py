"""Main CLI entry point for minivcs."""

import click
from colorama import init

from minivcs import __version__
from minivcs.core.errors import FatalError
from minivcs.cli.output import BANNER, report_error
from minivcs.cli.commands import (init_cmd, add_cmd, commit_cmd, status_cmd, log_cmd,
                                  checkout_cmd, branch_cmd, branches_cmd, switch_cmd,
                                  show_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class MiniVCSGroup(click.Group):
    """Command group that shows a banner and turns fatal errors into a failed exit."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except FatalError as e:
            report_error(e)
            ctx.exit(1)


@click.group(cls=MiniVCSGroup)
@click.version_option(version=__version__)
def cli():
    pass


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(status_cmd)
cli.add_command(log_cmd)
cli.add_command(checkout_cmd)
cli.add_command(branch_cmd)
cli.add_command(branches_cmd)
cli.add_command(switch_cmd)
cli.add_command(show_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
