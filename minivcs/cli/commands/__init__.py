"""CLI commands for minivcs."""

from minivcs.cli.commands.init import init_cmd
from minivcs.cli.commands.add import add_cmd
from minivcs.cli.commands.commit import commit_cmd
from minivcs.cli.commands.status import status_cmd
from minivcs.cli.commands.log import log_cmd
from minivcs.cli.commands.checkout import checkout_cmd
from minivcs.cli.commands.branch import branch_cmd, branches_cmd
from minivcs.cli.commands.switch import switch_cmd
from minivcs.cli.commands.show import show_cmd
from minivcs.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'status_cmd', 'log_cmd',
           'checkout_cmd', 'branch_cmd', 'branches_cmd', 'switch_cmd',
           'show_cmd', 'config_cmd']
