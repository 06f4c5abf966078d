"""Config command - manage repository configuration."""

import click
from minivcs.core.config import get_config, split_key
from minivcs.core.repository import Repository
from minivcs.cli.output import success, error, info


def load_config(is_global):
    """Config for the enclosing repository, or global-only config."""
    if is_global:
        return get_config()
    return get_config(Repository.open())


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        minivcs config set user.name "Your Name"
        minivcs config set --global user.email "you@example.com"
    """
    config = load_config(is_global)
    section, option = split_key(key)
    config.set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.

    Examples:
        minivcs config get user.name
    """
    config = load_config(is_global)
    section, option = split_key(key)
    value = config.get(section, option)

    if value is None:
        click.echo(error(f"Config key not found: {key}"), err=True)
        return

    click.echo(value)


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        minivcs config list
    """
    values = load_config(is_global).list_all(global_only=is_global)

    if not values:
        click.echo(info("No configuration set"))
        return

    for key, value in sorted(values.items()):
        click.echo(f"{key}={value}")
