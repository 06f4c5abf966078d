"""Layered INI configuration for minivcs.

A value is looked up in MINIVCS_<SECTION>_<KEY> environment variables,
then the repository's .myvcs/config, then ~/.minivcsconfig.
"""

import io
import os
import getpass
import configparser
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from minivcs.utils.fs import atomic_write_text

ENV_PREFIX = 'MINIVCS'


def env_name(section: str, key: str) -> str:
    """Environment variable overriding section.key."""
    return f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"


def split_key(key: str) -> Tuple[str, str]:
    """Split 'section.option' into its parts; bare keys go to [core]."""
    return tuple(key.split('.', 1)) if '.' in key else ('core', key)


def read_ini(path: Optional[Path]) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path is not None and path.exists():
        parser.read(path, encoding='utf-8')
    return parser


class Config:
    """
    Configuration visible from one repository, or from none.

    Files are re-read on every lookup so values written by one command
    are seen by the next without any cache to invalidate.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.minivcsconfig'

    def __init__(self, repo_config_path: Optional[Path] = None):
        self.repo_config_path = repo_config_path

    def _files(self, global_only: bool = False) -> List[Path]:
        """Config files, highest precedence first."""
        if global_only or self.repo_config_path is None:
            return [self.GLOBAL_CONFIG_PATH]
        return [self.repo_config_path, self.GLOBAL_CONFIG_PATH]

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        value = os.environ.get(env_name(section, key))
        if value is not None:
            return value

        for path in self._files():
            parser = read_ini(path)
            if parser.has_option(section, key):
                return parser.get(section, key)

        return fallback

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Write section.key to the global or the repository file.

        Raises:
            ValueError: If the repository file is requested outside a repository
        """
        if global_config:
            path = self.GLOBAL_CONFIG_PATH
        elif self.repo_config_path is None:
            raise ValueError("No repository config path available")
        else:
            path = self.repo_config_path

        parser = read_ini(path)
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, key, value)

        buffer = io.StringIO()
        parser.write(buffer)
        atomic_write_text(path, buffer.getvalue())

    def list_all(self, global_only: bool = False) -> Dict[str, str]:
        """Flat 'section.key' values; repository values override global ones."""
        values = {}
        for path in reversed(self._files(global_only)):
            parser = read_ini(path)
            for section in parser.sections():
                for key, value in parser.items(section):
                    values[f"{section}.{key}"] = value
        return values

    def get_author(self) -> str:
        """
        Author string recorded in new commits.

        "Name <email>" when an email is configured, "Name" otherwise. The
        name falls back to the login name, then to 'unknown'.
        """
        name = self.get('user', 'name')
        if not name:
            try:
                name = getpass.getuser()
            except (KeyError, OSError):
                name = None
        name = name or 'unknown'

        email = self.get('user', 'email')
        return f"{name} <{email}>" if email else name


def get_config(repo=None) -> Config:
    """Config for repo, or global-only config when repo is None."""
    if repo:
        return Config(repo.config_file)
    return Config()
