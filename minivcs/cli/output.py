"""CLI output utilities and formatting."""

import click
from colorama import Fore, Style

BANNER = f"""
{Fore.CYAN}{Style.BRIGHT}minivcs{Style.RESET_ALL} {Fore.WHITE}- a minimal content-addressed version control system{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def report_error(exc: Exception) -> None:
    """Print an error to the error stream."""
    click.echo(error(str(exc)), err=True)


def short(digest) -> str:
    """Abbreviated digest for display."""
    return digest[:7] if digest else '-------'
