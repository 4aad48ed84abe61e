"""
CLI Utilities - Shared helper functions for command line output.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..core.types import PackSummary

console = Console()


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross to standard error.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_empty_scan_warning(source: str, extension: str) -> None:
    """
    Print a helpful warning when a scan finds nothing to pack.

    Args:
        source (str): The directory that was scanned.
        extension (str): The extension that was searched for.
    """
    click.echo()
    click.echo(click.style(f"⚠️  No {extension} files found under {source}", fg="yellow", bold=True))
    click.echo("   The output directory was created but is empty.")
    click.echo("   Troubleshooting:")
    click.echo("   1. Is the source path the root of your documentation?")
    click.echo("   2. Do your files use a different extension? Try --extension:")
    click.echo(click.style(f"      mdxpack {source} --extension .md", fg="cyan"))
    click.echo()


def print_summary_table(summary: PackSummary) -> None:
    """Render a pack summary as a rich table."""
    table = Table(title="Pack summary", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Source", summary.source)
    table.add_row("Output", summary.output_dir)
    table.add_row("Policy", summary.policy)
    table.add_row("Files", str(summary.files_found))
    table.add_row("Artifacts", str(summary.artifacts_written))
    table.add_row("Words", f"{summary.total_words:,}")
    table.add_row("Duration", f"{summary.duration_sec}s")
    console.print(table)


def configure_logging(verbose: bool) -> None:
    """
    Show mdxpack debug logs on stderr when verbose.

    Without ``--verbose`` nothing is installed and warnings reach stderr
    through the logging module's last-resort handler.
    """
    if not verbose:
        return

    package_logger = logging.getLogger("mdxpack")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )
    package_logger.setLevel(logging.DEBUG)
