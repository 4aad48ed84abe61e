"""
mdxpack CLI - Main entry point.

    mdxpack SOURCE_PATH [WORDS | folder]

Packs every documentation file under SOURCE_PATH into a handful of
larger Markdown files in the output directory (``dist`` by default).
"""

import logging
import sys

import click

from ..config import load_config
from ..core.errors import MdxpackError
from ..core.packer import Packer
from ..core.policy import BatchingPolicy, SizeBounded, parse_policy
from .utils import (
    configure_logging,
    echo_empty_scan_warning,
    echo_error,
    echo_success,
    print_summary_table,
)

logger = logging.getLogger(__name__)


def resolve_policy(token: str | None, default_threshold: int) -> BatchingPolicy:
    """
    Parse the batching argument, falling back to the default threshold.

    An unrecognised argument is not an error: it is logged and the run
    continues with ``default_threshold``.
    """
    result = parse_policy(token, default_threshold)
    if result.is_err():
        error = result.unwrap_err()
        logger.warning(f"{error.message}; using {default_threshold} words per file")
    return result.unwrap_or(SizeBounded(threshold=default_threshold))


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(package_name="mdxpack")
@click.argument("source_path", required=False)
@click.argument("batching", required=False)
@click.argument("extra_args", nargs=-1)
@click.option("-o", "--output-dir", type=click.Path(file_okay=False), help="Output directory (default: dist)")
@click.option("-e", "--extension", help="Source file extension to collect (default: .mdx)")
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False), help="YAML configuration file")
@click.option("--sort", "sort_entries", is_flag=True, help="Visit directory entries in sorted order")
@click.option("--json", "as_json", is_flag=True, help="Output a JSON summary")
@click.option("-v", "--verbose", is_flag=True, help="Show detailed output")
def main(
    source_path: str | None,
    batching: str | None,
    extra_args: tuple,
    output_dir: str | None,
    extension: str | None,
    config_path: str | None,
    sort_entries: bool,
    as_json: bool,
    verbose: bool,
):
    """
    Pack documentation files into a few large Markdown files.

    BATCHING is either a word count per output file (default 5000) or the
    keyword ``folder`` to write one file per source directory.

    \b
    Examples:
      mdxpack ./docs
      mdxpack ./docs 20000
      mdxpack ./docs folder
    """
    configure_logging(verbose)
    if extra_args:
        logger.debug(f"Ignoring extra arguments: {' '.join(extra_args)}")

    if not source_path:
        echo_error("Please provide a source path as an argument.")
        sys.exit(1)

    try:
        config = load_config(config_path).with_overrides(
            output_dir=output_dir,
            source_extension=extension,
            sort_entries=sort_entries or None,
        )
    except MdxpackError as e:
        echo_error(str(e))
        sys.exit(1)

    policy = resolve_policy(batching, config.default_threshold)
    logger.debug(f"Packing {source_path} with {policy.describe()} batching")

    def progress(path, batch):
        if not as_json:
            click.echo(f"Created file: {path}")

    try:
        summary = Packer(config).run(source_path, policy, progress_callback=progress)
    except MdxpackError as e:
        echo_error(f"An error occurred: {e}")
        sys.exit(1)

    if as_json:
        click.echo(summary.model_dump_json(indent=2))
        return

    if summary.files_found == 0:
        echo_empty_scan_warning(source_path, config.source_extension)
    echo_success(f'Files have been concatenated and saved in the "{config.output_dir}" folder.')
    if verbose:
        print_summary_table(summary)


if __name__ == "__main__":
    main()
