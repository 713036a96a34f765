import logging

import click

from .errors import ArgumentCountError
from .pipeline import run_pipeline


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("paths", nargs=-1)
@click.option("--quiet", "-q", is_flag=True, help="Suppress progress messages")
@click.option("--verbose", "-v", is_flag=True, help="Show intersection/union counts and debug logging")
def main(paths, quiet, verbose):
    """
    Text duplication checker (CLI)

    dupcheck ORIGINAL_FILE PLAGIARIZED_FILE OUTPUT_FILE
    """
    if len(paths) != 3:
        raise ArgumentCountError(len(paths))
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    original, plagiarized, output = paths
    report = run_pipeline(
        original_path=original,
        plagiarized_path=plagiarized,
        output_path=output,
        echo=None if quiet else click.echo,
    )
    if verbose:
        click.echo(f"Intersection: {report.intersection}, union: {report.union}")


if __name__ == "__main__":
    main()
