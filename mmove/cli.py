"""CLI entrypoint."""

import click
from rich.console import Console

from mmove.constants import DEFAULT_LOG_LEVEL, ENV_PREFIX, VERBOSE_LOG_LEVEL
from mmove.exceptions import MassMoveError
from mmove.logs import setup_logging
from mmove.models.move import MoveOp
from mmove.processors.move_processor import MoveProcessor


console = Console(highlight=False, soft_wrap=True, emoji=False)
err_console = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)


def _print_move(op: MoveOp) -> None:
    console.print(str(op), markup=False)


@click.command(context_settings=dict(show_default=True, auto_envvar_prefix=ENV_PREFIX))
@click.argument("source_pattern", type=str)
@click.argument("destination_pattern", type=str)
@click.option("-f", "--force", is_flag=True, default=False, help="Replace existing files in the destination directory.")
@click.option(
    "-n",
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show the planned moves without touching any file.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(
    source_pattern: str,
    destination_pattern: str,
    force: bool,
    dry_run: bool,
    verbose: bool,
) -> None:
    """mmv - Mass move files matching a wildcard pattern.

    SOURCE_PATTERN selects files: a path whose filename may contain `*`,
    standing for any (possibly empty) substring.

    DESTINATION_PATTERN builds the new path: markers `#1`, `#2`, ... are
    replaced by the substrings matched by the first, second, ... `*`.

    Examples:

        mmv 'path/to/some_*_filename.*' 'path2/to/changed_#1_filename.#2'

        mmv -f 'photos/IMG_*.jpg' 'photos/holiday_#1.jpg'
    """
    setup_logging(VERBOSE_LOG_LEVEL if verbose else DEFAULT_LOG_LEVEL)

    processor = MoveProcessor(source_pattern, destination_pattern, force=force)
    try:
        plan = processor.run(on_moved=_print_move, dry_run=dry_run)
    except MassMoveError as e:
        err_console.print(str(e), markup=False, end="")
        raise SystemExit(1) from e

    if dry_run:
        for op in plan.operations:
            note = " (replace)" if op.replaces_existing else ""
            console.print(f"{op}{note}", markup=False)
