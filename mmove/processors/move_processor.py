"""Mass move processor: wildcard sources to `#N` destination templates."""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from mmove.constants import WILDCARD
from mmove.exceptions import (
    DestinationExistsError,
    DestinationReplaceFailedError,
    DuplicateDestinationError,
    OutputDirectoryCreateError,
    RenameFailedError,
)
from mmove.models.move import MoveOp, MovePlan
from mmove.paths import split_path
from mmove.patterns import extract_generic_parts, find_matching_files
from mmove.templates import build_target_path, marker_indices


logger = logging.getLogger(__name__)

MoveCallback = Callable[[MoveOp], None]


class MoveProcessor:
    """Moves every file matching a wildcard pattern to a templated destination.

    The batch runs as a linear pipeline: discover sources, validate all
    destinations, create the output directory, then rename one file at a
    time. Nothing is retried and nothing is rolled back: a failure part way
    through leaves earlier renames (and, in force mode, earlier deletions of
    replaced destinations) in place.
    """

    def __init__(self, source_pattern: str, destination_pattern: str, force: bool = False) -> None:
        """Initialize the move processor.

        Args:
            source_pattern: Directory plus wildcard filename, e.g. ``path/to/some_*_filename.*``.
            destination_pattern: Destination template, e.g. ``path2/to/changed_#1_filename.#2``.
            force: Replace destination files that already exist.
        """
        self.source_pattern = source_pattern
        self.destination_pattern = destination_pattern
        self.force = force

    def build_plan(self) -> MovePlan:
        """Compute the destination of every matching source file.

        Returns:
            MovePlan with one operation per matched file.

        Raises:
            DirectoryUnreadableError: If the source directory cannot be listed.
            NoMatchError: If the source pattern matches nothing.
            DuplicateDestinationError: If two sources map to the same destination.
        """
        source_files = find_matching_files(self.source_pattern)
        self._log_unused_markers()
        output_directory, _ = split_path(self.destination_pattern)
        plan = MovePlan(output_directory=output_directory)

        claimed: dict[str, str] = {}
        for source in source_files:
            captures = extract_generic_parts(source, self.source_pattern)
            destination = build_target_path(captures, self.destination_pattern)
            if destination in claimed:
                raise DuplicateDestinationError(destination, claimed[destination], source)
            claimed[destination] = source

            op = MoveOp(source=source, destination=destination, captures=captures)
            logger.debug("Planned %s (captures: %s)", op, captures)
            plan.operations.append(op)

        return plan

    def _log_unused_markers(self) -> None:
        wildcard_count = split_path(self.source_pattern)[1].count(WILDCARD)
        unused = [i for i in marker_indices(self.destination_pattern) if not 1 <= i <= wildcard_count]
        if unused:
            logger.debug(
                "Markers %s have no matching wildcard in '%s' and will be left empty",
                ", ".join(f"#{i}" for i in unused),
                self.source_pattern,
            )

    def clear_destinations(self, plan: MovePlan, dry_run: bool = False) -> None:
        """Check every destination and, in force mode, delete existing ones.

        In force mode a destination that is the source path itself is never
        deleted; the rename onto itself then leaves the file in place.

        Args:
            plan: Plan returned by `build_plan`.
            dry_run: Only mark the destinations that would be replaced.

        Raises:
            DestinationExistsError: If a destination exists and force is off.
            DestinationReplaceFailedError: If deleting a destination fails.
        """
        for op in plan.operations:
            if not os.path.lexists(op.destination):
                continue
            if not self.force:
                raise DestinationExistsError(op.destination)
            if op.is_same:
                continue

            op.replaces_existing = True
            if dry_run:
                continue
            try:
                os.remove(op.destination)
            except OSError as e:
                raise DestinationReplaceFailedError(op.destination, str(e)) from e
            logger.debug("Deleted existing destination %s", op.destination)

    def ensure_output_directory(self, plan: MovePlan) -> None:
        """Create the destination directory and any missing ancestors.

        Raises:
            OutputDirectoryCreateError: If the directory cannot be created.
        """
        if not plan.output_directory:
            return
        try:
            os.makedirs(plan.output_directory, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryCreateError(plan.output_directory, str(e)) from e

    def apply(self, plan: MovePlan, on_moved: MoveCallback | None = None) -> None:
        """Rename files in plan order.

        Args:
            plan: Validated plan.
            on_moved: Called with each operation right after its rename succeeds.

        Raises:
            RenameFailedError: On the first rename that fails. Files moved
                before it stay moved.
        """
        for op in plan.operations:
            try:
                Path(op.source).rename(op.destination)
            except OSError as e:
                raise RenameFailedError(op.source, op.destination, str(e)) from e

            logger.info("Moved %s", op)
            if on_moved is not None:
                on_moved(op)

    def run(self, on_moved: MoveCallback | None = None, dry_run: bool = False) -> MovePlan:
        """Run the whole pipeline.

        Args:
            on_moved: Called after each successful rename.
            dry_run: Stop after validating destinations; nothing on disk changes.

        Returns:
            The executed (or, on dry run, validated) plan.
        """
        plan = self.build_plan()
        self.clear_destinations(plan, dry_run=dry_run)
        if dry_run:
            return plan

        self.ensure_output_directory(plan)
        self.apply(plan, on_moved=on_moved)
        return plan


def mass_move(
    source_pattern: str,
    destination_pattern: str,
    force: bool = False,
    on_moved: MoveCallback | None = None,
) -> MovePlan:
    """Move files matching ``source_pattern`` to paths built from ``destination_pattern``.

    Example:
        ``mass_move("path/to/some_*_filename.*", "path2/to/changed_#1_filename.#2")``
        moves ``path/to/some_A_filename.bin`` to ``path2/to/changed_A_filename.bin``.

    Returns:
        The executed plan.

    Raises:
        MassMoveError: Describing the first failure encountered.
    """
    processor = MoveProcessor(source_pattern, destination_pattern, force=force)
    return processor.run(on_moved=on_moved)
