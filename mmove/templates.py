"""Destination path construction from `#N` marker templates."""

import re

from mmove.constants import MARKER_REGEX
from mmove.paths import join_path, split_path


_MARKER = re.compile(MARKER_REGEX)


def marker_indices(template: str) -> list[int]:
    """Return the indices of all `#N` markers in a template, in order."""
    _, file_template = split_path(template)
    return [int(index) for index in _MARKER.findall(file_template)]


def build_target_path(substr_to_insert: list[str], full_output_path_pattern: str) -> str:
    """Build a destination path by substituting captures into a template.

    Each ``#N`` in the filename part of the template is replaced by
    ``substr_to_insert[N - 1]``. Markers outside ``1..len(substr_to_insert)``
    are replaced by an empty string. The directory part is kept as is.

    Args:
        substr_to_insert: Captured substrings, e.g. ``["A", "bin"]``.
        full_output_path_pattern: Template, e.g. ``path2/to/changed_#1_filename.#2``.

    Returns:
        The destination path, e.g. ``path2/to/changed_A_filename.bin``.
    """
    output_path, file_template = split_path(full_output_path_pattern)

    def substitute(marker: re.Match[str]) -> str:
        index = int(marker.group(1))
        if 1 <= index <= len(substr_to_insert):
            return substr_to_insert[index - 1]
        return ""

    filename = _MARKER.sub(substitute, file_template)
    return join_path(output_path, filename)
