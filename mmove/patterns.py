"""Wildcard pattern matching and capture extraction."""

import logging
import os
import re

from mmove.constants import WILDCARD
from mmove.exceptions import DirectoryUnreadableError, NoMatchError
from mmove.paths import join_path, listing_directory, split_path


logger = logging.getLogger(__name__)

# `*` as a plain "any sequence" and as a lazy capturing group
_ANY_SEQUENCE = ".*"
_LAZY_CAPTURE = "(.*?)"


def _translate(pattern: str, wildcard_replacement: str) -> str:
    literals = pattern.split(WILDCARD)
    return "^" + wildcard_replacement.join(re.escape(literal) for literal in literals) + "$"


def wildcard_to_regex_pattern(pattern: str) -> str:
    """Convert a wildcard filename pattern into an anchored regular expression.

    Every character except ``*`` is matched literally (``.`` included).

    Args:
        pattern: Wildcard pattern, e.g. ``some_*.txt``.

    Returns:
        Regular expression source, e.g. ``^some_.*\\.txt$``.
    """
    return _translate(pattern, _ANY_SEQUENCE)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a wildcard filename pattern into a whole-name matcher."""
    return re.compile(wildcard_to_regex_pattern(pattern), re.DOTALL)


def matches(name: str, pattern: str) -> bool:
    """Check whether a filename matches a wildcard pattern."""
    return compile_pattern(pattern).fullmatch(name) is not None


def find_matching_files(full_pattern: str) -> list[str]:
    """Find the directory entries matching the pattern part of a full path.

    Listing is non-recursive and does not filter by entry type.

    Args:
        full_pattern: Directory plus wildcard filename, e.g. ``path/to/*.txt``.

    Returns:
        Matching paths rebuilt as ``directory/name``, sorted by name.

    Raises:
        DirectoryUnreadableError: If the directory cannot be listed.
        NoMatchError: If no entry matches.
    """
    directory, file_pattern = split_path(full_pattern)
    regex = compile_pattern(file_pattern)

    try:
        names = os.listdir(listing_directory(directory))
    except OSError as e:
        raise DirectoryUnreadableError(listing_directory(directory)) from e

    matching_files = [join_path(directory, name) for name in sorted(names) if regex.fullmatch(name)]
    if not matching_files:
        raise NoMatchError(full_pattern)

    logger.debug("Pattern '%s' matched %d file(s)", full_pattern, len(matching_files))
    return matching_files


def capture_regex_pattern(pattern: str) -> str:
    """Convert a wildcard pattern into a regex with one lazy group per ``*``."""
    return _translate(pattern, _LAZY_CAPTURE)


def extract_generic_parts(filename: str, pattern: str) -> list[str]:
    """Extract the substrings hidden under each ``*`` of a pattern.

    Both arguments may be bare names or full paths; only their filename
    components are compared. Each wildcard takes the shortest text that still
    lets the whole name match, deciding left to right, so
    ``extract_generic_parts("some_file_name", "som*e_n*")`` gives
    ``["e_fil", "ame"]``.

    Args:
        filename: Concrete filename, e.g. ``path/to/some_A_filename.bin``.
        pattern: Wildcard pattern, e.g. ``path/to/some_*_filename.*``.

    Returns:
        Captured substrings in order of appearance, or an empty list if the
        pattern does not match.
    """
    _, name = split_path(filename)
    _, file_pattern = split_path(pattern)

    match = re.fullmatch(capture_regex_pattern(file_pattern), name, re.DOTALL)
    if match is None:
        return []
    return list(match.groups())
