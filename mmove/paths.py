"""Lexical path splitting shared by pattern matching and target building."""

from mmove.constants import CURRENT_DIRECTORY, PATH_SEPARATOR


def split_path(full_path: str) -> tuple[str, str]:
    """Split a path into its directory and its filename (or pattern).

    The split happens at the last separator and never touches the filesystem.
    A path directly under the root keeps the root as its directory, so
    ``/file.txt`` splits into ``("/", "file.txt")``.

    Args:
        full_path: Path such as ``path/to/some_*.txt``.

    Returns:
        ``(directory, tail)``. ``directory`` is empty if there is no separator.
    """
    directory, separator, tail = full_path.rpartition(PATH_SEPARATOR)
    if not separator:
        return "", full_path
    if not directory:
        return PATH_SEPARATOR, tail
    return directory, tail


def join_path(directory: str, name: str) -> str:
    """Join a directory component and a filename back into one path."""
    if not directory:
        return name
    if directory == PATH_SEPARATOR:
        return f"{directory}{name}"
    return f"{directory}{PATH_SEPARATOR}{name}"


def listing_directory(directory: str) -> str:
    """Directory to list for a directory component (the empty one means cwd)."""
    return directory or CURRENT_DIRECTORY
