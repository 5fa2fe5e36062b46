"""Helpers for splitting and rebuilding file paths."""

import os

PATH_SEPARATOR = os.sep


def get_file_extension(file_path):
    """Return everything after the first dot of the last path component.

    Hidden files (a leading dot) and names ending in a bare dot have no
    extension, and an empty string is returned for them.
    """
    if not file_path:
        return ""
    separator_index = file_path.rfind(PATH_SEPARATOR)
    dot_index = file_path.find(".", separator_index + 1)
    if dot_index <= 0 or file_path[dot_index - 1] == PATH_SEPARATOR:
        return ""
    return file_path[dot_index + 1:]


def get_file_name(file_path):
    """Return the last path component without its extension."""
    if not file_path:
        return ""
    base_name = file_path[file_path.rfind(PATH_SEPARATOR) + 1:]
    extension = get_file_extension(file_path)
    if extension:
        base_name = base_name[: -(len(extension) + 1)]
    return base_name


def get_path_without_extension(file_path):
    """Return the path with its extension and the dot before it removed."""
    if file_path is None:
        return ""
    extension = get_file_extension(file_path)
    if not extension:
        return file_path
    return file_path[: -(len(extension) + 1)]


def get_path_with_custom_extension(file_path, extension):
    """Return the path with its extension replaced by ``extension``.

    A leading dot in ``extension`` is optional. An empty or missing path or
    extension leaves the path unchanged.
    """
    if not file_path or not extension:
        return file_path
    stem = get_path_without_extension(file_path)
    if extension.startswith("."):
        return stem + extension
    return f"{stem}.{extension}"