"""
Dotted-path access on nested mappings.

A literal key always wins over its dotted interpretation: for
``{"a.b": 1}`` the path ``a.b`` refers to the top-level key.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, List, Optional, Tuple

PATH_SEPARATOR = "."

_MISSING = object()


def _walk(data: Mapping, path: str) -> Tuple[Optional[Mapping], Optional[str]]:
    """Return the mapping holding the leaf of ``path`` and the leaf key."""
    if path in data:
        return data, path

    segments = path.split(PATH_SEPARATOR)
    current: Any = data
    for segment in segments[:-1]:
        if not isinstance(current, Mapping) or segment not in current:
            return None, None
        current = current[segment]

    if not isinstance(current, Mapping) or segments[-1] not in current:
        return None, None

    return current, segments[-1]


def has_path(data: Mapping, path: str) -> bool:
    """Check whether ``path`` resolves to a present value."""
    container, _ = _walk(data, path)
    return container is not None


def get_path(data: Mapping, path: str, default: Any = None) -> Any:
    """Read the value at ``path``, or ``default`` when absent."""
    container, key = _walk(data, path)
    if container is None:
        return default
    return container[key]


def pull_path(data: MutableMapping, path: str, default: Any = None) -> Any:
    """
    Read and remove the value at ``path``.

    Ancestor containers are left in place even when they become empty.
    """
    container, key = _walk(data, path)
    if container is None:
        return default
    return container.pop(key, default)


def set_path(data: MutableMapping, path: str, value: Any) -> None:
    """
    Write ``value`` at ``path``.

    Intermediate mappings are created as needed; a non-mapping value in the
    way is replaced by an empty dict.
    """
    if path in data or PATH_SEPARATOR not in path:
        data[path] = value
        return

    segments: List[str] = path.split(PATH_SEPARATOR)
    current = data
    # Create or replace intermediates down to the parent of the leaf
    for segment in segments[:-1]:
        child = current.get(segment, _MISSING)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child

    current[segments[-1]] = value
