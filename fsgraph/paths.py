"""Path value used as the vertex identity of a :class:`~fsgraph.graph.PathGraph`.

Vertices are ``pathlib.PurePath`` instances of the host flavour. Pure paths
never touch the disk, are hashable, and compare and sort using the host's
case rules (case-insensitive on Windows, case-sensitive on POSIX).
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Union

#: Anything accepted where a vertex is expected.
PathLike = Union[str, os.PathLike]

#: The vertex type stored in graphs.
Path = PurePath

_HOST_PURE_PATH = type(PurePath())


def as_path(value: PathLike) -> PurePath:
    """Coerce ``value`` into a host-flavoured ``PurePath``.

    Concrete ``pathlib.Path`` objects are reduced to their pure form so that
    a vertex added from disk and one typed in by hand compare equal.

    Args:
        value: A string or ``os.PathLike`` object.

    Returns:
        The pure path for ``value``.

    Raises:
        TypeError: If ``value`` is neither a string nor path-like.
        ValueError: If ``value`` is empty. ``PurePath("")`` would silently
            become ``"."``, and the empty path is never a vertex.
    """
    if type(value) is _HOST_PURE_PATH:
        return value  # type: ignore[return-value]
    if isinstance(value, (str, os.PathLike)):
        if os.fspath(value) == "":
            raise ValueError("The empty path is not a valid vertex")
        return PurePath(value)
    raise TypeError(
        f"Expected str or os.PathLike for a path, got {type(value).__name__}"
    )
