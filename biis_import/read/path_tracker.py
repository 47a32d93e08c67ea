"""Canonical element path tracking for the streaming decoder."""

from __future__ import annotations

from biis_import.common.constants import PATH_SEPARATOR


def local_name(tag: str) -> str:
    return tag.split("}")[-1]


class PathTracker:
    """Stack of currently open element names.

    Paths are built from local names only; namespaces and attributes never
    take part in the key.
    """

    def __init__(self) -> None:
        self._names: list[str] = []

    def enter(self, element_name: str) -> str:
        self._names.append(local_name(element_name))
        return self.current

    def exit(self) -> None:
        self._names.pop()

    @property
    def current(self) -> str:
        return PATH_SEPARATOR.join(self._names)

    @property
    def depth(self) -> int:
        return len(self._names)
