"""Ordering of the active ingredients of a drug."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from .xmlutil import IDREF, get_container, get_value

__all__ = [
    "SortertVirkestoff",
    "get_sorteringvirkestoffmedstyrke",
    "get_sorteringvirkestoffutenstyrke",
]


class SortertVirkestoff:
    """Pairs of sorting number and active-ingredient reference.

    The sorting numbers start at 0 and follow the order in which the
    ingredients are named; each number appears at most once.
    """

    def __init__(
        self, sortering: str | None = None, refvirkestoff: IDREF | None = None
    ) -> None:
        self._entries: list[tuple[str, IDREF]] = []
        if sortering is not None and refvirkestoff is not None:
            self.append(sortering, refvirkestoff)

    @property
    def sortering(self) -> tuple[tuple[str, IDREF], ...]:
        return tuple(self._entries)

    def append(self, sortering: str, refvirkestoff: IDREF) -> bool:
        """Add a pair; return False and add nothing if the number is taken."""
        if any(number == sortering for number, _ in self._entries):
            return False
        self._entries.append((sortering, refvirkestoff))
        return True

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, IDREF]]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SortertVirkestoff):
            return self._entries == other._entries
        return NotImplemented

    def __repr__(self) -> str:
        return f"SortertVirkestoff({self._entries!r})"


def _collect(node: ET.Element | None, element: str, reference: str) -> SortertVirkestoff:
    result = SortertVirkestoff()
    pairs = get_container(
        node,
        element,
        lambda item: (get_value(item, "Sortering"), get_value(item, reference)),
    )
    for sortering, ref in pairs:
        result.append(sortering, ref)
    return result


def get_sorteringvirkestoffmedstyrke(node: ET.Element | None) -> SortertVirkestoff:
    """Read the ingredient order with strength from a drug element."""
    return _collect(node, "SortertVirkestoffMedStyrke", "RefVirkestoffMedStyrke")


def get_sorteringvirkestoffutenstyrke(node: ET.Element | None) -> SortertVirkestoff:
    """Read the ingredient order without strength from a drug element."""
    return _collect(node, "SortertVirkestoffUtenStyrke", "RefVirkestoffUtenStyrke")