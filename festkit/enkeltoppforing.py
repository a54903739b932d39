"""The entry header carried by every record in a FEST document."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .xmlutil import child, get_value

__all__ = ["Enkeltoppforing", "get_enkeltoppforing"]

_ACTIVE = "A"


@dataclass(frozen=True, eq=False)
class Enkeltoppforing:
    """An entry: unique ``id``, entry ``date`` and whether it is active.

    Entries are equal when their ids are equal; an entry also compares equal
    to a string holding its id.
    """

    id: str
    date: str
    status: bool

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Enkeltoppforing):
            return self.id == other.id
        if isinstance(other, str):
            return self.id == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


def _is_active(node: ET.Element | None) -> bool:
    status = child(node, "Status")
    if status is None:
        return False
    first = next(iter(status.attrib.values()), "")
    return first == _ACTIVE


def get_enkeltoppforing(node: ET.Element | None) -> Enkeltoppforing:
    """Read the entry header from an ``Oppf...`` element."""
    return Enkeltoppforing(
        id=get_value(node, "Id"),
        date=get_value(node, "Tidspunkt"),
        status=_is_active(node),
    )