"""Package size and type information."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .codes import Cv, Pq, get_cv, get_pq
from .xmlutil import IDREF, get_container, get_value

__all__ = ["Pakningsinfo", "get_pakningsinfo"]


@dataclass(frozen=True)
class Pakningsinfo:
    """Package information for one branded drug in a package.

    The package size is ``multippel * antall * mengde``; ``ddd`` is the
    defined daily dose and ``statistikkfaktor`` scales it per package.
    Numeric fields are kept as the text the document holds.
    """

    reflegemiddelmerkevare: IDREF = ""
    pakningsstr: str = ""
    enhetpakning: Cv = field(default_factory=Cv)
    pakningstype: Cv = field(default_factory=Cv)
    multippel: str = ""
    antall: str = ""
    mengde: str = ""
    sortering: str = ""
    ddd: Pq = field(default_factory=Pq)
    statistikkfaktor: str = ""


def _pakningsinfo(node: ET.Element) -> Pakningsinfo:
    return Pakningsinfo(
        reflegemiddelmerkevare=get_value(node, "RefLegemiddelMerkevare"),
        pakningsstr=get_value(node, "Pakningsstr"),
        enhetpakning=get_cv(node, "EnhetPakning"),
        pakningstype=get_cv(node, "Pakningstype"),
        multippel=get_value(node, "Multippel"),
        antall=get_value(node, "Antall"),
        mengde=get_value(node, "Mengde"),
        sortering=get_value(node, "Sortering"),
        ddd=get_pq(node, "DDD"),
        statistikkfaktor=get_value(node, "Statistikkfaktor"),
    )


def get_pakningsinfo(node: ET.Element | None) -> list[Pakningsinfo]:
    """Read every ``Pakningsinfo`` child of a package element, in order."""
    return get_container(node, "Pakningsinfo", _pakningsinfo)