"""Prices attached to a drug package."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .codes import Cv, Pq, get_cv, get_pq
from .xmlutil import get_container, get_value

__all__ = ["PrisVare", "get_prisvare"]


@dataclass(frozen=True)
class PrisVare:
    """A price of a given ``type`` valid between two dates.

    ``pris`` holds the amount in ``v`` and the currency in ``u``.
    """

    type: Cv = field(default_factory=Cv)
    pris: Pq = field(default_factory=Pq)
    gyldigfradato: str = ""
    gyldigtildato: str = ""


def _prisvare(node: ET.Element) -> PrisVare:
    return PrisVare(
        type=get_cv(node, "Type"),
        pris=get_pq(node, "Pris"),
        gyldigfradato=get_value(node, "GyldigFraDato"),
        gyldigtildato=get_value(node, "GyldigTilDato"),
    )


def get_prisvare(node: ET.Element | None) -> list[PrisVare]:
    """Read every ``PrisVare`` child of a package element, in order."""
    return get_container(node, "PrisVare", _prisvare)