"""Refund information for a drug."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .xmlutil import IDREF, child, get_container, get_value

__all__ = ["Refusjon", "get_refusjon"]


@dataclass(frozen=True)
class Refusjon:
    """References to refund groups and the period the refund is valid.

    ``forskrivestildato`` (last prescription date) and ``utleverestildato``
    (last dispensing date) are ``None`` when the document gives none.
    """

    refrefusjonsgruppe: tuple[IDREF, ...] = ()
    gyldigfradato: str = ""
    forskrivestildato: str | None = None
    utleverestildato: str | None = None

    def __bool__(self) -> bool:
        return bool(self.refrefusjonsgruppe)


def get_refusjon(node: ET.Element | None) -> Refusjon:
    """Read the ``Refusjon`` child of a drug element."""
    refusjon = child(node, "Refusjon")
    return Refusjon(
        refrefusjonsgruppe=tuple(
            get_container(refusjon, "RefRefusjonsgruppe", get_value)
        ),
        gyldigfradato=get_value(refusjon, "GyldigFraDato"),
        forskrivestildato=get_value(refusjon, "ForskrivesTilDato") or None,
        utleverestildato=get_value(refusjon, "UtleveresTilDato") or None,
    )