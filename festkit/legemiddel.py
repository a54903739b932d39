"""Common drug information shared by several FEST entry types."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .codes import Cs, Cv, get_cs, get_cv
from .refusjon import Refusjon, get_refusjon
from .xmlutil import IDREF, child, get_bool, get_value

__all__ = [
    "Legemiddel",
    "PakningByttegruppe",
    "get_legemiddel",
    "get_pakningbyttegruppe",
]


@dataclass(frozen=True)
class PakningByttegruppe:
    """Reference to the substitution group a package belongs to.

    ``gyldigtildato`` is ``None`` when no end date is given.  A group with an
    empty reference is falsy.
    """

    refbyttegruppe: IDREF = ""
    gyldigfradato: str = ""
    gyldigtildato: str | None = None

    def __bool__(self) -> bool:
        return bool(self.refbyttegruppe)


@dataclass(frozen=True)
class Legemiddel:
    """Drug information: ATC code, name, form, prescription group and more.

    ``refusjon`` and ``pakningbyttegruppe`` are ``None`` when absent.
    """

    atc: Cv = field(default_factory=Cv)
    navnformstyrke: str = ""
    reseptgruppe: Cs = field(default_factory=Cs)
    legemiddelformkort: Cv = field(default_factory=Cv)
    refvilkar: str = ""
    preparattype: Cs = field(default_factory=Cs)
    typesoknadslv: Cs = field(default_factory=Cs)
    opioidsoknad: bool = False
    svarttrekant: Cv = field(default_factory=Cv)
    refusjon: Refusjon | None = None
    pakningbyttegruppe: PakningByttegruppe | None = None


def get_pakningbyttegruppe(node: ET.Element | None) -> PakningByttegruppe:
    """Read the ``PakningByttegruppe`` child of a drug element."""
    group = child(node, "PakningByttegruppe")
    return PakningByttegruppe(
        refbyttegruppe=get_value(group, "RefByttegruppe"),
        gyldigfradato=get_value(group, "GyldigFraDato"),
        gyldigtildato=get_value(group, "GyldigTilDato") or None,
    )


def get_legemiddel(node: ET.Element | None) -> Legemiddel:
    """Read the drug information from a drug element."""
    return Legemiddel(
        atc=get_cv(node, "Atc"),
        navnformstyrke=get_value(node, "NavnFormStyrke"),
        reseptgruppe=get_cs(node, "Reseptgruppe"),
        legemiddelformkort=get_cv(node, "LegemiddelformKort"),
        refvilkar=get_value(node, "RefVilkar"),
        preparattype=get_cs(node, "Preparattype"),
        typesoknadslv=get_cs(node, "TypeSoknadSlv"),
        opioidsoknad=get_bool(node, "Opioidsoknad"),
        svarttrekant=get_cv(node, "SvartTrekant"),
        refusjon=get_refusjon(node) or None,
        pakningbyttegruppe=get_pakningbyttegruppe(node) or None,
    )