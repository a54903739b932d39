"""Administration details shared by branded and generic drug entries."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .codes import Cs, Cv, get_cs, get_cv
from .xmlutil import IDREF, child, get_bool, get_container, get_value

__all__ = ["AdministreringLegemiddel", "get_administreringlegemiddel"]


@dataclass(frozen=True)
class AdministreringLegemiddel:
    """How a drug is administered.

    Optional parts are ``None`` when the document does not give them;
    ``administrasjonsvei`` is always present, possibly empty.
    """

    blandingsveske: bool = False
    refblandingsveske: tuple[IDREF, ...] | None = None
    administrasjonsvei: tuple[Cv, ...] = ()
    kanknuses: Cs | None = None
    kanapnes: Cs | None = None
    bolus: Cs | None = None
    injeksjonshastighetbolus: Cs | None = None
    deling: Cs | None = None
    enhetdosering: tuple[Cv, ...] | None = None
    kortdose: tuple[Cv, ...] | None = None
    forhandsregelinntak: tuple[Cv, ...] | None = None


def _codes(node: ET.Element | None, name: str) -> tuple[Cv, ...]:
    return tuple(get_container(node, name, get_cv))


def get_administreringlegemiddel(node: ET.Element | None) -> AdministreringLegemiddel:
    """Read the ``AdministreringLegemiddel`` part of a drug element.

    The crushing, opening, bolus, injection-speed and division codes are read
    from the drug element itself rather than from the administration child.
    """
    admin = child(node, "AdministreringLegemiddel")
    return AdministreringLegemiddel(
        blandingsveske=get_bool(admin, "Blandingsveske"),
        refblandingsveske=tuple(get_container(admin, "RefBlandingsVeske", get_value))
        or None,
        administrasjonsvei=_codes(admin, "Administrasjonsvei"),
        kanknuses=get_cs(node, "KanKnuses") or None,
        kanapnes=get_cs(node, "KanApnes") or None,
        bolus=get_cs(node, "Bolus") or None,
        injeksjonshastighetbolus=get_cs(node, "InjeksjonshastighetBolus") or None,
        deling=get_cs(node, "Deling") or None,
        enhetdosering=_codes(admin, "EnhetDosering") or None,
        kortdose=_codes(admin, "Kortdose") or None,
        forhandsregelinntak=_codes(admin, "ForhandsregelInntak") or None,
    )