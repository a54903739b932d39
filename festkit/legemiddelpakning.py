"""Drug package entries from the ``KatLegemiddelpakning`` catalog."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .administrering import AdministreringLegemiddel, get_administreringlegemiddel
from .codes import get_pq
from .enkeltoppforing import Enkeltoppforing, get_enkeltoppforing
from .legemiddel import Legemiddel, PakningByttegruppe, get_legemiddel
from .pakningsinfo import Pakningsinfo, get_pakningsinfo
from .prisvare import PrisVare, get_prisvare
from .xmlutil import IDREF, child, get_container, get_value

__all__ = ["Legemiddelpakning", "get_legemiddelpakning"]


@dataclass(frozen=True)
class Legemiddelpakning:
    """A drug package with its item number, barcodes, prices and drug data.

    ``id`` stays the same even when the item number ``varenr`` changes.
    ``ean`` and ``oppbevaring`` (storage condition code) are ``None`` when
    the document gives none.
    """

    enkeltoppforing: Enkeltoppforing = field(
        default_factory=lambda: Enkeltoppforing("", "", False)
    )
    id: IDREF = ""
    varenr: str = ""
    ean: tuple[str, ...] | None = None
    oppbevaring: str | None = None
    legemiddel: Legemiddel = field(default_factory=Legemiddel)
    pakningsinfo: tuple[Pakningsinfo, ...] = ()
    prisvare: tuple[PrisVare, ...] = ()
    administreringlegemiddel: AdministreringLegemiddel = field(
        default_factory=AdministreringLegemiddel
    )

    @property
    def key(self) -> str:
        """The item number, used as the lookup key for packages."""
        return self.varenr

    @property
    def varenavn(self) -> str:
        """The name, form and strength of the packaged drug."""
        return self.legemiddel.navnformstyrke

    @property
    def pakningbyttegruppe(self) -> PakningByttegruppe | None:
        """The substitution group of the package, if any."""
        return self.legemiddel.pakningbyttegruppe


def get_legemiddelpakning(node: ET.Element | None) -> Legemiddelpakning:
    """Read a package from an ``OppfLegemiddelpakning`` element."""
    pakning = child(node, "Legemiddelpakning")
    return Legemiddelpakning(
        enkeltoppforing=get_enkeltoppforing(node),
        id=get_value(pakning, "Id"),
        varenr=get_value(pakning, "Varenr"),
        ean=tuple(get_container(pakning, "Ean", get_value)) or None,
        oppbevaring=get_pq(pakning, "Oppbevaring").v or None,
        legemiddel=get_legemiddel(pakning),
        pakningsinfo=tuple(get_pakningsinfo(pakning)),
        prisvare=tuple(get_prisvare(pakning)),
        administreringlegemiddel=get_administreringlegemiddel(pakning),
    )