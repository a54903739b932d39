import pytest

from festkit.administrering import get_administreringlegemiddel
from festkit.xmlutil import parse_xml

XML_MERKEVARE = (
    "<?xml version='1.0' encoding='utf-8'?><FEST "
    "xmlns='http://www.kith.no/xmlstds/eresept/m30/2014-12-01'>"
    "<HentetDato>2023-09-08T03:11:43</HentetDato>"
    "<KatLegemiddelMerkevare><OppfLegemiddelMerkevare>"
    "<Id>ID_DE995772-8BBC-4164-8A0C-044CFC522794</Id>"
    "<Tidspunkt>2023-06-05T03:11:16</Tidspunkt>"
    "<Status V='A' DN='Aktiv oppføring' />"
    "<LegemiddelMerkevare "
    "xmlns='http://www.kith.no/xmlstds/eresept/forskrivning/2014-12-01'>"
    "<Atc V='N02AJ07' S='2.16.578.1.12.4.1.1.7180' DN='Kodein og acetylsalisylsyre' />"
    "<NavnFormStyrke>Kodimagnyl Ikke-stoppende dak tab 9,6 mg/500 mg/150 mg</NavnFormStyrke>"
    "<Reseptgruppe V='B' DN='Reseptgruppe B' />"
    "<Opioidsoknad>true</Opioidsoknad>"
    "<AdministreringLegemiddel>"
    "<Administrasjonsvei V='53' S='2.16.578.1.12.4.1.1.7477' DN='Oral bruk' />"
    "<EnhetDosering V='13' S='2.16.578.1.12.4.1.1.7480' DN='tablett' />"
    "</AdministreringLegemiddel>"
    "<Id>ID_000A27B8-3930-4264-80F9-CDB14C895662</Id>"
    "</LegemiddelMerkevare></OppfLegemiddelMerkevare></KatLegemiddelMerkevare></FEST>"
)


@pytest.fixture
def merkevare_node():
    root = parse_xml(XML_MERKEVARE.encode("utf-8"))
    return root.find("KatLegemiddelMerkevare/OppfLegemiddelMerkevare/LegemiddelMerkevare")


def test_administrering_from_node(merkevare_node):
    admin = get_administreringlegemiddel(merkevare_node)
    assert admin.blandingsveske is False
    assert admin.refblandingsveske is None
    assert admin.administrasjonsvei[0].value == "53"
    assert admin.kanknuses is None
    assert admin.kanapnes is None
    assert admin.bolus is None
    assert admin.injeksjonshastighetbolus is None
    assert admin.deling is None
    assert admin.enhetdosering is not None
    assert admin.enhetdosering[0].value == "13"
    assert admin.kortdose is None
    assert admin.forhandsregelinntak is None


def test_mixing_liquid_and_references():
    node = parse_xml(
        "<LegemiddelMerkevare><AdministreringLegemiddel>"
        "<Blandingsveske>true</Blandingsveske>"
        "<RefBlandingsVeske>ID_A</RefBlandingsVeske>"
        "<RefBlandingsVeske>ID_B</RefBlandingsVeske>"
        "<Kortdose V='1' S='x' DN='dose' />"
        "</AdministreringLegemiddel></LegemiddelMerkevare>"
    )
    admin = get_administreringlegemiddel(node)
    assert admin.blandingsveske is True
    assert admin.refblandingsveske == ("ID_A", "ID_B")
    assert admin.kortdose == ("1",)
    assert admin.administrasjonsvei == ()


def test_codes_read_from_drug_element():
    node = parse_xml(
        "<LegemiddelMerkevare>"
        "<KanKnuses V='1' DN='Ja' /><Deling V='2' DN='Kan deles' />"
        "<AdministreringLegemiddel><Bolus V='9' DN='inside' /></AdministreringLegemiddel>"
        "</LegemiddelMerkevare>"
    )
    admin = get_administreringlegemiddel(node)
    assert admin.kanknuses == "1"
    assert admin.kanknuses.dn == "Ja"
    assert admin.deling == "2"
    assert admin.bolus is None


def test_missing_node_gives_empty_administration():
    admin = get_administreringlegemiddel(None)
    assert admin.blandingsveske is False
    assert admin.administrasjonsvei == ()
    assert admin.enhetdosering is None