from festkit.codes import Pq
from festkit.legemiddelpakning import get_legemiddelpakning
from festkit.xmlutil import parse_xml

PAKNING_XML = (
    "<?xml version='1.0' encoding='utf-8'?>"
    "<FEST xmlns='http://example.com/fest/m30'>"
    "<HentetDato>2023-09-08T03:11:43</HentetDato>"
    "<KatLegemiddelpakning><OppfLegemiddelpakning>"
    "<Id>ID_9453E041-D1D0-42BA-812F-59A3C54A1C20</Id>"
    "<Tidspunkt>2022-12-20T03:10:47</Tidspunkt>"
    "<Status V='A' DN='Aktiv oppføring' />"
    "<Legemiddelpakning xmlns='http://example.com/fest/forskrivning'>"
    "<Atc V='N05CF02' S='2.16.578.1.12.4.1.1.7180' DN='Zolpidem' />"
    "<NavnFormStyrke>Zolpidem Dune tab 10 mg</NavnFormStyrke>"
    "<Reseptgruppe V='B' DN='Reseptgruppe B' />"
    "<LegemiddelformKort V='53' S='2.16.578.1.12.4.1.1.7448' DN='Tablett' />"
    "<Preparattype V='7' DN='Legemiddel' />"
    "<TypeSoknadSlv V='1' DN='Skal ikke søkes' />"
    "<Refusjon><RefRefusjonsgruppe>ID_18258D51-519E-47AC-9430-D284BA1A1514"
    "</RefRefusjonsgruppe><GyldigFraDato>2023-01-01</GyldigFraDato></Refusjon>"
    "<PakningByttegruppe><RefByttegruppe>ID_BF16B775-2109-41A1-8369-2230FDE6B0EE"
    "</RefByttegruppe><GyldigFraDato>2023-01-01</GyldigFraDato></PakningByttegruppe>"
    "<Id>ID_0008426A-FCA1-4CA1-9202-7D7D5B2922C2</Id>"
    "<Varenr>526181</Varenr><Ean>5745000695003</Ean>"
    "<Oppbevaring V='R' DN='Rom (15-25 grader)' />"
    "<Pakningsinfo><RefLegemiddelMerkevare>ID_D9ECF4A9-FE22-401D-AA86-31ACA65EFAC2"
    "</RefLegemiddelMerkevare><Pakningsstr>7</Pakningsstr>"
    "<EnhetPakning V='stk' S='2.16.578.1.12.4.1.1.7452' DN='stykk' />"
    "<Pakningstype V='169' S='2.16.578.1.12.4.1.1.7449' DN='Blisterpakning' />"
    "<Mengde>7</Mengde><DDD V='0.01' U='g' />"
    "<Statistikkfaktor>0.07</Statistikkfaktor></Pakningsinfo>"
    "<PrisVare><Type V='3' S='2.16.578.1.12.4.1.1.7453' DN='AIP' />"
    "<Pris V='7.69' U='NOK' /><GyldigFraDato>2023-01-01</GyldigFraDato></PrisVare>"
    "<PrisVare><Type V='2' S='2.16.578.1.12.4.1.1.7453' DN='Refusjonspris' />"
    "<Pris V='69.8' U='NOK' /><GyldigFraDato>2023-01-01</GyldigFraDato></PrisVare>"
    "<PrisVare><Type V='4' S='2.16.578.1.12.4.1.1.7453' DN='AUP' />"
    "<Pris V='69.8' U='NOK' /><GyldigFraDato>2023-01-01</GyldigFraDato></PrisVare>"
    "<Markedsforingsinfo><Markedsforingsdato>2023-01-01</Markedsforingsdato>"
    "</Markedsforingsinfo></Legemiddelpakning>"
    "</OppfLegemiddelpakning></KatLegemiddelpakning></FEST>"
)


def _pakning():
    root = parse_xml(PAKNING_XML)
    return get_legemiddelpakning(root.find("KatLegemiddelpakning/OppfLegemiddelpakning"))


def test_identity_fields():
    pakning = _pakning()
    assert pakning.varenr == "526181"
    assert pakning.id == "ID_0008426A-FCA1-4CA1-9202-7D7D5B2922C2"
    assert pakning.key == pakning.varenr


def test_entry_header():
    pakning = _pakning()
    assert pakning.enkeltoppforing == "ID_9453E041-D1D0-42BA-812F-59A3C54A1C20"
    assert pakning.enkeltoppforing.date == "2022-12-20T03:10:47"
    assert pakning.enkeltoppforing.status is True


def test_ean_and_storage():
    pakning = _pakning()
    assert pakning.ean == ("5745000695003",)
    assert pakning.oppbevaring == "R"


def test_name_and_substitution_group():
    pakning = _pakning()
    assert pakning.varenavn == "Zolpidem Dune tab 10 mg"
    assert pakning.pakningbyttegruppe.refbyttegruppe == (
        "ID_BF16B775-2109-41A1-8369-2230FDE6B0EE"
    )
    assert pakning.legemiddel.atc == "N05CF02"


def test_prices():
    pakning = _pakning()
    assert len(pakning.prisvare) == 3
    assert pakning.prisvare[0].pris.v == "7.69"
    assert [p.type.value for p in pakning.prisvare] == ["3", "2", "4"]


def test_package_info():
    pakning = _pakning()
    assert len(pakning.pakningsinfo) == 1
    info = pakning.pakningsinfo[0]
    assert info.ddd == Pq("0.01", "g")
    assert info.pakningstype == "169"


def test_missing_administration_reads_empty():
    pakning = _pakning()
    assert pakning.administreringlegemiddel.administrasjonsvei == ()
    assert pakning.administreringlegemiddel.blandingsveske is False


def test_missing_element_gives_empty_package():
    pakning = get_legemiddelpakning(None)
    assert pakning.varenr == ""
    assert pakning.ean is None
    assert pakning.oppbevaring is None
    assert pakning.pakningbyttegruppe is None
    assert pakning.prisvare == ()