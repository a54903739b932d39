# festkit

Read the FEST XML file from the Norwegian Medicines Agency and work with its
catalogue of drug packages (`KatLegemiddelpakning`) as plain Python objects.
The package has no dependencies beyond the standard library.

## Installation

    pip install festkit

## Loading a FEST file

```python
from festkit.document import Fest, FileNotFound, created_date

fest = Fest()
try:
    fest.load_file("fest251.xml")
except FileNotFound as exc:
    print("error:", exc)

print(created_date(fest))  # text of <HentetDato>, e.g. "2023-09-08T03:11:43"
```

`Fest.load_string` takes the XML as a `str` or `bytes` instead. Loading again
replaces the previous document, and a failed load leaves `Fest.root` as
`None`. Errors raised while loading all derive from `FestError`:

- `FileNotFound`: the file does not exist
- `IoError`: the file could not be read
- `OutOfMemory`: not enough memory to load the document
- `NoDocument`: the input holds no XML element at all
- `BadDocument`: the input is not well-formed XML
- `BadFestFormat`: the XML is well formed but its root is not `FEST`

## Packages and generics

```python
from festkit.document import (
    catalog_legemiddelpakning,
    find_legemiddelpakning,
    generic_legemiddelpakning,
    map_catalog_legemiddelpakning,
)

packages = catalog_legemiddelpakning(fest)           # list, in file order
by_varenr = map_catalog_legemiddelpakning(packages)  # dict keyed by item number

pakning = find_legemiddelpakning(packages, "116772")  # None when missing
for generic in generic_legemiddelpakning(packages, pakning):
    print(generic.varenr, generic.varenavn)
```

- `map_catalog_legemiddelpakning` accepts either a `Fest` or a list of
  packages; when an item number occurs twice the first package is kept.
- `find_legemiddelpakning` and `generic_legemiddelpakning` accept either a
  list or such a dict.
- `generic_legemiddelpakning` takes a package, a substitution group id
  (`RefByttegruppe`) or `None`, and returns every package in that group. A
  missing package, or one without a group, gives an empty list.

Each `Legemiddelpakning` carries `id`, `varenr`, `ean`, `oppbevaring`,
`legemiddel`, `pakningsinfo`, `prisvare`, `administreringlegemiddel` and its
entry header `enkeltoppforing`, plus the shortcuts `key` (the item number),
`varenavn` and `pakningbyttegruppe`.

## Lower-level readers

Each part of an entry has its own reader taking an
`xml.etree.ElementTree` element whose namespaces have been removed, as
`festkit.xmlutil.parse_xml` and `Fest.root` give them:

- `festkit.legemiddelpakning.get_legemiddelpakning`
- `festkit.legemiddel.get_legemiddel` and `get_pakningbyttegruppe`
- `festkit.refusjon.get_refusjon`
- `festkit.prisvare.get_prisvare`
- `festkit.pakningsinfo.get_pakningsinfo`
- `festkit.administrering.get_administreringlegemiddel`
- `festkit.enkeltoppforing.get_enkeltoppforing`
- `festkit.sortertvirkestoff.get_sorteringvirkestoffmedstyrke` and
  `get_sorteringvirkestoffutenstyrke`
- `festkit.codes.get_cs`, `get_cv` and `get_pq`

Optional fields come back as `None` when the file leaves them out. The coded
values `Cs` and `Cv` compare equal to each other and to plain strings by
their code alone, so `legemiddel.atc == "N02AJ07"` works.

## Command line

    festkit-generic fest251.xml 116772

prints the item number and name of every package in the same substitution
group as the given item number. Both arguments are optional and default to
`fest251.xml` and `116772`. If the file is missing an `error:` line is
printed and nothing else; other load errors go to standard error with exit
status 1.

## What it does not do

Only the package catalogue is read. The other catalogues of a FEST file,
such as the brand-name drug catalogue (`KatLegemiddelMerkevare`), have no
readers here, and within a package the marketing information and product
text sections are not read.