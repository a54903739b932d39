"""Loading a FEST document and querying its package catalog."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping

from .legemiddelpakning import Legemiddelpakning, get_legemiddelpakning
from .xmlutil import IDREF, child, get_container, get_value, parse_xml

__all__ = [
    "BadDocument",
    "BadFestFormat",
    "Fest",
    "FestError",
    "FileNotFound",
    "IoError",
    "NoDocument",
    "OutOfMemory",
    "catalog_legemiddelpakning",
    "created_date",
    "find_legemiddelpakning",
    "generic_legemiddelpakning",
    "map_catalog_legemiddelpakning",
]

_ROOT_NAME = "FEST"
_ELEMENT_START = re.compile(r"<[A-Za-z_:]")


class FestError(Exception):
    """Base class for errors raised while loading a FEST document."""


class FileNotFound(FestError):
    """The document file does not exist."""


class IoError(FestError):
    """The document file could not be read."""


class OutOfMemory(FestError):
    """There was not enough memory to load the document."""


class NoDocument(FestError):
    """The input holds no document element."""


class BadDocument(FestError):
    """The input is not well-formed XML."""


class BadFestFormat(FestError):
    """The XML is well formed but is not a FEST document."""


def _has_element(data: str | bytes) -> bool:
    text = data.decode("latin-1") if isinstance(data, bytes) else data
    return _ELEMENT_START.search(text) is not None


class Fest:
    """A loaded FEST document.

    Loading again replaces the previous document; a failed load leaves the
    object empty.  :attr:`root` is ``None`` while nothing is loaded.
    """

    def __init__(self) -> None:
        self._root: ET.Element | None = None

    @property
    def root(self) -> ET.Element | None:
        """The ``FEST`` root element, or ``None``."""
        return self._root

    def load_file(self, filename: str | os.PathLike[str]) -> None:
        """Load a document from a file."""
        self._root = None
        try:
            with open(filename, "rb") as handle:
                data = handle.read()
        except FileNotFoundError as exc:
            raise FileNotFound(f"File was not found: {os.fspath(filename)}") from exc
        except MemoryError as exc:
            raise OutOfMemory("Could not allocate memory") from exc
        except OSError as exc:
            raise IoError(f"Error reading from file/stream: {exc}") from exc
        self._load(data)

    def load_string(self, xml_string: str | bytes) -> None:
        """Load a document from a string."""
        self._root = None
        self._load(xml_string)

    def _load(self, data: str | bytes) -> None:
        try:
            root = parse_xml(data)
        except ET.ParseError as exc:
            if not _has_element(data):
                raise NoDocument("No document element found") from exc
            raise BadDocument(str(exc)) from exc
        except MemoryError as exc:
            raise OutOfMemory("Could not allocate memory") from exc
        if root.tag != _ROOT_NAME:
            raise BadFestFormat("root is not named FEST")
        self._root = root


def created_date(fest: Fest) -> str:
    """Return the ``HentetDato`` timestamp of the document."""
    return get_value(fest.root, "HentetDato")


def catalog_legemiddelpakning(fest: Fest) -> list[Legemiddelpakning]:
    """Return every package in ``KatLegemiddelpakning``, in document order."""
    catalog = child(fest.root, "KatLegemiddelpakning")
    return get_container(catalog, "OppfLegemiddelpakning", get_legemiddelpakning)


def map_catalog_legemiddelpakning(
    source: Fest | Iterable[Legemiddelpakning],
) -> dict[str, Legemiddelpakning]:
    """Map item number to package, from a document or a list of packages.

    When an item number occurs more than once the first package is kept.
    """
    packages = catalog_legemiddelpakning(source) if isinstance(source, Fest) else source
    result: dict[str, Legemiddelpakning] = {}
    for pakning in packages:
        result.setdefault(pakning.key, pakning)
    return result


def find_legemiddelpakning(
    container: Iterable[Legemiddelpakning] | Mapping[str, Legemiddelpakning],
    varenr: str,
) -> Legemiddelpakning | None:
    """Return the package with item number ``varenr``, or ``None``."""
    if isinstance(container, Mapping):
        return container.get(varenr)
    return next((p for p in container if p.key == varenr), None)


def generic_legemiddelpakning(
    container: Iterable[Legemiddelpakning] | Mapping[str, Legemiddelpakning],
    target: Legemiddelpakning | IDREF | None,
) -> list[Legemiddelpakning]:
    """Return the packages in the same substitution group as ``target``.

    ``target`` is a package or a substitution group reference.  A missing
    package, or one without a group, gives an empty list.
    """
    if target is None:
        return []
    if isinstance(target, str):
        reference = target
    else:
        group = target.pakningbyttegruppe
        if group is None:
            return []
        reference = group.refbyttegruppe
    packages = container.values() if isinstance(container, Mapping) else container
    return [
        p
        for p in packages
        if p.pakningbyttegruppe is not None
        and p.pakningbyttegruppe.refbyttegruppe == reference
    ]