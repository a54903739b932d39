"""Coded values used throughout the FEST format."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .xmlutil import child

__all__ = ["Cs", "Cv", "Pq", "get_cs", "get_cv", "get_pq"]


def _target(node: ET.Element | None, name: str | None) -> ET.Element | None:
    return node if name is None else child(node, name)


@dataclass(frozen=True, eq=False)
class Cs:
    """Coded simple value: a code ``value`` and its display name ``dn``.

    Two values are equal when their codes are equal; a value also compares
    equal to a string holding its code.  An empty code is falsy.
    """

    value: str = ""
    dn: str = ""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cs):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True, eq=False)
class Cv:
    """Coded value: code ``value``, code system ``s`` and display name ``dn``.

    Equality is by code only, against another :class:`Cv` or a string.
    An empty code is falsy.
    """

    value: str = ""
    s: str = ""
    dn: str = ""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cv):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True)
class Pq:
    """Physical quantity: value ``v`` and unit ``u``."""

    v: str = ""
    u: str = ""

    def __bool__(self) -> bool:
        return bool(self.v)


def get_cs(node: ET.Element | None, name: str | None = None) -> Cs:
    """Read a :class:`Cs` from the child ``name`` or from ``node`` itself."""
    target = _target(node, name)
    if target is None:
        return Cs()
    return Cs(target.get("V", ""), target.get("DN", ""))


def get_cv(node: ET.Element | None, name: str | None = None) -> Cv:
    """Read a :class:`Cv` from the child ``name`` or from ``node`` itself."""
    target = _target(node, name)
    if target is None:
        return Cv()
    return Cv(target.get("V", ""), target.get("S", ""), target.get("DN", ""))


def get_pq(node: ET.Element | None, name: str | None = None) -> Pq:
    """Read a :class:`Pq` from the child ``name`` or from ``node`` itself."""
    target = _target(node, name)
    if target is None:
        return Pq()
    return Pq(target.get("V", ""), target.get("U", ""))