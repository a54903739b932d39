"""Small helpers for reading values out of FEST XML elements.

Elements are plain :class:`xml.etree.ElementTree.Element` objects whose
namespaces have been removed.  Every helper accepts ``None`` in place of an
element and then behaves as if the element were present but empty, so that
missing optional parts of a document simply read as empty values.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable
from typing import TypeVar

__all__ = [
    "IDREF",
    "child",
    "compare_value",
    "get_bool",
    "get_container",
    "get_value",
    "parse_xml",
    "strip_namespaces",
]

IDREF = str
"""A reference to the unique id of another entry in the document."""

T = TypeVar("T")


def _local_name(name: str) -> str:
    return name.rsplit("}", 1)[-1] if name.startswith("{") else name


def strip_namespaces(element: ET.Element) -> ET.Element:
    """Remove namespace qualifiers from all tags and attribute names in place."""
    for node in element.iter():
        if isinstance(node.tag, str):
            node.tag = _local_name(node.tag)
        if any(key.startswith("{") for key in node.attrib):
            node.attrib = {_local_name(k): v for k, v in node.attrib.items()}
    return element


def parse_xml(text: str | bytes) -> ET.Element:
    """Parse an XML document and return its root with namespaces removed.

    Raises :class:`xml.etree.ElementTree.ParseError` on malformed input.
    """
    return strip_namespaces(ET.fromstring(text))


def child(node: ET.Element | None, name: str) -> ET.Element | None:
    """Return the first child named ``name``, or ``None``."""
    if node is None:
        return None
    return node.find(name)


def get_value(node: ET.Element | None, name: str | None = None) -> str:
    """Return the text of the child ``name``, or of ``node`` itself."""
    target = node if name is None else child(node, name)
    if target is None:
        return ""
    return target.text or ""


def get_bool(node: ET.Element | None, name: str) -> bool:
    """Return True only when the child ``name`` holds exactly ``true``."""
    return get_value(node, name) == "true"


def compare_value(name: str, node: ET.Element) -> bool:
    """Return True when ``node`` is named ``name``."""
    return node.tag == name


def get_container(
    node: ET.Element | None, name: str, factory: Callable[[ET.Element], T]
) -> list[T]:
    """Build an item with ``factory`` for every child named ``name``, in order."""
    if node is None:
        return []
    return [factory(item) for item in node if compare_value(name, item)]