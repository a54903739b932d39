"""Readers for the drug package catalogue of FEST XML documents."""

__version__ = "0.3.0"