"""
BOM Normalizer

Turns an in-memory CycloneDX bill of materials into a document that
conforms to one chosen CycloneDX spec version.
"""

__version__ = "0.1.0"
__author__ = "BOM Normalizer Team"
__description__ = "Spec-version-aware normalization and JSON serialization of CycloneDX BOMs"
