"""
Spec-aware normalizers turning the BOM object graph into plain values.
"""

from .base_normalizer import BaseNormalizer, NormalizerOptions
from .factory import Factory
from .entity_normalizers import (
    BomNormalizer, MetadataNormalizer, ComponentNormalizer, ToolNormalizer,
    HashNormalizer, OrganizationalContactNormalizer, OrganizationalEntityNormalizer,
    LicenseNormalizer, SwidNormalizer, ExternalReferenceNormalizer,
    AttachmentNormalizer, PropertyNormalizer, SCHEMA_URLS
)
from .dependency_graph import DependencyGraphNormalizer

__all__ = [
    "BaseNormalizer",
    "NormalizerOptions",
    "Factory",
    "BomNormalizer",
    "MetadataNormalizer",
    "ComponentNormalizer",
    "ToolNormalizer",
    "HashNormalizer",
    "OrganizationalContactNormalizer",
    "OrganizationalEntityNormalizer",
    "LicenseNormalizer",
    "SwidNormalizer",
    "ExternalReferenceNormalizer",
    "AttachmentNormalizer",
    "PropertyNormalizer",
    "DependencyGraphNormalizer",
    "SCHEMA_URLS"
]
