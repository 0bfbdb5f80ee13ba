"""
Data models for the BOM object graph.
"""

from .bom_ref import BomRef
from .hash import HashAlgorithm
from .collections import SortableSet, HashDict
from .license import (
    AttachmentEncoding, Attachment, NamedLicense, SpdxLicense, LicenseExpression, License
)
from .contact import OrganizationalContact, OrganizationalEntity
from .external_reference import ExternalReferenceType, ExternalReference
from .property import Property
from .swid import Swid
from .tool import Tool
from .component import ComponentType, ComponentScope, Component
from .bom import Metadata, Bom
from .tree import iter_component_tree

__all__ = [
    "BomRef",
    "HashAlgorithm",
    "SortableSet",
    "HashDict",
    "AttachmentEncoding",
    "Attachment",
    "NamedLicense",
    "SpdxLicense",
    "LicenseExpression",
    "License",
    "OrganizationalContact",
    "OrganizationalEntity",
    "ExternalReferenceType",
    "ExternalReference",
    "Property",
    "Swid",
    "Tool",
    "ComponentType",
    "ComponentScope",
    "Component",
    "Metadata",
    "Bom",
    "iter_component_tree"
]
