"""
Component data model for software and hardware parts of a BOM.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .bom_ref import BomRef
from .collections import HashDict, SortableSet, ensure_sortable_set
from .contact import OrganizationalEntity
from .external_reference import ExternalReference
from .license import License
from .property import Property
from .swid import Swid


class ComponentType(Enum):
    """Component types across all CycloneDX versions."""
    APPLICATION = "application"
    FRAMEWORK = "framework"
    LIBRARY = "library"
    CONTAINER = "container"
    OPERATING_SYSTEM = "operating-system"
    DEVICE = "device"
    FIRMWARE = "firmware"
    FILE = "file"
    # 1.5
    PLATFORM = "platform"
    DEVICE_DRIVER = "device-driver"
    MACHINE_LEARNING_MODEL = "machine-learning-model"
    DATA = "data"


class ComponentScope(Enum):
    """Whether a component is needed at runtime."""
    REQUIRED = "required"
    OPTIONAL = "optional"
    EXCLUDED = "excluded"


@dataclass(eq=False)
class Component:
    """
    Represents one component of a BOM.

    A component may contain further components, to any depth, and
    declares the components it depends on by their ``BomRef``.
    Components compare by identity; the model layer is expected to keep
    ``bom_ref`` values unique within one document.
    """

    type: ComponentType
    name: str
    bom_ref: BomRef = field(default_factory=BomRef)
    group: Optional[str] = None
    version: Optional[str] = None
    supplier: Optional[OrganizationalEntity] = None
    author: Optional[str] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    scope: Optional[ComponentScope] = None
    hashes: HashDict = field(default_factory=HashDict)
    licenses: SortableSet[License] = field(default_factory=SortableSet)
    copyright: Optional[str] = None
    cpe: Optional[str] = None
    purl: Optional[str] = None
    swid: Optional[Swid] = None
    external_references: SortableSet[ExternalReference] = field(default_factory=SortableSet)
    properties: SortableSet[Property] = field(default_factory=SortableSet)
    components: SortableSet["Component"] = field(default_factory=SortableSet)
    dependencies: SortableSet[BomRef] = field(default_factory=SortableSet)

    def __post_init__(self):
        """Post-initialization processing."""
        if isinstance(self.type, str):
            self.type = ComponentType(self.type.lower())

        if isinstance(self.scope, str):
            self.scope = ComponentScope(self.scope.lower())

        if not isinstance(self.bom_ref, BomRef):
            self.bom_ref = BomRef(self.bom_ref)

        if not isinstance(self.hashes, HashDict):
            self.hashes = HashDict(self.hashes)

        self.licenses = ensure_sortable_set(self.licenses)
        self.external_references = ensure_sortable_set(self.external_references)
        self.properties = ensure_sortable_set(self.properties)
        self.components = ensure_sortable_set(self.components)
        self.dependencies = SortableSet(
            ref if isinstance(ref, BomRef) else BomRef(ref)
            for ref in (self.dependencies or ())
        )

    def sort_key(self) -> Tuple[str, str, str, str]:
        return (self.group or "", self.name, self.version or "", self.bom_ref.value)
