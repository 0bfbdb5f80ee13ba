"""
BOM root aggregate and its metadata block.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import uuid

from .collections import SortableSet, ensure_sortable_set
from .component import Component
from .contact import OrganizationalContact, OrganizationalEntity
from .tool import Tool


@dataclass(eq=False)
class Metadata:
    """
    Document-level metadata.

    ``component`` is the subject of the BOM; it may carry its own
    nested component tree and dependencies like any other component.
    """

    timestamp: Optional[datetime] = None
    tools: SortableSet[Tool] = field(default_factory=SortableSet)
    authors: SortableSet[OrganizationalContact] = field(default_factory=SortableSet)
    component: Optional[Component] = None
    manufacture: Optional[OrganizationalEntity] = None
    supplier: Optional[OrganizationalEntity] = None

    def __post_init__(self):
        self.tools = ensure_sortable_set(self.tools)
        self.authors = ensure_sortable_set(self.authors)


@dataclass(eq=False)
class Bom:
    """
    Represents a complete software bill of materials.

    The object graph is owned by the caller; normalization only reads it.
    """

    metadata: Metadata = field(default_factory=Metadata)
    components: SortableSet[Component] = field(default_factory=SortableSet)
    version: int = 1
    serial_number: Optional[str] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = Metadata()
        self.components = ensure_sortable_set(self.components)

    @staticmethod
    def generate_serial_number() -> str:
        """Create a fresh ``urn:uuid:`` serial number."""
        return f"urn:uuid:{uuid.uuid4()}"
