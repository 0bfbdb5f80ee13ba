"""
Tool model: software that took part in creating the BOM.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .collections import HashDict, SortableSet, ensure_sortable_set
from .external_reference import ExternalReference


@dataclass(eq=False)
class Tool:
    """A tool listed in the BOM metadata."""

    vendor: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None
    hashes: HashDict = field(default_factory=HashDict)
    external_references: SortableSet[ExternalReference] = field(default_factory=SortableSet)

    def __post_init__(self):
        if not isinstance(self.hashes, HashDict):
            self.hashes = HashDict(self.hashes)
        self.external_references = ensure_sortable_set(self.external_references)

    def sort_key(self) -> Tuple[str, str, str]:
        return (self.vendor or "", self.name or "", self.version or "")
