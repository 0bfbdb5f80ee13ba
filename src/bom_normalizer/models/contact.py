"""
Organizational contact and entity models.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .collections import SortableSet, ensure_sortable_set


@dataclass(frozen=True)
class OrganizationalContact:
    """A person to contact: name, e-mail and phone, all optional."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    def sort_key(self) -> Tuple[str, str, str]:
        return (self.name or "", self.email or "", self.phone or "")


@dataclass(eq=False)
class OrganizationalEntity:
    """
    An organization such as a supplier or manufacturer.

    URLs are kept as plain strings in the order they were added.
    """

    name: Optional[str] = None
    url: List[str] = field(default_factory=list)
    contact: SortableSet[OrganizationalContact] = field(default_factory=SortableSet)

    def __post_init__(self):
        self.url = [str(u) for u in (self.url or [])]
        self.contact = ensure_sortable_set(self.contact)
