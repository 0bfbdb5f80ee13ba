"""
Reference token that identifies a component within one BOM document.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BomRef:
    """
    Opaque identity of a component.

    Two refs are equal when their string forms are equal. The empty
    string means "unassigned"; such refs never take part in the
    dependency graph.
    """

    value: str = ""

    def __post_init__(self):
        if self.value is None:
            object.__setattr__(self, "value", "")

    @property
    def is_assigned(self) -> bool:
        return len(self.value) > 0

    def sort_key(self) -> Tuple[str]:
        return (self.value,)

    def __str__(self) -> str:
        return self.value
