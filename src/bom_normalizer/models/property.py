"""
Name/value property model.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Property:
    """Free-form name/value pair attached to a component."""

    name: str
    value: str

    def sort_key(self) -> Tuple[str, str]:
        return (self.name, self.value)
