"""
ISO/IEC 19770-2 software identification (SWID) tag model.
"""

from dataclasses import dataclass
from typing import Optional

from .license import Attachment


@dataclass(frozen=True)
class Swid:
    """SWID tag describing a component."""

    tag_id: str
    name: str
    version: Optional[str] = None
    tag_version: Optional[int] = None
    patch: Optional[bool] = None
    text: Optional[Attachment] = None
    url: Optional[str] = None
