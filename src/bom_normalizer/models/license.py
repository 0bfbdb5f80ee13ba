"""
License data models.

A license is exactly one of three kinds: a named license, an SPDX
license identified by its SPDX id, or an SPDX license expression.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class AttachmentEncoding(Enum):
    """Encodings allowed for attached text."""
    BASE64 = "base64"


@dataclass(frozen=True)
class Attachment:
    """Inline content, such as a full license text."""

    content: str
    content_type: Optional[str] = None
    encoding: Optional[AttachmentEncoding] = None

    def __post_init__(self):
        if isinstance(self.encoding, str):
            object.__setattr__(self, "encoding", AttachmentEncoding(self.encoding))


@dataclass(frozen=True)
class NamedLicense:
    """License known only by a free-text name."""

    name: str
    text: Optional[Attachment] = None
    url: Optional[str] = None

    def sort_key(self) -> Tuple[int, str]:
        return (0, self.name)


@dataclass(frozen=True)
class SpdxLicense:
    """License identified by an SPDX license id, e.g. ``MIT``."""

    id: str
    text: Optional[Attachment] = None
    url: Optional[str] = None

    def sort_key(self) -> Tuple[int, str]:
        return (1, self.id)


@dataclass(frozen=True)
class LicenseExpression:
    """SPDX license expression, e.g. ``MIT OR Apache-2.0``."""

    expression: str

    def sort_key(self) -> Tuple[int, str]:
        return (2, self.expression)


License = Union[NamedLicense, SpdxLicense, LicenseExpression]
