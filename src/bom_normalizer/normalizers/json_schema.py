"""
String format checks mirroring the JSON schema formats CycloneDX uses.
"""

import re
from typing import Any

_IDN_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+$")

# characters RFC 3987 does not allow anywhere in an IRI reference
_IRI_FORBIDDEN_PATTERN = re.compile(r'[\s<>"{}|\\^`\x00-\x1f\x7f]')


def is_idn_email(value: Any) -> bool:
    """Check whether ``value`` looks like an (internationalized) e-mail address."""
    return isinstance(value, str) and _IDN_EMAIL_PATTERN.match(value) is not None


def is_iri_reference(value: Any) -> bool:
    """Check whether ``value`` is a non-empty IRI reference."""
    return (
        isinstance(value, str)
        and len(value) > 0
        and _IRI_FORBIDDEN_PATTERN.search(value) is None
    )
