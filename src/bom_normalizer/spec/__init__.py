"""
CycloneDX specification versions and their capabilities.
"""

from .protocol import (
    SpecVersion, Format, SpecProtocol, Spec1dot1, Spec1dot2, Spec1dot3,
    Spec1dot4, Spec1dot5, SPEC_DICT, get_spec
)

__all__ = [
    "SpecVersion",
    "Format",
    "SpecProtocol",
    "Spec1dot1",
    "Spec1dot2",
    "Spec1dot3",
    "Spec1dot4",
    "Spec1dot5",
    "SPEC_DICT",
    "get_spec"
]
