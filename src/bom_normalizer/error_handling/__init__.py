"""
Error types raised by the BOM normalizer.
"""

from .exceptions import (
    BomNormalizerError, UnknownLicenseVariantError, UnsupportedFormatError,
    UnsupportedSpecVersionError, ConfigurationError
)

__all__ = [
    "BomNormalizerError",
    "UnknownLicenseVariantError",
    "UnsupportedFormatError",
    "UnsupportedSpecVersionError",
    "ConfigurationError"
]
