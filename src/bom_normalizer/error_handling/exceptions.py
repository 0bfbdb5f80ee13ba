"""
Custom exceptions for the BOM normalizer.
"""

from typing import Optional, Dict, Any, List


class BomNormalizerError(Exception):
    """
    Base exception for all BOM normalizer errors.

    This is the root exception class that all other custom exceptions
    inherit from, providing common functionality and attributes.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """
        Initialize BOM normalizer error.

        Args:
            message: Error message
            error_code: Optional error code for categorization
            context: Additional context information
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = dict(context or {})
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None
        }

    def __str__(self) -> str:
        parts = [self.message]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"Context: {context_str}")

        if self.cause:
            parts.append(f"Caused by: {self.cause}")

        return " | ".join(parts)


class UnknownLicenseVariantError(BomNormalizerError, TypeError):
    """
    Raised when a license object is none of the known license kinds.

    This signals a broken object graph handed over by the model layer.
    It aborts the current normalization pass and is never caught inside
    the library.
    """

    def __init__(self, message: str, license_type: Optional[str] = None, **kwargs):
        """
        Initialize unknown license variant error.

        Args:
            message: Error message
            license_type: Name of the unexpected type
            **kwargs: Additional arguments for base class
        """
        context = dict(kwargs.get('context') or {})
        if license_type:
            context['license_type'] = license_type

        kwargs['context'] = context
        kwargs.setdefault('error_code', 'UNEXPECTED_LICENSE_CHOICE')
        super().__init__(message, **kwargs)

        self.license_type = license_type


class UnsupportedFormatError(BomNormalizerError):
    """
    Raised when a serializer is requested for a format the target
    spec version cannot express.
    """

    def __init__(
        self,
        message: str,
        output_format: Optional[str] = None,
        spec_version: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize unsupported format error.

        Args:
            message: Error message
            output_format: Requested output format
            spec_version: Target spec version
            **kwargs: Additional arguments for base class
        """
        context = dict(kwargs.get('context') or {})
        if output_format:
            context['output_format'] = output_format
        if spec_version:
            context['spec_version'] = spec_version

        kwargs['context'] = context
        super().__init__(message, **kwargs)

        self.output_format = output_format
        self.spec_version = spec_version


class UnsupportedSpecVersionError(BomNormalizerError):
    """Raised when no capability table exists for a requested spec version."""

    def __init__(
        self,
        message: str,
        spec_version: Optional[str] = None,
        known_versions: Optional[List[str]] = None,
        **kwargs
    ):
        context = dict(kwargs.get('context') or {})
        if spec_version:
            context['spec_version'] = spec_version
        if known_versions:
            context['known_versions'] = known_versions

        kwargs['context'] = context
        super().__init__(message, **kwargs)

        self.spec_version = spec_version
        self.known_versions = known_versions or []


class ConfigurationError(BomNormalizerError):
    """
    Exception for configuration errors.

    This exception is raised when there are issues with
    configuration loading, validation, or usage.
    """

    def __init__(
        self,
        message: str,
        config_section: Optional[str] = None,
        config_key: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_section: Configuration section with error
            config_key: Specific configuration key with error
            **kwargs: Additional arguments for base class
        """
        context = dict(kwargs.get('context') or {})
        if config_section:
            context['config_section'] = config_section
        if config_key:
            context['config_key'] = config_key

        kwargs['context'] = context
        super().__init__(message, **kwargs)

        self.config_section = config_section
        self.config_key = config_key
