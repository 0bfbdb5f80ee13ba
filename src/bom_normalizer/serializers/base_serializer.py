"""
Base classes and interfaces for BOM serializers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..config import AppConfig, get_config
from ..models import Bom
from ..normalizers import NormalizerOptions


@dataclass(frozen=True)
class SerializerOptions:
    """
    Options for turning the normalized document into text.

    Attributes:
        indent: Indentation width; None writes the most compact form
    """

    indent: Optional[int] = None

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "SerializerOptions":
        """Build options from the application configuration."""
        config = config or get_config()
        return cls(indent=config.normalizer.indent)


class BaseSerializer(ABC):
    """Abstract base class for format-specific BOM serializers."""

    def serialize(
        self,
        bom: Bom,
        normalizer_options: Optional[NormalizerOptions] = None,
        serializer_options: Optional[SerializerOptions] = None
    ) -> str:
        """
        Normalize a BOM and render it as text.

        Args:
            bom: BOM to serialize
            normalizer_options: Options for the normalization pass; read
                from the configuration when omitted
            serializer_options: Options for the text rendering; read from
                the configuration when omitted

        Returns:
            Serialized document
        """
        normalized = self._normalize(bom, normalizer_options or NormalizerOptions.from_config())
        return self._serialize(normalized, serializer_options or SerializerOptions.from_config())

    @abstractmethod
    def _normalize(self, bom: Bom, options: NormalizerOptions) -> Any:
        """
        Turn the BOM into a plain value tree.

        Args:
            bom: BOM to normalize
            options: Normalizer options

        Returns:
            Normalized document
        """
        pass

    @abstractmethod
    def _serialize(self, normalized: Any, options: SerializerOptions) -> str:
        """
        Render a normalized document as text.

        Args:
            normalized: Output of ``_normalize``
            options: Serializer options

        Returns:
            Serialized document
        """
        pass

    @property
    @abstractmethod
    def format_name(self) -> str:
        """
        Get the name of this format.

        Returns:
            Format name (e.g., 'JSON')
        """
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """
        Get the recommended file extension for this format.

        Returns:
            File extension (e.g., '.cdx.json')
        """
        pass
