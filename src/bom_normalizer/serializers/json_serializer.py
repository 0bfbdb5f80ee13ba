"""
JSON serializer for CycloneDX documents.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from ..config import AppConfig, get_config
from ..error_handling import UnsupportedFormatError
from ..models import Bom
from ..normalizers import Factory, NormalizerOptions
from ..spec import Format, SpecVersion, get_spec
from .base_serializer import BaseSerializer, SerializerOptions

logger = logging.getLogger(__name__)


class JsonSerializer(BaseSerializer):
    """
    Serializer for the CycloneDX JSON format.

    The target spec version is fixed by the normalizer factory passed in.
    """

    def __init__(self, normalizer_factory: Factory):
        """
        Initialize the JSON serializer.

        Args:
            normalizer_factory: Factory bound to the target spec version

        Raises:
            UnsupportedFormatError: If the spec version has no JSON format
        """
        spec = normalizer_factory.spec
        if not spec.supports_format(Format.JSON):
            raise UnsupportedFormatError(
                "Spec does not support JSON format.",
                output_format=Format.JSON.value,
                spec_version=spec.version.value
            )
        self._normalizer_factory = normalizer_factory

    @property
    def normalizer_factory(self) -> Factory:
        return self._normalizer_factory

    @property
    def format_name(self) -> str:
        return "JSON"

    @property
    def file_extension(self) -> str:
        return ".cdx.json"

    def _normalize(self, bom: Bom, options: NormalizerOptions) -> Dict[str, Any]:
        spec_version = self._normalizer_factory.spec.version.value
        logger.info(
            f"Normalizing BOM for CycloneDX {spec_version} JSON",
            extra={"spec_version": spec_version, "output_format": Format.JSON.value}
        )
        return self._normalizer_factory.make_for_bom().normalize(bom, options)

    def _serialize(self, normalized: Dict[str, Any], options: SerializerOptions) -> str:
        if options.indent is None:
            return json.dumps(normalized, ensure_ascii=False, separators=(",", ":"))
        return json.dumps(normalized, ensure_ascii=False, indent=options.indent)


def make_json_serializer(
    spec_version: Optional[Union[str, SpecVersion]] = None,
    config: Optional[AppConfig] = None
) -> JsonSerializer:
    """
    Create a JSON serializer for a spec version.

    Args:
        spec_version: Target version; defaults to the configured one
        config: Configuration to read defaults from

    Returns:
        JsonSerializer bound to the requested version
    """
    if spec_version is None:
        spec_version = (config or get_config()).normalizer.spec_version
    return JsonSerializer(Factory(get_spec(spec_version)))
