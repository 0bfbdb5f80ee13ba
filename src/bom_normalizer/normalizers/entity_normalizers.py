"""
Normalizers for the individual BOM entities.

Each normalizer turns one model object into the JSON-ready structure of
the target spec version. Fields the version cannot express are left out
entirely, never written as null.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..error_handling import UnknownLicenseVariantError
from ..models import (
    Attachment, Bom, Component, ExternalReference, HashAlgorithm, LicenseExpression,
    Metadata, NamedLicense, OrganizationalContact, OrganizationalEntity, Property,
    SpdxLicense, Swid, Tool
)
from ..spec import SpecVersion
from .base_normalizer import (
    BaseNormalizer, NormalizerOptions, normalize_stringable_iter, omit_absent, optional_list,
    optional_string
)
from .json_schema import is_idn_email, is_iri_reference

logger = logging.getLogger(__name__)

SCHEMA_URLS: Dict[SpecVersion, str] = {
    SpecVersion.V1_2: "http://cyclonedx.org/schema/bom-1.2b.schema.json",
    SpecVersion.V1_3: "http://cyclonedx.org/schema/bom-1.3a.schema.json",
    SpecVersion.V1_4: "http://cyclonedx.org/schema/bom-1.4.schema.json",
    SpecVersion.V1_5: "http://cyclonedx.org/schema/bom-1.5.schema.json",
}


class BomNormalizer(BaseNormalizer):
    """Normalizer for the BOM root; produces the whole document body."""

    def normalize(self, data: Bom, options: NormalizerOptions) -> Dict[str, Any]:
        """
        Normalize a complete BOM.

        Components are normalized top-down; the dependency graph is built
        by a separate walk over the same BOM and merged in afterwards.

        Args:
            data: BOM to normalize
            options: Options of the current pass

        Returns:
            Document body ready for serialization
        """
        spec = self._factory.spec

        metadata = self._factory.make_for_metadata().normalize(data.metadata, options)

        dependencies = None
        if spec.supports_dependency_graph:
            dependencies = self._factory.make_for_dependency_graph().normalize(data, options)

        return omit_absent({
            "$schema": SCHEMA_URLS.get(spec.version),
            "bomFormat": "CycloneDX",
            "specVersion": spec.version.value,
            "version": data.version,
            "serialNumber": optional_string(data.serial_number),
            "metadata": metadata if metadata else None,
            # always a list: older schemas require the key
            "components": self._factory.make_for_component().normalize_repository(
                data.components, options
            ),
            "dependencies": dependencies
        })


class MetadataNormalizer(BaseNormalizer):
    """Normalizer for the BOM metadata block."""

    def normalize(self, data: Metadata, options: NormalizerOptions) -> Dict[str, Any]:
        org_entity_normalizer = self._factory.make_for_organizational_entity()
        return omit_absent({
            "timestamp": _format_timestamp(data.timestamp),
            "tools": optional_list(
                self._factory.make_for_tool().normalize_repository(data.tools, options)
            ),
            "authors": optional_list(
                self._factory.make_for_organizational_contact().normalize_repository(data.authors, options)
            ),
            "component": self._factory.make_for_component().normalize(data.component, options)
            if data.component is not None else None,
            "manufacture": org_entity_normalizer.normalize(data.manufacture, options)
            if data.manufacture is not None else None,
            "supplier": org_entity_normalizer.normalize(data.supplier, options)
            if data.supplier is not None else None
        })


class ToolNormalizer(BaseNormalizer):
    """Normalizer for tools listed in the metadata."""

    def normalize(self, data: Tool, options: NormalizerOptions) -> Dict[str, Any]:
        external_references = None
        if self._factory.spec.supports_tool_references:
            external_references = optional_list(
                self._factory.make_for_external_reference().normalize_repository(
                    data.external_references, options
                )
            )
        return omit_absent({
            "vendor": optional_string(data.vendor),
            "name": optional_string(data.name),
            "version": optional_string(data.version),
            "hashes": optional_list(
                self._factory.make_for_hash().normalize_repository(data.hashes, options)
            ),
            "externalReferences": external_references
        })

    def normalize_repository(self, data, options: NormalizerOptions) -> List[Dict[str, Any]]:
        return self._normalize_ordered(data, options)


class HashNormalizer(BaseNormalizer):
    """Normalizer for ``(algorithm, content)`` hash pairs."""

    def normalize(self, data: Tuple[HashAlgorithm, str], options: NormalizerOptions) -> Optional[Dict[str, str]]:
        algorithm, content = data
        spec = self._factory.spec
        if not (spec.supports_hash_algorithm(algorithm) and spec.supports_hash_value(content)):
            return None
        return {
            "alg": algorithm.value,
            "content": content
        }

    def normalize_repository(self, data, options: NormalizerOptions) -> List[Dict[str, str]]:
        pairs = data.sorted() if options.sort_lists else list(data.items())
        normalized = (self.normalize(pair, options) for pair in pairs)
        return [h for h in normalized if h is not None]


class OrganizationalContactNormalizer(BaseNormalizer):
    """Normalizer for contact persons."""

    def normalize(self, data: OrganizationalContact, options: NormalizerOptions) -> Dict[str, str]:
        return omit_absent({
            "name": optional_string(data.name),
            "email": data.email if is_idn_email(data.email) else None,
            "phone": optional_string(data.phone)
        })

    def normalize_repository(self, data, options: NormalizerOptions) -> List[Dict[str, str]]:
        return self._normalize_ordered(data, options)


class OrganizationalEntityNormalizer(BaseNormalizer):
    """Normalizer for organizations such as suppliers."""

    def normalize(self, data: OrganizationalEntity, options: NormalizerOptions) -> Dict[str, Any]:
        urls = [url for url in normalize_stringable_iter(data.url, options) if is_iri_reference(url)]
        return omit_absent({
            "name": optional_string(data.name),
            "url": urls if urls else None,
            "contact": optional_list(
                self._factory.make_for_organizational_contact().normalize_repository(data.contact, options)
            )
        })


class ComponentNormalizer(BaseNormalizer):
    """
    Normalizer for components and their nested components.

    A component whose type the target version does not know is omitted
    together with its whole subtree. Nested components are normalized
    with an explicit stack, children before their parent, so nesting
    depth is not limited by the interpreter's recursion limit.
    """

    def normalize(self, data: Component, options: NormalizerOptions) -> Optional[Dict[str, Any]]:
        if not self._is_supported(data):
            return None

        # each frame: component, iterator over its children, normalized children so far
        stack: List[Tuple[Component, Iterator[Component], List[Dict[str, Any]]]] = [
            (data, iter(self._ordered(data.components, options)), [])
        ]
        while True:
            component, children, normalized_children = stack[-1]
            child = next(children, None)
            if child is not None:
                if self._is_supported(child):
                    stack.append((child, iter(self._ordered(child.components, options)), []))
                continue

            stack.pop()
            normalized = self._normalize_fields(component, normalized_children, options)
            if not stack:
                return normalized
            stack[-1][2].append(normalized)

    def _is_supported(self, component: Component) -> bool:
        spec = self._factory.spec
        if spec.supports_component_type(component.type):
            return True
        logger.debug(
            f"Omitting component {component.name!r}: type {component.type.value!r} "
            f"is not supported by spec {spec.version.value}",
            extra={"spec_version": spec.version.value, "component": component.name}
        )
        return False

    def _normalize_fields(
        self,
        data: Component,
        components: List[Dict[str, Any]],
        options: NormalizerOptions
    ) -> Dict[str, Any]:
        """Build the output of one component from its already normalized children."""
        spec = self._factory.spec
        version = data.version or ""
        factory = self._factory
        return omit_absent({
            "type": data.type.value,
            "name": data.name,
            "group": optional_string(data.group),
            "version": version if version or spec.requires_component_version else None,
            "bom-ref": optional_string(data.bom_ref.value),
            "supplier": factory.make_for_organizational_entity().normalize(data.supplier, options)
            if data.supplier is not None else None,
            "author": optional_string(data.author),
            "publisher": optional_string(data.publisher),
            "description": optional_string(data.description),
            "scope": data.scope.value if data.scope is not None else None,
            "hashes": optional_list(factory.make_for_hash().normalize_repository(data.hashes, options)),
            "licenses": optional_list(factory.make_for_license().normalize_repository(data.licenses, options)),
            "copyright": optional_string(data.copyright),
            "cpe": optional_string(data.cpe),
            "purl": optional_string(data.purl),
            "swid": factory.make_for_swid().normalize(data.swid, options)
            if data.swid is not None else None,
            "externalReferences": optional_list(
                factory.make_for_external_reference().normalize_repository(data.external_references, options)
            ),
            "properties": optional_list(
                factory.make_for_property().normalize_repository(data.properties, options)
            ) if spec.supports_properties(data) else None,
            "components": optional_list(components)
        })

    def normalize_repository(self, data, options: NormalizerOptions) -> List[Dict[str, Any]]:
        return self._normalize_ordered(data, options)


class LicenseNormalizer(BaseNormalizer):
    """Normalizer for the three license kinds."""

    def normalize(self, data: Any, options: NormalizerOptions) -> Dict[str, Any]:
        """
        Normalize a license according to its kind.

        Raises:
            UnknownLicenseVariantError: If ``data`` is not a known license kind
        """
        if isinstance(data, NamedLicense):
            return self._normalize_named_license(data, options)
        if isinstance(data, SpdxLicense):
            return self._normalize_spdx_license(data, options)
        if isinstance(data, LicenseExpression):
            return self._normalize_license_expression(data)
        raise UnknownLicenseVariantError(
            "Unexpected license choice",
            license_type=type(data).__name__
        )

    def _normalize_named_license(self, data: NamedLicense, options: NormalizerOptions) -> Dict[str, Any]:
        return {
            "license": omit_absent({
                "name": data.name,
                "text": self._normalize_text(data.text, options),
                "url": optional_string(data.url)
            })
        }

    def _normalize_spdx_license(self, data: SpdxLicense, options: NormalizerOptions) -> Dict[str, Any]:
        return {
            "license": omit_absent({
                "id": data.id,
                "text": self._normalize_text(data.text, options),
                "url": optional_string(data.url)
            })
        }

    def _normalize_license_expression(self, data: LicenseExpression) -> Dict[str, str]:
        return {"expression": data.expression}

    def _normalize_text(self, text: Optional[Attachment], options: NormalizerOptions) -> Optional[Dict[str, str]]:
        if text is None:
            return None
        return self._factory.make_for_attachment().normalize(text, options)

    def normalize_repository(self, data, options: NormalizerOptions) -> List[Dict[str, Any]]:
        return self._normalize_ordered(data, options)


class SwidNormalizer(BaseNormalizer):
    """Normalizer for SWID tags."""

    def normalize(self, data: Swid, options: NormalizerOptions) -> Dict[str, Any]:
        return omit_absent({
            "tagId": data.tag_id,
            "name": data.name,
            "version": optional_string(data.version),
            "tagVersion": data.tag_version,
            "patch": data.patch,
            "text": self._factory.make_for_attachment().normalize(data.text, options)
            if data.text is not None else None,
            "url": data.url if is_iri_reference(data.url) else None
        })


class ExternalReferenceNormalizer(BaseNormalizer):
    """Normalizer for external references; unknown types are omitted."""

    def normalize(self, data: ExternalReference, options: NormalizerOptions) -> Optional[Dict[str, str]]:
        if not self._factory.spec.supports_external_reference_type(data.type):
            return None
        return omit_absent({
            "url": str(data.url),
            "type": data.type.value,
            "comment": optional_string(data.comment)
        })

    def normalize_repository(self, data, options: NormalizerOptions) -> List[Dict[str, str]]:
        return self._normalize_ordered(data, options)


class AttachmentNormalizer(BaseNormalizer):
    """Normalizer for inline attachments."""

    def normalize(self, data: Attachment, options: NormalizerOptions) -> Dict[str, str]:
        return omit_absent({
            "content": data.content,
            "contentType": optional_string(data.content_type),
            "encoding": data.encoding.value if data.encoding is not None else None
        })


class PropertyNormalizer(BaseNormalizer):
    """Normalizer for name/value properties."""

    def normalize(self, data: Property, options: NormalizerOptions) -> Dict[str, str]:
        return {
            "name": data.name,
            "value": data.value
        }

    def normalize_repository(self, data, options: NormalizerOptions) -> List[Dict[str, str]]:
        return self._normalize_ordered(data, options)


def _format_timestamp(timestamp: Optional[datetime]) -> Optional[str]:
    """Render a timestamp as ISO-8601 UTC with milliseconds; naive values count as UTC."""
    if timestamp is None:
        return None
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    utc = timestamp.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
