"""
Factory that binds all normalizers to one spec version.
"""

from ..spec import SpecProtocol
from .dependency_graph import DependencyGraphNormalizer
from .entity_normalizers import (
    AttachmentNormalizer, BomNormalizer, ComponentNormalizer, ExternalReferenceNormalizer,
    HashNormalizer, LicenseNormalizer, MetadataNormalizer, OrganizationalContactNormalizer,
    OrganizationalEntityNormalizer, PropertyNormalizer, SwidNormalizer, ToolNormalizer
)


class Factory:
    """
    Creates normalizers for one target spec version.

    Every normalizer made here consults the same spec object, so none of
    them needs to know which version it is writing.
    """

    def __init__(self, spec: SpecProtocol):
        """
        Initialize the factory.

        Args:
            spec: Capabilities of the target spec version
        """
        self._spec = spec

    @property
    def spec(self) -> SpecProtocol:
        return self._spec

    def make_for_bom(self) -> BomNormalizer:
        return BomNormalizer(self)

    def make_for_metadata(self) -> MetadataNormalizer:
        return MetadataNormalizer(self)

    def make_for_component(self) -> ComponentNormalizer:
        return ComponentNormalizer(self)

    def make_for_tool(self) -> ToolNormalizer:
        return ToolNormalizer(self)

    def make_for_organizational_contact(self) -> OrganizationalContactNormalizer:
        return OrganizationalContactNormalizer(self)

    def make_for_organizational_entity(self) -> OrganizationalEntityNormalizer:
        return OrganizationalEntityNormalizer(self)

    def make_for_hash(self) -> HashNormalizer:
        return HashNormalizer(self)

    def make_for_license(self) -> LicenseNormalizer:
        return LicenseNormalizer(self)

    def make_for_swid(self) -> SwidNormalizer:
        return SwidNormalizer(self)

    def make_for_external_reference(self) -> ExternalReferenceNormalizer:
        return ExternalReferenceNormalizer(self)

    def make_for_attachment(self) -> AttachmentNormalizer:
        return AttachmentNormalizer(self)

    def make_for_property(self) -> PropertyNormalizer:
        return PropertyNormalizer(self)

    def make_for_dependency_graph(self) -> DependencyGraphNormalizer:
        return DependencyGraphNormalizer(self)

    def __repr__(self) -> str:
        return f"Factory(spec={self._spec!r})"
