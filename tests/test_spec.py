import pytest

from bom_normalizer.error_handling import UnsupportedSpecVersionError
from bom_normalizer.models import Component, ComponentType, ExternalReferenceType, HashAlgorithm
from bom_normalizer.spec import (
    Format, SpecVersion, Spec1dot1, Spec1dot2, Spec1dot3, Spec1dot4, Spec1dot5, SPEC_DICT, get_spec
)


def test_get_spec_accepts_strings_and_enum_members() -> None:
    assert get_spec("1.4") is Spec1dot4
    assert get_spec(SpecVersion.V1_2) is Spec1dot2
    assert get_spec(" 1.5 ") is Spec1dot5


def test_get_spec_rejects_unknown_version() -> None:
    with pytest.raises(UnsupportedSpecVersionError) as exc_info:
        get_spec("2.0")

    assert exc_info.value.spec_version == "2.0"
    assert "1.4" in exc_info.value.known_versions


def test_every_version_has_a_table() -> None:
    assert set(SPEC_DICT) == set(SpecVersion)
    for version, spec in SPEC_DICT.items():
        assert spec.version is version


def test_json_format_starts_with_1_2() -> None:
    assert not Spec1dot1.supports_format(Format.JSON)
    assert Spec1dot1.supports_format(Format.XML)
    assert Spec1dot2.supports_format(Format.JSON)
    assert Spec1dot5.supports_format(Format.JSON)


def test_component_types_per_version() -> None:
    assert not Spec1dot1.supports_component_type(ComponentType.CONTAINER)
    assert Spec1dot2.supports_component_type(ComponentType.CONTAINER)
    assert not Spec1dot4.supports_component_type(ComponentType.MACHINE_LEARNING_MODEL)
    assert Spec1dot5.supports_component_type(ComponentType.MACHINE_LEARNING_MODEL)


def test_hash_algorithms_and_values() -> None:
    assert not Spec1dot1.supports_hash_algorithm(HashAlgorithm.BLAKE3)
    assert Spec1dot2.supports_hash_algorithm(HashAlgorithm.BLAKE3)

    assert Spec1dot4.supports_hash_value("a" * 32)
    assert Spec1dot4.supports_hash_value("F" * 128)
    assert not Spec1dot4.supports_hash_value("a" * 33)
    assert not Spec1dot4.supports_hash_value("z" * 64)
    assert not Spec1dot4.supports_hash_value("")
    assert not Spec1dot4.supports_hash_value("a" * 32 + "\n")
    assert not Spec1dot4.supports_hash_value(" " + "a" * 32)


def test_external_reference_types_per_version() -> None:
    assert not Spec1dot3.supports_external_reference_type(ExternalReferenceType.RELEASE_NOTES)
    assert Spec1dot4.supports_external_reference_type(ExternalReferenceType.RELEASE_NOTES)
    assert not Spec1dot4.supports_external_reference_type(ExternalReferenceType.MODEL_CARD)
    assert Spec1dot5.supports_external_reference_type(ExternalReferenceType.MODEL_CARD)


def test_structural_flags() -> None:
    component = Component(type="library", name="x")

    assert not Spec1dot2.supports_properties(component)
    assert Spec1dot3.supports_properties(component)

    assert not Spec1dot3.supports_tool_references
    assert Spec1dot4.supports_tool_references

    assert Spec1dot3.requires_component_version
    assert not Spec1dot4.requires_component_version

    assert not Spec1dot1.supports_dependency_graph
    assert Spec1dot2.supports_dependency_graph
