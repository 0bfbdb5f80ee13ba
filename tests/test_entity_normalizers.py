from datetime import datetime, timedelta, timezone

import pytest

from bom_normalizer.error_handling import BomNormalizerError, UnknownLicenseVariantError
from bom_normalizer.models import (
    Attachment, Component, ExternalReference, LicenseExpression, Metadata, NamedLicense,
    OrganizationalContact, OrganizationalEntity, Property, SpdxLicense, Swid, Tool
)

SHA256 = "a" * 64
MD5 = "b" * 32


def test_empty_version_is_omitted_when_not_required(factory_1_4, unsorted_options) -> None:
    component = Component(type="library", name="x", version="")

    normalized = factory_1_4.make_for_component().normalize(component, unsorted_options)

    assert "version" not in normalized


def test_empty_version_is_kept_when_required(factory_1_3, unsorted_options) -> None:
    normalizer = factory_1_3.make_for_component()

    assert normalizer.normalize(Component(type="library", name="x", version=""), unsorted_options)["version"] == ""
    assert normalizer.normalize(Component(type="library", name="x"), unsorted_options)["version"] == ""


def test_empty_optional_strings_are_omitted(factory_1_4, unsorted_options) -> None:
    component = Component(
        type="library", name="x", version="1.0", group="", author="", publisher="",
        description="", copyright="", cpe="", purl="", bom_ref=""
    )

    normalized = factory_1_4.make_for_component().normalize(component, unsorted_options)

    assert normalized == {"type": "library", "name": "x", "version": "1.0"}


def test_component_fields(factory_1_4, unsorted_options) -> None:
    component = Component(
        type="library",
        name="left-pad",
        group="acme",
        version="1.3.0",
        bom_ref="pkg:npm/acme/left-pad@1.3.0",
        supplier=OrganizationalEntity(name="ACME", url=["https://acme.example"]),
        scope="required",
        hashes={"SHA-256": SHA256},
        licenses=[SpdxLicense(id="MIT")],
        purl="pkg:npm/acme/left-pad@1.3.0",
        external_references=[ExternalReference(url="https://github.com/acme/left-pad", type="vcs")],
        properties=[Property(name="build", value="release")]
    )

    normalized = factory_1_4.make_for_component().normalize(component, unsorted_options)

    assert normalized == {
        "type": "library",
        "name": "left-pad",
        "group": "acme",
        "version": "1.3.0",
        "bom-ref": "pkg:npm/acme/left-pad@1.3.0",
        "supplier": {"name": "ACME", "url": ["https://acme.example"]},
        "scope": "required",
        "hashes": [{"alg": "SHA-256", "content": SHA256}],
        "licenses": [{"license": {"id": "MIT"}}],
        "purl": "pkg:npm/acme/left-pad@1.3.0",
        "externalReferences": [{"url": "https://github.com/acme/left-pad", "type": "vcs"}],
        "properties": [{"name": "build", "value": "release"}],
    }


def test_unsupported_component_type_drops_component_and_subtree(factory_1_4, factory_1_5, unsorted_options) -> None:
    model = Component(
        type="machine-learning-model", name="model",
        components=[Component(type="data", name="weights")]
    )
    app = Component(type="application", name="app", components=[model, Component(type="library", name="lib")])

    normalized_1_4 = factory_1_4.make_for_component().normalize(app, unsorted_options)
    normalized_1_5 = factory_1_5.make_for_component().normalize(app, unsorted_options)

    assert factory_1_4.make_for_component().normalize(model, unsorted_options) is None
    assert [c["name"] for c in normalized_1_4["components"]] == ["lib"]
    assert [c["name"] for c in normalized_1_5["components"]] == ["model", "lib"]
    assert normalized_1_5["components"][0]["components"] == [{"type": "data", "name": "weights"}]


def test_nested_components_collapse_when_all_are_unsupported(factory_1_4, unsorted_options) -> None:
    app = Component(type="application", name="app", components=[Component(type="platform", name="p")])

    normalized = factory_1_4.make_for_component().normalize(app, unsorted_options)

    assert "components" not in normalized


def test_invalid_hashes_are_omitted(factory_1_1, factory_1_4, unsorted_options) -> None:
    component = Component(
        type="library", name="x",
        hashes={"SHA-256": SHA256, "MD5": "not-a-hash", "SHA-1": "c" * 40 + "\n", "BLAKE3": SHA256}
    )

    normalized_1_4 = factory_1_4.make_for_component().normalize(component, unsorted_options)
    normalized_1_1 = factory_1_1.make_for_component().normalize(component, unsorted_options)

    assert normalized_1_4["hashes"] == [
        {"alg": "SHA-256", "content": SHA256},
        {"alg": "BLAKE3", "content": SHA256},
    ]
    assert normalized_1_1["hashes"] == [{"alg": "SHA-256", "content": SHA256}]


def test_hash_list_collapses_when_nothing_is_valid(factory_1_4, unsorted_options) -> None:
    component = Component(type="library", name="x", hashes={"MD5": "nope"})

    normalized = factory_1_4.make_for_component().normalize(component, unsorted_options)

    assert "hashes" not in normalized


def test_external_reference_types_are_gated(factory_1_3, factory_1_4, unsorted_options) -> None:
    notes = ExternalReference(url="https://example.com/notes", type="release-notes", comment="")

    assert factory_1_3.make_for_external_reference().normalize(notes, unsorted_options) is None
    assert factory_1_4.make_for_external_reference().normalize(notes, unsorted_options) == {
        "url": "https://example.com/notes",
        "type": "release-notes",
    }


def test_properties_are_gated_per_version(factory_1_2, factory_1_3, unsorted_options) -> None:
    component = Component(type="library", name="x", properties=[Property(name="k", value="v")])

    assert "properties" not in factory_1_2.make_for_component().normalize(component, unsorted_options)
    assert factory_1_3.make_for_component().normalize(component, unsorted_options)["properties"] == [
        {"name": "k", "value": "v"}
    ]


def test_tool_external_references_are_gated(factory_1_3, factory_1_4, unsorted_options) -> None:
    tool = Tool(
        vendor="acme", name="scanner", version="",
        hashes={"MD5": MD5},
        external_references=[ExternalReference(url="https://acme.example/scanner", type="website")]
    )

    assert factory_1_3.make_for_tool().normalize(tool, unsorted_options) == {
        "vendor": "acme",
        "name": "scanner",
        "hashes": [{"alg": "MD5", "content": MD5}],
    }
    assert factory_1_4.make_for_tool().normalize(tool, unsorted_options)["externalReferences"] == [
        {"url": "https://acme.example/scanner", "type": "website"}
    ]


def test_license_variants(factory_1_4, unsorted_options) -> None:
    normalizer = factory_1_4.make_for_license()
    text = Attachment(content="UGVybWlzc2lvbg==", content_type="text/plain", encoding="base64")

    assert normalizer.normalize(NamedLicense(name="Custom", text=text, url="https://example.com/l"), unsorted_options) == {
        "license": {
            "name": "Custom",
            "text": {"content": "UGVybWlzc2lvbg==", "contentType": "text/plain", "encoding": "base64"},
            "url": "https://example.com/l",
        }
    }
    assert normalizer.normalize(SpdxLicense(id="Apache-2.0"), unsorted_options) == {
        "license": {"id": "Apache-2.0"}
    }
    assert normalizer.normalize(LicenseExpression(expression="MIT OR Apache-2.0"), unsorted_options) == {
        "expression": "MIT OR Apache-2.0"
    }


def test_unknown_license_variant_is_fatal(factory_1_4, unsorted_options) -> None:
    component = Component(type="library", name="x", licenses=["MIT"])

    with pytest.raises(UnknownLicenseVariantError) as exc_info:
        factory_1_4.make_for_component().normalize(component, unsorted_options)

    assert isinstance(exc_info.value, TypeError)
    assert isinstance(exc_info.value, BomNormalizerError)
    assert exc_info.value.license_type == "str"


def test_contact_email_must_look_like_an_address(factory_1_4, unsorted_options) -> None:
    normalizer = factory_1_4.make_for_organizational_contact()

    assert normalizer.normalize(OrganizationalContact(name="Jo", email="jo@example.com"), unsorted_options) == {
        "name": "Jo", "email": "jo@example.com"
    }
    assert normalizer.normalize(OrganizationalContact(name="Jo", email="not an email", phone=""), unsorted_options) == {
        "name": "Jo"
    }


def test_entity_urls_must_be_iri_references(factory_1_4, sorted_options) -> None:
    entity = OrganizationalEntity(
        name="ACME",
        url=["https://b.example", "not a url", "https://a.example", ""],
        contact=[OrganizationalContact(name="Zed"), OrganizationalContact(name="Amy")]
    )

    normalized = factory_1_4.make_for_organizational_entity().normalize(entity, sorted_options)

    assert normalized == {
        "name": "ACME",
        "url": ["https://a.example", "https://b.example"],
        "contact": [{"name": "Amy"}, {"name": "Zed"}],
    }


def test_swid(factory_1_4, unsorted_options) -> None:
    swid = Swid(tag_id="acme-app-1.0", name="app", version="", tag_version=1, patch=False, url="bad url")

    assert factory_1_4.make_for_swid().normalize(swid, unsorted_options) == {
        "tagId": "acme-app-1.0",
        "name": "app",
        "tagVersion": 1,
        "patch": False,
    }


def test_lists_follow_the_ordering_option(factory_1_4, sorted_options, unsorted_options) -> None:
    component = Component(
        type="library", name="x",
        hashes={"SHA-512": "c" * 128, "MD5": MD5},
        licenses=[LicenseExpression(expression="MIT"), SpdxLicense(id="Zlib"), NamedLicense(name="B")],
        properties=[Property(name="z", value="1"), Property(name="a", value="2")],
        components=[Component(type="library", name="zeta"), Component(type="library", name="alpha")]
    )
    normalizer = factory_1_4.make_for_component()

    unsorted = normalizer.normalize(component, unsorted_options)
    ordered = normalizer.normalize(component, sorted_options)

    assert [h["alg"] for h in unsorted["hashes"]] == ["SHA-512", "MD5"]
    assert [h["alg"] for h in ordered["hashes"]] == ["MD5", "SHA-512"]
    assert [p["name"] for p in unsorted["properties"]] == ["z", "a"]
    assert [p["name"] for p in ordered["properties"]] == ["a", "z"]
    assert [c["name"] for c in ordered["components"]] == ["alpha", "zeta"]
    assert ordered["licenses"] == [
        {"license": {"name": "B"}},
        {"license": {"id": "Zlib"}},
        {"expression": "MIT"},
    ]


def test_metadata(factory_1_4, unsorted_options) -> None:
    metadata = Metadata(
        timestamp=datetime(2022, 3, 4, 12, 30, tzinfo=timezone(timedelta(hours=2))),
        tools=[Tool(name="scanner")],
        authors=[OrganizationalContact(name="Jo")],
        component=Component(type="application", name="app", version="2.0"),
        supplier=OrganizationalEntity(name="ACME")
    )

    normalized = factory_1_4.make_for_metadata().normalize(metadata, unsorted_options)

    assert normalized == {
        "timestamp": "2022-03-04T10:30:00.000Z",
        "tools": [{"name": "scanner"}],
        "authors": [{"name": "Jo"}],
        "component": {"type": "application", "name": "app", "version": "2.0"},
        "supplier": {"name": "ACME"},
    }


def test_metadata_component_of_unsupported_type_is_omitted(factory_1_4, unsorted_options) -> None:
    metadata = Metadata(component=Component(type="data", name="dataset"))

    assert factory_1_4.make_for_metadata().normalize(metadata, unsorted_options) == {}
