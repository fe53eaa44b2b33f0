"""Tests for the response shapes.

Each captured payload is parsed into its response shape and serialized back.
"""

import pytest
from pydantic import ValidationError

from knora_v1.models.basic_components import (
    DateValue,
    RichTextValue,
    to_payload,
)
from knora_v1.models.resource_formats import (
    ContextCode,
    Prop,
    PropertyTypesInResourceClassResponse,
    ResourceContextResponse,
    ResourceFullResponse,
    ResourceInfoResponse,
    ResourceLabelSearchResponse,
    ResourcePropertiesResponse,
    ResourceRightsResponse,
    ResourceTypeResponse,
    ResourceTypesInVocabularyResponse,
    VocabularyResponse,
)

PAYLOAD_SHAPES = [
    ("resource_full.json", ResourceFullResponse),
    ("resource_info.json", ResourceInfoResponse),
    ("resource_rights.json", ResourceRightsResponse),
    ("resource_context.json", ResourceContextResponse),
    ("properties.json", ResourcePropertiesResponse),
    ("resourcetype.json", ResourceTypeResponse),
    ("resourcetypes.json", ResourceTypesInVocabularyResponse),
    ("propertylists_restype.json", PropertyTypesInResourceClassResponse),
    ("propertylists_vocabulary.json", PropertyTypesInResourceClassResponse),
    ("vocabularies.json", VocabularyResponse),
    ("search.json", ResourceLabelSearchResponse),
]


@pytest.mark.parametrize("name, shape", PAYLOAD_SHAPES)
def test_payload_survives_round_trip(load_payload, name, shape):
    payload = load_payload(name)
    response = shape.model_validate(payload)
    assert response.ok
    assert to_payload(response) == payload


def test_unknown_fields_are_kept(load_payload):
    payload = load_payload("resource_rights.json")
    payload["debug"] = {"elapsed": 12}

    response = ResourceRightsResponse.model_validate(payload)
    assert to_payload(response)["debug"] == {"elapsed": 12}


def test_missing_required_field_is_rejected(load_payload):
    payload = load_payload("resource_info.json")
    del payload["resource_info"]["restype_id"]

    with pytest.raises(ValidationError):
        ResourceInfoResponse.model_validate(payload)


class TestFullResource:

    @pytest.fixture
    def response(self, load_payload):
        return ResourceFullResponse.model_validate(load_payload("resource_full.json"))

    def test_typed_values(self, response):
        pagenum = response.props["http://www.knora.org/ontology/incunabula#pagenum"]
        assert isinstance(pagenum.values[0], RichTextValue)
        assert pagenum.values[0].utf8str == "a1r, Titelblatt"

        seqnum = response.props["http://www.knora.org/ontology/incunabula#seqnum"]
        assert seqnum.values == [1]

        part_of = response.props["http://www.knora.org/ontology/incunabula#partOf"]
        assert part_of.values == ["http://rdfh.ch/c5058f3a"]

    def test_property_without_values(self, response):
        comment = response.props["http://www.knora.org/ontology/incunabula#page_comment"]
        assert comment.values is None
        assert comment.value_ids is None
        assert comment.rows() == []
        assert "values" not in to_payload(comment)

    def test_link_rows(self, response):
        part_of = response.props["http://www.knora.org/ontology/incunabula#partOf"]
        assert part_of.rows() == [
            {
                "value_restype": "Buch",
                "value_firstprops": "Zeitglöcklein des Lebens und Leidens Christi",
                "value_iconsrcs": "http://localhost:3335/project-icons/incunabula/book.gif",
                "value_ids": "http://rdfh.ch/8a0b1e75/values/3a7b5130-22c2-4400-a794-062b7a3e3436",
                "value_rights": 2,
                "values": "http://rdfh.ch/c5058f3a",
                "comments": "",
            }
        ]

    def test_regions_mix_properties_and_strings(self, response):
        region = response.resinfo.regions[0]
        assert region["res_id"] == "http://rdfh.ch/b6b5ff1eb703"
        color = region["http://www.knora.org/ontology/knora-base#hasColor"]
        assert isinstance(color, Prop)
        assert color.values[0].value == "#ff3333"

    def test_incoming(self, response):
        incoming = response.incoming[0]
        assert incoming.ext_res_id.pid == "http://www.knora.org/ontology/knora-base#isRegionOf"
        assert incoming.resinfo.restype_label == "Region"


def test_absent_optional_value_metadata(load_payload):
    response = ResourcePropertiesResponse.model_validate(load_payload("properties.json"))
    pubdate = response.properties["http://www.knora.org/ontology/incunabula#pubdate"].values[0]

    assert isinstance(pubdate.value, DateValue)
    assert pubdate.value.calendar == "JULIAN"
    assert pubdate.person_id is None
    assert "lastmod" not in to_payload(pubdate)


def test_occurrence_only_for_resource_class(load_payload):
    by_class = PropertyTypesInResourceClassResponse.model_validate(load_payload("propertylists_restype.json"))
    by_vocabulary = PropertyTypesInResourceClassResponse.model_validate(load_payload("propertylists_vocabulary.json"))

    assert by_class.properties[0].occurrence == "1-n"
    assert by_vocabulary.properties[0].occurrence is None
    assert "occurrence" not in to_payload(by_vocabulary.properties[0])


def test_compound_context(load_payload):
    context = ResourceContextResponse.model_validate(load_payload("resource_context.json")).resource_context

    assert context.context is ContextCode.COMPOUND
    assert context.parent_res_id is None
    dependents = context.dependents()
    assert [dependent["res_id"] for dependent in dependents] == ["http://rdfh.ch/8a0b1e75", "http://rdfh.ch/4f11adaf"]
    assert dependents[1]["firstprop"] == "a1v, Titelblatt, Rückseite"
    assert dependents[1]["preview"].nx == 82


def test_error_status_is_not_ok():
    response = ResourceRightsResponse.model_validate({"status": 9, "rights": 0})
    assert not response.ok
