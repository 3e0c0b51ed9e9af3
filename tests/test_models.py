import json

from xml_property_store.models import PropertiesDocument


def test_counts_and_defaults():
    doc = PropertiesDocument()
    assert doc.property_count == 0
    assert doc.option_list_count == 0
    assert doc.source is None

    doc.properties["A"] = "1"
    doc.option_lists["B"] = ["x", "y"]
    assert doc.property_count == 1
    assert doc.option_list_count == 1


def test_to_dict_is_json_ready_and_detached():
    doc = PropertiesDocument(
        properties={"MY_STRING": "Hello, World"},
        option_lists={"MY_STRING_OPTIONS": ["January", "February"]},
        source="valid_test_properties.xml",
    )

    payload = doc.to_dict()
    payload["option_lists"]["MY_STRING_OPTIONS"].append("March")

    assert doc.option_lists["MY_STRING_OPTIONS"] == ["January", "February"]
    assert json.loads(json.dumps(doc.to_dict())) == {
        "source": "valid_test_properties.xml",
        "properties": {"MY_STRING": "Hello, World"},
        "option_lists": {"MY_STRING_OPTIONS": ["January", "February"]},
    }
