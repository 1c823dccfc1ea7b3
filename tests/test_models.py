"""Tests for data models."""

import dataclasses

import pytest
from xml_json_converter.models import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    XmlNode,
    from_python,
    to_python,
)


class TestJsonValue:
    """Tests for the JsonValue variants."""

    def test_number_stores_float(self):
        """Test that integers are stored as floats."""
        number = JsonNumber(3)

        assert isinstance(number.value, float)
        assert number == JsonNumber(3.0)
        assert str(number) == "3"

    def test_number_rejects_non_numbers(self):
        """Test validation of JsonNumber values."""
        with pytest.raises(ValueError, match="requires a number"):
            JsonNumber("3")
        with pytest.raises(ValueError, match="requires a number"):
            JsonNumber(True)

    def test_array_items_are_a_tuple(self):
        """Test that arrays copy their items into a tuple."""
        items = [JsonNumber(1)]
        array = JsonArray(items)
        items.append(JsonNumber(2))

        assert array.items == (JsonNumber(1),)
        assert len(array) == 1
        assert array[0] == JsonNumber(1)

    def test_object_copies_members(self):
        """Test that objects own a copy of their members."""
        members = {"a": JSON_NULL}
        obj = JsonObject(members)
        members["b"] = JSON_NULL

        assert list(obj.keys()) == ["a"]
        assert "a" in obj
        assert "b" not in obj

    def test_object_rejects_non_string_keys(self):
        with pytest.raises(ValueError, match="keys must be strings"):
            JsonObject({1: JSON_NULL})

    def test_values_are_frozen(self):
        """Test that values cannot be rebound after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            JsonString("a").value = "b"

    def test_object_members_are_read_only(self):
        """Test that object members cannot be changed in place."""
        obj = JsonObject({"a": JSON_NULL})

        with pytest.raises(TypeError):
            obj.members["k"] = obj
        assert list(obj.keys()) == ["a"]

    def test_values_are_hashable(self):
        """Test that equal trees hash equally, regardless of key order."""
        first = from_python({"a": [1, {"b": None}], "c": "x"})
        second = from_python({"c": "x", "a": [1, {"b": None}]})

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_null_equality(self):
        assert JsonNull() == JSON_NULL
        assert str(JSON_NULL) == "null"
        assert str(JsonBool(False)) == "false"

    def test_from_python(self):
        """Test building a tree from plain Python data."""
        value = from_python({"a": [1, 2.5, None], "b": {"c": True}, "d": "x"})

        assert value == JsonObject({
            "a": JsonArray([JsonNumber(1), JsonNumber(2.5), JSON_NULL]),
            "b": JsonObject({"c": JsonBool(True)}),
            "d": JsonString("x"),
        })

    def test_from_python_rejects_unknown_types(self):
        with pytest.raises(ValueError, match="Unsupported type"):
            from_python({"a": {1, 2}})

    def test_to_python(self):
        """Test that integral numbers come back as ints."""
        data = {"n": [1, 2.5, -3], "s": "x", "b": False, "z": None}

        assert to_python(from_python(data)) == data
        assert isinstance(to_python(JsonNumber(4.0)), int)


class TestXmlNode:
    """Tests for XmlNode class."""

    def test_create_valid_node(self):
        node = XmlNode(tag="a", attributes={"x": "1"}, children=[XmlNode(tag="b")], text="t")

        assert node.tag == "a"
        assert node.attributes == {"x": "1"}
        assert node.children[0].tag == "b"
        assert node.text == "t"

    def test_defaults(self):
        node = XmlNode(tag="a")

        assert node.attributes == {}
        assert node.children == ()
        assert node.text is None
        assert node.is_empty

    def test_empty_tag_rejected(self):
        with pytest.raises(ValueError, match="tag cannot be empty"):
            XmlNode(tag="")

    def test_non_string_attribute_rejected(self):
        with pytest.raises(ValueError, match="must have a string value"):
            XmlNode(tag="a", attributes={"x": 1})

    def test_node_is_frozen(self):
        """Test that a node cannot be changed after construction."""
        node = XmlNode(tag="a", attributes={"x": "1"}, children=[XmlNode(tag="b")])

        with pytest.raises(dataclasses.FrozenInstanceError):
            node.tag = ""
        with pytest.raises(TypeError):
            node.attributes["y"] = "2"
        with pytest.raises(AttributeError):
            node.children.append(node)

    def test_constructor_arguments_are_copied(self):
        """Test that later changes to the input containers do not leak in."""
        attributes = {"x": "1"}
        children = [XmlNode(tag="b")]
        node = XmlNode(tag="a", attributes=attributes, children=children)
        attributes["y"] = "2"
        children.append(XmlNode(tag="c"))

        assert dict(node.attributes) == {"x": "1"}
        assert node.children == (XmlNode(tag="b"),)

    def test_nodes_are_hashable(self):
        first = XmlNode(tag="a", attributes={"x": "1", "y": "2"}, text="t")
        second = XmlNode(tag="a", attributes={"y": "2", "x": "1"}, text="t")

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_non_node_child_rejected(self):
        with pytest.raises(ValueError, match="must be XmlNode"):
            XmlNode(tag="a", children=["b"])

    def test_find_and_iter(self):
        node = XmlNode(tag="r", children=[
            XmlNode(tag="i", text="1"),
            XmlNode(tag="j", children=[XmlNode(tag="k")]),
            XmlNode(tag="i", text="2"),
        ])

        assert node.find("i").text == "1"
        assert node.find("missing") is None
        assert [child.text for child in node.find_all("i")] == ["1", "2"]
        assert [n.tag for n in node.iter()] == ["r", "i", "j", "k", "i"]
