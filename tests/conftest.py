"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def person_xml():
    """Simple element tree with coercible leaf text."""
    return "<person><name>John Doe</name><age>30</age></person>"


@pytest.fixture
def person_json():
    """JSON counterpart of person_xml."""
    return '{"person":{"name":"John Doe","age":30}}'


@pytest.fixture
def catalog_xml():
    """XML with attributes, repeated siblings, mixed text and entities."""
    return """
    <catalog version="2" xml:lang='en'>
        <book id="b1" available="true">
            <title>Tom &amp; Jerry</title>
            <price>9.99</price>
            <tags><tag>cartoon</tag><tag>classic</tag></tags>
        </book>
        <book id="b2">
            <title>A &lt;Short&gt; Story</title>
            <price>12</price>
            <note>Signed <b>first</b> edition</note>
        </book>
        <empty/>
    </catalog>
    """


@pytest.fixture
def sample_json():
    """JSON document exercising every value variant."""
    return """
    {
        "name": "Widget \\"Pro\\"",
        "count": 3,
        "ratio": -0.25,
        "big": 1.5e10,
        "active": true,
        "retired": false,
        "owner": null,
        "tags": ["a", "b\\nc", []],
        "dimensions": {"w": 10, "h": 2.5, "unit": "cm"},
        "empty": {}
    }
    """
