#!/usr/bin/env python3
"""
Example usage of the XML/JSON Converter.

Converts a small catalog from XML to JSON and back, then shows how parse
errors are reported.
"""

from xml_json_converter import XMLJSONConverter, parse_json


def main():
    """Main example function."""
    print("XML/JSON Converter Example")
    print("=" * 50)

    catalog = """
    <catalog version="2">
        <book id="b1">
            <title>Tom &amp; Jerry</title>
            <price>9.99</price>
        </book>
        <book id="b2">
            <title>Learning Python</title>
            <price>12</price>
            <note>Signed <b>first</b> edition</note>
        </book>
    </catalog>
    """

    converter = XMLJSONConverter(indent=2)

    result = converter.xml_to_json(catalog)
    if not result.success:
        print("❌ Failed to convert XML")
        for error in result.errors:
            print(f"   Error: {error}")
        return

    print("✅ XML -> JSON")
    print(result.output)

    back = converter.json_to_xml(result.output)
    print("\n✅ JSON -> XML")
    print(back.output)

    summary = converter.profiler.get_performance_summary()
    print(f"\nOperations profiled: {summary['total_operations']}")
    print(f"Total duration: {summary['total_duration']:.4f}s")

    print("\nError reporting:")
    failed = converter.xml_to_json("<a><b></a>")
    for error in failed.errors:
        print(f"   {error}")

    parsed = parse_json('{"price": 01}')
    if not parsed.success:
        error = parsed.error
        print(f"   {error.kind.value} at line {error.line}, column {error.column}")


if __name__ == "__main__":
    main()
