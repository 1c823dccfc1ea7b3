"""XML serialization of XmlNode trees."""

from typing import List

from ..models import XmlNode


def escape_xml(value: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for text and attribute values."""
    return (value.replace("&", "&amp;")
                 .replace("<", "&lt;")
                 .replace(">", "&gt;")
                 .replace('"', "&quot;"))


class XMLWriter:
    """
    Writes XmlNode trees as compact XML text.

    Attributes are written in insertion order and a node's text precedes its
    children. Nodes with no attributes, children or text become ``<tag/>``.
    """

    def write(self, node: XmlNode) -> str:
        parts: List[str] = []
        self._write_node(node, parts)
        return "".join(parts)

    def _write_node(self, node: XmlNode, parts: List[str]) -> None:
        if node.is_empty:
            parts.append(f"<{node.tag}/>")
            return

        parts.append(f"<{node.tag}")
        for name, value in node.attributes.items():
            parts.append(f' {name}="{escape_xml(value)}"')
        parts.append(">")

        if node.text:
            parts.append(escape_xml(node.text))
        for child in node.children:
            self._write_node(child, parts)

        parts.append(f"</{node.tag}>")


def to_xml_string(node: XmlNode) -> str:
    """Serialize an XmlNode tree to XML text."""
    return XMLWriter().write(node)
