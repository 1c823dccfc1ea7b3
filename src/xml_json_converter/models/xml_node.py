"""XML element model."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class XmlNode:
    """
    Represents one XML element.

    A node owns its attributes, its children and the text found directly
    inside it (child markup excluded, runs concatenated in document order).
    Nodes are immutable: attributes are a read-only mapping and children a
    tuple, both copied on construction.
    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["XmlNode", ...] = ()
    text: Optional[str] = None

    def __post_init__(self):
        """Validate node after initialization."""
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))
        self._validate()

    def __hash__(self) -> int:
        return hash((self.tag, frozenset(self.attributes.items()), self.children, self.text))

    def _validate(self) -> None:
        if not self.tag:
            raise ValueError("tag cannot be empty")

        for key, value in self.attributes.items():
            if not key:
                raise ValueError("attribute names cannot be empty")
            if not isinstance(value, str):
                raise ValueError(f"attribute {key!r} must have a string value")

        for child in self.children:
            if not isinstance(child, XmlNode):
                raise ValueError(f"children must be XmlNode instances, got {type(child).__name__}")

    @property
    def is_empty(self) -> bool:
        """True when the node has no attributes, no children and no text."""
        return not self.attributes and not self.children and not self.text

    def find(self, tag: str) -> Optional["XmlNode"]:
        """Return the first direct child with the given tag, if any."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def find_all(self, tag: str) -> List["XmlNode"]:
        """Return all direct children with the given tag, in document order."""
        return [child for child in self.children if child.tag == tag]

    def iter(self) -> Iterator["XmlNode"]:
        """Depth-first pre-order walk of this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()
