"""Ordered node model for Doxygen description markup.

Doxygen descriptions interleave text and inline markup, e.g.
``call <computeroutput>foo()</computeroutput> for details``. The nodes keep
character data as first-class children so the order survives conversion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from lxml import etree

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class TextNode:
    """Character data between (or inside) elements."""

    text: str


@dataclass(frozen=True)
class ElementNode:
    """A tagged element with attributes and ordered children."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: tuple[DoxNode, ...] = ()

    def get(self, name: str, default: str = "") -> str:
        """Return an attribute value."""
        return self.attrs.get(name, default)

    def elements(self, tag: str | None = None) -> Iterator[ElementNode]:
        """Iterate child elements, optionally only those with the given tag."""
        for child in self.children:
            if isinstance(child, ElementNode) and (tag is None or child.tag == tag):
                yield child

    def first(self, tag: str) -> ElementNode | None:
        """Return the first child element with the given tag."""
        return next(self.elements(tag), None)

    def text_content(self) -> str:
        """Concatenate all descendant text in document order."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.text)
            else:
                parts.append(child.text_content())
        return "".join(parts)


DoxNode = Union[TextNode, ElementNode]


def from_xml(element: etree._Element) -> ElementNode:
    """Convert an lxml element into an ``ElementNode`` tree."""
    children: list[DoxNode] = []
    if element.text:
        children.append(TextNode(element.text))
    for child in element:
        # Comments and processing instructions have non-string tags.
        if isinstance(child.tag, str):
            children.append(from_xml(child))
        if child.tail:
            children.append(TextNode(child.tail))
    return ElementNode(
        tag=etree.QName(element).localname,
        attrs={str(k): str(v) for k, v in element.attrib.items()},
        children=tuple(children),
    )


def element_text(node: ElementNode | None) -> str:
    """Return the stripped text content of an optional element."""
    if node is None:
        return ""
    return node.text_content().strip()
