"""Helpers shared by the doxymd tests."""

from __future__ import annotations

from pathlib import Path

from lxml import etree

from doxymd.auto_links import AutoLinker
from doxymd.doc_model import DocCompound, DocMemberOverload
from doxymd.dox_node import ElementNode, from_xml
from doxymd.type_links import default_std_type_links


def xml_node(xml: str) -> ElementNode:
    """Parse an XML fragment into an ``ElementNode``."""
    return from_xml(etree.fromstring(xml))


class FakeResolver:
    """Resolves a fixed set of compound and member ids."""

    def __init__(self) -> None:
        """Register one compound ``Foo`` with one overload ``bar``."""
        self.auto_linker = AutoLinker(default_std_type_links())
        self.foo = DocCompound(
            kind="class", namespace="ns", type_name="Foo", doc_id="foo"
        )
        self.bar = DocMemberOverload(name="bar", compound=self.foo, anchor="#bar")

    def resolve_compound_id(self, dox_compound_id: str) -> DocCompound | None:
        return self.foo if dox_compound_id == "classns_1_1Foo" else None

    def resolve_member_id(
        self, dox_member_id: str
    ) -> tuple[DocCompound | None, DocMemberOverload | None]:
        if dox_member_id == "classns_1_1Foo_1abar":
            return self.foo, self.bar
        return None, None


INDEX_XML = """<?xml version='1.0' encoding='UTF-8' standalone='no'?>
<doxygenindex version="1.9.1">
  <compound refid="classwidgets_1_1Widget" kind="class"><name>widgets::Widget</name>
    <member refid="classwidgets_1_1Widget_1actor" kind="function"><name>Widget</name></member>
  </compound>
  <compound refid="structwidgets_1_1Base" kind="struct"><name>widgets::Base</name>
  </compound>
  <compound refid="namespacewidgets" kind="namespace"><name>widgets</name>
  </compound>
  <compound refid="widget_8h" kind="file"><name>widget.h</name>
  </compound>
</doxygenindex>
"""

WIDGET_XML = """<?xml version='1.0' encoding='UTF-8' standalone='no'?>
<doxygen version="1.9.1">
  <compounddef id="classwidgets_1_1Widget" kind="class" language="C++" prot="public">
    <compoundname>widgets::Widget</compoundname>
    <basecompoundref refid="structwidgets_1_1Base" prot="public" virt="non-virtual">widgets::Base</basecompoundref>
    <sectiondef kind="user-defined">
      <header>Deprecated members</header>
      <memberdef kind="function" id="classwidgets_1_1Widget_1aold" prot="public" static="no" virt="non-virtual">
        <type>void</type>
        <argsstring>()</argsstring>
        <name>old</name>
        <briefdescription><para>Does the old thing.</para></briefdescription>
        <detaileddescription></detaileddescription>
        <location file="include/widget.h" line="5"/>
      </memberdef>
    </sectiondef>
    <sectiondef kind="public-func">
      <memberdef kind="function" id="classwidgets_1_1Widget_1actor" prot="public" static="no" explicit="yes" virt="non-virtual">
        <type></type>
        <argsstring>(int size=0)</argsstring>
        <name>Widget</name>
        <briefdescription><para>Creates a widget.</para></briefdescription>
        <detaileddescription></detaileddescription>
        <location file="include/widget.h" line="10"/>
      </memberdef>
      <memberdef kind="function" id="classwidgets_1_1Widget_1aresize1" prot="public" static="no" virt="virtual">
        <type>void</type>
        <argsstring>(int size)</argsstring>
        <name>resize</name>
        <briefdescription><para>Resizes the widget.</para></briefdescription>
        <detaileddescription><para>See <ref refid="classwidgets_1_1Widget_1asize" kindref="member">size</ref>.</para></detaileddescription>
        <location file="include/widget.h" line="16"/>
      </memberdef>
      <memberdef kind="function" id="classwidgets_1_1Widget_1asize" prot="public" static="no" virt="non-virtual">
        <type>int</type>
        <argsstring>() const</argsstring>
        <name>size</name>
        <briefdescription><para>Returns the size.</para></briefdescription>
        <detaileddescription></detaileddescription>
        <location file="include/widget.h" line="20"/>
      </memberdef>
      <memberdef kind="function" id="classwidgets_1_1Widget_1aresize2" prot="public" static="no" virt="non-virtual">
        <type>void</type>
        <argsstring>(int width, int height)</argsstring>
        <name>resize</name>
        <briefdescription></briefdescription>
        <detaileddescription><para>Resizes to a rectangle.</para></detaileddescription>
        <location file="include/widget.h" line="30"/>
      </memberdef>
    </sectiondef>
    <sectiondef kind="private-attrib">
      <memberdef kind="variable" id="classwidgets_1_1Widget_1asize_" prot="private" static="no">
        <type>int</type>
        <name>size_</name>
        <briefdescription></briefdescription>
        <detaileddescription></detaileddescription>
        <location file="include/widget.h" line="40"/>
      </memberdef>
    </sectiondef>
    <briefdescription><para>A widget.</para></briefdescription>
    <detaileddescription><para>Holds a std::vector&lt;int&gt;.</para></detaileddescription>
    <location file="include/widget.h" line="8"/>
  </compounddef>
</doxygen>
"""

BASE_XML = """<?xml version='1.0' encoding='UTF-8' standalone='no'?>
<doxygen version="1.9.1">
  <compounddef id="structwidgets_1_1Base" kind="struct" language="C++" prot="public">
    <compoundname>widgets::Base</compoundname>
    <sectiondef kind="public-func">
      <memberdef kind="function" id="structwidgets_1_1Base_1adtor" prot="public" static="no" virt="virtual">
        <type></type>
        <argsstring>()</argsstring>
        <name>~Base</name>
        <briefdescription></briefdescription>
        <detaileddescription></detaileddescription>
        <location file="include/base.h" line="3"/>
      </memberdef>
    </sectiondef>
    <briefdescription></briefdescription>
    <detaileddescription><para>Base of all widgets.</para></detaileddescription>
    <location file="include/base.h" line="1"/>
  </compounddef>
</doxygen>
"""


def write_doxygen_xml(xml_dir: Path) -> Path:
    """Write a small Doxygen XML output with a class and its base struct."""
    xml_dir.mkdir(parents=True, exist_ok=True)
    (xml_dir / "index.xml").write_text(INDEX_XML, encoding="utf-8")
    (xml_dir / "classwidgets_1_1Widget.xml").write_text(WIDGET_XML, encoding="utf-8")
    (xml_dir / "structwidgets_1_1Base.xml").write_text(BASE_XML, encoding="utf-8")
    return xml_dir
