"""Tests for prototypes and summaries."""

from doc_fixtures import xml_node
from doxymd.dox_model import DoxBaseRef, DoxMember, DoxParam
from doxymd.prototype import (
    create_summary,
    format_compound_prototype,
    format_member_prototype,
    lower_first,
    space_defaults,
)


def member(**kwargs: object) -> DoxMember:
    fields: dict = {"id": "m", "kind": "function", "prot": "public", "line": 1}
    fields.update(kwargs)
    return DoxMember(**fields)


def test_space_defaults() -> None:
    """Verify that only plain assignments are re-spaced."""
    assert space_defaults("(int a=0, bool b =  true)") == "(int a = 0, bool b = true)"
    assert space_defaults("(const T &other) == delete") == (
        "(const T &other) == delete"
    )
    assert space_defaults("()=default") == "() = default"


def test_member_prototype() -> None:
    """Verify access, specifiers, type, name and arguments."""
    proto = format_member_prototype(
        member(
            name="count",
            static=True,
            type=xml_node("<type>std::size_t</type>"),
            argsstring="(int a=0)",
        )
    )
    assert proto == "public: static std::size_t count(int a = 0);"


def test_member_prototype_reference_type() -> None:
    """Verify that no space follows a reference or pointer type."""
    proto = format_member_prototype(
        member(
            name="name",
            virt="pure-virtual",
            type=xml_node("<type>const std::string  &amp;</type>"),
            argsstring="() const =0",
        )
    )
    assert proto == "public: virtual const std::string &name() const = 0;"


def test_member_prototype_with_template() -> None:
    """Verify the template header line."""
    params = (
        DoxParam(type=xml_node("<type>typename T</type>")),
        DoxParam(
            type=xml_node("<type>typename</type>"),
            declname="U",
            defval=xml_node("<defval>int</defval>"),
        ),
    )
    proto = format_member_prototype(
        member(
            name="set",
            prot="protected",
            explicit=True,
            type=xml_node("<type>void</type>"),
            argsstring="(T value)",
            template_params=params,
        )
    )
    assert proto == (
        "template<typename T, typename U = int>\n"
        "protected: explicit void set(T value);"
    )


def test_compound_prototype() -> None:
    """Verify one line per base class."""
    proto = format_compound_prototype(
        "class",
        "Foo",
        (DoxBaseRef("Base< T >", "public"), DoxBaseRef("IOther", "protected")),
    )
    assert proto == "class Foo\n    : public Base<T>\n    , protected IOther"
    assert format_compound_prototype("struct", "Bar") == "struct Bar"


def test_create_summary() -> None:
    """Verify brief, first detail line and placeholder fallbacks."""
    assert create_summary(" Brief. ", "Details.") == "Brief."
    assert create_summary("", "\nFirst line\nSecond line") == "First line"
    assert create_summary("", "") == "&nbsp;"


def test_lower_first() -> None:
    """Verify that only the first letter is lower-cased."""
    assert lower_first("Returns X") == "returns X"
    assert lower_first("`code`") == "`code`"
    assert lower_first("") == ""
