"""Tests for automatic linking of std and IDL type names."""

from doxymd.auto_links import AutoLinker, template_args_end
from doxymd.type_links import TypeLinks, default_std_type_links

CPPREF = "https://en.cppreference.com/w/cpp/"


def std_linker() -> AutoLinker:
    return AutoLinker(default_std_type_links())


def test_template_args_end_tracks_depth() -> None:
    """Verify balanced matching of nested template arguments."""
    assert template_args_end("<a<b>>c", 0) == 6
    assert template_args_end("<a<b>", 0) is None
    assert template_args_end("abc", 0) is None


def test_std_type_with_template_args() -> None:
    """Verify that template arguments stay outside the link."""
    assert std_linker().apply("std::vector<int>") == (
        f"[`std::vector`]({CPPREF}container/vector)`<int>`"
    )


def test_std_type_without_template_args() -> None:
    """Verify that a bare std type name is linked as a whole."""
    assert std_linker().apply("a std::string value") == (
        f"a [`std::string`]({CPPREF}string/basic_string) value"
    )


def test_std_member_suffix_links_member_page() -> None:
    """Verify that ``::member()`` suffixes link to the member page."""
    assert std_linker().apply("std::map::at()") == (
        f"[`std::map::at()`]({CPPREF}container/map/at)"
    )


def test_std_operator_suffix_after_template_args() -> None:
    """Verify that ``operator[]`` uses the operator table."""
    assert std_linker().apply("std::vector<int>::operator[]") == (
        f"[`std::vector`]({CPPREF}container/vector)`<int>`"
        f"[`::operator[]`]({CPPREF}container/vector/operator_at)"
    )


def test_nested_std_types_are_consumed_by_outer_link() -> None:
    """Verify that std names inside template arguments are not linked again."""
    assert std_linker().apply("std::map<std::string, std::vector<int>> m") == (
        f"[`std::map`]({CPPREF}container/map)`<std::string, std::vector<int>>` m"
    )


def test_unknown_and_qualified_names_are_left_alone() -> None:
    """Verify that only known names not preceded by a qualifier are linked."""
    linker = std_linker()
    assert linker.apply("std::foo") == "std::foo"
    assert linker.apply("mystd::vector") == "mystd::vector"
    assert linker.apply("::std::vector") == "::std::vector"


def test_existing_links_and_code_spans_are_protected() -> None:
    """Verify that text inside links and code spans is not rewritten."""
    text = "`std::vector` and [std::string](https://example.org)"
    assert std_linker().apply(text) == text


def test_idl_types_are_linked() -> None:
    """Verify that IDL type names and member suffixes are linked."""
    idl = TypeLinks(
        link_prefix="https://docs.example.org/",
        link_map={"IJSValueWriter": "ijsvaluewriter"},
    )
    linker = AutoLinker(idl_links=idl)
    assert linker.apply("use IJSValueWriter::WriteString() now") == (
        "use [`IJSValueWriter::WriteString()`]"
        "(https://docs.example.org/ijsvaluewriter) now"
    )
    assert linker.apply("IJSValueReader") == "IJSValueReader"
