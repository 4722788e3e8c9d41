"""Tests for loading Doxygen XML into the typed model."""

from pathlib import Path

import pytest

from doc_fixtures import write_doxygen_xml
from doxymd.errors import ParseError
from doxymd.load_dox_model import load_compound, load_dox_model, load_index


def test_load_index_lists_compounds(tmp_path: Path) -> None:
    """Verify that every compound of the index is listed."""
    xml_dir = write_doxygen_xml(tmp_path / "xml")
    entries = load_index(xml_dir / "index.xml")
    assert ("classwidgets_1_1Widget", "class", "widgets::Widget") in entries
    assert len(entries) == 4


def test_load_dox_model_filters_kinds(tmp_path: Path) -> None:
    """Verify that only requested compound kinds are loaded."""
    xml_dir = write_doxygen_xml(tmp_path / "xml")
    model = load_dox_model(xml_dir)
    assert sorted(model.compounds) == [
        "classwidgets_1_1Widget",
        "structwidgets_1_1Base",
    ]
    model = load_dox_model(xml_dir, ("struct",))
    assert list(model.compounds) == ["structwidgets_1_1Base"]


def test_compound_fields(tmp_path: Path) -> None:
    """Verify the fields read from a compound document."""
    xml_dir = write_doxygen_xml(tmp_path / "xml")
    widget = load_compound(xml_dir / "classwidgets_1_1Widget.xml")
    assert widget.kind == "class"
    assert widget.name == "widgets::Widget"
    assert widget.file == "include/widget.h"
    assert widget.line == 8
    assert [b.name for b in widget.base_refs] == ["widgets::Base"]
    assert widget.base_refs[0].refid == "structwidgets_1_1Base"
    assert [s.kind for s in widget.sections] == [
        "user-defined",
        "public-func",
        "private-attrib",
    ]
    assert widget.sections[0].header == "Deprecated members"

    ctor = widget.sections[1].members[0]
    assert ctor.name == "Widget"
    assert ctor.line == 10
    assert ctor.explicit
    assert ctor.argsstring == "(int size=0)"
    assert widget.sections[1].members[1].virt == "virtual"
    assert widget.template_params is None


def test_malformed_xml_raises_parse_error(tmp_path: Path) -> None:
    """Verify that unparsable XML is reported with its path."""
    path = tmp_path / "index.xml"
    path.write_text("<doxygenindex><compound>", encoding="utf-8")
    with pytest.raises(ParseError) as excinfo:
        load_index(path)
    assert excinfo.value.path == path
    assert str(path) in str(excinfo.value)


def test_missing_file_raises_parse_error(tmp_path: Path) -> None:
    """Verify that a missing compound file is a parse error."""
    with pytest.raises(ParseError):
        load_compound(tmp_path / "missing.xml")


def test_wrong_root_element(tmp_path: Path) -> None:
    """Verify that a document with the wrong root is rejected."""
    path = tmp_path / "index.xml"
    path.write_text("<doxygen/>", encoding="utf-8")
    with pytest.raises(ParseError, match="expected <doxygenindex>"):
        load_index(path)


def test_all_member_errors_are_reported(tmp_path: Path) -> None:
    """Verify that every shape problem in a compound is collected."""
    path = tmp_path / "classbad.xml"
    path.write_text(
        '<doxygen><compounddef id="classbad" kind="class">'
        "<compoundname>Bad</compoundname>"
        '<sectiondef kind="public-func">'
        '<memberdef kind="function" id="m1"><location file="a.h" line="1"/>'
        "</memberdef>"
        '<memberdef kind="function" id="m2"><name>f</name>'
        '<location file="a.h" line="x"/></memberdef>'
        "</sectiondef></compounddef></doxygen>",
        encoding="utf-8",
    )
    with pytest.raises(ParseError) as excinfo:
        load_compound(path)
    errors = excinfo.value.errors
    assert len(errors) == 2
    assert "missing <name>" in errors[0]
    assert "'x' is not an integer" in errors[1]
