"""Logic for loading the Doxygen XML index and compound documents."""

import logging
from pathlib import Path

from lxml import etree

from doxymd.dox_model import (
    EMPTY,
    DoxBaseRef,
    DoxCompound,
    DoxMember,
    DoxModel,
    DoxParam,
    DoxSection,
)
from doxymd.dox_node import ElementNode, element_text, from_xml
from doxymd.errors import ParseError

logger = logging.getLogger(__name__)

DEFAULT_COMPOUND_KINDS = ("class", "struct", "union")


def parse_xml_file(path: Path) -> ElementNode:
    """Read and parse one XML file into an ``ElementNode`` tree."""
    try:
        tree = etree.parse(str(path))
    except OSError as e:
        msg = "Cannot read XML file"
        raise ParseError(msg, path, [str(e)]) from e
    except etree.XMLSyntaxError as e:
        msg = "Malformed XML"
        raise ParseError(msg, path, [str(e)]) from e
    return from_xml(tree.getroot())


def load_index(path: Path) -> list[tuple[str, str, str]]:
    """Return ``(refid, kind, name)`` for every compound listed in ``index.xml``."""
    root = parse_xml_file(path)
    if root.tag != "doxygenindex":
        msg = "Unexpected index document"
        found = f"root element is <{root.tag}>, expected <doxygenindex>"
        raise ParseError(msg, path, [found])

    entries: list[tuple[str, str, str]] = []
    errors: list[str] = []
    for i, compound in enumerate(root.elements("compound")):
        refid = compound.get("refid")
        kind = compound.get("kind")
        if not refid:
            errors.append(f"compound[{i}]: missing 'refid' attribute")
        if not kind:
            errors.append(f"compound[{i}]: missing 'kind' attribute")
        if refid and kind:
            entries.append((refid, kind, element_text(compound.first("name"))))
    if errors:
        msg = "Invalid index document"
        raise ParseError(msg, path, errors)
    return entries


def load_compound(path: Path) -> DoxCompound:
    """Load one compound document (``<refid>.xml``)."""
    root = parse_xml_file(path)
    if root.tag != "doxygen":
        msg = "Unexpected compound document"
        found = f"root element is <{root.tag}>, expected <doxygen>"
        raise ParseError(msg, path, [found])
    compound_def = root.first("compounddef")
    if compound_def is None:
        msg = "Invalid compound document"
        raise ParseError(msg, path, ["missing <compounddef>"])

    errors: list[str] = []
    compound = _parse_compound_def(compound_def, errors)
    if errors:
        msg = "Invalid compound document"
        raise ParseError(msg, path, errors)
    return compound


def load_dox_model(
    xml_dir: Path,
    compound_kinds: tuple[str, ...] | list[str] = DEFAULT_COMPOUND_KINDS,
) -> DoxModel:
    """Load ``index.xml`` and every compound of the requested kinds."""
    index_path = xml_dir / "index.xml"
    logger.info("Loading index %s", index_path)
    model = DoxModel()
    for refid, kind, name in load_index(index_path):
        if kind not in compound_kinds:
            continue
        compound_path = xml_dir / f"{refid}.xml"
        logger.debug("Loading compound %s (%s)", name or refid, compound_path)
        compound = load_compound(compound_path)
        model.compounds[compound.id] = compound
    logger.info("Loaded %d compounds from %s", len(model.compounds), xml_dir)
    return model


def _parse_compound_def(node: ElementNode, errors: list[str]) -> DoxCompound:
    """Convert a ``compounddef`` element, appending any shape problems to errors."""
    compound_id = node.get("id")
    if not compound_id:
        errors.append("compounddef: missing 'id' attribute")
    name = element_text(node.first("compoundname"))
    if not name:
        errors.append(f"compounddef {compound_id}: missing <compoundname>")

    file, line = _parse_location(
        node, f"compounddef {compound_id}", errors, required=False
    )

    base_refs = tuple(
        DoxBaseRef(
            name=element_text(base),
            prot=base.get("prot", "public"),
            virt=base.get("virt", "non-virtual"),
            refid=base.get("refid") or None,
        )
        for base in node.elements("basecompoundref")
    )

    sections = tuple(
        _parse_section(section, f"{name or compound_id}/sectiondef[{i}]", errors)
        for i, section in enumerate(node.elements("sectiondef"))
    )

    return DoxCompound(
        id=compound_id,
        kind=node.get("kind"),
        name=name,
        file=file,
        line=line,
        base_refs=base_refs,
        sections=sections,
        template_params=_parse_template_params(node.first("templateparamlist")),
        brief=node.first("briefdescription") or EMPTY,
        detailed=node.first("detaileddescription") or EMPTY,
    )


def _parse_section(node: ElementNode, where: str, errors: list[str]) -> DoxSection:
    """Convert a ``sectiondef`` element."""
    kind = node.get("kind")
    if not kind:
        errors.append(f"{where}: missing 'kind' attribute")
    members = tuple(
        _parse_member(member, f"{where}/memberdef[{i}]", errors)
        for i, member in enumerate(node.elements("memberdef"))
    )
    return DoxSection(
        kind=kind, header=element_text(node.first("header")), members=members
    )


def _parse_member(node: ElementNode, where: str, errors: list[str]) -> DoxMember:
    """Convert a ``memberdef`` element."""
    name = element_text(node.first("name"))
    if not name:
        errors.append(f"{where}: missing <name>")
    else:
        where = f"{where} ({name})"
    file, line = _parse_location(node, where, errors, required=True)
    return DoxMember(
        id=node.get("id"),
        kind=node.get("kind"),
        name=name,
        prot=node.get("prot", "public"),
        line=line,
        file=file,
        static=node.get("static") == "yes",
        virt=node.get("virt", "non-virtual"),
        explicit=node.get("explicit") == "yes",
        type=node.first("type") or EMPTY,
        argsstring=element_text(node.first("argsstring")),
        template_params=_parse_template_params(node.first("templateparamlist")),
        brief=node.first("briefdescription") or EMPTY,
        detailed=node.first("detaileddescription") or EMPTY,
    )


def _parse_template_params(node: ElementNode | None) -> tuple[DoxParam, ...] | None:
    """Convert a ``templateparamlist``; ``None`` for non-template declarations."""
    if node is None:
        return None
    return tuple(
        DoxParam(
            type=param.first("type") or EMPTY,
            declname=element_text(param.first("declname")),
            defval=param.first("defval"),
        )
        for param in node.elements("param")
    )


def _parse_location(
    node: ElementNode,
    where: str,
    errors: list[str],
    *,
    required: bool,
) -> tuple[str, int]:
    """Return ``(file, line)`` from a ``location`` child."""
    location = node.first("location")
    if location is None:
        if required:
            errors.append(f"{where}: missing <location>")
        return "", 0
    raw_line = location.get("line", "0")
    try:
        line = int(raw_line)
    except ValueError:
        errors.append(f"{where}: location line {raw_line!r} is not an integer")
        line = 0
    return location.get("file"), line
