"""Build the documentation object model from loaded Doxygen compounds.

Building runs in two phases. Grouping creates one ``DocCompound`` per class,
struct or union, classifies its sections and groups members into overloads
with anchors. Conversion then renders descriptions, prototypes and summaries;
it needs every compound and overload to exist first so that cross references
between compounds can be resolved.
"""

import logging
from pathlib import PurePosixPath

from doxymd.auto_links import AutoLinker
from doxymd.doc_model import (
    DocBaseCompound,
    DocCompound,
    DocMember,
    DocMemberOverload,
    DocModel,
    DocSection,
)
from doxymd.dox_model import DoxCompound, DoxMember, DoxModel
from doxymd.errors import ConfigurationError
from doxymd.markdown import to_markdown
from doxymd.overload_name import CONSTRUCTOR, DESTRUCTOR, overload_name
from doxymd.prototype import (
    create_summary,
    format_compound_prototype,
    format_member_prototype,
    lower_first,
)
from doxymd.section_kinds import NOT_VISIBLE, USER_DEFINED, classify_section_kind
from doxymd.slugger import Slugger
from doxymd.transform_options import TransformOptions

logger = logging.getLogger(__name__)

OTHER_MEMBERS = "Other members"


def split_compound_name(qualified_name: str) -> tuple[str, str]:
    """Return ``(namespace, type_name)`` with template arguments removed."""
    parts = qualified_name.split("<", 1)[0].strip().split("::")
    return "::".join(parts[:-1]), parts[-1]


def is_deprecated_section(section: DocSection) -> bool:
    """Whether a section holds deprecated members and belongs at the end."""
    return "deprecated" in section.title.lower()


class DocModelBuilder:
    """Turns a ``DoxModel`` into a ``DocModel`` and resolves cross references."""

    def __init__(self, options: TransformOptions) -> None:
        """Create a builder for one documentation set."""
        self.options = options
        self.auto_linker = AutoLinker(options.std_type_links, options.idl_type_links)
        self.doc_model = DocModel()
        self.compound_map: dict[str, DocCompound] = {}  # dox compound id -> doc
        self.member_map: dict[str, DocMemberOverload] = {}  # dox member id -> doc
        self._compound_sources: dict[str, str] = {}  # doc id -> qualified name
        self._members: dict[str, list[tuple[DocMember, DoxMember]]] = {}

    def build(self, dox_model: DoxModel) -> DocModel:
        """Run both phases over every compound of a documented kind."""
        dox_compounds = [
            c
            for c in dox_model.compounds.values()
            if c.kind in self.options.compound_kinds
        ]
        for dox_compound in dox_compounds:
            self.group_compound(dox_compound)
        for dox_compound in dox_compounds:
            self.convert_compound(dox_compound)
        logger.info("Built documentation for %d compounds", len(dox_compounds))
        return self.doc_model

    # LinkResolver

    def resolve_compound_id(self, dox_compound_id: str) -> DocCompound | None:
        """Return the compound documented under a Doxygen compound id."""
        return self.compound_map.get(dox_compound_id)

    def resolve_member_id(
        self, dox_member_id: str
    ) -> tuple[DocCompound | None, DocMemberOverload | None]:
        """Return the compound and overload documenting a Doxygen member id."""
        overload = self.member_map.get(dox_member_id)
        if overload is None:
            return None, None
        return overload.compound, overload

    # Grouping phase

    def group_compound(self, dox_compound: DoxCompound) -> DocCompound:
        """Create the compound with its sections, overloads and anchors."""
        logger.debug("Grouping %s", dox_compound.name)
        compound = self._create_compound(dox_compound)
        members: list[tuple[DocMember, DoxMember]] = []
        self._members[dox_compound.id] = members

        sections: dict[str, DocSection] = {}
        overloads: dict[str, DocMemberOverload] = {}
        for dox_section in dox_compound.sections:
            title = classify_section_kind(dox_section.kind, self.options.section_kinds)
            if title == NOT_VISIBLE:
                continue
            if title == USER_DEFINED:
                title = dox_section.header or OTHER_MEMBERS
            section = sections.get(title)
            if section is None:
                section = sections[title] = DocSection(title=title)

            for dox_member in dox_section.members:
                member = DocMember(name=dox_member.name, line=dox_member.line)
                name = overload_name(
                    dox_member.name, compound.type_name, self.options.overload_names
                )
                overload = overloads.get(name)
                if overload is None:
                    overload = DocMemberOverload(
                        name=name, compound=compound, line=member.line
                    )
                    overloads[name] = overload
                    compound.member_overloads.append(overload)
                    section.member_overloads.append(overload)
                overload.members.append(member)
                overload.line = min(overload.line, member.line)
                self.member_map[dox_member.id] = overload
                members.append((member, dox_member))

        self._order(compound, list(sections.values()))
        return compound

    def _create_compound(self, dox_compound: DoxCompound) -> DocCompound:
        """Derive names and the document id, and register the compound."""
        namespace, type_name = split_compound_name(dox_compound.name)
        doc_id = f"{self.options.prefix}{type_name.lower()}"
        if doc_id in self.doc_model.compounds:
            first = self._compound_sources[doc_id]
            msg = (
                f"Document id '{doc_id}' is used by both "
                f"{first} and {dox_compound.name}"
            )
            if "<" in first or "<" in dox_compound.name:
                msg += (
                    "; Doxygen documents each template specialization as a "
                    "separate compound"
                )
            raise ConfigurationError(msg)

        compound = DocCompound(
            kind=dox_compound.kind,
            namespace=namespace,
            type_name=type_name,
            doc_id=doc_id,
            namespace_alias=self.options.namespace_aliases.get(namespace),
            file_name=PurePosixPath(dox_compound.file.replace("\\", "/")).name,
        )
        self.doc_model.compounds[doc_id] = compound
        self.compound_map[dox_compound.id] = compound
        self._compound_sources[doc_id] = dox_compound.name
        return compound

    def _order(self, compound: DocCompound, sections: list[DocSection]) -> None:
        """Sort members, overloads and sections, then assign anchors."""
        for section in sections:
            for overload in section.member_overloads:
                overload.members.sort(key=lambda m: m.line)
            section.member_overloads.sort(key=lambda o: o.line)
            if section.member_overloads:
                section.line = min(o.line for o in section.member_overloads)

        visible = [s for s in sections if s.member_overloads]
        visible.sort(key=lambda s: (is_deprecated_section(s), s.line))
        compound.sections = visible

        compound.member_overloads.sort(key=lambda o: o.name)
        slugger = Slugger()
        for overload in compound.member_overloads:
            overload.anchor = "#" + slugger.slug(overload.name)

    # Conversion phase

    def convert_compound(self, dox_compound: DoxCompound) -> None:
        """Fill in Markdown descriptions, prototypes and summaries."""
        compound = self.compound_map[dox_compound.id]
        compound.brief = to_markdown(dox_compound.brief, self)
        compound.details = to_markdown(dox_compound.detailed, self)
        compound.summary = create_summary(compound.brief, compound.details)
        compound.prototype = format_compound_prototype(
            dox_compound.kind,
            compound.type_name,
            dox_compound.base_refs,
            dox_compound.template_params,
        )
        compound.base_compounds = [
            DocBaseCompound(
                name=base.name.replace("< ", "<").replace(" >", ">"),
                access=base.prot,
                doc_id=self._base_doc_id(base.refid),
            )
            for base in dox_compound.base_refs
        ]

        for member, dox_member in self._members[dox_compound.id]:
            member.brief = to_markdown(dox_member.brief, self)
            member.details = to_markdown(dox_member.detailed, self)
            member.summary = create_summary(member.brief, member.details)
            member.prototype = format_member_prototype(dox_member)

        for overload in compound.member_overloads:
            overload.summary = self._overload_summary(compound, overload)

    def _base_doc_id(self, refid: str | None) -> str | None:
        if not refid:
            return None
        base = self.compound_map.get(refid)
        return base.doc_id if base is not None else None

    @staticmethod
    def _overload_summary(compound: DocCompound, overload: DocMemberOverload) -> str:
        link = f"[`{compound.type_name}`]({compound.doc_id})"
        if overload.name == CONSTRUCTOR:
            return f"constructs the {link}"
        if overload.name == DESTRUCTOR:
            return f"destroys the {link}"
        return lower_first(overload.members[0].summary)
