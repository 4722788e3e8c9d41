"""Logic for rendering compound (class, struct, union) pages."""

from doxymd.doc_model import DocCompound, DocMemberOverload, DocSection
from doxymd.md_codeblock import md_codeblock
from doxymd.md_table import md_table


def render_compound_page(compound: DocCompound) -> str:
    """Render a compound page in Markdown with Docusaurus front matter."""
    parts = [
        "---",
        f"id: {compound.doc_id}",
        f"title: {compound.type_name}",
        "---",
        "",
    ]
    parts.extend(_render_metadata(compound))

    if compound.brief:
        parts += [compound.brief, ""]
    parts += [md_codeblock("cpp", compound.prototype), ""]
    if compound.details:
        parts += [compound.details, ""]

    parts.extend(_render_base_compounds(compound))
    for section in compound.sections:
        parts.extend(_render_section_summary(section))

    if compound.member_overloads:
        parts += ["## Member details", ""]
        for overload in compound.member_overloads:
            parts.extend(_render_overload(overload))

    return "\n".join(parts).rstrip() + "\n"


def _render_metadata(compound: DocCompound) -> list[str]:
    """Render kind, namespace and header lines."""
    parts = [f"Kind: `{compound.kind}`", ""]
    if compound.display_namespace:
        parts += [f"Namespace: `{compound.display_namespace}`", ""]
    if compound.file_name:
        parts += [f"Header: `{compound.file_name}`", ""]
    return parts


def _render_base_compounds(compound: DocCompound) -> list[str]:
    """Render the list of base classes."""
    if not compound.base_compounds:
        return []
    parts = ["## Base classes", ""]
    for base in compound.base_compounds:
        name = f"[`{base.name}`]({base.doc_id})" if base.doc_id else f"`{base.name}`"
        parts.append(f"- {base.access} {name}")
    parts.append("")
    return parts


def _render_section_summary(section: DocSection) -> list[str]:
    """Render a section's summary table linking to overload anchors."""
    rows = [
        [f"[`{o.name}`]({o.anchor})", o.summary] for o in section.member_overloads
    ]
    return [f"## {section.title}", "", md_table(["Name", "Description"], rows), ""]


def _render_overload(overload: DocMemberOverload) -> list[str]:
    """Render the detail block of one overload group."""
    parts = [f"### {overload.name} {{{overload.anchor}}}", ""]
    for member in overload.members:
        parts += [md_codeblock("cpp", member.prototype), ""]
        if member.brief:
            parts += [member.brief, ""]
        if member.details:
            parts += [member.details, ""]
    parts += ["---", ""]
    return parts
