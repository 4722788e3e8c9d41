"""Logic for rendering the index page listing every compound."""

from doxymd.doc_model import DocCompound, DocModel
from doxymd.md_table import md_table


def group_by_namespace(doc_model: DocModel) -> dict[str, list[DocCompound]]:
    """Group compounds by display namespace, both sorted case-insensitively."""
    groups: dict[str, list[DocCompound]] = {}
    for compound in doc_model.compounds.values():
        groups.setdefault(compound.display_namespace, []).append(compound)
    return {
        ns: sorted(groups[ns], key=lambda c: c.type_name.lower())
        for ns in sorted(groups, key=str.lower)
    }


def render_index_page(
    doc_model: DocModel, *, doc_id: str = "index", title: str = "API Reference"
) -> str:
    """Render the index page in Markdown."""
    parts = ["---", f"id: {doc_id}", f"title: {title}", "---", ""]
    for namespace, compounds in group_by_namespace(doc_model).items():
        parts += [f"## {namespace or 'Global namespace'}", ""]
        rows = [
            [f"[`{c.type_name}`]({c.doc_id})", f"`{c.kind}`", c.summary]
            for c in compounds
        ]
        parts += [md_table(["Name", "Kind", "Description"], rows), ""]
    return "\n".join(parts).rstrip() + "\n"
