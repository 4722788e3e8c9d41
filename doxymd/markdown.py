"""Convert Doxygen description markup to Markdown.

Descriptions are trees of text and tagged elements (``para``, ``itemizedlist``,
``computeroutput``, ``ref``, ...). Each tag maps to a fixed rewrite rule. The
traversal threads a ``RenderContext`` through every call: the stack of
enclosing list and section elements decides bullet style and heading depth,
the indent level is used for list continuation lines, and the ``no_link``
flag keeps links out of code spans and code blocks.

Unknown tags are logged and their children are rendered unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Union

from doxymd.dox_node import DoxNode, ElementNode, TextNode

if TYPE_CHECKING:
    from doxymd.link_resolver import LinkResolver

logger = logging.getLogger(__name__)

Description = Union[DoxNode, Sequence[DoxNode], None]

PARAMETER_LIST_TITLES = {
    "param": "Parameters",
    "retval": "Return values",
    "exception": "Exceptions",
    "templateparam": "Template parameters",
}


@dataclass
class RenderContext:
    """Traversal state for one rendering run."""

    link_resolver: LinkResolver | None = None
    frames: list[ElementNode] = field(default_factory=list)
    indent: int = 0
    no_link: bool = False
    out: list[str] = field(default_factory=list)

    @property
    def links_enabled(self) -> bool:
        """Whether references and known type names may become links."""
        return self.link_resolver is not None and not self.no_link


def to_markdown(desc: Description, link_resolver: LinkResolver | None = None) -> str:
    """Render a description node (or a list of nodes) as trimmed Markdown."""
    ctx = RenderContext(link_resolver=link_resolver)
    write(ctx, desc)
    return "".join(ctx.out).strip()


def write(ctx: RenderContext, *items: str | Description) -> None:
    """Append strings and rendered nodes to the output in order."""
    for item in items:
        if not item:
            continue
        if isinstance(item, str):
            ctx.out.append(item)
        elif isinstance(item, (TextNode, ElementNode)):
            transform_node(ctx, item, 0)
        else:
            for index, node in enumerate(visible_children(item)):
                transform_node(ctx, node, index)


def visible_children(nodes: Sequence[DoxNode]) -> list[DoxNode]:
    """Drop whitespace-only text nodes that contain no space character."""
    return [
        node
        for node in nodes
        if not isinstance(node, TextNode)
        or (node.text and (node.text.strip() or " " in node.text))
    ]


def transform_node(ctx: RenderContext, node: DoxNode, index: int) -> None:
    """Render one node; ``index`` is its position among visible siblings."""
    if isinstance(node, TextNode):
        write_text(ctx, node.text)
        return
    handler = ELEMENT_HANDLERS.get(node.tag)
    if handler is None:
        logger.warning(
            "Unsupported element <%s>: rendering its content only", node.tag
        )
        write(ctx, node.children)
        return
    handler(ctx, node, index)


def write_text(ctx: RenderContext, text: str) -> None:
    """Write a text run, auto-linking known type names when links are enabled."""
    if not text:
        return
    if not text.strip():
        if " " in text:
            ctx.out.append(" ")
        return
    if ctx.links_enabled and ctx.link_resolver is not None:
        text = ctx.link_resolver.auto_linker.apply(text)
    ctx.out.append(text)


def write_code(ctx: RenderContext, *items: str | Description) -> None:
    """Write items with links suppressed."""
    no_link = ctx.no_link
    ctx.no_link = True
    try:
        write(ctx, *items)
    finally:
        ctx.no_link = no_link


def write_with_frame(
    ctx: RenderContext, element: ElementNode, *items: str | Description
) -> None:
    """Write items with ``element`` pushed onto the context stack."""
    ctx.frames.append(element)
    try:
        write(ctx, *items)
    finally:
        ctx.frames.pop()


def render_nested(ctx: RenderContext, nodes: Description) -> str:
    """Render nodes into a separate trimmed string sharing the link settings."""
    nested = RenderContext(link_resolver=ctx.link_resolver, no_link=ctx.no_link)
    write(nested, nodes)
    return "".join(nested.out).strip()


def remove_last_if(ctx: RenderContext, text: str) -> None:
    """Drop the last written fragment if it equals ``text``."""
    if ctx.out and ctx.out[-1] == text:
        ctx.out.pop()


# -----------------------------
# Element handlers
# -----------------------------


def _children(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write(ctx, el.children)


def _nothing(ctx: RenderContext, el: ElementNode, index: int) -> None:
    pass


def _literal(text: str) -> Callable[[RenderContext, ElementNode, int], None]:
    def handler(ctx: RenderContext, el: ElementNode, index: int) -> None:
        write(ctx, text)

    return handler


def _wrap(before: str, after: str) -> Callable[[RenderContext, ElementNode, int], None]:
    def handler(ctx: RenderContext, el: ElementNode, index: int) -> None:
        write(ctx, before, el.children, after)

    return handler


def _para(ctx: RenderContext, el: ElementNode, index: int) -> None:
    if index:
        write(ctx, "\n\n", " " * ctx.indent)
    write(ctx, el.children)


def _list(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write_with_frame(ctx, el, "\n" if index else "", el.children)


def _listitem(ctx: RenderContext, el: ElementNode, index: int) -> None:
    ordered = bool(ctx.frames) and ctx.frames[-1].tag == "orderedlist"
    bullet = "1. " if ordered else "* "
    write(ctx, "\n" if index else "", " " * ctx.indent, bullet)
    ctx.indent += len(bullet)
    try:
        write(ctx, el.children)
    finally:
        ctx.indent -= len(bullet)


def _parameterlist(ctx: RenderContext, el: ElementNode, index: int) -> None:
    title = PARAMETER_LIST_TITLES.get(el.get("kind"), "Parameters")
    write(ctx, f"\n### {title}\n", el.children, "\n\n")


def _parametername(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write_code(ctx, "`", el.children, "` ")


def _computeroutput(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write_code(ctx, "`", el.children, "`")


def _programlisting(ctx: RenderContext, el: ElementNode, index: int) -> None:
    # Listings from \include or \snippet carry a file name, inline ones ".ext".
    name = PurePosixPath(el.get("filename")).name
    lang = name.rsplit(".", 1)[-1] if "." in name else ""
    lang = lang or "cpp"
    write_code(ctx, f"\n```{lang}\n", el.children, "```\n")


def _preformatted(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write_code(ctx, "\n<pre>", el.children, "</pre>\n")


def _verbatim(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write_code(ctx, "\n```\n", el.text_content().strip("\n"), "\n```\n")


def _simplesect(ctx: RenderContext, el: ElementNode, index: int) -> None:
    kind = el.get("kind")
    if kind == "attention":
        write(ctx, "> ", el.children)
    elif kind == "return":
        write(ctx, "\n### Returns\n", el.children)
    elif kind == "see":
        write(ctx, "**See also**: ", el.children)
    elif kind == "note":
        write(ctx, "> **Note**: ", el.children)
    elif kind == "warning":
        write(ctx, "> **Warning**: ", el.children)
    elif kind == "remark":
        write(ctx, "\n### Remarks\n", el.children)
    else:
        logger.warning(
            "Unsupported simplesect kind '%s': rendering its content only", kind
        )
        write(ctx, el.children)


def _formula(ctx: RenderContext, el: ElementNode, index: int) -> None:
    s = el.text_content().strip()
    if s.startswith("$") and s.endswith("$"):
        write(ctx, s)
        return
    if s.startswith("\\[") and s.endswith("\\]"):
        s = s[2:-2].strip()
    write(ctx, "\n$$\n" + s + "\n$$\n")


def _section(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write_with_frame(ctx, el, "\n\n" if index else "", el.children)


def _title(ctx: RenderContext, el: ElementNode, index: int) -> None:
    level = 0
    if ctx.frames and ctx.frames[-1].tag[-1:].isdigit():
        level = int(ctx.frames[-1].tag[-1])
    write(ctx, "#" * level, " ", el.text_content().strip())


def _heading(ctx: RenderContext, el: ElementNode, index: int) -> None:
    remove_last_if(ctx, " ")
    try:
        level = int(el.get("level", "0"))
    except ValueError:
        level = 0
    write(ctx, "#" * level, " ", el.children)


def _ulink(ctx: RenderContext, el: ElementNode, index: int) -> None:
    text = render_nested(ctx, el.children)
    if ctx.no_link:
        write(ctx, text)
    else:
        write(ctx, "[", text, "](", el.get("url"), ")")


def _ref(ctx: RenderContext, el: ElementNode, index: int) -> None:
    text = to_markdown(el.children)
    resolver = ctx.link_resolver
    if resolver is None or ctx.no_link:
        write(ctx, text)
        return

    refid = el.get("refid")
    kindref = el.get("kindref")
    if kindref == "compound":
        compound = resolver.resolve_compound_id(refid)
        if compound is not None:
            write(ctx, f"[`{text}`]({compound.doc_id})")
            return
    elif kindref == "member":
        compound, overload = resolver.resolve_member_id(refid)
        if compound is not None:
            anchor = overload.anchor if overload is not None else ""
            write(ctx, f"[`{text}`]({compound.doc_id}{anchor})")
            return
    else:
        logger.warning("Unknown kindref '%s' for reference '%s'", kindref, text)
        write(ctx, f"`{text}`")
        return

    logger.warning("Cannot resolve %s reference %s ('%s')", kindref, refid, text)
    write(ctx, f"`{text}`")


def _table(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write(ctx, "\n", el.children, "\n")


def _row(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write(ctx, "\n", escape_row(render_nested(ctx, el.children)))
    entries = list(el.elements("entry"))
    if entries and entries[0].get("thead") == "yes":
        for i in range(len(entries)):
            write(ctx, " | " if i else "\n", "---------")


def _entry(ctx: RenderContext, el: ElementNode, index: int) -> None:
    write(ctx, escape_cell(render_nested(ctx, el.children)), "|")


def escape_row(text: str) -> str:
    """Remove the trailing cell separator of a rendered row."""
    text = text.rstrip()
    if text.endswith("|") and not text.endswith("\\|"):
        text = text[:-1].rstrip()
    return text


def escape_cell(text: str) -> str:
    """Make rendered cell content safe for a single table row."""
    return text.strip("\n").replace("|", "\\|").replace("\n", "<br/>")


ELEMENT_HANDLERS: dict[str, Callable[[RenderContext, ElementNode, int], None]] = {
    "ref": _ref,
    "sp": _literal(" "),
    "nonbreakablespace": _literal("&nbsp;"),
    "ensp": _literal("&ensp;"),
    "emsp": _literal("&emsp;"),
    "thinsp": _literal("&thinsp;"),
    "mdash": _literal("&mdash;"),
    "ndash": _literal("&ndash;"),
    "linebreak": _literal("<br/>"),
    "hruler": _literal("---"),
    "emphasis": _wrap("*", "*"),
    "bold": _wrap("**", "**"),
    "strike": _wrap("~~", "~~"),
    "underline": _wrap("<u>", "</u>"),
    "superscript": _wrap("<sup>", "</sup>"),
    "subscript": _wrap("<sub>", "</sub>"),
    "para": _para,
    "orderedlist": _list,
    "itemizedlist": _list,
    "listitem": _listitem,
    "parameterlist": _parameterlist,
    "parameteritem": _wrap("* ", "\n"),
    "parametername": _parametername,
    "computeroutput": _computeroutput,
    "programlisting": _programlisting,
    "codeline": _wrap("", "\n"),
    "preformatted": _preformatted,
    "verbatim": _verbatim,
    "xrefsect": _wrap("\n> ", ""),
    "xreftitle": _wrap("**", ":** "),
    "simplesect": _simplesect,
    "formula": _formula,
    "sect1": _section,
    "sect2": _section,
    "sect3": _section,
    "sect4": _section,
    "title": _title,
    "heading": _heading,
    "ulink": _ulink,
    "table": _table,
    "row": _row,
    "entry": _entry,
    "anchor": _nothing,
    "highlight": _children,
    "parameterdescription": _children,
    "parameternamelist": _children,
    "xrefdescription": _children,
    "briefdescription": _children,
    "detaileddescription": _children,
    "inbodydescription": _children,
    "description": _children,
    "type": _children,
    "defval": _children,
    # Absent descriptions are represented by an element with an empty tag.
    "": _children,
}
