"""Build C++-like declarations and one-line summaries for documentation pages."""

import re

from doxymd.dox_model import DoxBaseRef, DoxMember, DoxParam
from doxymd.markdown import to_markdown

NBSP = "&nbsp;"

_WHITESPACE_RE = re.compile(r"\s+")
# A lone "=" (not part of ==, !=, <=, >=) with its surrounding spaces.
_ASSIGN_RE = re.compile(r"\s*(?<![=!<>])=(?!=)\s*")


def normalize_type(text: str) -> str:
    """Collapse internal whitespace of a rendered type."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def space_defaults(argsstring: str) -> str:
    """Re-space every assignment in an argument string to `` = ``."""
    return _ASSIGN_RE.sub(" = ", argsstring)


def format_template_header(params: tuple[DoxParam, ...]) -> str:
    """Return ``template<...>`` for a template parameter list."""
    rendered = []
    for param in params:
        text = normalize_type(to_markdown(param.type))
        if param.declname and not text.endswith(param.declname):
            text = f"{text} {param.declname}"
        if param.defval is not None:
            default = normalize_type(to_markdown(param.defval))
            if default:
                text += f" = {default}"
        rendered.append(text)
    return f"template<{', '.join(rendered)}>"


def format_member_prototype(member: DoxMember) -> str:
    """Return the pseudo-declaration shown for a member."""
    parts: list[str] = []
    if member.template_params is not None:
        parts.append(format_template_header(member.template_params) + "\n")
    parts.append(f"{member.prot}: ")
    if member.static:
        parts.append("static ")
    if member.virt in ("virtual", "pure-virtual"):
        parts.append("virtual ")
    if member.explicit:
        parts.append("explicit ")
    type_text = normalize_type(to_markdown(member.type))
    if type_text:
        parts.append(type_text)
        if not type_text.endswith(("&", "*")):
            parts.append(" ")
    parts.append(member.name)
    if member.argsstring.strip():
        parts.append(space_defaults(member.argsstring.strip()))
    parts.append(";")
    return "".join(parts)


def format_compound_prototype(
    kind: str,
    type_name: str,
    base_refs: tuple[DoxBaseRef, ...] = (),
    template_params: tuple[DoxParam, ...] | None = None,
) -> str:
    """Return ``class Name`` followed by one line per base class."""
    prototype = f"{kind} {type_name}"
    if template_params is not None:
        prototype = format_template_header(template_params) + "\n" + prototype
    for index, base in enumerate(base_refs):
        separator = "," if index else ":"
        name = base.name.replace("< ", "<").replace(" >", ">")
        prototype += f"\n    {separator} {base.prot} {name}"
    return prototype


def create_summary(brief: str, details: str) -> str:
    """Return the brief, else the first line of the details, else ``&nbsp;``."""
    summary = brief.strip()
    if not summary:
        summary = details.strip().split("\n", 1)[0].strip()
    return summary or NBSP


def lower_first(text: str) -> str:
    """Lower-case a leading capital letter so the text reads as a continuation."""
    if text[:1].isupper():
        return text[0].lower() + text[1:]
    return text
