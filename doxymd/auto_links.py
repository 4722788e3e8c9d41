"""Rewrite known standard library and IDL type names in text as Markdown links."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from doxymd.type_links import TypeLinks

if TYPE_CHECKING:
    from collections.abc import Iterator

# Existing links and code spans are never rewritten again.
PROTECTED_RE = re.compile(r"\[[^\]\n]*\]\([^)\s]*\)|`[^`\n]*`")
STD_NAME_RE = re.compile(r"(?<![\w:])std::\w+")
MEMBER_SUFFIX_RE = re.compile(r"::(?:(operator\[\])|(\w+)\(\))")
IDL_NAME_RE = re.compile(r"\b(\w+)(::\w+(?:\(\))?)?")


def template_args_end(text: str, start: int) -> int | None:
    """Return the index after the ``>`` closing a ``<...>`` span at ``start``."""
    if start >= len(text) or text[start] != "<":
        return None
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "<":
            depth += 1
        elif text[i] == ">":
            depth -= 1
            if depth == 0:
                return i + 1
    return None


class AutoLinker:
    """Links ``std::`` types from one table and IDL-generated types from another."""

    def __init__(
        self,
        std_links: TypeLinks | None = None,
        idl_links: TypeLinks | None = None,
    ) -> None:
        """Create a linker over immutable link tables."""
        self.std_links = std_links or TypeLinks()
        self.idl_links = idl_links or TypeLinks()

    def apply(self, text: str) -> str:
        """Return ``text`` with every recognized type name turned into a link."""
        if not text or not (self.std_links.link_map or self.idl_links.link_map):
            return text
        out: list[str] = []
        pos = 0
        for m in PROTECTED_RE.finditer(text):
            out.append(self._link_plain(text[pos : m.start()]))
            out.append(m.group(0))
            pos = m.end()
        out.append(self._link_plain(text[pos:]))
        return "".join(out)

    def _link_plain(self, text: str) -> str:
        """Run the std pass, then the IDL pass over what the std pass left."""
        out: list[str] = []
        pos = 0
        for start, end, link in self._std_links(text):
            out.append(self._idl_links(text[pos:start]))
            out.append(link)
            pos = end
        out.append(self._idl_links(text[pos:]))
        return "".join(out)

    def _std_links(self, text: str) -> Iterator[tuple[int, int, str]]:
        """Yield ``(start, end, markdown)`` for every linked ``std::`` token."""
        pos = 0
        while m := STD_NAME_RE.search(text, pos):
            name = m.group(0)
            url = self.std_links.url_for(name)
            if url is None:
                pos = m.end()
                continue

            template_end = template_args_end(text, m.end())
            suffix_start = template_end or m.end()
            suffix = MEMBER_SUFFIX_RE.match(text, suffix_start)
            end = suffix.end() if suffix else suffix_start
            member_url = self._member_url(url, suffix) if suffix else url

            if template_end is None:
                link = f"[`{text[m.start() : end]}`]({member_url})"
            else:
                link = f"[`{name}`]({url})`{text[m.end() : template_end]}`"
                if suffix:
                    link += f"[`{suffix.group(0)}`]({member_url})"
            yield m.start(), end, link
            pos = end

    def _member_url(self, url: str, suffix: re.Match[str]) -> str:
        """Return the URL of a ``::member()`` or ``::operator[]`` suffix."""
        operator, member = suffix.group(1), suffix.group(2)
        if operator:
            page = self.std_links.operator_map.get(operator)
            return f"{url}/{page}" if page else url
        return f"{url}/{member}"

    def _idl_links(self, text: str) -> str:
        """Link every identifier found in the IDL table."""
        if not text or not self.idl_links.link_map:
            return text

        def repl(m: re.Match[str]) -> str:
            url = self.idl_links.url_for(m.group(1))
            if url is None:
                return m.group(0)
            return f"[`{m.group(0)}`]({url})"

        return IDL_NAME_RE.sub(repl, text)
