"""Interface used by the Markdown renderer to resolve Doxygen references."""

from typing import Protocol

from doxymd.auto_links import AutoLinker
from doxymd.doc_model import DocCompound, DocMemberOverload


class LinkResolver(Protocol):
    """Maps Doxygen ids to documentation pages and anchors."""

    auto_linker: AutoLinker

    def resolve_compound_id(self, dox_compound_id: str) -> DocCompound | None:
        """Return the compound documented under a Doxygen compound id."""
        ...

    def resolve_member_id(
        self, dox_member_id: str
    ) -> tuple[DocCompound | None, DocMemberOverload | None]:
        """Return the compound and overload documenting a Doxygen member id."""
        ...
