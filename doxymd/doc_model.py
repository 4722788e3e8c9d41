"""Documentation object model handed to the page renderer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class DocMember:
    """One concrete declaration inside an overload group."""

    name: str
    line: int = 0
    brief: str = ""
    details: str = ""
    summary: str = ""
    prototype: str = ""


@dataclass(eq=False)
class DocMemberOverload:
    """All declarations of one compound sharing a display name."""

    name: str
    compound: DocCompound = field(repr=False)
    members: list[DocMember] = field(default_factory=list)
    anchor: str = "#"
    summary: str = ""
    line: int = 0


@dataclass(eq=False)
class DocSection:
    """A titled group of member overloads, e.g. "Public members"."""

    title: str
    member_overloads: list[DocMemberOverload] = field(default_factory=list)
    line: int = 0


@dataclass(frozen=True)
class DocBaseCompound:
    """A base class as shown on the derived class page."""

    name: str
    access: str
    doc_id: str | None = None


@dataclass(eq=False)
class DocCompound:
    """The page-level representation of one class, struct or union."""

    kind: str
    namespace: str
    type_name: str
    doc_id: str
    namespace_alias: str | None = None
    prototype: str = ""
    brief: str = ""
    details: str = ""
    summary: str = ""
    sections: list[DocSection] = field(default_factory=list)
    member_overloads: list[DocMemberOverload] = field(default_factory=list)
    base_compounds: list[DocBaseCompound] = field(default_factory=list)
    file_name: str = ""

    @property
    def display_namespace(self) -> str:
        """Namespace as shown to readers: the alias if one is configured."""
        return self.namespace_alias or self.namespace


@dataclass
class DocModel:
    """All compounds of one documentation set, keyed by document id."""

    compounds: dict[str, DocCompound] = field(default_factory=dict)
