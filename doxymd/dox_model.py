"""Typed view over the parsed Doxygen XML (compounds, sections, members)."""

from dataclasses import dataclass, field

from doxymd.dox_node import ElementNode

EMPTY = ElementNode(tag="")


@dataclass(frozen=True)
class DoxParam:
    """A template parameter of a compound or member."""

    type: ElementNode
    declname: str = ""
    defval: ElementNode | None = None


@dataclass(frozen=True)
class DoxBaseRef:
    """A base compound reference (``basecompoundref``)."""

    name: str
    prot: str
    virt: str = "non-virtual"
    refid: str | None = None


@dataclass(frozen=True)
class DoxMember:
    """One ``memberdef`` declaration."""

    id: str
    kind: str
    name: str
    prot: str
    line: int
    file: str = ""
    static: bool = False
    virt: str = "non-virtual"
    explicit: bool = False
    type: ElementNode = EMPTY
    argsstring: str = ""
    template_params: tuple[DoxParam, ...] | None = None
    brief: ElementNode = EMPTY
    detailed: ElementNode = EMPTY


@dataclass(frozen=True)
class DoxSection:
    """A ``sectiondef`` grouping as found in the compound document."""

    kind: str
    header: str = ""
    members: tuple[DoxMember, ...] = ()


@dataclass(frozen=True)
class DoxCompound:
    """One documented class, struct or union."""

    id: str
    kind: str
    name: str
    file: str = ""
    line: int = 0
    base_refs: tuple[DoxBaseRef, ...] = ()
    sections: tuple[DoxSection, ...] = ()
    template_params: tuple[DoxParam, ...] | None = None
    brief: ElementNode = EMPTY
    detailed: ElementNode = EMPTY


@dataclass
class DoxModel:
    """All compounds loaded for one project, keyed by Doxygen id."""

    compounds: dict[str, DoxCompound] = field(default_factory=dict)
