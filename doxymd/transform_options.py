"""Immutable lookup tables injected into the documentation model builder."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from doxymd.load_dox_model import DEFAULT_COMPOUND_KINDS
from doxymd.overload_name import DEFAULT_OVERLOAD_NAMES
from doxymd.section_kinds import DEFAULT_SECTION_KINDS
from doxymd.type_links import TypeLinks, default_std_type_links


@dataclass(frozen=True)
class TransformOptions:
    """Settings for one documentation set."""

    prefix: str = ""
    compound_kinds: tuple[str, ...] = DEFAULT_COMPOUND_KINDS
    namespace_aliases: Mapping[str, str] = field(default_factory=dict)
    section_kinds: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_SECTION_KINDS)
    )
    overload_names: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_OVERLOAD_NAMES)
    )
    std_type_links: TypeLinks = field(default_factory=default_std_type_links)
    idl_type_links: TypeLinks = field(default_factory=TypeLinks)

    def __post_init__(self) -> None:
        """Freeze the mapping tables."""
        for name in ("namespace_aliases", "section_kinds", "overload_names"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "TransformOptions":
        """Build options from a validated project configuration mapping."""
        # Config lists namespaces per alias; lookups go the other way.
        namespace_aliases = {
            namespace: alias
            for alias, namespaces in (config.get("namespace_aliases") or {}).items()
            for namespace in namespaces
        }
        section_kinds = dict(DEFAULT_SECTION_KINDS)
        section_kinds.update(config.get("sections") or {})
        overload_names = dict(DEFAULT_OVERLOAD_NAMES)
        overload_names.update(config.get("overload_names") or {})

        std_raw = config.get("std_type_links")
        std_type_links = (
            TypeLinks.from_config(std_raw, "std_type_links")
            if std_raw is not None
            else default_std_type_links()
        )
        return cls(
            prefix=config.get("prefix") or "",
            compound_kinds=tuple(
                config.get("compound_kinds") or DEFAULT_COMPOUND_KINDS
            ),
            namespace_aliases=namespace_aliases,
            section_kinds=section_kinds,
            overload_names=overload_names,
            std_type_links=std_type_links,
            idl_type_links=TypeLinks.from_config(
                config.get("idl_type_links"), "idl_type_links"
            ),
        )
