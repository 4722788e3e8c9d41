"""Link tables for automatically linked type names."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from doxymd.errors import ConfigurationError

DEFAULT_STD_LINK_PREFIX = "https://en.cppreference.com/w/cpp/"

DEFAULT_STD_LINK_MAP: dict[str, str] = {
    "std::array": "container/array",
    "std::function": "utility/functional/function",
    "std::initializer_list": "utility/initializer_list",
    "std::less": "utility/functional/less",
    "std::map": "container/map",
    "std::optional": "utility/optional",
    "std::pair": "utility/pair",
    "std::shared_ptr": "memory/shared_ptr",
    "std::string": "string/basic_string",
    "std::string_view": "string/basic_string_view",
    "std::tuple": "utility/tuple",
    "std::unique_ptr": "memory/unique_ptr",
    "std::unordered_map": "container/unordered_map",
    "std::variant": "utility/variant",
    "std::vector": "container/vector",
    "std::wstring": "string/basic_string",
    "std::wstring_view": "string/basic_string_view",
}

DEFAULT_STD_OPERATOR_MAP: dict[str, str] = {
    "operator[]": "operator_at",
}


@dataclass(frozen=True)
class TypeLinks:
    """Read-only name to URL table with a shared URL prefix."""

    link_prefix: str = ""
    link_map: Mapping[str, str] = field(default_factory=dict)
    operator_map: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the tables so instances can be shared between runs."""
        object.__setattr__(self, "link_map", MappingProxyType(dict(self.link_map)))
        object.__setattr__(
            self, "operator_map", MappingProxyType(dict(self.operator_map))
        )

    def url_for(self, name: str) -> str | None:
        """Return the full URL for a name, or ``None`` if it is not linked."""
        ref = self.link_map.get(name)
        if ref is None:
            return None
        return self.link_prefix + ref

    @classmethod
    def from_config(cls, raw: Mapping[str, Any] | None, where: str) -> "TypeLinks":
        """Build from a ``{link_prefix, link_map, operator_map}`` config mapping."""
        if not raw:
            return cls()
        link_map = raw.get("link_map") or {}
        operator_map = raw.get("operator_map") or {}
        tables = {"link_map": link_map, "operator_map": operator_map}
        for table_name, table in tables.items():
            bad = [k for k, v in table.items() if not isinstance(v, str)]
            if bad:
                msg = f"{where}.{table_name}: non-string URLs for {', '.join(bad)}"
                raise ConfigurationError(msg)
        return cls(
            link_prefix=str(raw.get("link_prefix") or ""),
            link_map=link_map,
            operator_map=operator_map,
        )


def default_std_type_links() -> TypeLinks:
    """Return the cppreference.com table used when no std links are configured."""
    return TypeLinks(
        link_prefix=DEFAULT_STD_LINK_PREFIX,
        link_map=DEFAULT_STD_LINK_MAP,
        operator_map=DEFAULT_STD_OPERATOR_MAP,
    )
