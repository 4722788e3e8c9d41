"""Logic for loading, merging and validating configuration files."""

from pathlib import Path
from typing import Any

import yaml

from doxymd.deep_merge import deep_merge
from doxymd.errors import ParseError

CONFIG_FILENAME = "doxymd.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "output": "docs",
    "prefix": "",
    "index": "index.md",
    "file_patterns": ["*.h", "*.hpp"],
    "compound_kinds": ["class", "struct", "union"],
}

_STRING_FIELDS = ("input", "output", "prefix", "index")
_STRING_LIST_FIELDS = ("projects", "file_patterns", "compound_kinds")
_STRING_MAP_FIELDS = ("sections", "overload_names")
_TYPE_LINK_FIELDS = ("std_type_links", "idl_type_links")
KNOWN_FIELDS = frozenset(
    (*_STRING_FIELDS, *_STRING_LIST_FIELDS, *_STRING_MAP_FIELDS, *_TYPE_LINK_FIELDS)
    + ("namespace_aliases",)
)


def read_config_file(path: Path) -> dict[str, Any]:
    """Read one YAML (or JSON) config file and validate its fields."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        msg = "Cannot read config"
        raise ParseError(msg, path, [str(e)]) from e
    except yaml.YAMLError as e:
        msg = "Malformed config"
        raise ParseError(msg, path, [str(e)]) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = "Invalid config"
        raise ParseError(msg, path, [f"expected a mapping, got {_type_name(raw)}"])
    errors = validate_config(raw)
    if errors:
        msg = "Invalid config"
        raise ParseError(msg, path, errors)
    return raw


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = dict(DEFAULT_CONFIG)
    if path:
        config = deep_merge(config, read_config_file(path))
    return config


def validate_config(raw: dict[str, Any]) -> list[str]:
    """Return one message per field that has the wrong shape."""
    errors: list[str] = []
    for key in raw:
        if key not in KNOWN_FIELDS:
            errors.append(f"{key}: unknown field")

    for key in _STRING_FIELDS:
        if key in raw and not isinstance(raw[key], str):
            errors.append(f"{key}: expected a string, got {_type_name(raw[key])}")
    for key in _STRING_LIST_FIELDS:
        if key in raw:
            errors.extend(_check_string_list(key, raw[key]))
    for key in _STRING_MAP_FIELDS:
        if key in raw:
            errors.extend(_check_string_map(key, raw[key]))

    aliases = raw.get("namespace_aliases")
    if aliases is not None:
        if not isinstance(aliases, dict):
            found = _type_name(aliases)
            errors.append(f"namespace_aliases: expected a mapping, got {found}")
        else:
            for alias, namespaces in aliases.items():
                errors.extend(
                    _check_string_list(f"namespace_aliases.{alias}", namespaces)
                )

    for key in _TYPE_LINK_FIELDS:
        if key in raw:
            errors.extend(_check_type_links(key, raw[key]))
    return errors


def _check_type_links(key: str, value: Any) -> list[str]:
    if not isinstance(value, dict):
        return [f"{key}: expected a mapping, got {_type_name(value)}"]
    errors = []
    for sub in value:
        if sub not in ("link_prefix", "link_map", "operator_map"):
            errors.append(f"{key}.{sub}: unknown field")
    prefix = value.get("link_prefix")
    if prefix is not None and not isinstance(prefix, str):
        errors.append(f"{key}.link_prefix: expected a string, got {_type_name(prefix)}")
    if "link_map" not in value:
        errors.append(f"{key}.link_map: required field is missing")
    else:
        errors.extend(_check_string_map(f"{key}.link_map", value["link_map"]))
    if value.get("operator_map") is not None:
        errors.extend(_check_string_map(f"{key}.operator_map", value["operator_map"]))
    return errors


def _check_string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list):
        return [f"{key}: expected a list of strings, got {_type_name(value)}"]
    return [
        f"{key}[{i}]: expected a string, got {_type_name(item)}"
        for i, item in enumerate(value)
        if not isinstance(item, str)
    ]


def _check_string_map(key: str, value: Any) -> list[str]:
    if not isinstance(value, dict):
        return [f"{key}: expected a mapping, got {_type_name(value)}"]
    return [
        f"{key}.{k}: expected a string, got {_type_name(v)}"
        for k, v in value.items()
        if not isinstance(v, str)
    ]


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return {dict: "mapping", list: "list", str: "string"}.get(
        type(value), type(value).__name__
    )
