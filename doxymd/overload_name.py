"""Readable grouping keys for member overloads."""

from collections.abc import Mapping

CONSTRUCTOR = "(constructor)"
DESTRUCTOR = "(destructor)"

DEFAULT_OVERLOAD_NAMES: dict[str, str] = {
    "operator=": "assignment operator=",
    "operator==": "equal operator==",
    "operator!=": "not equal operator!=",
    "operator[]": "subscript operator[]",
}


def overload_name(
    member_name: str,
    type_name: str,
    renames: Mapping[str, str] = DEFAULT_OVERLOAD_NAMES,
) -> str:
    """Return the key under which a member is grouped with its overloads."""
    if member_name == type_name:
        return CONSTRUCTOR
    if member_name == f"~{type_name}":
        return DESTRUCTOR
    return renames.get(member_name, member_name)
