"""Mapping of Doxygen ``sectiondef`` kinds to displayed member sections."""

from collections.abc import Mapping

from doxymd.errors import ConfigurationError

NOT_VISIBLE = "not visible"
USER_DEFINED = "user defined"

PUBLIC_MEMBERS = "Public members"
PROTECTED_MEMBERS = "Protected members"
STANDALONE_MEMBERS = "Standalone members"

# Covers the whole DoxSectionKind vocabulary of Doxygen's compound.xsd.
DEFAULT_SECTION_KINDS: dict[str, str] = {
    "user-defined": USER_DEFINED,
    "public-type": NOT_VISIBLE,
    "public-func": PUBLIC_MEMBERS,
    "public-attrib": PUBLIC_MEMBERS,
    "public-slot": PUBLIC_MEMBERS,
    "signal": PUBLIC_MEMBERS,
    "dcop-func": PUBLIC_MEMBERS,
    "property": PUBLIC_MEMBERS,
    "event": PUBLIC_MEMBERS,
    "public-static-func": PUBLIC_MEMBERS,
    "public-static-attrib": PUBLIC_MEMBERS,
    "protected-type": NOT_VISIBLE,
    "protected-func": PROTECTED_MEMBERS,
    "protected-attrib": PROTECTED_MEMBERS,
    "protected-slot": PROTECTED_MEMBERS,
    "protected-static-func": PROTECTED_MEMBERS,
    "protected-static-attrib": PROTECTED_MEMBERS,
    "package-type": NOT_VISIBLE,
    "package-func": NOT_VISIBLE,
    "package-attrib": NOT_VISIBLE,
    "package-static-func": NOT_VISIBLE,
    "package-static-attrib": NOT_VISIBLE,
    "private-type": NOT_VISIBLE,
    "private-func": NOT_VISIBLE,
    "private-attrib": NOT_VISIBLE,
    "private-slot": NOT_VISIBLE,
    "private-static-func": NOT_VISIBLE,
    "private-static-attrib": NOT_VISIBLE,
    "friend": NOT_VISIBLE,
    "related": STANDALONE_MEMBERS,
    "define": NOT_VISIBLE,
    "prototype": NOT_VISIBLE,
    "typedef": NOT_VISIBLE,
    "enum": NOT_VISIBLE,
    "func": NOT_VISIBLE,
    "var": NOT_VISIBLE,
    "interfaces": NOT_VISIBLE,
    "services": NOT_VISIBLE,
}


def classify_section_kind(kind: str, table: Mapping[str, str]) -> str:
    """Return the section title, ``NOT_VISIBLE`` or ``USER_DEFINED`` for a kind."""
    try:
        return table[kind]
    except KeyError:
        msg = f"Unknown section kind '{kind}'"
        raise ConfigurationError(msg) from None
