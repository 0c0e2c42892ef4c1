"""
Go-specific naming utilities and sanitization.

Handles Go reserved words, predeclared identifiers and package names.
"""

import re

from ...core.naming import NameSanitizer

# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}

# Go predeclared types and functions
GO_BUILTIN_TYPES = {
    "any",
    "bool",
    "byte",
    "error",
    "float32",
    "float64",
    "int",
    "int8",
    "int16",
    "int32",
    "int64",
    "rune",
    "string",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uintptr",
    "append",
    "cap",
    "close",
    "copy",
    "delete",
    "len",
    "make",
    "new",
    "panic",
    "print",
    "println",
    "recover",
}


# Characters that would end the raw-string tag or its quoted json value
TAG_UNSAFE_CHARS = re.compile(r'[`"\\\x00-\x1f\x7f]')


def create_go_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Go."""
    return NameSanitizer(GO_RESERVED_WORDS, GO_BUILTIN_TYPES)


def go_package_name(name: str) -> str:
    """
    Derive a Go package name: lower case letters and digits only.

    ``"User_Accounts"`` becomes ``"useraccounts"``.
    """
    package = re.sub(r"[^a-z0-9]", "", name.lower())
    if not package or package[0].isdigit():
        package = f"p{package}"
    if package in GO_RESERVED_WORDS:
        package = f"{package}pkg"
    return package


def go_tag_name(name: str) -> str:
    """
    Derive the json tag value for a column: lower-cased, without the
    characters a struct tag cannot hold.
    """
    return TAG_UNSAFE_CHARS.sub("", name.lower())


def validate_go_package_name(name: str) -> list[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    if not name.isidentifier() or not name.isascii():
        errors.append(f"'{name}' is not a valid Go identifier")

    if name != name.lower():
        errors.append("Package names should be lowercase")

    if "_" in name:
        errors.append("Package names should not contain underscores")

    if name in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors
