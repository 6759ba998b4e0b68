"""
Go-specific naming utilities.

Handles Go reserved words, builtins, and naming conventions for the
identifiers the model template derives from entity names.
"""

from ...core.naming import lower_first

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

# Go builtin types and functions
GO_BUILTINS = {
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

# Identifiers declared by the model template or imported into it
TEMPLATE_IDENTIFIERS = {
    "o",
    "ts",
    "err",
    "id",
    "num",
    "count",
    "args",
    "whereCond",
    "updPro",
    "fmt",
    "time",
    "orm",
    "models",
    "utils",
}


def receiver_name(entity_name: str) -> str:
    """
    Pick the local variable name used for an entity in generated code.

    Normally the lower-cased first letter. Falls back to the lower-first
    name when the letter would shadow a template identifier, and appends
    an underscore when that in turn is a Go keyword or builtin.
    """
    letter = entity_name[:1].lower()
    if letter.isalpha() and letter not in TEMPLATE_IDENTIFIERS:
        return letter

    name = lower_first(entity_name)
    if name in GO_RESERVED_WORDS or name in GO_BUILTINS or name in TEMPLATE_IDENTIFIERS:
        name = f"{name}_"
    return name


def validate_go_package_name(name: str) -> list[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation warnings (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    if "_" in name:
        errors.append(f"Package name '{name}' should not contain underscores")

    if name in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors
