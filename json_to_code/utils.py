"""
Naming utilities for the JSON to code generator.
"""

import re

# Split text into words on camelCase boundaries, keeping acronyms together
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(_normalize_separators(text))


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    return "".join(word.capitalize() for word in _split_into_words(text) if word)


def to_camel_case(text: str) -> str:
    """Convert any key to camelCase ("first_name" -> "firstName")."""
    pascal = snake_to_pascal_case(text)
    return pascal[:1].lower() + pascal[1:]


def to_snake_case(text: str) -> str:
    """Convert any key to snake_case ("firstName" -> "first_name")."""
    return "_".join(word.lower() for word in _split_into_words(text) if word)


def singularize(name: str) -> str:
    """Best effort singular form of a PascalCase type name.

    Used to name the element type of an array ("Users" -> "User").
    """
    if name.endswith("ies") and len(name) > 3:
        return name[:-3] + "y"
    if name.endswith(("sses", "xes", "ches", "shes")):
        return name[:-2]
    if name.endswith(("ss", "us", "is")):
        return name
    if name.endswith("s") and len(name) > 1:
        return name[:-1]
    return name


def apply_naming(text: str, convention: str) -> str:
    """Apply a property naming convention from a language description.

    Args:
        text: Original JSON key
        convention: One of "camel", "snake", "pascal" or "original"

    Returns:
        Converted name; keys without any word characters become "field"
    """
    if convention == "camel":
        name = to_camel_case(text)
    elif convention == "snake":
        name = to_snake_case(text)
    elif convention == "pascal":
        name = snake_to_pascal_case(text)
    elif convention == "original":
        name = re.sub(r"\W", "_", text)
    else:
        raise ValueError(f"Unknown naming convention: {convention}")

    if not name:
        return "field"
    if name[0].isdigit():
        return "_" + name
    return name
