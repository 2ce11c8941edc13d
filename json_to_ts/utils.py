"""
Identifier helpers for the JSON to TypeScript generator.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")
_SNAKE_SEGMENT = re.compile(r"_([a-z])")
_BARE_PROPERTY_NAME = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Used to derive a root type name from an input file name.

    Examples:
        "user_profile" -> "UserProfile"
        "api-response" -> "ApiResponse"
        "first 3 rows" -> "First3Rows"
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def to_camel_case(key: str) -> str:
    """Collapse every '_' followed by a lowercase letter into the uppercased letter.

    Examples:
        "user_name" -> "userName"
        "is_active_" -> "isActive_"
        "HTTP_Code" -> "HTTP_Code"
    """
    return _SNAKE_SEGMENT.sub(lambda m: m.group(1).upper(), key)


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def sanitize_type_name(name: str) -> str:
    """Strip characters that cannot appear in a type identifier.

    A leading digit gets an underscore prefix. May return an empty string.
    """
    cleaned = _INVALID_IDENTIFIER_CHARS.sub("", name)
    if cleaned[:1].isdigit():
        cleaned = "_" + cleaned
    return cleaned


def enum_member_key(value: str) -> str:
    """Turn an enum string value into a member identifier.

    Examples:
        "admin" -> "admin"
        "in-progress" -> "in_progress"
        "2fa" -> "_2fa"
    """
    key = _INVALID_IDENTIFIER_CHARS.sub("_", value)
    if not key or key[0].isdigit():
        key = "_" + key
    return key


def is_bare_property_name(key: str) -> bool:
    """Whether the key can be written without quotes in an interface body."""
    return _BARE_PROPERTY_NAME.match(key) is not None
