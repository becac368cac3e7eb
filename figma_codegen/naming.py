"""Identifier casing and reserved-word avoidance for generated source.

All functions are pure string transforms. Anything that is not an ASCII
letter, digit, whitespace or hyphen is dropped before casing, so layer
names like "123 my component!!" or "按钮 Submit" still give valid
identifiers.
"""

import re

from . import settings

_STRIP_RE = re.compile(r"[^a-zA-Z0-9\s-]+")
_SPLIT_RE = re.compile(r"[\s-]+")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_NON_KEBAB_RE = re.compile(r"[^a-zA-Z0-9-]+")

_STOP_WORDS = frozenset({
    "the", "and", "are", "for", "with", "that", "this", "from", "have", "been",
})

# JavaScript / TypeScript reserved and future-reserved words
RESERVED_WORDS = frozenset({
    "break", "case", "catch", "class", "const", "continue", "debugger", "default",
    "delete", "do", "else", "export", "extends", "finally", "for", "function",
    "if", "import", "in", "instanceof", "new", "return", "super", "switch",
    "this", "throw", "try", "typeof", "var", "void", "while", "with", "yield",
    "enum", "implements", "interface", "let", "package", "private", "protected",
    "public", "static", "await", "abstract", "boolean", "byte", "char", "double",
    "final", "float", "goto", "int", "long", "native", "short", "synchronized",
    "throws", "transient", "volatile",
})


def _words(value: str) -> list:
    cleaned = _STRIP_RE.sub("", value)
    return [w for w in _SPLIT_RE.split(cleaned) if w]


def to_pascal_case(value: str) -> str:
    """'submit button' -> 'SubmitButton'; '123 my component!!' -> 'N123MyComponent'."""
    words = _words(value or "")
    if not words:
        return "Component"
    result = "".join(w[0].upper() + w[1:] for w in words)
    if result[0].isdigit():
        result = "N" + result
    return result


def to_camel_case(value: str) -> str:
    """'Search Input' -> 'searchInput'. Long names keep up to three key words."""
    if not value:
        return ""
    words = _words(value)
    if not words:
        return "item"

    first = words[0]
    result = first[0].lower() + first[1:] + "".join(w[0].upper() + w[1:] for w in words[1:])
    if result[0].isdigit():
        result = "n" + result

    if len(result) > settings.CAMEL_CASE_MAX_LENGTH:
        important = [
            w for w in (w.lower() for w in words)
            if len(w) > 3 and w not in _STOP_WORDS
        ]
        if important:
            short = important[:3]
            result = short[0] + "".join(w[0].upper() + w[1:] for w in short[1:])
        else:
            result = result[:settings.CAMEL_CASE_MAX_LENGTH]
        if not result[0].isalpha():
            result = "item" + result

    return result


def to_kebab_case(value: str) -> str:
    """'PrimaryButton' -> 'primary-button'; 'Frame 12' -> 'frame-12'."""
    if not value:
        return ""
    result = _CAMEL_BOUNDARY_RE.sub(r"\1-\2", value)
    result = _NON_KEBAB_RE.sub("-", result)
    result = re.sub(r"-+", "-", result).strip("-")
    return result.lower()


def sanitize_variable_name(name: str) -> str:
    """Suffix reserved words ('default' -> 'defaultValue'); empty -> 'item'."""
    if not name:
        return "item"
    if name in RESERVED_WORDS:
        return name + "Value"
    return name


_HANDLER_SUFFIXES = {"click": "", "change": "Change", "toggle": "Toggle"}


def handler_name(identifier: str, kind: str) -> str:
    """'searchInput', 'change' -> 'handleSearchInputChange'."""
    suffix = _HANDLER_SUFFIXES[getattr(kind, "value", kind)]
    return f"handle{to_pascal_case(identifier)}{suffix}"
