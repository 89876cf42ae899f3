"""
String utility functions for the unit test generator.
"""

import re

_RESERVED_WORDS = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger",
        "default", "delete", "do", "else", "enum", "export", "extends",
        "false", "finally", "for", "function", "if", "import", "in",
        "instanceof", "new", "null", "return", "super", "switch", "this",
        "throw", "true", "try", "typeof", "var", "void", "while", "with",
        "yield", "let", "static", "await",
    }
)


def to_identifier(name: str) -> str:
    """Convert a file name into a JavaScript binding (e.g. my-module -> myModule)."""
    parts = [p for p in re.split(r"[^0-9A-Za-z_$]+", name) if p]
    if not parts:
        return "subject"
    ident = parts[0] + "".join(p[:1].upper() + p[1:] for p in parts[1:])
    if ident[0].isdigit():
        ident = "_" + ident
    if ident in _RESERVED_WORDS:
        ident = "_" + ident
    return ident
