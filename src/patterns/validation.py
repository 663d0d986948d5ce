"""Precondition checks for file patterns.

A pattern is checked before any filesystem or network access. Every
duplicated placeholder (and a duplicated wildcard) is reported in one
message.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from core.errors import ValidationError
from core.paths import tokenize
from patterns.placeholders import PLACEHOLDERS, WILDCARD

# File extensions a Phrase file format is stored under. Formats missing here
# are not checked against the pattern's extension.
FORMAT_EXTENSIONS: Dict[str, Tuple[str, ...]] = {
    "yml": ("yml", "yaml"),
    "yml_symfony": ("yml", "yaml"),
    "yml_symfony2": ("yml", "yaml"),
    "json": ("json",),
    "simple_json": ("json",),
    "nested_json": ("json",),
    "react_simple_json": ("json",),
    "react_nested_json": ("json",),
    "i18next": ("json",),
    "strings": ("strings",),
    "stringsdict": ("stringsdict",),
    "xml": ("xml",),
    "properties": ("properties",),
    "properties_xml": ("xml",),
    "gettext": ("po",),
    "gettext_template": ("pot",),
    "xlf": ("xlf", "xliff"),
    "xliff_2": ("xlf", "xliff"),
    "resx": ("resx",),
    "csv": ("csv",),
    "ts": ("ts",),
    "php_array": ("php",),
    "ini": ("ini",),
    "plist": ("plist",),
    "arb": ("arb",),
    "xlsx": ("xlsx",),
}


def format_extensions(file_format: str) -> Tuple[str, ...]:
    return FORMAT_EXTENSIONS.get((file_format or "").strip().lower(), ())


def resolve_extension(pattern: str) -> str:
    """Return the extension of the pattern's final segment, without the dot.

    A placeholder may stand in for the extension ("play.<locale_code>").
    """
    tokens = tokenize(pattern)
    if not tokens:
        return ""
    head, dot, ext = tokens[-1].rpartition(".")
    if not dot:
        return ""
    return ext


def check_path(pattern: str, file_format: str = "", format_extension: str = "") -> str:
    if not (pattern or "").strip():
        raise ValidationError("File patterns may not be empty!")

    extension = resolve_extension(pattern)
    if not extension:
        raise ValidationError(f"'{pattern}' has no file extension")

    allowed = (format_extension,) if format_extension else format_extensions(file_format)
    if allowed and extension not in allowed and extension not in PLACEHOLDERS and WILDCARD not in extension:
        raise ValidationError(
            f"File extension '{extension}' does not equal '{'/'.join(allowed)}' "
            f"(format: '{file_format}') for file pattern '{pattern}'"
        )
    return extension


def duplicated_tokens(pattern: str) -> List[str]:
    dups = [name for name in PLACEHOLDERS if pattern.count(name) > 1]
    if pattern.count(WILDCARD) > 1:
        dups.append(WILDCARD)
    return dups


def check_preconditions(pattern: str, file_format: str = "", format_extension: str = "") -> str:
    """Validate a pattern and return its effective extension.

    Raises:
      ValidationError for an empty or extension-less pattern, an extension
      the file format is not stored under, or when a placeholder or the
      wildcard occurs more than once.
    """
    extension = check_path(pattern, file_format, format_extension)

    dups = duplicated_tokens(pattern)
    if dups:
        raise ValidationError(f"{', '.join(dups)} can only occur once in a file pattern!")

    return extension


def check_target_preconditions(pattern: str, file_format: str = "", format_extension: str = "") -> str:
    # Targets name one concrete file per locale, so no wildcard at all
    extension = check_preconditions(pattern, file_format, format_extension)
    if WILDCARD in pattern:
        raise ValidationError(
            f"File pattern for 'pull' cannot include any '{WILDCARD}': '{pattern}'. "
            "Please specify direct and valid paths with file name!"
        )
    return extension
