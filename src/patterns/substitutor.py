from __future__ import annotations

from pathlib import Path

from core.errors import MissingAttributeError
from core.models import LocaleFile
from core.paths import resolve_under_root
from patterns.placeholders import LOCALE_CODE, LOCALE_NAME, TAG

"""
Fill a pattern's placeholders from a known locale to get a target path.
"""


def fill_placeholders(pattern: str, locale_file: LocaleFile) -> str:
    """Replace every placeholder with the matching LocaleFile attribute.

    Raises:
      MissingAttributeError if the pattern uses a placeholder whose
      attribute is empty.
    """
    values = {
        LOCALE_CODE: locale_file.code,
        LOCALE_NAME: locale_file.name,
        TAG: locale_file.tag,
    }

    out = pattern
    for placeholder, value in values.items():
        if placeholder not in out:
            continue
        if not value:
            raise MissingAttributeError(placeholder, pattern)
        out = out.replace(placeholder, value)
    return out


def substitute(pattern: str, locale_file: LocaleFile, root: Path) -> Path:
    """Return the absolute target path for locale_file under root."""
    return resolve_under_root(root, fill_placeholders(pattern, locale_file))
