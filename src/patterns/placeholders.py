"""Placeholder vocabulary shared by every pattern operation.

Only the three literal tokens below are placeholders; any other bracketed
text in a pattern is ordinary literal text.
"""

from __future__ import annotations

import re
from typing import List

LOCALE_CODE = "<locale_code>"
LOCALE_NAME = "<locale_name>"
TAG = "<tag>"

PLACEHOLDERS = (LOCALE_NAME, LOCALE_CODE, TAG)
WILDCARD = "*"

PLACEHOLDER_RE = re.compile("|".join(re.escape(p) for p in PLACEHOLDERS))


def group_name(placeholder: str) -> str:
    # "<locale_code>" -> "locale_code"
    return placeholder.strip("<>")


def find_placeholders(s: str) -> List[str]:
    return PLACEHOLDER_RE.findall(s or "")


def contains_locale_placeholder(pattern: str) -> bool:
    return LOCALE_CODE in (pattern or "") or LOCALE_NAME in (pattern or "")


def replace_placeholder_in_params(locale_id: str, code: str) -> str:
    """Fill <locale_code> inside a configured locale id.

    Returns "" when there is no code or the id carries no placeholder;
    callers treat that as "nothing to substitute".
    """
    if code and LOCALE_CODE in (locale_id or ""):
        return locale_id.replace(LOCALE_CODE, code, 1)
    return ""
