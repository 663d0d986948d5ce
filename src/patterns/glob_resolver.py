from __future__ import annotations

import glob
import logging
from pathlib import Path
from typing import List

from core.paths import is_absolute_pattern, join_tokens, tokenize
from patterns.placeholders import PLACEHOLDER_RE, WILDCARD

"""
Turn a file pattern into a filesystem wildcard query and enumerate matches.

Placeholders become "*". A final segment starting with "." (e.g. ".strings"
for "Localizable.strings") also absorbs an implicit filename prefix.
"""

log = logging.getLogger(__name__)


def to_glob(pattern: str) -> str:
    without_placeholders = PLACEHOLDER_RE.sub(WILDCARD, pattern or "")
    tokens = tokenize(without_placeholders)
    if not tokens:
        return ""

    file_head = tokens[-1]
    if file_head.startswith("."):
        tokens[-1] = WILDCARD + file_head

    return join_tokens(tokens, absolute=is_absolute_pattern(pattern))


def glob_files(pattern: str, root: Path) -> List[str]:
    """Return paths matching the pattern, relative to root unless absolute.

    Wildcards also match names starting with ".". Zero matches is a valid
    result; the caller decides what it means.
    """
    query = to_glob(pattern)
    if not query:
        return []

    files = sorted(p for p in glob.glob(query, root_dir=str(root), include_hidden=True) if _is_file(p, root))
    log.debug("Found %d files matching the source pattern %s", len(files), query)
    return files


def _is_file(path: str, root: Path) -> bool:
    p = Path(path)
    return (p if p.is_absolute() else root / p).is_file()
