from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence

from core.errors import AccessDeniedError

"""
Path utilities used across the project.

Splits patterns and concrete paths into comparable segments and keeps
generated locale files inside the project root.
"""

SEPARATOR = os.sep


def tokenize(s: str, sep: str = SEPARATOR) -> List[str]:
    """Split a pattern or path into segments.

    Empty and "." segments are dropped so that "./a//b" and "a/b" yield
    the same segments and pattern/path indices line up.
    """
    return [seg for seg in (s or "").split(sep) if seg not in ("", ".")]


def join_tokens(tokens: Sequence[str], *, absolute: bool = False, sep: str = SEPARATOR) -> str:
    joined = sep.join(tokens)
    return sep + joined if absolute else joined


def is_absolute_pattern(pattern: str, sep: str = SEPARATOR) -> bool:
    return (pattern or "").startswith(sep) or os.path.isabs(pattern or "")


def resolve_under_root(project_root: Path, raw: str) -> Path:
    """Resolve raw against project_root and refuse anything outside it."""
    root = project_root.resolve()
    p = Path(raw)
    p = (p if p.is_absolute() else root / p).resolve()

    try:
        p.relative_to(root)
    except ValueError as e:
        raise AccessDeniedError(f"Locale file outside project root is not allowed: {raw}") from e

    return p


def relative_display(path: str | Path, project_root: Path) -> str:
    # Prefer a root-relative POSIX path for messages; fall back to the input
    p = Path(path)
    try:
        return p.resolve().relative_to(project_root.resolve()).as_posix()
    except ValueError:
        return str(path)
