"""Reduce concrete paths to locale attributes using a file pattern.

Each pattern segment that holds a placeholder is compiled into a regular
expression with one named group per placeholder; the expression is matched
against the candidate's segment at the same index. Segments without a
placeholder already matched during globbing and are not checked again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

from core.models import LocaleFile
from core.paths import SEPARATOR, tokenize
from patterns.placeholders import PLACEHOLDER_RE, WILDCARD, group_name

_WILDCARD_RE = ".*"


def segment_expression(segment: str) -> str:
    """Translate one pattern segment into a regex source string.

    Returns "" for segments without placeholders. Literal text is escaped,
    placeholders become greedy named groups and a wildcard matches any run
    of characters without being captured.
    """
    if not PLACEHOLDER_RE.search(segment):
        return ""

    out: List[str] = []
    pos = 0
    for m in PLACEHOLDER_RE.finditer(segment):
        out.append(_escape_literal(segment[pos:m.start()]))
        out.append(f"(?P<{group_name(m.group(0))}>.+)")
        pos = m.end()
    out.append(_escape_literal(segment[pos:]))
    return "".join(out)


def _escape_literal(text: str) -> str:
    return _WILDCARD_RE.join(re.escape(part) for part in text.split(WILDCARD))


@lru_cache(maxsize=256)
def compile_segments(pattern: str) -> Tuple[Tuple[int, "re.Pattern[str]"], ...]:
    # (segment index, compiled expression) for every placeholder segment
    compiled = []
    for idx, segment in enumerate(tokenize(pattern)):
        source = segment_expression(segment)
        if source:
            compiled.append((idx, re.compile(source)))
    return tuple(compiled)


@dataclass
class SegmentMatch:
    tagged: Dict[str, str] = field(default_factory=dict)
    # indices of placeholder segments whose content did not match
    mismatched: List[int] = field(default_factory=list)


class Reducer:
    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.tokens = tokenize(pattern)

    def match(self, path_tokens: Sequence[str]) -> SegmentMatch:
        result = SegmentMatch()
        for idx, expression in compile_segments(self.pattern):
            m = expression.fullmatch(path_tokens[idx])
            if m is None:
                result.mismatched.append(idx)
                continue
            for name, value in m.groupdict().items():
                if value:
                    result.tagged[name] = value.strip(SEPARATOR)
        return result

    def reduce_with_match(self, path_tokens: Sequence[str]) -> Optional[Tuple[LocaleFile, SegmentMatch]]:
        if len(path_tokens) != len(self.tokens):
            return None

        result = self.match(path_tokens)
        locale_file = LocaleFile(
            code=result.tagged.get("locale_code", ""),
            name=result.tagged.get("locale_name", ""),
            tag=result.tagged.get("tag", ""),
        )
        return locale_file, result

    def reduce(self, path_tokens: Sequence[str]) -> Optional[LocaleFile]:
        """Extract code/name/tag from a tokenized path.

        Returns None when the path has a different number of segments than
        the pattern; such a path cannot have been produced by it.
        """
        reduced = self.reduce_with_match(path_tokens)
        return reduced[0] if reduced else None
