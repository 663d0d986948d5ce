"""Discover existing locale files for a push source.

Globs the source pattern under the project root, reduces every match to
its locale identity and reconciles it with the project's remote locales.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import List, Sequence

from core.errors import NotFoundError
from core.models import LocaleFile, RemoteLocale, Source
from core.paths import tokenize
from patterns.glob_resolver import glob_files
from patterns.reconcile import apply_remote_locale, find_remote_locale
from patterns.reducer import Reducer
from patterns.validation import check_preconditions

log = logging.getLogger(__name__)


class LocalLocaleSource:
    def __init__(self, *, source: Source, project_root: Path) -> None:
        self._source = source
        self._project_root = project_root.resolve()

    @property
    def source(self) -> Source:
        return self._source

    def abs_pattern(self) -> str:
        return os.path.normpath(os.path.join(self._project_root, self._source.file))

    def discover(self, remote_locales: Sequence[RemoteLocale]) -> List[LocaleFile]:
        pattern = self._source.file
        check_preconditions(pattern, self._source.format)

        reducer = Reducer(pattern)
        out: List[LocaleFile] = []

        for path in glob_files(pattern, self._project_root):
            reduced = reducer.reduce_with_match(tokenize(path))
            if reduced is None:
                log.debug("Skipping %s: segment count differs from pattern %s", path, pattern)
                continue

            locale_file, match = reduced
            if match.mismatched:
                log.debug(
                    "Placeholder segments %s of %s did not match %s",
                    match.mismatched,
                    pattern,
                    path,
                )

            out.append(self._finalize(locale_file, path, remote_locales))
            log.debug(
                "Code:'%s', Name:'%s', Tag:'%s', Pattern:'%s'",
                locale_file.code,
                locale_file.name,
                locale_file.tag,
                pattern,
            )

        if not out:
            raise NotFoundError(f"Could not find any files on your system that matches: '{self.abs_pattern()}'")
        return out

    def _finalize(self, locale_file: LocaleFile, path: str, remote_locales: Sequence[RemoteLocale]) -> LocaleFile:
        remote = find_remote_locale(locale_file, remote_locales, self._source.locale_id)
        if remote is not None:
            apply_remote_locale(locale_file, remote)

        p = Path(path)
        locale_file.path = str((p if p.is_absolute() else self._project_root / p).resolve())
        locale_file.file_format = self._source.format
        return locale_file

    async def locale_files(self, remote_locales: Sequence[RemoteLocale]) -> List[LocaleFile]:
        # Offload blocking filesystem IO to a thread to keep async loop responsive
        return await asyncio.to_thread(self.discover, list(remote_locales))
