"""Pull remote locales of one target into files generated from its pattern.

Each remote locale is turned into a target path by filling the pattern's
placeholders, then downloaded and written to disk. A locale that cannot be
placed or downloaded is reported and the remaining locales still run.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Sequence

from core.errors import LocaleSyncError, NotFoundError, OperationTimeoutError
from core.interfaces import LocaleDirectory
from core.models import LocaleFile, RemoteLocale, Target
from core.paths import relative_display
from patterns.placeholders import contains_locale_placeholder
from patterns.substitutor import substitute
from patterns.validation import check_target_preconditions

log = logging.getLogger(__name__)


@dataclass
class PullResult:
    locale_file: LocaleFile
    bytes_written: int = 0
    error: str = ""

    def as_dict(self, project_root: Path) -> Dict[str, Any]:
        out = self.locale_file.as_dict()
        if self.locale_file.path:
            out["path"] = relative_display(self.locale_file.path, project_root)
        out["bytes_written"] = self.bytes_written
        out["error"] = self.error
        return out


def remote_locale_for_target(target: Target, remote_locales: Sequence[RemoteLocale]) -> RemoteLocale:
    locale_id = target.locale_id
    for remote in remote_locales:
        if locale_id in (remote.id, remote.name):
            return remote
    raise NotFoundError(f"Could not find remote locale with ID or name '{locale_id}'")


def locales_for_target(target: Target, remote_locales: Sequence[RemoteLocale]) -> List[RemoteLocale]:
    if target.locale_id:
        # a specific locale was requested
        return [remote_locale_for_target(target, remote_locales)]

    if contains_locale_placeholder(target.file):
        return list(remote_locales)

    raise NotFoundError(
        f"Could not find any files on your system that matches the locales for project '{target.project_id}'."
    )


def create_locale_file(target: Target, remote: RemoteLocale, project_root: Path) -> LocaleFile:
    locale_file = LocaleFile(
        code=remote.code,
        name=remote.name,
        tag=target.tag,
        id=remote.id,
        exists_remote=True,
        file_format=target.format,
    )
    locale_file.path = str(substitute(target.file, locale_file, project_root))
    return locale_file


def download_params(target: Target, locale_file: LocaleFile, branch: str = "") -> Dict[str, Any]:
    params = {k: v for k, v in target.params.items() if k != "locale_id"}
    if not params.get("file_format") and locale_file.file_format:
        params["file_format"] = locale_file.file_format
    if branch:
        params["branch"] = branch
    return params


def _write_file(path: str, content: bytes) -> int:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(content)
    return len(content)


async def pull_target(
    client: LocaleDirectory,
    target: Target,
    remote_locales: Sequence[RemoteLocale],
    *,
    project_root: Path,
    branch: str = "",
    timeout_minutes: int = 30,
) -> List[PullResult]:
    check_target_preconditions(target.file, target.format)

    if not remote_locales:
        raise NotFoundError(f"Could not find any locales for project '{target.project_id}'")

    deadline = time.monotonic() + timeout_minutes * 60
    results: List[PullResult] = []

    for remote in locales_for_target(target, remote_locales):
        if time.monotonic() >= deadline:
            raise OperationTimeoutError(f"Timeout of {timeout_minutes} minutes exceeded")

        try:
            locale_file = create_locale_file(target, remote, project_root)
        except LocaleSyncError as e:
            log.warning("Skipping locale %s: %s", remote.name or remote.id, e)
            unplaced = LocaleFile(code=remote.code, name=remote.name, id=remote.id, exists_remote=True)
            results.append(PullResult(locale_file=unplaced, error=str(e)))
            continue

        result = PullResult(locale_file=locale_file)
        try:
            content = await client.download_locale(
                target.project_id,
                locale_file.id,
                download_params(target, locale_file, branch),
            )
        except LocaleSyncError as e:
            log.warning("%s for %s", e, locale_file.path)
            result.error = f"{e} for {relative_display(locale_file.path, project_root)}"
            results.append(result)
            continue

        result.bytes_written = await asyncio.to_thread(_write_file, locale_file.path, content)
        log.info(
            "Downloaded %s to %s",
            locale_file.message(),
            relative_display(locale_file.path, project_root),
        )
        results.append(result)

    return results
