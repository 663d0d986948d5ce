"""Push local locale files of one source to Phrase.

Discovers the files, creates locales that do not exist remotely yet and
uploads every file with the source's upload params.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.errors import LocaleSyncError, ValidationError
from core.interfaces import LocaleDirectory
from core.models import LocaleFile, RemoteLocale, Source, UploadSummary
from core.paths import relative_display
from patterns.placeholders import LOCALE_CODE, replace_placeholder_in_params
from sources.local_source import LocalLocaleSource

log = logging.getLogger(__name__)


@dataclass
class PushResult:
    locale_file: LocaleFile
    created: bool = False
    summary: Optional[UploadSummary] = None
    error: str = ""

    def as_dict(self, project_root: Path) -> Dict[str, Any]:
        out = self.locale_file.as_dict()
        out["path"] = relative_display(self.locale_file.path, project_root)
        out["created"] = self.created
        out["error"] = self.error
        if self.summary is not None:
            out["summary"] = {
                "locales_created": self.summary.locales_created,
                "translation_keys_created": self.summary.translation_keys_created,
                "translations_created": self.summary.translations_created,
                "translations_updated": self.summary.translations_updated,
            }
        return out


def create_locale_params(source: Source, locale_file: LocaleFile) -> Dict[str, str]:
    """Name and code for a locale that only exists locally.

    Raises:
      ValidationError if the file carries no locale code.
    """
    if not locale_file.code:
        raise ValidationError("no locale code specified")

    name = locale_file.name or locale_file.code

    # A configured locale id like "<locale_code>-custom" names the new locale
    locale_name = replace_placeholder_in_params(source.locale_id, locale_file.code)
    if locale_name and locale_name != locale_file.code:
        name = locale_name

    return {"name": name, "code": locale_file.code}


def upload_params(source: Source, locale_file: LocaleFile, branch: str = "") -> Dict[str, Any]:
    params = dict(source.params)

    configured = str(params.get("locale_id") or "")
    if LOCALE_CODE in configured:
        # the configured id is a template; prefer the reconciled remote id
        filled = locale_file.id or replace_placeholder_in_params(configured, locale_file.code)
        if filled:
            params["locale_id"] = filled
        else:
            params.pop("locale_id")
    elif not configured:
        if locale_file.id:
            params["locale_id"] = locale_file.id
        elif locale_file.code:
            params["locale_id"] = locale_file.code

    if locale_file.tag and not params.get("tags"):
        params["tags"] = locale_file.tag

    if branch:
        params["branch"] = branch

    return params


async def push_source(
    client: LocaleDirectory,
    source: Source,
    *,
    project_root: Path,
    branch: str = "",
    remote_locales: Optional[List[RemoteLocale]] = None,
) -> List[PushResult]:
    if remote_locales is None:
        remote_locales = await client.list_locales(source.project_id, branch)

    local = LocalLocaleSource(source=source, project_root=project_root)
    locale_files = await local.locale_files(remote_locales)

    results: List[PushResult] = []
    for locale_file in locale_files:
        rel = relative_display(locale_file.path, project_root)
        log.info("Uploading %s", rel)
        result = PushResult(locale_file=locale_file)

        if not locale_file.exists_remote:
            try:
                params = create_locale_params(source, locale_file)
                remote = await client.create_locale(source.project_id, branch=branch, **params)
            except LocaleSyncError as e:
                log.warning("failed to create locale: %s", e)
                result.error = f"failed to create locale: {e}"
                results.append(result)
                continue

            # remote identity is owned by the caller once the locale exists
            locale_file.id = remote.id
            locale_file.code = remote.code
            locale_file.name = remote.name
            locale_file.exists_remote = True
            result.created = True

        result.summary = await client.upload(
            source.project_id,
            locale_file.path,
            upload_params(source, locale_file, branch),
        )
        log.info("Uploaded %s successfully.", rel)
        if result.summary.changed:
            log.info(
                "Locales created: %d - Keys created: %d - Translations created: %d - Translations updated: %d",
                result.summary.locales_created,
                result.summary.translation_keys_created,
                result.summary.translations_created,
                result.summary.translations_updated,
            )
        results.append(result)

    return results
