"""Match locale files against the project's remote locales.

Rules are tried in order; the first rule that matches any remote locale
wins:

1. the configured locale id equals a remote name or id;
2. the configured locale id, with <locale_code> filled from the file,
   is contained in a remote name;
3. a remote name equals the file's locale name;
4. a remote name equals the file's locale code.

No match means the file stands for a locale that does not exist remotely yet.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from core.models import LocaleFile, RemoteLocale
from patterns.placeholders import replace_placeholder_in_params

MatchRule = Callable[[LocaleFile, RemoteLocale, str], bool]


def matches_configured_locale(locale_file: LocaleFile, remote: RemoteLocale, locale_id: str) -> bool:
    return bool(locale_id) and locale_id in (remote.name, remote.id)


def matches_substituted_locale_id(locale_file: LocaleFile, remote: RemoteLocale, locale_id: str) -> bool:
    locale_name = replace_placeholder_in_params(locale_id, locale_file.code)
    return bool(locale_name) and locale_name in remote.name


def matches_locale_name(locale_file: LocaleFile, remote: RemoteLocale, locale_id: str) -> bool:
    return bool(locale_file.name) and remote.name == locale_file.name


def matches_locale_code(locale_file: LocaleFile, remote: RemoteLocale, locale_id: str) -> bool:
    return bool(locale_file.code) and remote.name == locale_file.code


MATCH_RULES: Sequence[MatchRule] = (
    matches_configured_locale,
    matches_substituted_locale_id,
    matches_locale_name,
    matches_locale_code,
)


def find_remote_locale(
    locale_file: LocaleFile,
    remote_locales: Sequence[RemoteLocale],
    locale_id: str = "",
) -> Optional[RemoteLocale]:
    for rule in MATCH_RULES:
        for remote in remote_locales:
            if rule(locale_file, remote, locale_id):
                return remote
    return None


def apply_remote_locale(locale_file: LocaleFile, remote: RemoteLocale) -> LocaleFile:
    locale_file.exists_remote = True
    locale_file.code = remote.code
    locale_file.name = remote.name
    locale_file.id = remote.id
    return locale_file
