"""Dataclasses shared by the pattern engine, the Phrase client and the tools.

Includes the LocaleFile unit record, read-only RemoteLocale snapshots,
upload summaries and the per-pattern push/pull settings read from the
project config file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RemoteLocale:
    """A locale as returned by the Phrase API. Read-only to the engine."""

    id: str
    name: str
    code: str
    default: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RemoteLocale":
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            code=str(data.get("code") or ""),
            default=bool(data.get("default", False)),
        )


@dataclass
class LocaleFile:
    """A locale file on disk and the locale identity it stands for.

    Field groups:
    - Identity: code, name, tag
    - Remote: id, exists_remote
    - Disk: path, file_format
    """

    code: str = ""
    name: str = ""
    tag: str = ""

    id: str = ""
    exists_remote: bool = False

    path: str = ""
    file_format: str = ""

    def message(self) -> str:
        if self.name and self.code and self.name != self.code:
            return f"{self.name} ({self.code})"
        return self.name or self.code or self.id

    def as_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "tag": self.tag,
            "id": self.id,
            "exists_remote": self.exists_remote,
            "path": self.path,
            "file_format": self.file_format,
        }


@dataclass(frozen=True)
class UploadSummary:
    locales_created: int = 0
    translation_keys_created: int = 0
    translations_created: int = 0
    translations_updated: int = 0

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "UploadSummary":
        data = data or {}
        return cls(
            locales_created=int(data.get("locales_created") or 0),
            translation_keys_created=int(data.get("translation_keys_created") or 0),
            translations_created=int(data.get("translations_created") or 0),
            translations_updated=int(data.get("translations_updated") or 0),
        )

    @property
    def changed(self) -> bool:
        return any(
            (
                self.locales_created,
                self.translation_keys_created,
                self.translations_created,
                self.translations_updated,
            )
        )


@dataclass
class PatternSettings:
    """One push source or pull target from the project config.

    `params` holds the raw upload/download parameters; `locale_id`,
    `tag` and `file_format` read the ones the engine cares about.
    """

    file: str
    project_id: str = ""
    access_token: str = ""
    file_format: str = ""
    params: Dict[str, Any] = field(default_factory=dict)

    @property
    def locale_id(self) -> str:
        return str(self.params.get("locale_id") or "")

    @property
    def tag(self) -> str:
        return str(self.params.get("tag") or "")

    @property
    def format(self) -> str:
        return str(self.params.get("file_format") or self.file_format or "")


# Push sources and pull targets share their shape.
Source = PatternSettings
Target = PatternSettings
