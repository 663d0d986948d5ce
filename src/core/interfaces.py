"""Core protocol and interface definitions.

Defines the LocaleDirectory protocol: the remote locale service the push
and pull flows talk to (implemented by the Phrase client).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Protocol

from core.models import RemoteLocale, UploadSummary


class LocaleDirectory(Protocol):
    """Contract for a remote locale service (Phrase, fakes in tests)."""
    async def list_locales(self, project_id: str, branch: str = "") -> List[RemoteLocale]:
        ...

    async def create_locale(
        self,
        project_id: str,
        *,
        name: str,
        code: str,
        branch: str = "",
    ) -> RemoteLocale:
        ...

    async def download_locale(
        self,
        project_id: str,
        locale_id: str,
        params: Mapping[str, Any],
    ) -> bytes:
        ...

    async def upload(
        self,
        project_id: str,
        file_path: str | Path,
        params: Mapping[str, Any],
    ) -> UploadSummary:
        ...
