"""MCP tool that previews which local files a pattern would push.

Registers the 'locale_files' tool: discovery only, no network access.
"""

from __future__ import annotations

from typing import Any, Dict, List

from mcp.server.fastmcp import FastMCP

from config import PROJECT_ROOT
from core.errors import ValidationError
from core.models import Source
from core.paths import relative_display
from sources.local_source import LocalLocaleSource


def register(mcp: FastMCP) -> None:
    @mcp.tool(name="locale_files")
    async def locale_files(file: str, file_format: str = "", locale_id: str = "") -> List[Dict[str, Any]]:
        """List local files matching a pattern with their extracted locale identity.

        Params:
          - file: file pattern, e.g. "./config/locales/<locale_code>.yml".
          - file_format: Phrase file format of the files (optional).
          - locale_id: locale id the files would be uploaded to (optional).

        Returns:
          One entry per matched file with code, name, tag and path.
        """
        if not file or not file.strip():
            raise ValidationError("Missing file pattern")

        params: Dict[str, Any] = {}
        if locale_id:
            params["locale_id"] = locale_id
        source = Source(file=file, file_format=file_format, params=params)

        found = await LocalLocaleSource(source=source, project_root=PROJECT_ROOT).locale_files([])
        out = []
        for locale_file in found:
            entry = locale_file.as_dict()
            entry["path"] = relative_display(locale_file.path, PROJECT_ROOT)
            out.append(entry)
        return out
