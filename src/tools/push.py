"""MCP tool that pushes local locale files to Phrase.

Registers the 'push' tool which reads the project config, discovers the
files of every push source and uploads them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from config import (
    HTTP_VERIFY,
    PHRASE_ACCESS_TOKEN,
    PHRASE_API_BASE_URL,
    PHRASE_CONFIG_FILE,
    PHRASE_TIMEOUT,
    PROJECT_ROOT,
    RATE_LIMIT_MAX_SLEEP,
)
from core.interfaces import LocaleDirectory
from core.paths import resolve_under_root
from core.project_config import load_project_config, require_sources
from sources.push import push_source
from sources.source_factory import get_phrase_client


def register(mcp: FastMCP, *, phrase_client: Optional[LocaleDirectory] = None) -> None:
    @mcp.tool(name="push")
    async def push(branch: str = "", config_file: str = PHRASE_CONFIG_FILE) -> List[Dict[str, Any]]:
        """Upload every locale file matched by the configured push sources.

        Params:
          - branch: Phrase branch to push to (default: main project).
          - config_file: project config path relative to the project root.

        Returns:
          One entry per file with its locale identity, whether the locale
          was created, the upload summary and any per-file error.

        Raises:
          ValidationError for a malformed config or file pattern;
          NotFoundError when a source matches no files; ExternalServiceError
          when Phrase rejects a request.
        """
        cfg = load_project_config(
            resolve_under_root(PROJECT_ROOT, config_file),
            token_override=PHRASE_ACCESS_TOKEN,
        )

        out: List[Dict[str, Any]] = []
        for source in require_sources(cfg):
            client = get_phrase_client(
                source,
                base_url=PHRASE_API_BASE_URL,
                timeout=PHRASE_TIMEOUT,
                http_verify=HTTP_VERIFY,
                max_sleep_seconds=RATE_LIMIT_MAX_SLEEP,
                phrase_client=phrase_client,
            )
            results = await push_source(client, source, project_root=PROJECT_ROOT, branch=branch)
            out.extend(r.as_dict(PROJECT_ROOT) for r in results)
        return out
