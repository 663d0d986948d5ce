"""MCP tool that pulls locales from Phrase into local files.

Registers the 'pull' tool which reads the project config and writes one
file per remote locale for every pull target.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from mcp.server.fastmcp import FastMCP

from config import (
    HTTP_VERIFY,
    PHRASE_ACCESS_TOKEN,
    PHRASE_API_BASE_URL,
    PHRASE_CONFIG_FILE,
    PHRASE_TIMEOUT,
    PROJECT_ROOT,
    PULL_TIMEOUT_MINUTES,
    RATE_LIMIT_MAX_SLEEP,
)
from core.interfaces import LocaleDirectory
from core.models import RemoteLocale
from core.paths import resolve_under_root
from core.project_config import load_project_config, require_targets
from sources.pull import pull_target
from sources.source_factory import get_phrase_client


def register(mcp: FastMCP, *, phrase_client: Optional[LocaleDirectory] = None) -> None:
    @mcp.tool(name="pull")
    async def pull(branch: str = "", config_file: str = PHRASE_CONFIG_FILE) -> List[Dict[str, Any]]:
        """Download the locales of every configured pull target.

        Params:
          - branch: Phrase branch to pull from (default: main project).
          - config_file: project config path relative to the project root.

        Returns:
          One entry per locale with its identity, target path, bytes
          written and any per-locale error.

        Raises:
          ValidationError for a malformed config or file pattern;
          NotFoundError when a project has no locales; OperationTimeoutError
          when a target takes longer than the configured budget.
        """
        cfg = load_project_config(
            resolve_under_root(PROJECT_ROOT, config_file),
            token_override=PHRASE_ACCESS_TOKEN,
        )

        # Remote locales are listed once per project and branch
        locales: Dict[Tuple[str, str], List[RemoteLocale]] = {}

        out: List[Dict[str, Any]] = []
        for target in require_targets(cfg):
            client = get_phrase_client(
                target,
                base_url=PHRASE_API_BASE_URL,
                timeout=PHRASE_TIMEOUT,
                http_verify=HTTP_VERIFY,
                max_sleep_seconds=RATE_LIMIT_MAX_SLEEP,
                phrase_client=phrase_client,
            )

            key = (target.project_id, branch)
            if key not in locales:
                locales[key] = await client.list_locales(target.project_id, branch)

            results = await pull_target(
                client,
                target,
                locales[key],
                project_root=PROJECT_ROOT,
                branch=branch,
                timeout_minutes=PULL_TIMEOUT_MINUTES,
            )
            out.extend(r.as_dict(PROJECT_ROOT) for r in results)
        return out
