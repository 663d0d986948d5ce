"""Phrase API client: list, create, download and upload locales.

A small async client for the four Phrase endpoints the push/pull flows
need. It honors explicit throttling (Retry-After on 429) and, after each
download, the remaining-quota headers via `core.rate_limiter.RateLimiter`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import httpx

from core.errors import ExternalServiceError, NotFoundError, ValidationError
from core.models import RemoteLocale, UploadSummary
from core.rate_limiter import RateLimiter

from .inputs import form_fields, normalize_locale_id, normalize_project_id, normalize_upload_file

log = logging.getLogger(__name__)


class PhraseClient:
    """Async Phrase API client.

    Purpose:
      - list_locales(project_id, branch='') -> List[RemoteLocale]
      - create_locale(project_id, name, code, branch='') -> RemoteLocale
      - download_locale(project_id, locale_id, params) -> bytes
      - upload(project_id, file_path, params) -> UploadSummary

    Key behavior:
      - Follows pagination when listing locales.
      - Retries 429 responses a bounded number of times.
      - Sleeps until the quota resets when a download reports none left.
    """

    USER_AGENT = "phrase-locales-mcp"
    PER_PAGE = 100

    _MAX_RATE_LIMIT_RETRIES = 2  # total attempts = 1 + retries

    def __init__(
        self,
        *,
        base_url: str,
        access_token: str,
        timeout: float = 30.0,
        verify: bool = True,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/")
        self._timeout = float(timeout)
        self._verify = bool(verify)
        self._rate_limiter = rate_limiter or RateLimiter()

        token = (access_token or "").strip()
        if not token:
            raise ValidationError("Missing access token")
        self._headers = {
            "Authorization": f"token {token}",
            "User-Agent": self.USER_AGENT,
            "Accept": "application/json",
        }

    async def list_locales(self, project_id: str, branch: str = "") -> List[RemoteLocale]:
        pid = normalize_project_id(project_id)
        out: List[RemoteLocale] = []

        async with self._create_client() as client:
            page = 1
            while True:
                params: Dict[str, Any] = {"page": page, "per_page": self.PER_PAGE}
                if branch:
                    params["branch"] = branch

                resp = await self._request(client, "GET", f"/projects/{pid}/locales", params=params)
                if resp.status_code == 404:
                    raise NotFoundError(f"Project not found: {pid}")
                self._raise_for_status(resp, context="list_locales")

                items = resp.json() or []
                out.extend(RemoteLocale.from_api(item) for item in items)
                if len(items) < self.PER_PAGE:
                    break
                page += 1

        log.debug("Project %s has %d remote locales", pid, len(out))
        return out

    async def create_locale(self, project_id: str, *, name: str, code: str, branch: str = "") -> RemoteLocale:
        pid = normalize_project_id(project_id)
        payload: Dict[str, Any] = {"name": name, "code": code}
        if branch:
            payload["branch"] = branch

        async with self._create_client() as client:
            resp = await self._request(client, "POST", f"/projects/{pid}/locales", json=payload)
            self._raise_for_status(resp, context="create_locale")
            return RemoteLocale.from_api(resp.json() or {})

    async def download_locale(self, project_id: str, locale_id: str, params: Mapping[str, Any]) -> bytes:
        pid = normalize_project_id(project_id)
        lid = normalize_locale_id(locale_id)

        async with self._create_client() as client:
            resp = await self._request(
                client,
                "GET",
                f"/projects/{pid}/locales/{lid}/download",
                params=form_fields(params),
            )
            if resp.status_code == 404:
                raise NotFoundError(f"Locale not found: {lid}")
            self._raise_for_status(resp, context="download_locale")
            content = resp.content

        await self._rate_limiter.wait_for_quota(resp)
        return content

    async def upload(self, project_id: str, file_path: str | Path, params: Mapping[str, Any]) -> UploadSummary:
        pid = normalize_project_id(project_id)
        path = normalize_upload_file(file_path)
        data = form_fields(params)

        async with self._create_client() as client:
            attempts = self._MAX_RATE_LIMIT_RETRIES + 1
            for attempt in range(attempts):
                # multipart bodies are single-use, reopen the file per attempt
                with path.open("rb") as fh:
                    try:
                        resp = await client.post(
                            f"/projects/{pid}/uploads",
                            data=data,
                            files={"file": (path.name, fh)},
                        )
                    except httpx.HTTPError as e:
                        raise self._external("upload", e) from e

                if attempt < attempts - 1 and await self._rate_limiter.maybe_sleep_and_retry(resp):
                    continue
                break

            self._raise_for_status(resp, context="upload")
            return UploadSummary.from_api((resp.json() or {}).get("summary"))

    # --- HTTP helpers ---

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify,
        )

    def _external(self, context: str, err: BaseException) -> ExternalServiceError:
        return ExternalServiceError(f"Phrase request failed ({context}): {err}")

    def _raise_for_status(self, resp: httpx.Response, *, context: str) -> None:
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._external(context, e) from e

    async def _request(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """Send a request with bounded retries for explicit throttling signals."""
        attempts = self._MAX_RATE_LIMIT_RETRIES + 1

        for attempt in range(attempts):
            try:
                resp = await client.request(
                    method,
                    url,
                    params=dict(params or {}),
                    json=dict(json) if json is not None else None,
                )
            except httpx.HTTPError as e:
                raise self._external(f"{method} {url}", e) from e

            if attempt < attempts - 1:
                if await self._rate_limiter.maybe_sleep_and_retry(resp):
                    continue

            return resp

        raise RuntimeError("Unreachable: _request did not return a response")
