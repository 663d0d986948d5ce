"""Utility to interpret Phrase throttling signals and sleep when needed.

- Honor Retry-After on 429 responses (caller retries).
- When a successful response reports X-Rate-Limit-Remaining == 0, wait
  until X-Rate-Limit-Reset before the next request; an unusable reset
  header means a 10 second pause.
- Bounds every sleep to a configurable maximum.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Mapping, Optional

import httpx

log = logging.getLogger(__name__)

DEFAULT_RESET_WAIT = 10


class RateLimiter:
    def __init__(self, *, max_sleep_seconds: int = 300) -> None:
        self._max_sleep_seconds = int(max_sleep_seconds)

    async def maybe_sleep_and_retry(self, response: httpx.Response) -> bool:
        # Returns True if caller should retry after sleeping.
        if response.status_code != 429:
            return False

        retry_after = self._parse_int_header(response.headers, "Retry-After")
        if retry_after is None:
            retry_after = self._seconds_until_reset(response.headers)
        await self._sleep_bounded(retry_after)
        return True

    async def wait_for_quota(self, response: httpx.Response) -> float:
        # Returns the number of seconds slept (0 when quota is left).
        remaining = self._parse_int_header(response.headers, "X-Rate-Limit-Remaining")
        if remaining is None or remaining > 0:
            return 0.0

        seconds = self._seconds_until_reset(response.headers)
        log.info("Rate limit exceeded. Download will continue in %d seconds", seconds)
        return await self._sleep_bounded(seconds)

    def _seconds_until_reset(self, headers: Mapping[str, str]) -> int:
        reset = self._parse_int_header(headers, "X-Rate-Limit-Reset")
        if reset is None:
            return DEFAULT_RESET_WAIT
        return max(0, reset - int(time.time()))

    async def _sleep_bounded(self, seconds: int) -> float:
        delay = float(min(int(seconds), self._max_sleep_seconds))
        if delay > 0:
            await asyncio.sleep(delay)
        return delay

    def _parse_int_header(self, headers: Mapping[str, str], name: str) -> Optional[int]:
        value = (headers.get(name) or "").strip()
        if not value.isdigit():
            return None
        return int(value)
