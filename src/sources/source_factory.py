"""Factory for the Phrase client used by a push source or pull target.

Exposes get_phrase_client which returns an injected client when one is
given, or builds one from the entry's access token.
"""

from __future__ import annotations

from typing import Optional

from clients.phrase.client import PhraseClient
from core.errors import ValidationError
from core.interfaces import LocaleDirectory
from core.models import PatternSettings
from core.rate_limiter import RateLimiter


def get_phrase_client(
    settings: PatternSettings,
    *,
    base_url: str,
    timeout: float = 30.0,
    http_verify: bool = True,
    max_sleep_seconds: int = 300,
    phrase_client: Optional[LocaleDirectory] = None,
) -> LocaleDirectory:
    """
    Return the client for one config entry.

    Priority Logic:
    1. An injected client is always used.
    2. Otherwise the entry must carry an access token and a project id.
    """
    if phrase_client is not None:
        return phrase_client

    if not settings.project_id.strip():
        raise ValidationError(f"Missing project_id for '{settings.file}'")
    if not settings.access_token.strip():
        raise ValidationError(f"Missing access_token for '{settings.file}'")

    return PhraseClient(
        base_url=base_url,
        access_token=settings.access_token,
        timeout=timeout,
        verify=http_verify,
        rate_limiter=RateLimiter(max_sleep_seconds=max_sleep_seconds),
    )
