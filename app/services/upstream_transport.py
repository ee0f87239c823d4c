"""Outbound HTTP transport with bounded exponential backoff on rate limiting."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Union
from urllib.parse import quote

import aiohttp

from app.core.config import Settings
from app.core.results import ErrorKind, Failure, Ok, Result, classify_status

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 3
    initial_backoff: float = 2.0
    multiplier: float = 2.0
    max_backoff: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> RetryPolicy:
        return cls(
            max_retries=settings.EMPLOYEE_API_MAX_RETRIES,
            initial_backoff=settings.EMPLOYEE_API_INITIAL_BACKOFF_SECONDS,
            multiplier=settings.EMPLOYEE_API_BACKOFF_MULTIPLIER,
            max_backoff=settings.EMPLOYEE_API_MAX_BACKOFF_SECONDS,
        )

    def delay_for(self, retry_number: int) -> float:
        """Delay in seconds before retry ``retry_number`` (1-based)."""
        return min(self.initial_backoff * self.multiplier ** (retry_number - 1), self.max_backoff)


@dataclass(frozen=True)
class RateLimited:
    message: str
    status: int = 429


AttemptOutcome = Union[Ok[Any], RateLimited, Failure]


def build_client_session(settings: Settings) -> aiohttp.ClientSession:
    timeout = aiohttp.ClientTimeout(total=settings.EMPLOYEE_API_TIMEOUT_SECONDS)
    return aiohttp.ClientSession(timeout=timeout, headers=DEFAULT_HEADERS)


def join_url(base_url: str, *segments: str) -> str:
    url = base_url.rstrip("/")
    for segment in segments:
        url = f"{url}/{quote(segment, safe='')}"
    return url


class RetryingTransport:
    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        policy: RetryPolicy | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.policy = policy or RetryPolicy()
        self._sleep = sleep

    async def send(
        self,
        method: str,
        *path: str,
        body: dict[str, Any] | None = None,
        exhausted_message: str | None = None,
    ) -> Result[Any]:
        """Issue ``method`` against ``base_url/path`` and return the parsed JSON body.

        Only rate-limited responses are retried; every other failure is returned
        on first occurrence.
        """
        url = join_url(self.base_url, *path)
        retries = 0
        while True:
            outcome = await self._attempt(method, url, body)
            if not isinstance(outcome, RateLimited):
                return outcome

            if retries >= self.policy.max_retries:
                logger.error("%s %s still rate limited after %d retries", method, url, retries)
                return Failure(
                    ErrorKind.RETRIES_EXHAUSTED,
                    exhausted_message or f"Retries exhausted after {retries} retries: {method} {url}",
                    outcome.status,
                )

            retries += 1
            delay = self.policy.delay_for(retries)
            logger.warning(
                "%s, retry %d/%d in %.1fs",
                outcome.message,
                retries,
                self.policy.max_retries,
                delay,
            )
            await self._sleep(delay)

    async def _attempt(self, method: str, url: str, body: dict[str, Any] | None) -> AttemptOutcome:
        try:
            async with self.session.request(method, url, json=body) as response:
                kind = classify_status(response.status)
                if kind is ErrorKind.RATE_LIMITED:
                    return RateLimited(f"{method} {url} returned {response.status}", response.status)
                if kind is not None:
                    error_text = await response.text(errors="replace")
                    return Failure(kind, f"{method} {url} failed: {response.status} - {error_text}", response.status)

                try:
                    payload = await response.json(content_type=None)
                except ValueError as e:
                    return Failure(ErrorKind.DECODE_ERROR, f"Invalid JSON from {method} {url}: {e}", response.status)
                return Ok(payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return Failure(ErrorKind.UPSTREAM_UNAVAILABLE, f"{method} {url} failed: {e!r}")
