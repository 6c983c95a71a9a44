#!/usr/bin/env python3
"""
Provider client
aiohttp wrapper for upstream dictionary/translation endpoints with a fixed
timeout, plus the `attempt` boundary that turns recoverable upstream failures
into a fallback value.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Dict, Optional, Protocol, Tuple, Type, TypeVar

import aiohttp

from .errors import MarkupError, UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_TIMEOUT_SECONDS = 10.0

# failures of the provider itself; anything else is a bug and must surface
RECOVERABLE_ERRORS: Tuple[Type[BaseException], ...] = (UpstreamError, MarkupError)


class Fetcher(Protocol):
    async def query(
        self,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        user_agent: str = '',
        method: str = 'GET',
        data: Optional[Dict[str, str]] = None,
    ) -> str:
        ...


class ProviderClient:
    """Single HTTP session shared by every upstream query of the process"""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 session: Optional[aiohttp.ClientSession] = None):
        self.timeout = timeout
        self.session = session

    async def __aenter__(self) -> 'ProviderClient':
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _ensure_session(self) -> aiohttp.ClientSession:
        # created lazily so it binds to the running event loop
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self.session

    async def close(self) -> None:
        if self.session is not None and not self.session.closed:
            await self.session.close()

    async def query(
        self,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        user_agent: str = '',
        method: str = 'GET',
        data: Optional[Dict[str, str]] = None,
    ) -> str:
        """
        Fetch an upstream body, forwarding the caller's User-Agent.

        Raises UpstreamError on network failure, timeout or non-2xx status.
        """
        session = self._ensure_session()
        headers = {'User-Agent': user_agent}

        try:
            async with session.request(method, endpoint, params=params, data=data,
                                       headers=headers) as response:
                if not 200 <= response.status < 300:
                    raise UpstreamError(
                        f"{method} {response.url} returned status {response.status}",
                        url=str(response.url),
                        status=response.status,
                    )
                body = await response.text()
        except asyncio.TimeoutError as e:
            raise UpstreamError(f"{method} {endpoint} timed out after {self.timeout}s",
                                url=endpoint) from e
        except aiohttp.ClientError as e:
            raise UpstreamError(f"{method} {endpoint} failed: {e}", url=endpoint) from e

        logger.debug(f"{method} {endpoint} -> {len(body)} chars")
        return body


async def attempt(
    operation: Awaitable[T],
    fallback: T,
    description: str = 'upstream call',
    absorb: Tuple[Type[BaseException], ...] = RECOVERABLE_ERRORS,
) -> T:
    """
    Await `operation`; if it raises one of `absorb`, log it and return
    `fallback` instead. Other exceptions propagate to the caller.
    """
    try:
        return await operation
    except UpstreamError as e:
        if not isinstance(e, absorb):
            raise
        logger.warning(f"{description} failed: {e}")
    except absorb as e:
        logger.warning(f"{description} failed unexpectedly: {e}", exc_info=True)
    return fallback
