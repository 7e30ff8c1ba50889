#!/usr/bin/env python3
"""
Discord webhook dispatcher for the Discord Command Logger plugin.
Posts payloads off the host thread and logs failed deliveries.
"""

import asyncio
import json
import logging
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable, Dict

import aiohttp

from ..host.interfaces import BackgroundExecutor
from ..observability.metrics import metrics

logger = logging.getLogger(__name__)

LOG_PREFIX = "[DiscordCommandLogger]"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Discord answers 204 unless the webhook is called with ?wait=true
SUCCESS_STATUSES = (200, 204)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a single webhook delivery."""

    ok: bool
    status: int = 0
    error: str = ""


class WebhookDispatcher:
    """Sends webhook payloads on a background executor, one attempt each."""

    def __init__(
        self,
        url: str,
        executor: BackgroundExecutor,
        verify_tls: bool = True,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session_factory: Callable[..., Any] = aiohttp.ClientSession,
    ):
        self.url = url
        self.executor = executor
        self.verify_tls = verify_tls
        self.timeout = timeout
        self._session_factory = session_factory

        if not verify_tls:
            logger.warning(f"{LOG_PREFIX} TLS certificate verification is disabled for webhook delivery")

    def dispatch(self, payload: Dict[str, Any]) -> Future:
        """Serialize ``payload`` now and submit its delivery. Does not wait for the send."""
        body = json.dumps(payload)
        return self.executor.submit(self.deliver(body))

    async def deliver(self, body: str) -> DispatchResult:
        """POST ``body`` to the webhook and report the outcome."""
        result = await self._post(body)
        self.on_complete(result)
        return result

    async def _post(self, body: str) -> DispatchResult:
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with self._session_factory(timeout=timeout) as session:
                async with session.post(
                    self.url,
                    data=body,
                    headers={"Content-Type": "application/json"},
                    ssl=self.verify_tls,
                ) as response:
                    if response.status in SUCCESS_STATUSES:
                        return DispatchResult(ok=True, status=response.status)
                    text = await response.text()
                    return DispatchResult(ok=False, status=response.status, error=text[:200])
        except asyncio.TimeoutError:
            return DispatchResult(ok=False, error=f"Request timed out after {self.timeout:g} seconds")
        except aiohttp.ClientError as e:
            return DispatchResult(ok=False, error=str(e) or type(e).__name__)
        except Exception as e:
            return DispatchResult(ok=False, error=f"{type(e).__name__}: {e}")

    def on_complete(self, result: DispatchResult) -> None:
        """Log failed deliveries. Successful ones are silent."""
        if result.ok:
            metrics.increment_posts_published()
            logger.debug(f"Webhook delivered (HTTP: {result.status})")
            return

        metrics.increment_post_failures()
        logger.error(f"{LOG_PREFIX} Error sending webhook: {result.error} (HTTP: {result.status})")
