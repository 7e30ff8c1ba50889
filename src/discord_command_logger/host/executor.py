"""Background executor running coroutines on a dedicated event loop thread."""

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Coroutine, Optional

logger = logging.getLogger(__name__)


class AsyncioBackgroundExecutor:
    """
    Owns an asyncio event loop running on a daemon thread.

    ``submit`` is safe to call from any thread and never waits for the work to
    run. Submitted tasks are independent; no ordering is guaranteed between them.
    """

    def __init__(self, name: str = "command-logger-webhooks"):
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run_loop, name=name, daemon=True)
        self._pending = set()
        self._lock = threading.Lock()
        self._closed = False
        self._thread.start()

    def _run_loop(self):
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def submit(self, coro: Coroutine[Any, Any, Any]) -> Future:
        with self._lock:
            if self._closed:
                coro.close()
                raise RuntimeError("Executor has been shut down")
            future = asyncio.run_coroutine_threadsafe(coro, self._loop)
            self._pending.add(future)
        future.add_done_callback(self._discard)
        return future

    def _discard(self, future: Future):
        with self._lock:
            self._pending.discard(future)

    def shutdown(self, timeout: Optional[float] = 15.0) -> None:
        """Wait up to ``timeout`` seconds for in-flight sends, then stop the loop."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            pending = list(self._pending)

        for future in pending:
            try:
                future.result(timeout=timeout)
            except Exception as e:
                logger.warning(f"Background task did not finish cleanly: {e}")

        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=timeout)
        if not self._thread.is_alive():
            self._loop.close()
