"""Background sync: periodically pulls the server record into the store.

Runs as an asyncio task started by ``start()`` and cancelled by
``stop()``; ``async with BackgroundSync(...)`` ties it to the lifetime of
the consumer that mounts it.

Every ``interval`` seconds the current server record is fetched and each
sub-record present in the response is dispatched into the store. There is
no conflict resolution: the last pull overwrites local edits that were not
submitted yet. A failed pull is logged, handed to ``on_error`` and
skipped; the loop keeps its fixed cadence (no backoff, no early retry).
"""

import asyncio
import logging
from typing import Callable

from formwizard.client.api import FormDataClient
from formwizard.config import settings
from formwizard.schemas.wizard import FormData
from formwizard.store import FormStore

logger = logging.getLogger("formwizard.sync")

ErrorCallback = Callable[[Exception], None]


class BackgroundSync:
    def __init__(
        self,
        store: FormStore,
        client: FormDataClient,
        interval: float | None = None,
        on_error: ErrorCallback | None = None,
    ):
        self.store = store
        self.client = client
        self.interval = interval if interval is not None else settings.sync_interval_seconds
        self.on_error = on_error
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def __aenter__(self) -> "BackgroundSync":
        self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        logger.info("Background sync started (every %.1fs)", self.interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Background sync stopped")

    async def sync_once(self) -> FormData:
        """Pull the server record and dispatch its sub-records."""
        data = await self.client.fetch()
        fields = data.model_fields_set
        if "personal_info" in fields:
            self.store.update_personal_info(data.personal_info)
        if "address" in fields:
            self.store.update_address(data.address)
        if "preferences" in fields:
            self.store.update_preferences(data.preferences)
        return data

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self.sync_once()
            except Exception as exc:
                logger.error("Failed to sync form data: %s", exc)
                self._report(exc)

    def _report(self, exc: Exception) -> None:
        if self.on_error is None:
            return
        try:
            self.on_error(exc)
        except Exception:
            logger.exception("Sync error callback failed")
