"""Client that exports Notion blocks and pages through the private v3 API."""

from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from .archive import EntryPredicate, ExportArchive, has_suffix
from .block_id import normalize_block_id
from .clients import create_http_client
from .config import Settings
from .errors import ExportFailedError, ExportTimeoutError, InvalidBlockIdError
from .logging import get_logger
from .models import (
    EnqueueTaskResponse,
    ExportBlockRequest,
    ExportOptions,
    ExportTask,
    GetTasksResponse,
)

logger = get_logger()


class NotionExporter:
    """Lightweight client to export ZIP, Markdown or CSV files from a Notion block.

    Exporting needs the ``token_v2`` cookie of a user with read access to the
    pages in question. Every call starts its own export task, so several
    exports can run concurrently on one instance.
    """

    def __init__(
        self,
        token: str,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings or Settings()
        self._owns_client = client is None
        self.client = client or create_http_client(token, self.settings)

    async def get_task_id(self, id_or_url: str) -> str:
        """Add an ``exportBlock`` task to Notion's queue and return its id."""
        block_id = normalize_block_id(id_or_url)
        if not block_id:
            raise InvalidBlockIdError(id_or_url)

        request = ExportBlockRequest(
            block_id=block_id,
            export_options=ExportOptions(
                time_zone=self.settings.time_zone,
                locale=self.settings.locale,
            ),
        )
        response = await self.client.post("enqueueTask", json=request.to_payload())
        response.raise_for_status()

        task_id = EnqueueTaskResponse.model_validate(response.json()).task_id
        logger.info("Export task enqueued", block_id=block_id, task_id=task_id)
        return task_id

    async def get_task(self, task_id: str) -> Optional[ExportTask]:
        """Fetch the current snapshot of a task, or ``None`` if Notion does not know it."""
        response = await self.client.post("getTasks", json={"taskIds": [task_id]})
        response.raise_for_status()
        return GetTasksResponse.model_validate(response.json()).find(task_id)

    async def _poll(self, task_id: str, poll_interval: float) -> str:
        while True:
            await asyncio.sleep(poll_interval)
            task = await self.get_task(task_id)

            if task is not None and task.export_url:
                logger.info("Export task finished", task_id=task_id)
                return task.export_url
            if task is not None and task.in_progress:
                logger.debug(
                    "Export task in progress",
                    task_id=task_id,
                    pages_exported=task.status.pages_exported,
                )
                continue

            state = task.state if task is not None else None
            logger.warning("Export task failed", task_id=task_id, state=state)
            raise ExportFailedError(task_id, state)

    async def poll_task(self, task_id: str, poll_interval: Optional[float] = None) -> str:
        """Wait for a task to finish and return the URL of the exported ZIP.

        The task is re-queried every ``poll_interval`` seconds for as long as
        it is ``in_progress``. Without a ``poll_timeout`` in the settings
        there is no upper bound on the wait.
        """
        interval = poll_interval if poll_interval is not None else self.settings.poll_interval
        timeout = self.settings.poll_timeout
        if timeout is None:
            return await self._poll(task_id, interval)

        try:
            return await asyncio.wait_for(self._poll(task_id, interval), timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("Export task timed out", task_id=task_id, timeout=timeout)
            raise ExportTimeoutError(task_id, timeout) from exc

    async def get_zip_url(self, id_or_url: str) -> str:
        """Export the given block and return the URL of the exported ZIP."""
        task_id = await self.get_task_id(id_or_url)
        return await self.poll_task(task_id)

    async def get_zip(self, url: str) -> ExportArchive:
        """Download the ZIP at ``url``."""
        response = await self.client.get(url)
        response.raise_for_status()
        logger.info("Export archive downloaded", size=len(response.content))
        return ExportArchive(response.content)

    async def get_file_string(self, id_or_url: str, predicate: EntryPredicate) -> str:
        """Export the block and return the first ZIP entry matching ``predicate`` as text."""
        url = await self.get_zip_url(id_or_url)
        with await self.get_zip(url) as archive:
            return archive.extract_text(predicate)

    async def get_csv_string(self, id_or_url: str) -> str:
        """Export the block and return its first CSV file, e.g. a database."""
        return await self.get_file_string(id_or_url, has_suffix(".csv"))

    async def get_md_string(self, id_or_url: str) -> str:
        """Export the block and return its first Markdown file."""
        return await self.get_file_string(id_or_url, has_suffix(".md"))

    async def aclose(self) -> None:
        """Close the HTTP client if this exporter created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "NotionExporter":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["NotionExporter"]
