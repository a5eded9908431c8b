"""Pytest configuration and fixtures."""

import json
import sys
import zipfile
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Optional, Union

import httpx
import pytest

# Allow running the suite without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from notion_exporter import NotionExporter, Settings  # noqa: E402

TOKEN = "test-token"
TASK_ID = "task-123"
EXPORT_URL = "https://file.notion.so/exports/export.zip"


def make_zip(files: Dict[str, Union[str, bytes]]) -> bytes:
    """Build an in-memory ZIP with the given ``path -> content`` entries."""
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for path, content in files.items():
            archive.writestr(path, content)
    return buffer.getvalue()


class FakeNotionAPI:
    """Stand-in for the Notion v3 API served through ``httpx.MockTransport``."""

    def __init__(self, tasks: Optional[List[dict]] = None, archive: bytes = b"") -> None:
        self.tasks = list(tasks or [])
        self.archive = archive
        self.requests: List[httpx.Request] = []
        self.enqueued: List[dict] = []
        self.polls = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.endswith("/enqueueTask"):
            self.enqueued.append(json.loads(request.content))
            return httpx.Response(200, json={"taskId": TASK_ID})

        if path.endswith("/getTasks"):
            self.polls += 1
            # Repeat the last snapshot once the scripted sequence is exhausted.
            task = self.tasks.pop(0) if len(self.tasks) > 1 else self.tasks[0]
            return httpx.Response(200, json={"results": [task]})

        if str(request.url) == EXPORT_URL:
            return httpx.Response(200, content=self.archive)

        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url="https://www.notion.so/api/v3/",
            headers={"Cookie": f"token_v2={TOKEN}; "},
            transport=httpx.MockTransport(self.handler),
        )


def task(state: str, export_url: Optional[str] = None, task_id: str = TASK_ID) -> dict:
    status = {"type": "complete" if state == "success" else "progress"}
    if export_url:
        status["exportURL"] = export_url
    return {"id": task_id, "eventName": "exportBlock", "state": state, "status": status}


@pytest.fixture
def settings():
    return Settings(poll_interval=0.001)


@pytest.fixture
def sleeps(monkeypatch):
    """Record poll delays instead of actually sleeping."""
    delays: List[float] = []

    async def fake_sleep(delay):
        delays.append(delay)

    monkeypatch.setattr("notion_exporter.exporter.asyncio.sleep", fake_sleep)
    return delays


@pytest.fixture
def make_exporter(settings):
    """Create an exporter wired to a :class:`FakeNotionAPI`."""

    def _make(api: FakeNotionAPI, **overrides) -> NotionExporter:
        exporter_settings = settings.model_copy(update=overrides) if overrides else settings
        return NotionExporter(TOKEN, settings=exporter_settings, client=api.client())

    return _make
