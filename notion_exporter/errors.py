"""Exceptions raised by the Notion exporter.

Transport problems are not wrapped: ``httpx.HTTPError`` subclasses reach the
caller unchanged.
"""

from __future__ import annotations

from typing import Optional


class NotionExportError(Exception):
    """Base class for export failures."""


class InvalidBlockIdError(NotionExportError, ValueError):
    """Raised when an id or URL does not contain a valid block id."""

    def __init__(self, id_or_url: str) -> None:
        super().__init__(f"Invalid URL or blockId: {id_or_url}")
        self.id_or_url = id_or_url


class ExportFailedError(NotionExportError):
    """Raised when an export task ends in any state but a usable success."""

    def __init__(self, task_id: str, state: Optional[str] = None) -> None:
        super().__init__("Export task failed.")
        self.task_id = task_id
        self.state = state


class ExportTimeoutError(ExportFailedError):
    """Raised when polling exceeds the configured ``poll_timeout``."""

    def __init__(self, task_id: str, timeout: float) -> None:
        super().__init__(task_id, state="in_progress")
        self.args = (f"Export task did not finish within {timeout} seconds.",)
        self.timeout = timeout


class EntryNotFoundError(NotionExportError, LookupError):
    """Raised when no archive entry matches the requested predicate."""

    def __init__(self) -> None:
        super().__init__("Could not find file in ZIP.")


__all__ = [
    "EntryNotFoundError",
    "ExportFailedError",
    "ExportTimeoutError",
    "InvalidBlockIdError",
    "NotionExportError",
]
