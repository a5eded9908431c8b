"""Export ZIP, Markdown or CSV files from Notion blocks and pages."""

from __future__ import annotations

from .archive import ArchiveEntry, ExportArchive, has_suffix
from .block_id import block_id_from_url, normalize_block_id, validate_block_id
from .config import Settings
from .errors import (
    EntryNotFoundError,
    ExportFailedError,
    ExportTimeoutError,
    InvalidBlockIdError,
    NotionExportError,
)
from .exporter import NotionExporter
from .models import ExportTask, TaskState

__all__ = [
    "ArchiveEntry",
    "EntryNotFoundError",
    "ExportArchive",
    "ExportFailedError",
    "ExportTask",
    "ExportTimeoutError",
    "InvalidBlockIdError",
    "NotionExportError",
    "NotionExporter",
    "Settings",
    "TaskState",
    "block_id_from_url",
    "has_suffix",
    "normalize_block_id",
    "validate_block_id",
]
