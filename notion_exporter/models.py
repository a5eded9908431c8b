"""Wire models for the Notion export API."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskState(str, Enum):
    """Task states reported by ``getTasks``."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    SUCCESS = "success"
    FAILURE = "failure"


class TaskStatus(BaseModel):
    """Progress information attached to a task."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: Optional[str] = None
    export_url: Optional[str] = Field(default=None, alias="exportURL")
    pages_exported: Optional[int] = Field(default=None, alias="pagesExported")


class ExportTask(BaseModel):
    """Snapshot of an export task as returned by the API."""

    model_config = ConfigDict(extra="ignore")

    id: str
    # Plain string so that unknown states still parse.
    state: str
    status: TaskStatus = Field(default_factory=TaskStatus)
    error: Optional[str] = None

    @property
    def in_progress(self) -> bool:
        return self.state == TaskState.IN_PROGRESS.value

    @property
    def export_url(self) -> Optional[str]:
        """The download URL, only when the task succeeded with one."""
        if self.state == TaskState.SUCCESS.value and self.status.export_url:
            return self.status.export_url
        return None


class EnqueueTaskResponse(BaseModel):
    """Body returned by ``enqueueTask``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    task_id: str = Field(alias="taskId")


class GetTasksResponse(BaseModel):
    """Body returned by ``getTasks``."""

    model_config = ConfigDict(extra="ignore")

    results: List[ExportTask] = Field(default_factory=list)

    def find(self, task_id: str) -> Optional[ExportTask]:
        return next((task for task in self.results if task.id == task_id), None)


class ExportOptions(BaseModel):
    """Options of an ``exportBlock`` request."""

    model_config = ConfigDict(populate_by_name=True)

    export_type: str = Field(default="markdown", alias="exportType")
    time_zone: str = Field(default="Europe/Zurich", alias="timeZone")
    locale: str = "en"


class ExportBlockRequest(BaseModel):
    """A single, non-recursive ``exportBlock`` request."""

    block_id: str
    recursive: bool = False
    export_options: ExportOptions = Field(default_factory=ExportOptions)

    def to_payload(self) -> Dict[str, Any]:
        """Build the ``enqueueTask`` request body."""
        return {
            "task": {
                "eventName": "exportBlock",
                "request": {
                    "block": {"id": self.block_id},
                    "recursive": self.recursive,
                    "exportOptions": self.export_options.model_dump(by_alias=True),
                },
            }
        }


__all__ = [
    "EnqueueTaskResponse",
    "ExportBlockRequest",
    "ExportOptions",
    "ExportTask",
    "GetTasksResponse",
    "TaskState",
    "TaskStatus",
]
