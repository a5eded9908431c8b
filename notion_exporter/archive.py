"""In-memory access to exported ZIP archives."""

from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import PurePosixPath
from typing import Callable, List, Optional

from .errors import EntryNotFoundError


@dataclass(frozen=True)
class ArchiveEntry:
    """A single file inside an export archive."""

    path: str
    _archive: zipfile.ZipFile = field(repr=False, compare=False)

    @property
    def name(self) -> str:
        """File name without the directories leading to it."""
        return PurePosixPath(self.path).name

    def get_data(self) -> bytes:
        return self._archive.read(self.path)

    def get_text(self, encoding: str = "utf-8") -> str:
        return self.get_data().decode(encoding, errors="replace")


EntryPredicate = Callable[[ArchiveEntry], bool]


def has_suffix(suffix: str) -> EntryPredicate:
    """Build a predicate matching entries whose file name ends with ``suffix``."""

    def predicate(entry: ArchiveEntry) -> bool:
        return entry.name.endswith(suffix)

    return predicate


class ExportArchive:
    """Read-only view over the bytes of a downloaded export.

    Raises :class:`zipfile.BadZipFile` when ``data`` is not a ZIP archive.
    """

    def __init__(self, data: bytes) -> None:
        self._zip = zipfile.ZipFile(BytesIO(data))

    @property
    def entries(self) -> List[ArchiveEntry]:
        """File entries in archive order; directory entries are skipped."""
        return [
            ArchiveEntry(info.filename, self._zip)
            for info in self._zip.infolist()
            if not info.is_dir()
        ]

    def find(self, predicate: EntryPredicate) -> Optional[ArchiveEntry]:
        return next((entry for entry in self.entries if predicate(entry)), None)

    def extract_text(self, predicate: EntryPredicate) -> str:
        """Return the stripped text of the first entry matching ``predicate``."""
        entry = self.find(predicate)
        if entry is None:
            raise EntryNotFoundError()
        return entry.get_text().strip()

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ExportArchive":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["ArchiveEntry", "EntryPredicate", "ExportArchive", "has_suffix"]
