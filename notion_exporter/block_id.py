"""Helpers for turning user supplied ids and Notion URLs into block ids.

Everything in here is pure string handling so it can be used (and tested)
without touching the network.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import parse_qs, urlsplit

_HEX_ID = re.compile(r"[0-9a-fA-F]{32}")
# Anchored at the segment start or a hyphen so longer hex runs are never cut down.
_TRAILING_UUID = re.compile(
    r"(?:^|(?<=-))[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

# Query parameter used by Notion "peek" links (``?p=<page id>``).
PEEK_PARAM = "p"


def validate_block_id(value: Optional[str]) -> Optional[str]:
    """Return the canonical hyphenated, lowercase form of a block id.

    Hyphens are ignored, so both ``e0603b592edc45f7acc7b0cccd6656e1`` and
    ``E0603B59-2EDC-45F7-ACC7-B0CCCD6656E1`` are accepted. Anything that is
    not exactly 32 hex digits returns ``None``.
    """
    if not value:
        return None

    compact = value.replace("-", "")
    if not _HEX_ID.fullmatch(compact):
        return None

    compact = compact.lower()
    return "-".join(
        (compact[:8], compact[8:12], compact[12:16], compact[16:20], compact[20:])
    )


def _trailing_token(segment: str) -> str:
    """Isolate the id at the end of a path segment like ``Page-Title-<id>``."""
    match = _TRAILING_UUID.search(segment)
    if match:
        return match.group(0)
    return segment.rsplit("-", 1)[-1]


def block_id_from_url(value: Optional[str]) -> Optional[str]:
    """Extract the candidate block id from a Notion URL.

    Input without a path separator is returned trimmed but otherwise
    untouched, so bare ids pass straight through to :func:`validate_block_id`.
    """
    if value is None:
        return None

    value = value.strip()
    if not value or "/" not in value:
        return value

    if "://" not in value and not value.startswith("/"):
        # ``www.notion.so/...`` without a scheme
        value = f"https://{value}"

    try:
        parts = urlsplit(value)
    except ValueError:
        # e.g. unbalanced brackets in the host part
        return None

    peek = parse_qs(parts.query).get(PEEK_PARAM)
    if peek and peek[0]:
        return _trailing_token(peek[0])

    segments = [segment for segment in parts.path.split("/") if segment]
    if not segments:
        return None
    return _trailing_token(segments[-1])


def normalize_block_id(id_or_url: Optional[str]) -> Optional[str]:
    """Return the canonical block id for a bare id or a Notion URL, or ``None``."""
    return validate_block_id(block_id_from_url(id_or_url))


__all__ = ["block_id_from_url", "normalize_block_id", "validate_block_id"]
