"""Rendering of the index page and of events and results as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from eventmaster.model import Event

log = logging.getLogger(__name__)

INDEX_LOAD_ERROR = "Error: Could not load index.html"


def _dump(value) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def index_page(path="index.html") -> str:
    """Return the HTML of the index page, or an error text if it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        log.error("Failed to open %s file.", path)
        return INDEX_LOAD_ERROR


def event_to_json(event: Event) -> str:
    """Render one event as a compact JSON object."""
    return _dump(
        {
            "id": event.id,
            "title": event.title,
            "category": event.category,
            "date": event.date,
            "time": event.time,
            "venue": event.venue,
            "status": event.status,
            "maxAttendees": event.max_attendees,
        }
    )


def events_to_json(events) -> str:
    """Render a sequence of events as a compact JSON array."""
    return "[" + ",".join(event_to_json(event) for event in events) + "]"


def result_to_json(success: bool, message: str) -> str:
    """Render the outcome of a change as ``{"success": ..., "message": ...}``."""
    return _dump({"success": bool(success), "message": message})