"""HTTP routes of the event API and the lenient body parser they use."""

from __future__ import annotations

import logging
import re

from flask import Flask, Response, request

from eventmaster.model import Event, EventModelError
from eventmaster.view import event_to_json, events_to_json, index_page, result_to_json

log = logging.getLogger(__name__)

_WHITESPACE = " \t\n"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _find_any(text: str, chars: str, start: int) -> int:
    positions = [pos for pos in (text.find(ch, start) for ch in chars) if pos >= 0]
    return min(positions) if positions else -1


def parse_json(text: str) -> dict[str, str]:
    """Read flat ``"key": value`` pairs from a JSON-like body.

    Every value is kept as text; later keys replace earlier ones and the
    result is ordered by key.
    """
    log.debug("Parsing JSON: %s", text)
    data: dict[str, str] = {}
    end = 0
    length = len(text)
    while True:
        start = text.find('"', end)
        if start < 0:
            break
        end = text.find('"', start + 1)
        if end < 0:
            break
        key = text[start + 1:end]

        start = text.find(":", end)
        if start < 0:
            break
        start += 1
        while start < length and text[start] in _WHITESPACE:
            start += 1
        if start >= length:
            continue

        if text[start] == '"':
            start += 1
            end = text.find('"', start)
            if end < 0:
                break
            data[key] = text[start:end]
            end += 1
        else:
            end = _find_any(text, ",}", start)
            if end < 0:
                break
            data[key] = text[start:end].strip(_WHITESPACE)

    result = dict(sorted(data.items()))
    for key, value in result.items():
        log.debug("%s: %s", key, value)
    return result


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if not match:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _json(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="application/json")


def create_app(model, index_path="index.html") -> Flask:
    """Build the Flask application serving the index page and the event API."""
    app = Flask(__name__)

    @app.get("/")
    def index():
        return index_page(index_path)

    @app.get("/api/events")
    def list_events():
        try:
            events = model.fetch_events()
        except EventModelError:
            events = []
        return _json(events_to_json(events))

    @app.get("/api/events/<int(signed=True):event_id>")
    def show_event(event_id):
        try:
            event = model.fetch_event(event_id)
        except EventModelError:
            event = Event()
        return _json(event_to_json(event))

    @app.post("/api/events")
    def create_event():
        data = parse_json(request.get_data(as_text=True))
        failure = result_to_json(False, "Failed to create event")
        try:
            max_attendees = _parse_int(data.get("maxAttendees", ""))
        except ValueError:
            return _json(failure, 500)
        try:
            model.create_event(
                data.get("title", ""),
                data.get("category", ""),
                data.get("date", ""),
                data.get("time", ""),
                data.get("venue", ""),
                data.get("status", ""),
                max_attendees,
            )
        except EventModelError:
            return _json(failure)
        return _json(result_to_json(True, "Event created successfully"))

    @app.put("/api/events/<int(signed=True):event_id>")
    def update_event(event_id):
        data = parse_json(request.get_data(as_text=True))
        success = True
        for key, value in data.items():
            try:
                model.update_event(event_id, key, value)
            except EventModelError:
                success = False
        message = "Event updated successfully" if success else "Failed to update event"
        return _json(result_to_json(success, message))

    @app.delete("/api/events/<int(signed=True):event_id>")
    def delete_event(event_id):
        try:
            model.delete_event(event_id)
        except EventModelError:
            return _json(result_to_json(False, "Failed to delete event"))
        return _json(result_to_json(True, "Event deleted successfully"))

    return app