import json

from eventmaster.model import Event
from eventmaster.view import (
    INDEX_LOAD_ERROR,
    event_to_json,
    events_to_json,
    index_page,
    result_to_json,
)


def test_index_page_reads_file(tmp_path):
    page = tmp_path / "index.html"
    page.write_text("<h1>Events</h1>", encoding="utf-8")
    assert index_page(page) == "<h1>Events</h1>"


def test_index_page_missing_file(tmp_path):
    assert index_page(tmp_path / "absent.html") == INDEX_LOAD_ERROR
    assert INDEX_LOAD_ERROR == "Error: Could not load index.html"


def test_event_to_json_default_event():
    expected = '{"id":0,"title":"","category":"","date":"","time":"","venue":"","status":"","maxAttendees":0}'
    assert event_to_json(Event()) == expected


def test_event_to_json_round_trip_and_key_order():
    event = Event(3, "Gala", "Party", "2024-05-01", "18:00", "Hall", "open", 40)
    decoded = json.loads(event_to_json(event))
    assert list(decoded) == [
        "id", "title", "category", "date", "time", "venue", "status", "maxAttendees",
    ]
    assert Event(*decoded.values()) == event


def test_event_to_json_escapes_quotes():
    event = Event(title='Say "hi"')
    assert json.loads(event_to_json(event))["title"] == 'Say "hi"'


def test_events_to_json_empty():
    assert events_to_json([]) == "[]"


def test_events_to_json_many():
    events = [Event(id=1, title="a"), Event(id=2, title="b")]
    decoded = json.loads(events_to_json(events))
    assert [item["id"] for item in decoded] == [1, 2]
    assert events_to_json(events) == "[" + event_to_json(events[0]) + "," + event_to_json(events[1]) + "]"


def test_result_to_json():
    assert result_to_json(True, "ok") == '{"success":true,"message":"ok"}'
    decoded = json.loads(result_to_json(False, "Failed to delete event"))
    assert decoded == {"success": False, "message": "Failed to delete event"}