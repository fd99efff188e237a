"""Event records and their storage in a MySQL ``events`` table."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

import pymysql

log = logging.getLogger(__name__)

HOST = "localhost"
USER = "root"
PASSWORD = "password"
DATABASE = "EventMaster"
PORT = 3306

COLUMNS = ("id", "title", "category", "date", "time", "venue", "status", "maxAttendees")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class EventModelError(Exception):
    """Raised when the database rejects a query or cannot be reached."""


@dataclass
class Event:
    """One row of the ``events`` table."""

    id: int = 0
    title: str = ""
    category: str = ""
    date: str = ""
    time: str = ""
    venue: str = ""
    status: str = ""
    max_attendees: int = 0


def _to_int(value: Any) -> int:
    """Read a leading integer the lenient way; anything unreadable is 0."""
    if value is None:
        return 0
    if isinstance(value, int):
        return int(value)
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _event_from_row(row: Any) -> Event:
    return Event(
        id=_to_int(row[0]),
        title=_to_text(row[1]),
        category=_to_text(row[2]),
        date=_to_text(row[3]),
        time=_to_text(row[4]),
        venue=_to_text(row[5]),
        status=_to_text(row[6]),
        max_attendees=_to_int(row[7]),
    )


def connect(host=HOST, user=USER, password=PASSWORD, database=DATABASE, port=PORT):
    """Open a MySQL connection and wrap it in an :class:`EventModel`."""
    try:
        connection = pymysql.connect(
            host=host,
            user=user,
            password=password,
            database=database,
            port=port,
            autocommit=True,
        )
    except pymysql.MySQLError as exc:
        log.error("Database connection failed: %s", exc)
        raise EventModelError(f"Database connection failed: {exc}") from exc
    log.info("Connected to database.")
    return EventModel(connection)


class EventModel:
    """Create, read, update and delete events over a DB-API connection."""

    def __init__(self, connection):
        self._connection = connection

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> EventModel:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _run(self, action: str, sql: str, params: tuple = ()) -> list:
        if self._connection is None:
            raise EventModelError(f"Error {action}: connection is closed")
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(sql, params)
                return list(cursor.fetchall() or ())
        except pymysql.MySQLError as exc:
            log.error("Error %s: %s", action, exc)
            raise EventModelError(f"Error {action}: {exc}") from exc

    def create_event(self, title, category, date, time, venue, status, max_attendees) -> None:
        """Insert a new event."""
        self._run(
            "adding event",
            "INSERT INTO events (title, category, `date`, `time`, venue, status, maxAttendees) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (title, category, date, time, venue, status, int(max_attendees)),
        )

    def fetch_events(self) -> list[Event]:
        """Return every event in table order."""
        rows = self._run("fetching events", "SELECT * FROM events")
        return [_event_from_row(row) for row in rows]

    def fetch_event(self, event_id) -> Event:
        """Return the event with this id, or an empty Event if there is none."""
        rows = self._run("fetching event", "SELECT * FROM events WHERE id = %s", (int(event_id),))
        return _event_from_row(rows[0]) if rows else Event()

    def update_event(self, event_id, field, new_value) -> None:
        """Set one column of one event."""
        if field not in COLUMNS:
            log.error("Error updating event: unknown field %r", field)
            raise EventModelError(f"Error updating event: unknown field {field!r}")
        self._run(
            "updating event",
            f"UPDATE events SET `{field}` = %s WHERE id = %s",
            (new_value, int(event_id)),
        )

    def delete_event(self, event_id) -> None:
        """Remove the event with this id."""
        self._run("deleting event", "DELETE FROM events WHERE id = %s", (int(event_id),))