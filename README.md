# eventmaster

A small web service for managing events. It serves a single HTML page and a
JSON API for creating, listing, updating and deleting events. The events are
kept in a MySQL table named `events`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Database

The service expects a MySQL database (by default `EventMaster` on
`localhost:3306`, user `root`) holding a table with these columns, in this
order:

```sql
CREATE TABLE events (
    id INT AUTO_INCREMENT PRIMARY KEY,
    title VARCHAR(255),
    category VARCHAR(255),
    date VARCHAR(32),
    time VARCHAR(32),
    venue VARCHAR(255),
    status VARCHAR(64),
    maxAttendees INT
);
```

The package does not create the database or the table; they must exist
before the server starts.

## Running the server

```
eventmaster
```

This connects to the database, then listens on `0.0.0.0:8080` and serves the
file `index.html` from the current directory at `/`. If the file cannot be
read, `/` answers with the text `Error: Could not load index.html`. If the
database cannot be reached, the command prints `Error: ...` and exits with
status 1.

Options:

| Option            | Default       | Meaning                      |
|-------------------|---------------|------------------------------|
| `--bind`          | `0.0.0.0`     | address to listen on         |
| `--port`          | `8080`        | port to listen on            |
| `--index`         | `index.html`  | HTML file served at `/`      |
| `--db-host`       | `localhost`   | MySQL host                   |
| `--db-port`       | `3306`        | MySQL port                   |
| `--db-user`       | `root`        | MySQL user                   |
| `--db-password`   | `password`    | MySQL password               |
| `--database`      | `EventMaster` | database name                |

No HTML page ships with the package; supply your own with `--index`.

## API

| Method | Path                | Description                     |
|--------|---------------------|---------------------------------|
| GET    | `/api/events`       | List all events                 |
| GET    | `/api/events/<id>`  | Fetch one event                 |
| POST   | `/api/events`       | Create an event                 |
| PUT    | `/api/events/<id>`  | Update the fields given         |
| DELETE | `/api/events/<id>`  | Delete an event                 |

An event looks like this:

```json
{"id":1,"title":"Launch","category":"Work","date":"2024-05-01",
 "time":"18:00","venue":"Hall A","status":"Scheduled","maxAttendees":50}
```

Fetching an id that does not exist returns an event with every field empty
and `id` 0. If the database fails while listing, the list is empty.

Creating, updating and deleting answer with
`{"success":true,"message":"..."}`, or `"success":false` when the database
rejects the change. A POST whose `maxAttendees` does not start with an
integer answers with status 500. A PUT sets each key of the body as a column
of that event; keys that are not column names make the update report failure.

Request bodies are read by a lenient reader that takes flat `"key": value`
pairs and keeps every value as text; nested objects and escaped quotes are
not understood.

## Using it from Python

```python
from eventmaster.controller import create_app
from eventmaster.model import connect

password = "password"
with connect("localhost", "root", password=password, database="EventMaster", port=3306) as model:
    app = create_app(model, "index.html")
    app.run(port=8080)
```

- `eventmaster.model` holds the `Event` dataclass, `EventModel` (with
  `create_event`, `fetch_events`, `fetch_event`, `update_event`,
  `delete_event` and `close`; usable as a context manager), `connect`, and
  `EventModelError`, raised when a query fails or the connection is closed.
  `EventModel` accepts any DB-API connection whose cursor understands `%s`
  placeholders.
- `eventmaster.view` holds `index_page`, `event_to_json`, `events_to_json`
  and `result_to_json`.
- `eventmaster.controller` holds `create_app`, which builds the Flask
  application, and `parse_json`, the lenient body reader.
- `eventmaster.main` holds `build_parser` and `main`, the command above.