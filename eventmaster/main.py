"""Command line entry point that starts the event server."""

from __future__ import annotations

import argparse
import sys

from eventmaster.controller import create_app
from eventmaster.model import DATABASE, HOST, PASSWORD, PORT, USER, connect


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eventmaster", description="Serve the event API over HTTP.")
    parser.add_argument("--bind", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--index", default="index.html", help="HTML file served at /")
    parser.add_argument("--db-host", default=HOST)
    parser.add_argument("--db-port", type=int, default=PORT)
    parser.add_argument("--db-user", default=USER)
    parser.add_argument("--db-password", default=PASSWORD)
    parser.add_argument("--database", default=DATABASE)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        with connect(args.db_host, args.db_user, args.db_password, args.database, args.db_port) as model:
            app = create_app(model, args.index)
            print(f"Starting EventMaster server on port {args.port}.")
            app.run(host=args.bind, port=args.port, threaded=True)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())