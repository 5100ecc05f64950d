"""A small JSON web API serving a feed of posts."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import threading
import time
import uuid
from typing import Any, Optional, Sequence

from flask import Flask, Response, g, request

from .database import Database
from .models import Device, Post

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8811


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def create_app(database: Optional[Database] = None) -> Flask:
    """Build the application serving ``database`` (a new empty one if omitted)."""
    db = database if database is not None else Database()
    lock = threading.Lock()
    app = Flask(__name__)

    @app.before_request
    def _start_timer() -> None:
        g.started = time.perf_counter()

    @app.after_request
    def _json_and_log(response: Response) -> Response:
        response.headers["Content-Type"] = "application/json"
        elapsed = time.perf_counter() - g.get("started", time.perf_counter())
        logger.info(
            "%s %s -> %d (%.3f ms)",
            request.method, request.path, response.status_code, elapsed * 1000,
        )
        return response

    @app.get("/post_feed")
    def post_feed() -> Response:
        with lock:
            payload = _dumps([post.to_dict() for post in db.posts()])
        return Response(payload, status=200)

    @app.post("/post")
    def post_post() -> Response:
        try:
            payload = request.get_data().decode("utf-8")
        except UnicodeDecodeError as error:
            return Response(str(error), status=500)
        try:
            post = Post.from_dict(json.loads(payload))
        except ValueError as error:
            return Response(str(error), status=400)
        with lock:
            db.add_posts(post)
        return Response(payload, status=201)

    @app.get("/post/<post_id>")
    def post(post_id: str) -> Response:
        try:
            wanted = uuid.UUID(post_id)
        except ValueError as error:
            return Response(str(error), status=400)
        with lock:
            found = next((p for p in db.posts() if p.uuid == wanted), None)
            found = dataclasses.replace(found) if found is not None else None
        if found is None:
            return Response(status=404)
        return Response(_dumps(found.to_dict()), status=200)

    return app


def seed_database() -> Database:
    """A database holding one sample post and one sample device."""
    db = Database()
    db.add_posts(Post("data 1", "data 2", "data 3"))
    db.add_devices(
        Device("Serial 1234", "Model 1234", "SoftwareVersion 1234", "Vendor 1234")
    )
    return db


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the API with a seeded database until interrupted."""
    parser = argparse.ArgumentParser(prog="webapi", description="Serve the post feed API.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    app = create_app(seed_database())
    app.run(host=args.host, port=args.port)
    return 0