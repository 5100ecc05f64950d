import json
import uuid

import pytest

from tinkerworks.database import Database
from tinkerworks.models import Post
from tinkerworks.webapi import create_app, seed_database


@pytest.fixture
def db():
    return Database()


@pytest.fixture
def client(db):
    return create_app(db).test_client()


def _payload(post):
    return json.dumps(post.to_dict())


def test_empty_feed(client):
    response = client.get("/post_feed")
    assert response.status_code == 200
    assert response.get_json() == []


def test_responses_are_json(client):
    response = client.get("/post_feed")
    assert response.headers["Content-Type"] == "application/json"


def test_create_post_echoes_body(client, db):
    post = Post("data 1", "data 2", "data 3")
    body = _payload(post)
    response = client.post("/post", data=body)
    assert response.status_code == 201
    assert response.get_data(as_text=True) == body
    assert db.posts() == [Post.from_dict(post.to_dict())]


def test_created_post_appears_in_feed_and_by_id(client):
    post = Post("data 1", "data 2", "data 3")
    client.post("/post", data=_payload(post))
    feed = client.get("/post_feed").get_json()
    assert feed == [post.to_dict()]
    single = client.get(f"/post/{post.uuid}")
    assert single.status_code == 200
    assert single.get_json() == post.to_dict()


def test_unknown_id_is_not_found(client):
    response = client.get(f"/post/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.headers["Content-Type"] == "application/json"


def test_malformed_id_is_bad_request(client):
    assert client.get("/post/not-a-uuid").status_code == 400


def test_invalid_json_is_bad_request(client, db):
    response = client.post("/post", data="{")
    assert response.status_code == 400
    assert db.posts() == []


def test_missing_field_is_bad_request(client, db):
    data = Post("a", "b", "c").to_dict()
    del data["uuid"]
    response = client.post("/post", data=json.dumps(data))
    assert response.status_code == 400
    assert "uuid" in response.get_data(as_text=True)
    assert db.posts() == []


def test_invalid_utf8_is_server_error(client):
    assert client.post("/post", data=b"\xff\xfe").status_code == 500


def test_seed_database_contents():
    db = seed_database()
    posts = db.posts()
    devices = db.devices()
    assert [p.title for p in posts] == ["data 1"]
    assert [d.serial for d in devices] == ["Serial 1234"]


def test_seeded_app_serves_seed_post():
    db = seed_database()
    client = create_app(db).test_client()
    post = db.posts()[0]
    assert client.get(f"/post/{post.uuid}").get_json() == post.to_dict()