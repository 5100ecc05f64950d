import uuid
from datetime import datetime, timedelta, timezone

import pytest

from tinkerworks.models import Config, Device, Post, format_datetime, parse_datetime

MOMENT = datetime(2023, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
ID = uuid.UUID("12345678-1234-5678-1234-567812345678")


def test_post_keys_match_wire_format():
    post = Post("data 1", "data 2", "data 3", MOMENT, ID)
    assert list(post.to_dict()) == ["title", "body", "author", "_datetime", "uuid"]


def test_post_uuid_is_hyphenated():
    post = Post("data 1", "data 2", "data 3", MOMENT, ID)
    assert post.to_dict()["uuid"] == "12345678-1234-5678-1234-567812345678"


def test_post_round_trip():
    post = Post("data 1", "data 2", "data 3", MOMENT, ID)
    assert Post.from_dict(post.to_dict()) == post


def test_config_round_trip():
    config = Config("10.0.0.1", "user", "placeholder", "22", "8080", MOMENT, ID)
    data = config.to_dict()
    assert data["sshkey"] == "placeholder"
    assert Config.from_dict(data) == config


def test_device_round_trip():
    device = Device("Serial 1234", "Model 1234", "SoftwareVersion 1234", "Vendor 1234", MOMENT, ID)
    assert Device.from_dict(device.to_dict()) == device


def test_defaults_give_fresh_identifiers():
    first = Post("a", "b", "c")
    second = Post("a", "b", "c")
    assert first.uuid != second.uuid
    assert first.timestamp.tzinfo is not None


def test_whole_seconds_have_no_fraction():
    moment = datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert format_datetime(moment) == "2023-01-02T03:04:05Z"


def test_parse_accepts_nanoseconds_and_offsets():
    parsed = parse_datetime("2023-01-02T05:04:05.123456789+02:00")
    assert parsed == MOMENT


def test_format_parse_round_trip():
    for micros in (0, 500000, 123456):
        moment = MOMENT.replace(microsecond=micros)
        assert parse_datetime(format_datetime(moment)) == moment


def test_non_utc_input_is_normalised():
    local = MOMENT.astimezone(timezone(timedelta(hours=5)))
    assert format_datetime(local) == format_datetime(MOMENT)


def test_missing_field_raises():
    data = Post("a", "b", "c", MOMENT, ID).to_dict()
    del data["author"]
    with pytest.raises(ValueError, match="author"):
        Post.from_dict(data)


def test_bad_uuid_raises():
    data = Post("a", "b", "c", MOMENT, ID).to_dict()
    data["uuid"] = "not-a-uuid"
    with pytest.raises(ValueError):
        Post.from_dict(data)


def test_bad_datetime_raises():
    data = Post("a", "b", "c", MOMENT, ID).to_dict()
    data["_datetime"] = "yesterday"
    with pytest.raises(ValueError):
        Post.from_dict(data)


def test_wrong_type_raises():
    data = Post("a", "b", "c", MOMENT, ID).to_dict()
    data["title"] = 5
    with pytest.raises(ValueError):
        Post.from_dict(data)


def test_non_object_raises():
    with pytest.raises(ValueError):
        Post.from_dict(["a", "b"])