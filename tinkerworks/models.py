"""Records served by the web API: posts, configurations and devices.

Each record serialises to a JSON-ready dict whose keys match the wire
format: the creation time travels as an RFC 3339 string under
``_datetime`` and the identifier as a hyphenated UUID string.
"""

from __future__ import annotations

import re
import uuid as uuid_module
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Type, TypeVar

_DATETIME_KEY = "_datetime"
_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)

R = TypeVar("R")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def format_datetime(moment: datetime) -> str:
    """RFC 3339 text in UTC with 0, 3 or 6 fractional digits and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    micros = moment.microsecond
    if micros == 0:
        fraction = ""
    elif micros % 1000 == 0:
        fraction = f".{micros // 1000:03d}"
    else:
        fraction = f".{micros:06d}"
    return moment.strftime("%Y-%m-%dT%H:%M:%S") + fraction + "Z"


def parse_datetime(text: str) -> datetime:
    """Parse RFC 3339 text into an aware UTC datetime."""
    if not isinstance(text, str):
        raise ValueError(f"expected an RFC 3339 string, got {type(text).__name__}")
    match = _RFC3339.match(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 datetime: {text!r}")
    date_part, time_part, fraction, offset = match.groups()
    fraction = (fraction or "")[:6].ljust(6, "0")
    if offset in ("Z", "z"):
        offset = "+00:00"
    moment = datetime.fromisoformat(f"{date_part}T{time_part}.{fraction}{offset}")
    return moment.astimezone(timezone.utc)


def _key(name: str) -> str:
    return _DATETIME_KEY if name == "timestamp" else name


def _record_to_dict(record: Any) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if f.name == "timestamp":
            result[_key(f.name)] = format_datetime(value)
        elif f.name == "uuid":
            result[_key(f.name)] = str(value)
        else:
            result[_key(f.name)] = value
    return result


def _record_from_dict(cls: Type[R], data: Mapping[str, Any]) -> R:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    values: Dict[str, Any] = {}
    for f in fields(cls):
        key = _key(f.name)
        if key not in data:
            raise ValueError(f"missing field `{key}`")
        raw = data[key]
        if f.name == "timestamp":
            values[f.name] = parse_datetime(raw)
        elif f.name == "uuid":
            if not isinstance(raw, str):
                raise ValueError(f"field `{key}` must be a UUID string")
            values[f.name] = uuid_module.UUID(raw)
        else:
            if not isinstance(raw, str):
                raise ValueError(f"field `{key}` must be a string")
            values[f.name] = raw
    return cls(**values)


@dataclass
class Post:
    """A post in the feed."""

    title: str
    body: str
    author: str
    timestamp: datetime = field(default_factory=_now)
    uuid: uuid_module.UUID = field(default_factory=uuid_module.uuid4)

    def to_dict(self) -> Dict[str, str]:
        return _record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        return _record_from_dict(cls, data)


@dataclass
class Config:
    """Connection settings for reaching a machine."""

    ip: str
    user: str
    sshkey: str
    port: str
    port_forward: str
    timestamp: datetime = field(default_factory=_now)
    uuid: uuid_module.UUID = field(default_factory=uuid_module.uuid4)

    def to_dict(self) -> Dict[str, str]:
        return _record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        return _record_from_dict(cls, data)


@dataclass
class Device:
    """A registered device."""

    serial: str
    model: str
    software_version: str
    vendor: str
    timestamp: datetime = field(default_factory=_now)
    uuid: uuid_module.UUID = field(default_factory=uuid_module.uuid4)

    def to_dict(self) -> Dict[str, str]:
        return _record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Device":
        return _record_from_dict(cls, data)