"""An in-memory store of posts and devices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .models import Device, Post


@dataclass
class Database:
    """Posts and devices kept in insertion order."""

    _posts: List[Post] = field(default_factory=list)
    _devices: List[Device] = field(default_factory=list)

    def add_posts(self, post: Post) -> None:
        self._posts.append(post)

    def posts(self) -> List[Post]:
        """A snapshot of the stored posts."""
        return list(self._posts)

    def add_devices(self, device: Device) -> None:
        self._devices.append(device)

    def devices(self) -> List[Device]:
        """A snapshot of the stored devices."""
        return list(self._devices)