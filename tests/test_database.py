from tinkerworks.database import Database
from tinkerworks.models import Device, Post


def test_new_database_is_empty():
    db = Database()
    assert db.posts() == []
    assert db.devices() == []


def test_posts_keep_insertion_order():
    db = Database()
    first = Post("one", "b", "c")
    second = Post("two", "b", "c")
    db.add_posts(first)
    db.add_posts(second)
    assert db.posts() == [first, second]


def test_devices_are_stored():
    db = Database()
    device = Device("Serial 1234", "Model 1234", "SoftwareVersion 1234", "Vendor 1234")
    db.add_devices(device)
    assert db.devices() == [device]
    assert db.posts() == []


def test_snapshot_does_not_alias_storage():
    db = Database()
    db.add_posts(Post("one", "b", "c"))
    snapshot = db.posts()
    snapshot.clear()
    assert len(db.posts()) == 1