import pytest

from ziesha.diskstore import DiskKvStore
from ziesha.kvstore import KvStoreError, Put, RamKvStore, Remove


@pytest.fixture
def disk(tmp_path):
    with DiskKvStore(tmp_path / "db") as store:
        yield store


def test_ram_and_disk_pair_prefix(disk):
    ram = RamKvStore()
    assert ram.checksum() == disk.checksum()

    ops = [
        Put("bc", bytes([0, 1, 2, 3])),
        Put("aa", bytes([3, 2, 1, 0])),
        Put("a0a", b""),
        Put("bge", b""),
        Put("def", b""),
    ]
    ram.update(ops)
    disk.update(ops)

    assert len(disk.pairs("")) == 5
    assert len(ram.pairs("")) == 5
    assert len(disk.pairs("a")) == 2
    assert len(ram.pairs("a")) == 2
    assert len(disk.pairs("b")) == 2
    assert len(ram.pairs("b")) == 2
    assert len(disk.pairs("d")) == 1
    assert len(ram.pairs("d")) == 1
    assert len(disk.pairs("a0")) == 1
    assert len(ram.pairs("a0")) == 1
    assert len(disk.pairs("a1")) == 0
    assert len(ram.pairs("a1")) == 0


def test_ram_and_disk_db_consistency(disk):
    ram = RamKvStore()
    assert ram.checksum() == disk.checksum()

    ops = [
        Put("bc", bytes([0, 1, 2, 3])),
        Put("aa", bytes([3, 2, 1, 0])),
        Put("def", b""),
    ]
    ram.update(ops)
    disk.update(ops)
    assert ram.checksum() == disk.checksum()

    new_ops = [
        Remove("aa"),
        Put("def", bytes([1, 1, 1, 2])),
        Put("ghi", bytes([3, 3, 3, 3])),
    ]
    ram.update(new_ops)
    disk.update(new_ops)
    assert ram.checksum() == disk.checksum()


def test_values_persist_across_reopen(tmp_path):
    path = tmp_path / "db"
    with DiskKvStore(path) as store:
        store.update([Put("k", b"value")])
    with DiskKvStore(path) as store:
        assert store.get("k") == b"value"
        assert store.get("other") is None


def test_mirror_over_disk_leaves_disk_untouched(disk):
    disk.update([Put("a", b"1")])
    mirror = disk.mirror()
    mirror.update([Put("a", b"2"), Put("b", b"3")])
    assert mirror.pairs("") == {"a": b"2", "b": b"3"}
    assert disk.pairs("") == {"a": b"1"}
    assert mirror.rollback() == [Put("a", b"1"), Remove("b")]


def test_closed_store_raises(tmp_path):
    store = DiskKvStore(tmp_path / "db")
    store.close()
    with pytest.raises(KvStoreError):
        store.get("k")