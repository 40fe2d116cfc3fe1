from __future__ import annotations

from pathlib import Path

import pytest

from bytedit.core.buffer import ByteStore, LoadFailed, SaveFailed


def test_set_grows_empty_store() -> None:
    store = ByteStore()
    assert store.size() == 0
    assert not store.is_dirty()

    store.set(0, 0xDE)
    assert store.size() == 1
    assert store.get(0) == 0xDE
    assert store.is_dirty()


def test_set_past_end_fills_gap_with_zero() -> None:
    store = ByteStore(b"\x01")
    store.set(4, 0x55)
    assert store.size() == 5
    assert bytes(store.data) == b"\x01\x00\x00\x00\x55"


def test_get_out_of_range_returns_zero() -> None:
    store = ByteStore(b"\x10\x20")
    assert store.get(1) == 0x20
    assert store.get(2) == 0
    assert store.get(-1) == 0


@pytest.mark.parametrize("value", [-1, 256])
def test_set_rejects_non_byte_values(value: int) -> None:
    store = ByteStore(b"\x00")
    with pytest.raises(ValueError):
        store.set(0, value)
    assert not store.is_dirty()


def test_set_rejects_negative_offset() -> None:
    with pytest.raises(ValueError):
        ByteStore(b"\x00").set(-1, 1)


def test_load_and_save_round_trip(tmp_path: Path) -> None:
    p = tmp_path / "data.bin"
    p.write_bytes(bytes(range(10)))

    store = ByteStore()
    store.load(str(p))
    assert store.filename == str(p)
    assert store.size() == 10
    assert not store.is_dirty()

    store.set(3, 0xFF)
    assert store.save() is True
    assert not store.is_dirty()
    assert p.read_bytes()[3] == 0xFF


def test_load_missing_file_raises(tmp_path: Path) -> None:
    store = ByteStore(b"keep")
    with pytest.raises(LoadFailed):
        store.load(str(tmp_path / "missing.bin"))
    assert bytes(store.data) == b"keep"
    assert store.filename is None


def test_save_without_filename_returns_false() -> None:
    store = ByteStore(b"abc")
    store.set(0, 0x41)
    assert store.save() is False
    assert store.is_dirty()


def test_save_as_sets_filename(tmp_path: Path) -> None:
    store = ByteStore(b"abc")
    target = tmp_path / "out.bin"
    assert store.save(str(target)) is True
    assert store.filename == str(target)
    assert target.read_bytes() == b"abc"


def test_save_to_unwritable_path_raises(tmp_path: Path) -> None:
    store = ByteStore(b"abc")
    with pytest.raises(SaveFailed):
        store.save(str(tmp_path / "no" / "such" / "dir.bin"))


def test_alphabet_store() -> None:
    store = ByteStore.alphabet()
    assert store.size() == 1024
    assert bytes(store.data[:28]) == b"ABCDEFGHIJKLMNOPQRSTUVWXYZAB"
    assert store.get(1023) == ord("A") + 1023 % 26
    assert store.is_dirty()
    assert store.filename is None
