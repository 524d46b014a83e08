from dataclasses import dataclass

import pytest

from calorietrack.database import Database


@dataclass
class Entry:
    key: str
    value: int

    @classmethod
    def header(cls):
        return "key,value"

    @classmethod
    def from_line(cls, line):
        key, value = line.split(",")
        return cls(key, int(value))

    def to_line(self):
        return f"{self.key},{self.value}"


def test_add_len_bool_items(tmp_path):
    db = Database(tmp_path / "db.csv", Entry)
    assert len(db) == 0
    assert bool(db) is False
    db.add(Entry("a", 1))
    db.add(Entry("b", 2))
    assert len(db) == 2
    assert bool(db) is True
    assert db.items() == [Entry("a", 1), Entry("b", 2)]


def test_items_is_a_copy(tmp_path):
    db = Database(tmp_path / "db.csv", Entry)
    db.add(Entry("a", 1))
    db.items().append(Entry("z", 9))
    assert len(db) == 1


def test_save_writes_header_and_lines(tmp_path):
    path = tmp_path / "db.csv"
    db = Database(path, Entry)
    db.add(Entry("a", 1))
    db.add(Entry("b", 2))
    db.save()
    assert path.read_text(encoding="utf-8") == "key,value\na,1\nb,2\n"


def test_round_trip(tmp_path):
    path = tmp_path / "db.csv"
    db = Database(path, Entry)
    db.add(Entry("a", 1))
    db.add(Entry("b", 2))
    db.save()
    other = Database(path, Entry)
    other.load()
    assert other.items() == db.items()


def test_load_skips_bad_lines_and_replaces_items(tmp_path):
    path = tmp_path / "db.csv"
    path.write_text("key,value\na,1\nbroken\nc,x\nd,4\n", encoding="utf-8")
    db = Database(path, Entry)
    db.add(Entry("old", 0))
    db.load()
    assert db.items() == [Entry("a", 1), Entry("d", 4)]


def test_load_missing_file_keeps_items(tmp_path):
    db = Database(tmp_path / "absent.csv", Entry)
    db.add(Entry("a", 1))
    with pytest.raises(FileNotFoundError):
        db.load()
    assert db.items() == [Entry("a", 1)]


def test_clear(tmp_path):
    db = Database(tmp_path / "db.csv", Entry)
    db.add(Entry("a", 1))
    db.clear()
    assert db.items() == []
    assert len(db) == 0