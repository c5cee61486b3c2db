from dataclasses import dataclass

import pytest

from flattiverse.holders import UniversalArcHolder, UniversalHolder


@dataclass
class Entry:
    id: int
    name: str


def test_push_fills_first_free_slot():
    holder = UniversalHolder(3)
    first = Entry(0, "alpha")
    second = Entry(0, "beta")
    assert holder.push(first) == 0
    assert holder.push(second) == 1
    assert list(holder) == [first, second]
    assert holder.get(1) is second


def test_push_reuses_removed_slot():
    holder = UniversalHolder(2)
    holder.push(Entry(0, "alpha"))
    holder.push(Entry(1, "beta"))
    removed = holder.remove(0)
    assert removed.name == "alpha"
    assert holder.get(0) is None
    assert holder.push(Entry(2, "gamma")) == 0


def test_push_on_full_holder_raises():
    holder = UniversalHolder(1)
    holder.push(Entry(0, "alpha"))
    with pytest.raises(IndexError):
        holder.push(Entry(1, "beta"))


def test_lookup_by_name_and_index():
    holder = UniversalHolder(4)
    entry = Entry(2, "alpha")
    holder.set(2, entry)
    assert holder["alpha"] is entry
    assert holder[2] is entry
    assert holder.get_by_name("missing") is None
    with pytest.raises(KeyError):
        holder["missing"]
    with pytest.raises(KeyError):
        holder[0]


def test_remove_by_name_clears_slot():
    holder = UniversalHolder(3)
    holder.push(Entry(0, "alpha"))
    holder.push(Entry(1, "beta"))
    removed = holder.remove_by_name("beta")
    assert removed == Entry(1, "beta")
    assert [entry.name for entry in holder] == ["alpha"]
    assert holder.remove_by_name("beta") is None


def test_holder_index_out_of_range():
    holder = UniversalHolder(2)
    with pytest.raises(IndexError):
        holder.get(2)
    with pytest.raises(IndexError):
        holder.set(-1, Entry(0, "alpha"))


def test_arc_populate_uses_id():
    holder = UniversalArcHolder(8)
    entry = Entry(5, "alpha")
    assert holder.populate(entry) is entry
    assert holder.get(5) is entry
    assert holder.has(5)
    assert holder.has_not(4)
    assert len(holder) == 1


def test_arc_iteration_is_in_slot_order():
    holder = UniversalArcHolder(8)
    for entry in (Entry(6, "c"), Entry(1, "a"), Entry(3, "b")):
        holder.populate(entry)
    assert [entry.name for entry in holder] == ["a", "b", "c"]
    assert len(holder) == 3


def test_arc_replacing_keeps_count():
    holder = UniversalArcHolder(4)
    holder.populate(Entry(1, "old"))
    holder.populate(Entry(1, "new"))
    assert len(holder) == 1
    assert holder.get(1).name == "new"


def test_arc_set_none_empties_slot():
    holder = UniversalArcHolder(4)
    holder.populate(Entry(2, "alpha"))
    holder.set(2, None)
    assert len(holder) == 0
    assert holder.get_opt(2) is None


def test_arc_remove():
    holder = UniversalArcHolder(4)
    entry = holder.populate(Entry(0, "alpha"))
    assert holder.remove(0) is entry
    assert len(holder) == 0
    assert holder.remove_opt(0) is None
    with pytest.raises(KeyError):
        holder.remove(0)


def test_arc_missing_and_out_of_range():
    holder = UniversalArcHolder(2)
    with pytest.raises(KeyError):
        holder.get(1)
    with pytest.raises(KeyError):
        holder.get(9)
    with pytest.raises(IndexError):
        holder.get_opt(9)
    assert not holder.has(9)
    assert holder.has_not(9)


def test_arc_iteration_is_a_snapshot():
    holder = UniversalArcHolder(3)
    holder.populate(Entry(0, "alpha"))
    holder.populate(Entry(1, "beta"))
    seen = []
    for entry in holder:
        holder.remove_opt(entry.id)
        seen.append(entry.name)
    assert seen == ["alpha", "beta"]
    assert list(holder) == []