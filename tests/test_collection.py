import pytest

from botlistspace import Collection, InvalidArgument


def make_collection():
    return Collection().set("a", 1).set("b", 2).set("c", 3)


def test_set_get_has_delete():
    collection = make_collection()

    assert collection.get("b") == 2
    assert collection.get("missing") is None
    assert collection.has("a")
    assert not collection.has("missing")

    assert collection.delete("a") is True
    assert collection.delete("a") is False
    assert collection.key_array() == ["b", "c"]


def test_overwrite_keeps_original_position():
    collection = make_collection()

    collection.set("a", 10)

    assert collection.key_array() == ["a", "b", "c"]
    assert collection.get("a") == 10


def test_delete_then_set_moves_key_to_end():
    collection = make_collection()

    collection.delete("a")
    collection.set("a", 10)

    assert collection.key_array() == ["b", "c", "a"]


def test_first_and_last():
    collection = make_collection()

    assert collection.first() == 1
    assert collection.last() == 3
    assert collection.first_n(2) == [1, 2]
    assert collection.last_n(2) == [2, 3]
    assert collection.first_n(10) == [1, 2, 3]
    assert collection.last_n(0) == []


def test_first_and_last_on_empty_collection():
    collection = Collection()

    assert collection.first() is None
    assert collection.last() is None
    assert collection.random() is None
    assert collection.first_n(3) == []
    assert collection.random_n(3) == []


@pytest.mark.parametrize("count", [-1, 1.5, "2", True])
def test_invalid_counts_are_rejected(count):
    collection = make_collection()

    with pytest.raises(InvalidArgument):
        collection.first_n(count)
    with pytest.raises(InvalidArgument):
        collection.last_n(count)
    with pytest.raises(InvalidArgument):
        collection.random_n(count)


def test_random_returns_members():
    collection = make_collection()

    assert collection.random() in {1, 2, 3}
    sample = collection.random_n(2)
    assert len(sample) == 2
    assert len(set(sample)) == 2
    assert set(sample) <= {1, 2, 3}
    assert sorted(collection.random_n(5)) == [1, 2, 3]


def test_arrays_follow_insertion_order():
    collection = make_collection()

    assert collection.array() == [1, 2, 3]
    assert collection.key_array() == ["a", "b", "c"]
    assert collection.entry_array() == [("a", 1), ("b", 2), ("c", 3)]
    assert repr(collection) == "<Collection size=3>"
