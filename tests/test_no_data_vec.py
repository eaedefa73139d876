import io
import itertools
import random

import pytest

from boundvec.no_data_vec import NoDataVec, no_data_vec, no_data_vec_repeat


def counter():
    return itertools.count().__next__


def test_new_vector_is_empty():
    vec = NoDataVec(counter())
    assert len(vec) == 0
    assert vec.capacity == 0


def test_push_grows_capacity():
    vec = NoDataVec(counter())
    vec.push("a")
    assert len(vec) == 1
    assert vec.capacity == 1
    for _ in range(4):
        vec.push("a")
        assert vec.capacity >= len(vec)
    assert len(vec) == 5
    assert vec.capacity == 8


def test_insert_counts_like_push():
    vec = NoDataVec(counter())
    vec.insert(0, "x")
    vec.insert(0, "y")
    assert len(vec) == 2
    assert vec.capacity >= 2


def test_with_len_sets_length_and_capacity():
    vec = NoDataVec.with_len(counter(), 7)
    assert len(vec) == 7
    assert vec.capacity == 7


def test_with_len_rejects_negative():
    with pytest.raises(ValueError):
        NoDataVec.with_len(counter(), -1)


def test_pop_returns_factory_values():
    vec = NoDataVec.with_len(counter(), 2)
    assert vec.pop() == 0
    assert vec.pop() == 1
    assert vec.pop() is None
    assert len(vec) == 0


def test_remove_decrements_length():
    vec = NoDataVec.with_len(counter(), 3)
    assert vec.remove(1) == 0
    assert len(vec) == 2
    assert vec.capacity == 3


def test_remove_from_empty_raises():
    vec = NoDataVec(counter())
    with pytest.raises(IndexError):
        vec.remove(0)


def test_get_and_index_use_factory():
    vec = NoDataVec.with_len(counter(), 1)
    assert vec.get(0) == 0
    assert vec[0] == 1
    assert len(vec) == 1


def test_iteration_yields_len_items():
    vec = NoDataVec.with_len(counter(), 4)
    assert list(vec) == [0, 1, 2, 3]


def test_binary_search_index_in_range():
    vec = NoDataVec.with_len(counter(), 5)
    rng = random.Random(1)
    outcomes = set()
    for _ in range(200):
        found, index = vec.binary_search_by_key(3, lambda item: item, rng)
        assert 0 <= index < len(vec)
        outcomes.add(found)
    assert outcomes == {True, False}


def test_binary_search_empty_raises():
    vec = NoDataVec(counter())
    with pytest.raises(ValueError):
        vec.binary_search_by_key(0, lambda item: item, random.Random(0))


def test_sort_by_key_leaves_vector_unchanged():
    calls = []
    vec = NoDataVec.with_len(counter(), 3)
    vec.sort_by_key(lambda item: calls.append(item))
    assert calls == []
    assert len(vec) == 3
    assert vec.capacity == 3


def test_copy_is_independent():
    vec = no_data_vec(counter(), 1, 2, 3)
    duplicate = vec.copy()
    assert (len(duplicate), duplicate.capacity) == (len(vec), vec.capacity)
    duplicate.push(4)
    assert len(vec) == 3
    assert len(duplicate) == 4


def test_serialize_wire_format():
    vec = NoDataVec.with_len(counter(), 3)
    assert vec.serialize() == (3).to_bytes(8, "little") * 2


def test_serialize_round_trip_keeps_capacity():
    vec = no_data_vec(counter(), "a", "b", "c")
    restored = NoDataVec.deserialize(counter(), vec.serialize())
    assert len(restored) == len(vec)
    assert restored.capacity == vec.capacity


def test_deserialize_short_input_raises():
    with pytest.raises(EOFError):
        NoDataVec.deserialize(counter(), b"\x01\x00\x00")


def test_from_reader_consumes_header_only():
    vec = NoDataVec.with_len(counter(), 2)
    stream = io.BytesIO(vec.serialize() + b"rest")
    restored = NoDataVec.from_reader(counter(), stream)
    assert len(restored) == 2
    assert restored.capacity == 2
    assert stream.read() == b"rest"


def test_no_data_vec_repeat_length():
    vec = no_data_vec_repeat(counter(), "z", 6)
    assert len(vec) == 6
    assert vec.capacity >= 6