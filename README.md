# boundvec

Two small vector models for code that reasons about collections by their
shape rather than by their storage. The package is a library only; it has
no command-line entry point.

## `boundvec.no_resizable_vec`

### `NoResizableVec`

A vector whose capacity is fixed when it is made. It never grows: pushing
or inserting into a full vector, inserting or removing at an index out of
range, or indexing outside `0 <= index < len(v)` raises
`CapacityAssertionError` (a subclass of `AssertionError`). A negative
capacity raises `ValueError`.

```python
from boundvec.no_resizable_vec import NoResizableVec, no_resizable_vec

v = NoResizableVec(3)
v.push(10)
v.push(30)
v.insert(1, 20)
print(v.as_list())      # [10, 20, 30]
print(v.find(20))       # 1
print(v.remove(0))      # 10
print(len(v), v.capacity)   # 2 3
v[0] = 99
print(v[0], v[-1:])     # 99 [30]

w = no_resizable_vec(1, 2, 3)   # capacity 6: twice the number of values
```

What it offers:

- `push(value)`, `insert(index, value)` – add an element (index may equal
  the length).
- `pop()` – remove and return the last element, or `None` when empty.
- `remove(index)` – remove and return the element at `index`.
- `find(value)` – index of the first equal element, or `None`.
- `v[i]` and `v[i] = x` with bounds checks; slices return a plain list.
- Iteration runs over a snapshot of the elements; `as_list()` returns a
  new list.
- `copy()` returns a vector with the same capacity and elements; two
  vectors are equal when both capacity and elements match.
- `capacity` is a read-only property.

`serialize(writer)` and `NoResizableVec.deserialize(data)` are not
supported and always raise `CapacityAssertionError`.

`no_resizable_vec_with_capacity(values, capacity)` builds a vector with an
explicit capacity and raises `CapacityAssertionError` if the values do not
fit.

## `boundvec.no_data_vec`

### `NoDataVec`

A vector that keeps only its length and capacity. Elements are never
stored: values passed in are discarded, and anything read back (`pop`,
`remove`, `get`, `v[i]`, iteration) is a fresh value from the factory you
supply. Capacity grows like a dynamic array: when full, it becomes the
larger of twice the old capacity and the new length.

```python
import random
from boundvec.no_data_vec import NoDataVec, no_data_vec, no_data_vec_repeat

v = no_data_vec_repeat(lambda: 0, "x", 5)
print(len(v), v.capacity)       # 5 8
data = v.serialize()            # 16 bytes: length and capacity, little-endian u64
same = NoDataVec.deserialize(lambda: 0, data)

u = NoDataVec.with_len(lambda: 0, 4)   # length 4, capacity 4
found, index = u.binary_search_by_key(7, lambda x: x, random.Random(1))
```

Notes on behaviour:

- `insert(index, value)` behaves like `push`; the index is not used.
- `remove(index)` raises `IndexError` on an empty vector; `pop()` returns
  `None` there.
- `get(index)` ignores the index and returns a factory value.
- `binary_search_by_key(b, f, rng)` returns an arbitrary `(found, index)`
  pair with `index < len(v)`, drawn from `rng`; it raises `ValueError` on
  an empty vector.
- `sort_by_key(f)` only checks that `f` is callable (else `TypeError`).
- `NoDataVec.arbitrary(factory, rng)` makes a vector of random length below
  `2**64 - 1`.
- `serialize()` raises `ValueError` if length or capacity exceed 64 bits;
  `deserialize(factory, data)` and `from_reader(factory, reader)` read the
  leading 16 bytes and raise `EOFError` if fewer are available.
- `copy()` keeps length, capacity and factory.

`no_data_vec(factory, *args)` pushes each argument;
`no_data_vec_repeat(factory, elem, n)` pushes `elem` `n` times.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```